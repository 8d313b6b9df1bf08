from pathlib import Path
from collections.abc import Sequence
from typing import Optional
import sys
import logging

from ytn.channel import Channel
from ytn.config import ChannelEntry, Settings, load_settings
from ytn.subscriber import Subscriber

logger = logging.getLogger(__name__)


def run_channel(entry: ChannelEntry) -> Channel:
    channel = Channel(name=entry.name)
    subscribers = {name: Subscriber(name) for name in entry.subscribers}
    for subscriber in subscribers.values():
        channel.add(subscriber)
    leavers = iter(entry.leavers)
    for kind in entry.releases:
        channel.publish(kind)
        leaver = next(leavers, None)
        if leaver is not None:
            subscribers[leaver].unsubscribe()
    return channel


def run(settings: Settings) -> list[Channel]:
    return [run_channel(entry) for entry in settings.channels]


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else None
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    settings = load_settings(path)
    logging.getLogger().setLevel(settings.log_level)
    logger.info(f"Running {len(settings.channels)} channel(s)")
    run(settings)


if __name__ == "__main__":
    main()
