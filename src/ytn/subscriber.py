import logging

from ytn.content import Content, get_time_ago
from ytn.observer import Observer

logger = logging.getLogger(__name__)


class Subscriber(Observer[Content]):
    def update(self, content: Content) -> None:
        time_ago = get_time_ago(content.published_at)
        logger.info(
            f"{self.name} received a notification from '{content.channel}' "
            f"about new {content.kind}: '{content.title}' ({time_ago})"
        )
