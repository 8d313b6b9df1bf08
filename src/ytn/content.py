from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from dateutil.relativedelta import relativedelta


class ContentKind(StrEnum):
    VIDEO = "video"
    PHOTO = "photo"


TitleFactory = Callable[[int, ContentKind], str]


def default_title(number: int, kind: ContentKind) -> str:
    match kind:
        case ContentKind.VIDEO:
            return f"Cool clip №{number} with <3"
        case ContentKind.PHOTO:
            return f"Funny photo №{number}"
    raise ValueError(f"Unknown content kind '{kind}'")


@dataclass(frozen=True)
class Content:
    title: str
    kind: ContentKind
    channel: str
    published_at: datetime = field(default_factory=datetime.now)


def get_time_ago(date_time: datetime, now: datetime | None = None) -> str:
    units = ("year", "month", "day", "hour", "minute")
    now = now or datetime.now()
    if date_time > now:
        return "just now"
    time_delta = relativedelta(now, date_time)
    for unit in units:
        value = getattr(time_delta, unit+"s")
        if value == 0:
            continue
        s = "s" if value > 1 else ""
        return f"{value} {unit}{s} ago"
    return "just now"
