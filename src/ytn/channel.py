from collections.abc import Sequence
from typing import Optional
import logging

from ytn.content import Content, ContentKind, TitleFactory, default_title
from ytn.observer import Observable, Observer, Status

logger = logging.getLogger(__name__)


class Channel(Observable[Content]):
    """A media channel that pushes every new piece of content to its subscribers.

    The content log is append-only: `publish` is the only way to grow it and
    nothing is ever removed or edited.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._content: list[Content] = []

    def __repr__(self) -> str:
        return f"Channel({self.name!r})"

    @property
    def content(self) -> Sequence[Content]:
        return tuple(self._content)

    @property
    def subscribers(self) -> Sequence[Observer[Content]]:
        return self.observers

    def publish(
        self,
        kind: ContentKind,
        title_factory: Optional[TitleFactory] = None,
    ) -> Content:
        make_title = title_factory or default_title
        title = make_title(len(self._content), kind)
        content = Content(title=title, kind=kind, channel=self.name)
        self._content.append(content)
        logger.info(f"{self.name}: Hey fans, there is a new {kind}: '{title}'!")
        self.notify_all()
        return content

    def create_video(self) -> Content:
        return self.publish(ContentKind.VIDEO)

    def create_photo(self) -> Content:
        return self.publish(ContentKind.PHOTO)

    def notify_all(self) -> Status:
        if not self._content:
            logger.info(f"Channel '{self.name}' has no content to notify about")
            return Status.EMPTY_CONTENT_LOG
        if not self._observers:
            logger.info(f"Channel '{self.name}' has no subscribers")
            return Status.NO_SUBSCRIBERS
        self.notify_observers(self._content[-1])
        return Status.DELIVERED
