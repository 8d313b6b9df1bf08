from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Generic, Optional, TypeVar
import logging
import weakref


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Status(Enum):
    DELIVERED = "delivered"
    EMPTY_CONTENT_LOG = "empty content log"
    NO_SUBSCRIBERS = "no subscribers"
    DETACHED = "detached"
    NOT_ATTACHED = "not attached"


class DeliveryError(ExceptionGroup):
    """Raised after a notification round in which some observers failed.

    Every observer of the round has been called by the time this is raised.
    """


@dataclass(frozen=True)
class Registration:
    number: int


class Observable(Generic[T]):
    def __init__(self, name: str) -> None:
        self.name = name
        self._observers: dict[Registration, Observer[T]] = {}
        self._registration_numbers = count()

    @property
    def observers(self) -> tuple["Observer[T]", ...]:
        return tuple(self._observers.values())

    def registrations(self, observer: "Observer[T]") -> tuple[Registration, ...]:
        return tuple(
            registration
            for registration, registered in self._observers.items()
            if registered is observer
        )

    def add(self, observer: "Observer[T]") -> Registration:
        previous_source = observer.source
        if previous_source is not None and previous_source is not self:
            previous_source.remove(observer)
        registration = Registration(next(self._registration_numbers))
        self._observers[registration] = observer
        observer._attach(self)
        logger.info(f"{observer.name} has been subscribed to the '{self.name}' channel")
        return registration

    def remove(self, observer: "Observer[T]") -> int:
        registrations = self.registrations(observer)
        for registration in registrations:
            del self._observers[registration]
        if observer.source is self:
            observer._detach()
        if registrations:
            logger.info(f"{observer.name} has been removed from '{self.name}' subscribers")
        else:
            logger.info(f"{observer.name} is not subscribed to '{self.name}'")
        return len(registrations)

    def remove_registration(self, registration: Registration) -> bool:
        observer = self._observers.pop(registration, None)
        if observer is None:
            return False
        if not self.registrations(observer) and observer.source is self:
            observer._detach()
        logger.info(f"{observer.name} has been removed from '{self.name}' subscribers")
        return True

    def notify_observers(self, payload: T) -> None:
        # Callbacks may add or remove observers; only the snapshot is notified
        snapshot = tuple(self._observers.values())
        errors = []
        for observer in snapshot:
            try:
                observer.update(payload)
            except Exception as error:
                logger.exception(f"{observer.name} failed to handle {payload!r}")
                errors.append(error)
        if errors:
            raise DeliveryError(
                f"{len(errors)} of {len(snapshot)} observers of '{self.name}' failed",
                errors,
            )


class Observer(ABC, Generic[T]):
    def __init__(self, name: str) -> None:
        self.name = name
        self._source: Optional[weakref.ref[Observable[T]]] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def source(self) -> Optional[Observable[T]]:
        if self._source is None:
            return None
        return self._source()

    def _attach(self, observable: Observable[T]) -> None:
        self._source = weakref.ref(observable)

    def _detach(self) -> None:
        self._source = None

    @abstractmethod
    def update(self, payload: T) -> None:
        pass

    def unsubscribe(self) -> Status:
        source = self.source
        if source is None:
            self._detach()
            return Status.NOT_ATTACHED
        source.remove(self)
        return Status.DETACHED
