from typing import Protocol
from weakref import WeakSet


class AbstractPublisherMessage:
    """
    A record delivered by a `Publisher` to each of its subscribers.
    """


class Publisher(Protocol):
    """
    Delivers records to subscribers, which are held by weak reference.
    """

    _subscribers: WeakSet["Subscriber"]

    def subscribe(self, subscriber: "Subscriber") -> None:
        """
        Register a subscriber to receive future records.
        """

    def unsubscribe(self, subscriber: "Subscriber") -> None:
        """
        Stop delivering records to a subscriber.
        """


class PublisherMixin:
    """
    Default subscribe & unsubscribe handling for classes that hold a `_subscribers` set.
    """

    def subscribe(self: Publisher, subscriber: "Subscriber") -> None:
        self._subscribers.add(subscriber)

    def unsubscribe(self: Publisher, subscriber: "Subscriber") -> None:
        self._subscribers.discard(subscriber)


class Subscriber(Protocol):
    """
    Receives records from a `Publisher`.
    """

    def notify(self, publisher: "Publisher", message: AbstractPublisherMessage) -> None: ...
