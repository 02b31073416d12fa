from .abstract import AbstractAsset, AbstractClaimToken, Snapshottable
from .concrete import (
    AbstractPublisherMessage,
    Publisher,
    PublisherMixin,
    Subscriber,
)

__all__ = (
    "AbstractAsset",
    "AbstractClaimToken",
    "AbstractPublisherMessage",
    "Publisher",
    "PublisherMixin",
    "Snapshottable",
    "Subscriber",
)
