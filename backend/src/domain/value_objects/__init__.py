"""Domain Value Objects - Immutable objects without identity."""

from .application_settings import (
    ApplicationSettings,
    SimpleApplicationSettings,
    OAuthClientSettings,
)
from .subscription_query import SubscriptionQuery
from .inline_picture import InlinePicture

__all__ = [
    "ApplicationSettings",
    "SimpleApplicationSettings",
    "OAuthClientSettings",
    "SubscriptionQuery",
    "InlinePicture",
]
