"""Support relay bot."""

from .app import Application, IApplication
from .config import Settings, load_settings
from .directory import ConversationDirectory, IConversationDirectory
from .dispatch import MAX_QUEUE_SIZE, DispatchQueue, IDispatchQueue
from .errors import (
    ConfigError,
    DeliveryError,
    QueueFullError,
    RelayError,
    TelegramAPIError,
    describe_error,
)
from .models import (
    ActionKind,
    InboundMessage,
    LocationAction,
    MediaAction,
    MediaKind,
    OutboundAction,
    SentMessage,
    TextAction,
)
from .router import IMessageRouter, MessageRouter
from .telegram import ISender, TelegramClient, UpdatePoller, parse_message
from .validators import is_valid_coordinate, is_valid_media_url

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    "load_settings",
    # Models
    "ActionKind",
    "InboundMessage",
    "LocationAction",
    "MediaAction",
    "MediaKind",
    "OutboundAction",
    "SentMessage",
    "TextAction",
    # Errors
    "RelayError",
    "ConfigError",
    "TelegramAPIError",
    "DeliveryError",
    "QueueFullError",
    "describe_error",
    # Validators
    "is_valid_media_url",
    "is_valid_coordinate",
    # Components
    "IConversationDirectory",
    "ConversationDirectory",
    "IDispatchQueue",
    "DispatchQueue",
    "MAX_QUEUE_SIZE",
    "IMessageRouter",
    "MessageRouter",
    "ISender",
    "TelegramClient",
    "UpdatePoller",
    "parse_message",
]
