"""Outbound actions carried by the dispatch queue."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .messages import MediaKind


class ActionKind(str, Enum):
    """Kinds of outbound action."""

    MESSAGE = "message"
    PHOTO = "photo"
    VIDEO = "video"
    DOCUMENT = "document"
    LOCATION = "location"


@dataclass(frozen=True)
class TextAction:
    """Send a text message."""

    chat_id: int
    text: str
    parse_mode: str | None = None
    reply_to_message_id: int | None = None

    @property
    def kind(self) -> ActionKind:
        return ActionKind.MESSAGE


@dataclass(frozen=True)
class MediaAction:
    """Send a photo, video or document by URL or platform file id."""

    media_kind: MediaKind
    chat_id: int
    media: str
    caption: str | None = None
    reply_to_message_id: int | None = None

    @property
    def kind(self) -> ActionKind:
        return ActionKind(self.media_kind.value)


@dataclass(frozen=True)
class LocationAction:
    """Send a (live) location."""

    chat_id: int
    latitude: float
    longitude: float
    live_period: int | None = None
    reply_to_message_id: int | None = None

    @property
    def kind(self) -> ActionKind:
        return ActionKind.LOCATION


OutboundAction = Union[TextAction, MediaAction, LocationAction]
