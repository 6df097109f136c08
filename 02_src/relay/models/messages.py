"""Inbound and sent message models."""

from dataclasses import dataclass
from enum import Enum


class MediaKind(str, Enum):
    """Media types the relay forwards as-is."""

    PHOTO = "photo"
    VIDEO = "video"
    DOCUMENT = "document"


@dataclass(frozen=True)
class InboundMessage:
    """A message received from the chat platform."""

    chat_id: int
    message_id: int
    sender_name: str = "Anonymous"
    text: str | None = None
    caption: str | None = None
    reply_to_message_id: int | None = None
    photo_file_id: str | None = None  # largest available size
    video_file_id: str | None = None
    document_file_id: str | None = None

    @property
    def media(self) -> tuple[MediaKind, str] | None:
        """Attached media as (kind, file id), photo first."""
        if self.photo_file_id:
            return MediaKind.PHOTO, self.photo_file_id
        if self.video_file_id:
            return MediaKind.VIDEO, self.video_file_id
        if self.document_file_id:
            return MediaKind.DOCUMENT, self.document_file_id
        return None


@dataclass(frozen=True)
class SentMessage:
    """Result of a successful send."""

    chat_id: int
    message_id: int
