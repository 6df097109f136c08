"""MessageRouter implementation."""

import html
from typing import Protocol

from .. import texts
from ..directory import IConversationDirectory
from ..dispatch import IDispatchQueue
from ..errors import DeliveryError, QueueFullError, describe_error
from ..logging_config import get_logger
from ..models import (
    InboundMessage,
    LocationAction,
    MediaAction,
    MediaKind,
    TextAction,
)
from ..validators import is_valid_coordinate, is_valid_media_url

logger = get_logger(__name__)

START_COMMAND = "/start"
LIVE_LOCATION_PERIOD = 3600  # seconds

# Admin reply commands, checked in this order by case-insensitive prefix
MEDIA_COMMANDS = (
    ("photo", MediaKind.PHOTO, texts.INVALID_PHOTO),
    ("video", MediaKind.VIDEO, texts.INVALID_VIDEO),
    ("doc", MediaKind.DOCUMENT, texts.INVALID_DOCUMENT),
)
LOCATION_COMMAND = "location"

MEDIA_LABELS = {
    MediaKind.PHOTO: texts.RELAY_PHOTO,
    MediaKind.VIDEO: texts.RELAY_VIDEO,
    MediaKind.DOCUMENT: texts.RELAY_DOCUMENT,
}
SENT_LABELS = {
    MediaKind.PHOTO: texts.SENT_PHOTO,
    MediaKind.VIDEO: texts.SENT_VIDEO,
    MediaKind.DOCUMENT: texts.SENT_DOCUMENT,
}


class IMessageRouter(Protocol):
    """Classifies inbound messages and turns them into outbound actions."""

    async def handle(self, message: InboundMessage) -> None:
        """Handle one inbound message. Never raises."""
        ...


class MessageRouter:
    """Relays user messages to the admin and admin replies back to users."""

    def __init__(
        self,
        queue: IDispatchQueue,
        directory: IConversationDirectory,
        admin_id: int,
    ):
        self._queue = queue
        self._directory = directory
        self._admin_id = admin_id

    async def handle(self, message: InboundMessage) -> None:
        """Handle one inbound message. Never raises."""
        logger.info(
            "Received message %s from chat %s",
            message.message_id,
            message.chat_id,
        )
        try:
            await self._route(message)
        except (DeliveryError, QueueFullError) as e:
            # The queue has already told the admin
            logger.warning("Relay aborted for chat %s: %s", message.chat_id, e)
        except Exception as e:
            logger.error(
                "Error handling message %s from chat %s: %s",
                message.message_id,
                message.chat_id,
                e,
                exc_info=True,
            )
            self._queue.enqueue(
                TextAction(
                    chat_id=self._admin_id,
                    text=texts.UNEXPECTED_ERROR.format(error=describe_error(e)),
                )
            )

    async def _route(self, message: InboundMessage) -> None:
        is_admin = message.chat_id == self._admin_id
        text = (message.text or "").strip()

        if not is_admin and text == START_COMMAND:
            await self._start_session(message)
        elif not is_admin and message.chat_id in self._directory:
            await self._relay_to_admin(message)
        elif is_admin and message.reply_to_message_id is not None:
            await self._handle_admin_reply(message)
        elif not is_admin:
            # TODO: decide whether to open a conversation here instead of
            # waiting for /start; users who skip it are currently dropped.
            logger.debug("Ignoring chat %s without a conversation", message.chat_id)

    async def _start_session(self, message: InboundMessage) -> None:
        self._queue.enqueue(TextAction(chat_id=message.chat_id, text=texts.WELCOME))

        if message.chat_id in self._directory:
            return

        sent = await self._queue.submit(
            TextAction(
                chat_id=self._admin_id,
                text=texts.NEW_CONVERSATION.format(
                    name=html.escape(message.sender_name),
                    chat_id=message.chat_id,
                ),
                parse_mode="HTML",
            )
        )
        self._directory.record_or_update(message.chat_id, sent.message_id)
        logger.info("Conversation started for chat %s", message.chat_id)

    async def _relay_to_admin(self, message: InboundMessage) -> None:
        media = message.media
        summary = texts.RELAY_HEADER.format(
            name=html.escape(message.sender_name),
            chat_id=message.chat_id,
        )
        if message.text:
            summary += texts.RELAY_TEXT.format(text=html.escape(message.text))
        elif media:
            summary += MEDIA_LABELS[media[0]]
        else:
            summary += texts.RELAY_OTHER

        sent = await self._queue.submit(
            TextAction(
                chat_id=self._admin_id,
                text=summary,
                parse_mode="HTML",
                reply_to_message_id=self._directory.lookup_admin_message_id(message.chat_id),
            )
        )
        self._directory.record_or_update(message.chat_id, sent.message_id)

        if media:
            kind, file_id = media
            self._queue.enqueue(
                MediaAction(
                    media_kind=kind,
                    chat_id=self._admin_id,
                    media=file_id,
                    reply_to_message_id=sent.message_id,
                )
            )

    async def _handle_admin_reply(self, message: InboundMessage) -> None:
        reply_to = message.reply_to_message_id
        user_id = self._directory.find_user_by_admin_message_id(reply_to)

        if user_id is None:
            self._notify_admin(texts.UNKNOWN_RECIPIENT, reply_to)
            return

        media = message.media
        if media:
            kind, file_id = media
            self._queue.enqueue(
                MediaAction(
                    media_kind=kind,
                    chat_id=user_id,
                    media=file_id,
                    caption=message.caption or "",
                )
            )
            self._notify_admin(SENT_LABELS[kind], reply_to)
            return

        self._handle_admin_command(user_id, (message.text or "").strip(), reply_to)

    def _handle_admin_command(self, user_id: int, text: str, reply_to: int) -> None:
        """Parse a text reply from the admin and queue the matching send."""
        lowered = text.lower()
        parts = text.split()

        for prefix, kind, invalid_text in MEDIA_COMMANDS:
            if not lowered.startswith(prefix):
                continue
            if len(parts) >= 2 and is_valid_media_url(parts[1]):
                self._queue.enqueue(
                    MediaAction(
                        media_kind=kind,
                        chat_id=user_id,
                        media=parts[1],
                        caption=parts[2] if len(parts) > 2 else "",
                    )
                )
                self._notify_admin(SENT_LABELS[kind], reply_to)
            else:
                self._notify_admin(invalid_text, reply_to)
            return

        if lowered.startswith(LOCATION_COMMAND):
            coordinates = _parse_coordinates(parts[1:3]) if len(parts) >= 3 else None
            if coordinates is None:
                self._notify_admin(texts.INVALID_LOCATION, reply_to)
                return
            latitude, longitude = coordinates
            self._queue.enqueue(
                LocationAction(
                    chat_id=user_id,
                    latitude=latitude,
                    longitude=longitude,
                    live_period=LIVE_LOCATION_PERIOD,
                )
            )
            self._notify_admin(texts.SENT_LOCATION, reply_to)
            return

        self._queue.enqueue(TextAction(chat_id=user_id, text=texts.REPLY_PREFIX + text))
        self._notify_admin(texts.SENT_TEXT, reply_to)

    def _notify_admin(self, text: str, reply_to: int | None) -> None:
        self._queue.enqueue(
            TextAction(
                chat_id=self._admin_id,
                text=text,
                reply_to_message_id=reply_to,
            )
        )


def _parse_coordinates(tokens: list[str]) -> tuple[float, float] | None:
    """Parse [lat, lon] tokens, or None if they are not a valid point."""
    try:
        latitude, longitude = float(tokens[0]), float(tokens[1])
    except ValueError:
        return None
    if not is_valid_coordinate(latitude, longitude):
        return None
    return latitude, longitude
