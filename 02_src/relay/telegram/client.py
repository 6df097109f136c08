"""Telegram Bot API client over httpx."""

from typing import Any, Protocol

import httpx

from ..errors import TelegramAPIError
from ..logging_config import get_logger
from ..models import InboundMessage, SentMessage

logger = get_logger(__name__)

API_BASE_URL = "https://api.telegram.org"


class ISender(Protocol):
    """Outbound operations used by the dispatch queue."""

    async def send_message(
        self,
        chat_id: int,
        text: str,
        *,
        parse_mode: str | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        """Send a text message."""
        ...

    async def send_photo(
        self,
        chat_id: int,
        photo: str,
        *,
        caption: str | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        """Send a photo by URL or file id."""
        ...

    async def send_video(
        self,
        chat_id: int,
        video: str,
        *,
        caption: str | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        """Send a video by URL or file id."""
        ...

    async def send_document(
        self,
        chat_id: int,
        document: str,
        *,
        caption: str | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        """Send a document by URL or file id."""
        ...

    async def send_location(
        self,
        chat_id: int,
        latitude: float,
        longitude: float,
        *,
        live_period: int | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        """Send a (live) location."""
        ...


class TelegramClient:
    """Minimal async Bot API client."""

    def __init__(
        self,
        bot_token: str,
        base_url: str = API_BASE_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._base_url = f"{base_url}/bot{bot_token}"
        self._timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        await self._client.aclose()

    async def send_message(
        self,
        chat_id: int,
        text: str,
        *,
        parse_mode: str | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if parse_mode:
            payload["parse_mode"] = parse_mode
        return await self._send("sendMessage", payload, reply_to_message_id)

    async def send_photo(
        self,
        chat_id: int,
        photo: str,
        *,
        caption: str | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        payload: dict[str, Any] = {"chat_id": chat_id, "photo": photo}
        if caption:
            payload["caption"] = caption
        return await self._send("sendPhoto", payload, reply_to_message_id)

    async def send_video(
        self,
        chat_id: int,
        video: str,
        *,
        caption: str | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        payload: dict[str, Any] = {"chat_id": chat_id, "video": video}
        if caption:
            payload["caption"] = caption
        return await self._send("sendVideo", payload, reply_to_message_id)

    async def send_document(
        self,
        chat_id: int,
        document: str,
        *,
        caption: str | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        payload: dict[str, Any] = {"chat_id": chat_id, "document": document}
        if caption:
            payload["caption"] = caption
        return await self._send("sendDocument", payload, reply_to_message_id)

    async def send_location(
        self,
        chat_id: int,
        latitude: float,
        longitude: float,
        *,
        live_period: int | None = None,
        reply_to_message_id: int | None = None,
    ) -> SentMessage:
        payload: dict[str, Any] = {
            "chat_id": chat_id,
            "latitude": latitude,
            "longitude": longitude,
        }
        if live_period:
            payload["live_period"] = live_period
        return await self._send("sendLocation", payload, reply_to_message_id)

    async def get_updates(self, offset: int | None = None, timeout: int = 30) -> list[dict]:
        """Long-poll for new updates."""
        payload: dict[str, Any] = {
            "timeout": timeout,
            "allowed_updates": ["message"],
        }
        if offset is not None:
            payload["offset"] = offset
        # The HTTP timeout must outlast the long-poll window
        return await self._call("getUpdates", payload, timeout=timeout + self._timeout)

    async def delete_webhook(self) -> None:
        """Drop any webhook so that getUpdates is allowed."""
        await self._call("deleteWebhook", {"drop_pending_updates": False})

    async def _send(
        self,
        method: str,
        payload: dict[str, Any],
        reply_to_message_id: int | None,
    ) -> SentMessage:
        if reply_to_message_id is not None:
            payload["reply_parameters"] = {
                "message_id": reply_to_message_id,
                "allow_sending_without_reply": True,
            }
        result = await self._call(method, payload)
        return SentMessage(
            chat_id=result.get("chat", {}).get("id", payload["chat_id"]),
            message_id=result["message_id"],
        )

    async def _call(
        self,
        method: str,
        payload: dict[str, Any],
        timeout: float | None = None,
    ) -> Any:
        """POST a Bot API method and return its ``result``."""
        url = f"{self._base_url}/{method}"
        try:
            response = await self._client.post(
                url,
                json=payload,
                timeout=timeout if timeout is not None else self._timeout,
            )
        except httpx.TimeoutException:
            raise TelegramAPIError(f"{method} timed out") from None
        except httpx.HTTPError as e:
            # str(e) may contain the request URL, and with it the token
            raise TelegramAPIError(f"{method} failed: {type(e).__name__}") from None

        try:
            data = response.json()
        except ValueError:
            raise TelegramAPIError(
                f"{method} returned non-JSON response",
                error_code=response.status_code,
            ) from None

        if response.status_code >= 400 or not data.get("ok"):
            raise TelegramAPIError(
                data.get("description") or f"{method} failed",
                error_code=data.get("error_code", response.status_code),
            )

        return data.get("result")


def parse_message(update: dict) -> InboundMessage | None:
    """
    Convert a Telegram Update payload into an InboundMessage.

    Only ``message`` updates are processed; edits, channel posts and
    callback queries return None. For photos the largest size is kept.

    Args:
        update: Update object as returned by getUpdates

    Returns:
        InboundMessage or None
    """
    msg = update.get("message")
    if not msg:
        return None

    chat = msg.get("chat") or {}
    if "id" not in chat or "message_id" not in msg:
        return None

    sender = msg.get("from") or {}
    reply_to = msg.get("reply_to_message") or {}

    photos = msg.get("photo") or []
    video = msg.get("video") or {}
    document = msg.get("document") or {}

    return InboundMessage(
        chat_id=chat["id"],
        message_id=msg["message_id"],
        sender_name=sender.get("first_name") or "Anonymous",
        text=msg.get("text"),
        caption=msg.get("caption"),
        reply_to_message_id=reply_to.get("message_id"),
        photo_file_id=photos[-1].get("file_id") if photos else None,
        video_file_id=video.get("file_id"),
        document_file_id=document.get("file_id"),
    )
