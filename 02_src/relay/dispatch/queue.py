"""DispatchQueue implementation."""

import asyncio
from dataclasses import dataclass
from typing import Protocol

from ..errors import DeliveryError, QueueFullError, describe_error
from ..logging_config import get_logger
from ..models import (
    LocationAction,
    MediaAction,
    MediaKind,
    OutboundAction,
    SentMessage,
    TextAction,
)
from ..telegram.client import ISender
from .. import texts

logger = get_logger(__name__)

MAX_QUEUE_SIZE = 100


class IDispatchQueue(Protocol):
    """FIFO buffer serializing outbound platform calls."""

    def enqueue(self, action: OutboundAction) -> bool:
        """Append action to the tail. Return False if it was dropped."""
        ...

    async def submit(self, action: OutboundAction) -> SentMessage:
        """Enqueue action and wait for its delivery result."""
        ...

    @property
    def pending(self) -> int:
        """Number of entries waiting to be sent."""
        ...


@dataclass
class _Entry:
    action: OutboundAction
    result: asyncio.Future | None = None
    notice: bool = False  # admin diagnostics are never re-reported


class DispatchQueue:
    """Single-worker outbound queue: at most one send in flight."""

    def __init__(
        self,
        sender: ISender,
        admin_id: int,
        max_size: int = MAX_QUEUE_SIZE,
    ):
        self._sender = sender
        self._admin_id = admin_id
        self._max_size = max_size
        # Unbounded on purpose: admin notices may exceed max_size
        self._queue: asyncio.Queue[_Entry] = asyncio.Queue()
        self._worker: asyncio.Task | None = None

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    @property
    def running(self) -> bool:
        return self._worker is not None and not self._worker.done()

    async def start(self) -> None:
        """Start the consumer task."""
        if self.running:
            return
        logger.info("Starting DispatchQueue (max_size=%s)", self._max_size)
        self._worker = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Cancel the consumer task. Pending entries are discarded."""
        if self._worker is None:
            return
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        logger.info("DispatchQueue stopped with %s pending entries", self.pending)

    async def join(self) -> None:
        """Wait until every queued entry has been processed."""
        await self._queue.join()

    def enqueue(self, action: OutboundAction) -> bool:
        """Append action to the tail. Return False if it was dropped."""
        return self._put(_Entry(action))

    async def submit(self, action: OutboundAction) -> SentMessage:
        """
        Enqueue action and wait for its delivery result.

        Raises:
            QueueFullError: action was dropped (admin already warned).
            DeliveryError: send failed (admin already notified).
        """
        result = asyncio.get_running_loop().create_future()
        if not self._put(_Entry(action, result=result)):
            raise QueueFullError(f"{action.kind.value} dropped: queue is full")
        return await result

    def notify_admin(self, text: str, reply_to_message_id: int | None = None) -> None:
        """Queue a diagnostic for the admin, bypassing the capacity check."""
        action = TextAction(
            chat_id=self._admin_id,
            text=text,
            reply_to_message_id=reply_to_message_id,
        )
        self._queue.put_nowait(_Entry(action, notice=True))

    def _put(self, entry: _Entry) -> bool:
        if self._queue.qsize() >= self._max_size:
            logger.warning(
                "Queue is full, rejecting %s for chat %s",
                entry.action.kind.value,
                entry.action.chat_id,
            )
            self.notify_admin(texts.QUEUE_FULL)
            return False
        self._queue.put_nowait(entry)
        return True

    async def _run(self) -> None:
        """Consumer loop: one entry at a time, in FIFO order."""
        while True:
            entry = await self._queue.get()
            try:
                await self._process(entry)
            finally:
                self._queue.task_done()

    async def _process(self, entry: _Entry) -> None:
        action = entry.action
        try:
            sent = await self._dispatch(action)
        except asyncio.CancelledError:
            if entry.result is not None and not entry.result.done():
                entry.result.cancel()
            raise
        except Exception as e:
            error = describe_error(e)
            logger.error(
                "Error processing %s for chat %s: %s",
                action.kind.value,
                action.chat_id,
                error,
            )
            if entry.result is not None and not entry.result.done():
                entry.result.set_exception(DeliveryError(error))
            if not entry.notice:
                self.notify_admin(
                    texts.DELIVERY_FAILED.format(kind=action.kind.value, error=error),
                    reply_to_message_id=action.reply_to_message_id,
                )
            return

        if entry.result is not None and not entry.result.done():
            entry.result.set_result(sent)

    async def _dispatch(self, action: OutboundAction) -> SentMessage:
        """Route an action to the matching sender call."""
        if isinstance(action, TextAction):
            return await self._sender.send_message(
                action.chat_id,
                action.text,
                parse_mode=action.parse_mode,
                reply_to_message_id=action.reply_to_message_id,
            )

        if isinstance(action, MediaAction):
            send = {
                MediaKind.PHOTO: self._sender.send_photo,
                MediaKind.VIDEO: self._sender.send_video,
                MediaKind.DOCUMENT: self._sender.send_document,
            }[action.media_kind]
            return await send(
                action.chat_id,
                action.media,
                caption=action.caption,
                reply_to_message_id=action.reply_to_message_id,
            )

        if isinstance(action, LocationAction):
            return await self._sender.send_location(
                action.chat_id,
                action.latitude,
                action.longitude,
                live_period=action.live_period,
                reply_to_message_id=action.reply_to_message_id,
            )

        raise TypeError(f"Unsupported action: {action!r}")
