"""Long-polling loop feeding inbound messages to a handler."""

import asyncio
from typing import Awaitable, Callable

from ..errors import TelegramAPIError
from ..logging_config import get_logger
from ..models import InboundMessage
from .client import TelegramClient, parse_message

logger = get_logger(__name__)


MessageHandler = Callable[[InboundMessage], Awaitable[None]]


class UpdatePoller:
    """Fetches updates with getUpdates and handles them one at a time."""

    def __init__(
        self,
        client: TelegramClient,
        handler: MessageHandler,
        poll_timeout: int = 30,
        retry_delay: float = 5.0,
    ):
        self._client = client
        self._handler = handler
        self._poll_timeout = poll_timeout
        self._retry_delay = retry_delay
        self._offset: int | None = None
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        """Drop any webhook and start polling in the background."""
        if self._task is not None:
            return
        await self._client.delete_webhook()
        self._task = asyncio.create_task(self._run())
        logger.info("Polling started")

    async def stop(self) -> None:
        """Stop polling."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Polling stopped")

    async def _run(self) -> None:
        while True:
            try:
                await self.poll_once()
            except TelegramAPIError as e:
                logger.error("getUpdates failed: %s", e)
                await asyncio.sleep(self._retry_delay)

    async def poll_once(self) -> int:
        """Fetch one batch of updates and handle them in order. Return batch size."""
        updates = await self._client.get_updates(
            offset=self._offset,
            timeout=self._poll_timeout,
        )
        for update in updates:
            # Advance first so a failing update is not fetched again
            self._offset = update["update_id"] + 1
            message = parse_message(update)
            if message is None:
                continue
            await self._handler(message)
        return len(updates)
