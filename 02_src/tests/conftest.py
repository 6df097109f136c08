"""Pytest configuration and fixtures."""

import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from relay.errors import TelegramAPIError  # noqa: E402
from relay.models import SentMessage  # noqa: E402

ADMIN_ID = 1000
USER_ID = 42


@dataclass
class Call:
    """One recorded sender call."""

    method: str
    chat_id: int
    args: dict = field(default_factory=dict)


class FakeSender:
    """Records outbound calls and hands out increasing message ids."""

    def __init__(self, first_message_id: int = 500, delay: float = 0):
        self.calls: list[Call] = []
        self.fail_if: Callable[[Call], bool] | None = None
        self.in_flight = 0
        self.max_in_flight = 0
        self._next_id = first_message_id
        self._delay = delay

    def calls_to(self, chat_id: int) -> list[Call]:
        return [c for c in self.calls if c.chat_id == chat_id]

    async def _record(self, method: str, chat_id: int, **args) -> SentMessage:
        call = Call(method=method, chat_id=chat_id, args=args)
        self.calls.append(call)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self._delay)
            if self.fail_if is not None and self.fail_if(call):
                raise TelegramAPIError("Bad Request: chat not found", error_code=400)
        finally:
            self.in_flight -= 1
        self._next_id += 1
        return SentMessage(chat_id=chat_id, message_id=self._next_id)

    async def send_message(self, chat_id, text, *, parse_mode=None, reply_to_message_id=None):
        return await self._record(
            "send_message",
            chat_id,
            text=text,
            parse_mode=parse_mode,
            reply_to_message_id=reply_to_message_id,
        )

    async def send_photo(self, chat_id, photo, *, caption=None, reply_to_message_id=None):
        return await self._record(
            "send_photo", chat_id, media=photo, caption=caption, reply_to_message_id=reply_to_message_id
        )

    async def send_video(self, chat_id, video, *, caption=None, reply_to_message_id=None):
        return await self._record(
            "send_video", chat_id, media=video, caption=caption, reply_to_message_id=reply_to_message_id
        )

    async def send_document(self, chat_id, document, *, caption=None, reply_to_message_id=None):
        return await self._record(
            "send_document",
            chat_id,
            media=document,
            caption=caption,
            reply_to_message_id=reply_to_message_id,
        )

    async def send_location(
        self, chat_id, latitude, longitude, *, live_period=None, reply_to_message_id=None
    ):
        return await self._record(
            "send_location",
            chat_id,
            latitude=latitude,
            longitude=longitude,
            live_period=live_period,
            reply_to_message_id=reply_to_message_id,
        )


@pytest.fixture
def sender():
    """Create a recording fake sender."""
    return FakeSender()


@pytest_asyncio.fixture
async def queue(sender):
    """Create a running DispatchQueue."""
    from relay.dispatch import DispatchQueue

    q = DispatchQueue(sender, admin_id=ADMIN_ID)
    await q.start()
    yield q
    await q.stop()


@pytest.fixture
def directory():
    """Create an empty ConversationDirectory."""
    from relay.directory import ConversationDirectory

    return ConversationDirectory()


@pytest.fixture
def router(queue, directory):
    """Create MessageRouter wired to the running queue."""
    from relay.router import MessageRouter

    return MessageRouter(queue=queue, directory=directory, admin_id=ADMIN_ID)


@pytest.fixture
def settings():
    """Create Settings for testing."""
    from relay.config import Settings

    return Settings(bot_token="123456:ABC-DEF", admin_id=ADMIN_ID)
