"""Tests for UpdatePoller."""

import asyncio

import pytest

from relay.errors import TelegramAPIError
from relay.telegram import UpdatePoller


def _update(update_id: int, chat_id: int = 42, text: str = "hi") -> dict:
    return {
        "update_id": update_id,
        "message": {"message_id": update_id, "chat": {"id": chat_id}, "text": text},
    }


class FakeClient:
    """Returns canned update batches and records offsets."""

    def __init__(self, batches: list):
        self._batches = list(batches)
        self.offsets: list[int | None] = []
        self.webhook_deleted = False

    async def get_updates(self, offset=None, timeout=30):
        self.offsets.append(offset)
        if not self._batches:
            await asyncio.sleep(3600)
        batch = self._batches.pop(0)
        if isinstance(batch, Exception):
            raise batch
        return batch

    async def delete_webhook(self):
        self.webhook_deleted = True


class TestUpdatePoller:
    """Tests for UpdatePoller."""

    @pytest.mark.asyncio
    async def test_poll_once_handles_in_order(self):
        """Test that messages are handled sequentially and offset advances."""
        handled = []

        async def handler(message):
            handled.append(message.message_id)

        client = FakeClient([[_update(5), {"update_id": 6, "edited_message": {}}, _update(7)]])
        poller = UpdatePoller(client, handler)

        count = await poller.poll_once()

        assert count == 3
        assert handled == [5, 7]
        assert poller._offset == 8

    @pytest.mark.asyncio
    async def test_offset_passed_to_next_poll(self):
        """Test that the next request acknowledges previous updates."""

        async def handler(message):
            pass

        client = FakeClient([[_update(1)], []])
        poller = UpdatePoller(client, handler)

        await poller.poll_once()
        await poller.poll_once()

        assert client.offsets == [None, 2]

    @pytest.mark.asyncio
    async def test_background_loop_retries(self):
        """Test that API errors are retried and the webhook is dropped."""
        handled = []

        async def handler(message):
            handled.append(message.text)

        client = FakeClient([TelegramAPIError("Conflict", 409), [_update(1, text="after")]])
        poller = UpdatePoller(client, handler, retry_delay=0)

        await poller.start()
        for _ in range(50):
            if handled:
                break
            await asyncio.sleep(0.01)
        await poller.stop()

        assert client.webhook_deleted
        assert handled == ["after"]
