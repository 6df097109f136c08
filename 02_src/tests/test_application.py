"""Tests for Application and the liveness API."""

import pytest
from fastapi.testclient import TestClient

from conftest import ADMIN_ID, USER_ID, FakeSender
from relay.api import create_fastapi_app
from relay.app import Application
from relay.models import InboundMessage


class TestApplicationStart:
    """Tests for Application.start()."""

    @pytest.mark.asyncio
    async def test_start_initializes_components(self, settings):
        """Test that start wires components in dependency order."""
        app = Application(settings, sender=FakeSender(), poll=False)
        await app.start()

        try:
            assert app.queue.running
            assert app.router._queue is app.queue
            assert app.router._directory is app.directory
            assert app._poller is None
            assert app._client is None
        finally:
            await app.stop()

        assert not app.queue.running

    def test_properties_before_start(self, settings):
        """Test that components are unavailable before start."""
        app = Application(settings, sender=FakeSender(), poll=False)

        with pytest.raises(RuntimeError):
            app.queue
        with pytest.raises(RuntimeError):
            app.router


class TestEndToEnd:
    """Full relay flow through a started Application."""

    @pytest.mark.asyncio
    async def test_start_relay_and_reply(self, settings):
        """Test /start, a user message and an admin reply."""
        sender = FakeSender()
        app = Application(settings, sender=sender, poll=False)
        await app.start()

        try:
            await app.router.handle(
                InboundMessage(chat_id=USER_ID, message_id=1, sender_name="Alice", text="/start")
            )
            await app.router.handle(
                InboundMessage(chat_id=USER_ID, message_id=2, sender_name="Alice", text="Hi")
            )
            await app.queue.join()

            thread_id = app.directory.lookup_admin_message_id(USER_ID)
            await app.router.handle(
                InboundMessage(
                    chat_id=ADMIN_ID,
                    message_id=3,
                    text="Hello Alice",
                    reply_to_message_id=thread_id,
                )
            )
            await app.queue.join()
        finally:
            await app.stop()

        user_texts = [c.args["text"] for c in sender.calls_to(USER_ID)]
        assert user_texts[-1] == "📩 Hello Alice"
        assert len(sender.calls_to(ADMIN_ID)) == 3


class TestLivenessApi:
    """Tests for the FastAPI liveness endpoints."""

    def test_root(self, settings):
        """Test the static OK response."""
        app = Application(settings, sender=FakeSender(), poll=False)

        with TestClient(create_fastapi_app(app)) as client:
            response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Bot is running!"

    def test_health(self, settings):
        """Test queue and directory stats."""
        app = Application(settings, sender=FakeSender(), poll=False)

        with TestClient(create_fastapi_app(app)) as client:
            app.directory.record_or_update(USER_ID, 77)
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "pending": 0, "conversations": 1}
