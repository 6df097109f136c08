"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import Settings
from .directory import ConversationDirectory
from .dispatch import DispatchQueue
from .logging_config import get_logger
from .router import MessageRouter
from .telegram import ISender, TelegramClient, UpdatePoller

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings,
        sender: ISender | None = None,
        poll: bool = True,
    ):
        self._settings = settings
        self._sender = sender
        self._poll = poll

        # Components (will be initialized in start())
        self._client: TelegramClient | None = None
        self._queue: DispatchQueue | None = None
        self._directory: ConversationDirectory | None = None
        self._router: MessageRouter | None = None
        self._poller: UpdatePoller | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application (admin_id=%s)", self._settings.admin_id)

        # 1. Bot API client (no dependencies)
        if self._sender is None or self._poll:
            self._client = TelegramClient(self._settings.bot_token)
        sender = self._sender or self._client

        # 2. DispatchQueue (depends on the sender)
        self._queue = DispatchQueue(sender, admin_id=self._settings.admin_id)
        await self._queue.start()

        # 3. ConversationDirectory (no dependencies)
        self._directory = ConversationDirectory()

        # 4. MessageRouter (depends on DispatchQueue + ConversationDirectory)
        self._router = MessageRouter(
            queue=self._queue,
            directory=self._directory,
            admin_id=self._settings.admin_id,
        )

        # 5. UpdatePoller (depends on the client + MessageRouter)
        if self._poll:
            self._poller = UpdatePoller(self._client, self._router.handle)
            await self._poller.start()

        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._poller:
            await self._poller.stop()
        if self._queue:
            await self._queue.stop()
        if self._client:
            await self._client.close()
            logger.info("Bot API client closed")

    @property
    def queue(self) -> DispatchQueue:
        """Get dispatch queue instance."""
        if self._queue is None:
            raise RuntimeError("Application not started")
        return self._queue

    @property
    def directory(self) -> ConversationDirectory:
        """Get conversation directory instance."""
        if self._directory is None:
            raise RuntimeError("Application not started")
        return self._directory

    @property
    def router(self) -> MessageRouter:
        """Get message router instance."""
        if self._router is None:
            raise RuntimeError("Application not started")
        return self._router
