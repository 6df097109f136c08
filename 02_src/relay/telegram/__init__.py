"""Telegram platform module."""

from .client import ISender, TelegramClient, parse_message
from .poller import MessageHandler, UpdatePoller

__all__ = [
    "ISender",
    "TelegramClient",
    "parse_message",
    "MessageHandler",
    "UpdatePoller",
]
