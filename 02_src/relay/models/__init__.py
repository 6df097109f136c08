"""Core data models for the relay bot."""

from .actions import ActionKind, LocationAction, MediaAction, OutboundAction, TextAction
from .messages import InboundMessage, MediaKind, SentMessage

__all__ = [
    # Messages
    "InboundMessage",
    "MediaKind",
    "SentMessage",
    # Actions
    "ActionKind",
    "OutboundAction",
    "TextAction",
    "MediaAction",
    "LocationAction",
]
