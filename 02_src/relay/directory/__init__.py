"""ConversationDirectory module."""

from .directory import ConversationDirectory, IConversationDirectory

__all__ = ["ConversationDirectory", "IConversationDirectory"]
