"""ConversationDirectory implementation."""

from typing import Protocol


class IConversationDirectory(Protocol):
    """Maps users to the admin-side message that threads their conversation."""

    def record_or_update(self, user_id: int, admin_message_id: int) -> None:
        """Set or overwrite the last admin-side message id for user_id."""
        ...

    def lookup_admin_message_id(self, user_id: int) -> int | None:
        """Get the last admin-side message id for user_id."""
        ...

    def find_user_by_admin_message_id(self, admin_message_id: int) -> int | None:
        """Reverse lookup: which user does admin_message_id belong to."""
        ...


class ConversationDirectory:
    """In-memory user_id -> admin message id map (process lifetime only)."""

    def __init__(self):
        self._entries: dict[int, int] = {}

    def record_or_update(self, user_id: int, admin_message_id: int) -> None:
        """Set or overwrite the last admin-side message id for user_id."""
        self._entries[user_id] = admin_message_id

    def lookup_admin_message_id(self, user_id: int) -> int | None:
        """Get the last admin-side message id for user_id."""
        return self._entries.get(user_id)

    def find_user_by_admin_message_id(self, admin_message_id: int) -> int | None:
        """Linear scan over all conversations."""
        for user_id, message_id in self._entries.items():
            if message_id == admin_message_id:
                return user_id
        return None

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
