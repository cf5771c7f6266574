"""
app/services/state_store.py

Purpose: User navigation state storage

- Key-value interface (sender id -> UserState) injected into the dispatcher
- In-memory implementation living for the process lifetime
- Records are kept as plain dicts so other key-value backends can hold
  the same shape
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from app.core.exceptions import StateStoreError
from app.flow.states import UserState
from app.core.logging import get_logger

logger = get_logger(__name__)


class StateStore(ABC):
    """Key-value store of user states."""

    @abstractmethod
    async def get(self, user_id: str) -> Optional[UserState]:
        """Returns the stored state, or None for a user never seen."""

    @abstractmethod
    async def set(self, user_id: str, state: UserState) -> None:
        """Stores (overwrites) the state of a user."""

    @abstractmethod
    async def count(self) -> int:
        """Number of users with a stored state."""


class InMemoryStateStore(StateStore):
    """
    Dict-backed store. State is lost on restart; entries are never evicted.
    """

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}

    async def get(self, user_id: str) -> Optional[UserState]:
        record = self._records.get(user_id)
        if record is None:
            return None

        try:
            return UserState.from_dict(record)
        except (KeyError, TypeError, ValueError) as e:
            raise StateStoreError(
                f"Corrupt state record for {user_id}",
                details={"record": record, "error": str(e)}
            ) from e

    async def set(self, user_id: str, state: UserState) -> None:
        self._records[user_id] = state.to_dict()
        logger.debug(f"State stored for {user_id}: {self._records[user_id]}")

    async def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()


# Singleton instance
state_store = InMemoryStateStore()


def get_state_store() -> StateStore:
    """FastAPI dependency returning the process-wide state store."""
    return state_store
