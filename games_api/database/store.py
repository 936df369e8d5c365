from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

class GameStore(ABC):
    """Persistence for game documents.

    Each method is a single-document primitive that is atomic on its own;
    callers get plain dicts back and never hold a connection between calls.
    """

    @abstractmethod
    async def find(self, projection: Optional[Sequence[str]] = None) -> List[dict]:
        """Every stored game; with a projection, only `id` and those fields"""

    @abstractmethod
    async def find_by_id(self, game_id: str) -> Optional[dict]:
        """The game with this id, or None"""

    @abstractmethod
    async def find_by_field(self, field: str, value) -> List[dict]:
        """Games whose `field` equals `value`; `field` must be searchable"""

    @abstractmethod
    async def insert(self, doc: dict) -> dict:
        """Store a new game and return it as stored"""

    @abstractmethod
    async def update_by_id(self, game_id: str, changes: dict) -> Optional[dict]:
        """Apply `changes` and return the updated game, or None if it does not exist"""

    @abstractmethod
    async def delete_by_id(self, game_id: str) -> bool:
        """Remove the game; False if there was nothing to remove"""

    @abstractmethod
    async def ping(self) -> bool:
        """Whether the backend is reachable"""

    async def close(self):
        pass
