from .base import DatabaseManager
from .store import GameStore
from .game_manager import PostgresGameStore
from .memory_store import InMemoryGameStore

__all__ = [
    "DatabaseManager",
    "GameStore",
    "PostgresGameStore",
    "InMemoryGameStore",
]
