import copy
import time
from typing import Dict, List, Optional, Sequence
from .store import GameStore
from ..models.data import GameRec, SEARCHABLE_FIELDS, UPDATABLE_FIELDS, new_game_id
from ..logger import get_logger

logger = get_logger()

class InMemoryGameStore(GameStore):
    """Dict-backed store used by the `memory` storage backend and the test suite.

    Documents are copied on the way in and out so callers never share state
    with the store.
    """

    def __init__(self, docs: Optional[List[dict]] = None):
        self._docs: Dict[str, dict] = {}
        for doc in docs or []:
            rec = GameRec(doc)
            self._docs[rec.id] = rec.to_dict()

    async def find(self, projection: Optional[Sequence[str]] = None) -> List[dict]:
        docs = list(self._docs.values())
        if projection:
            keys = ['id'] + [key for key in projection if key != 'id']
            return [{key: copy.deepcopy(doc[key]) for key in keys} for doc in docs]
        return copy.deepcopy(docs)

    async def find_by_id(self, game_id: str) -> Optional[dict]:
        doc = self._docs.get(game_id)
        return copy.deepcopy(doc) if doc else None

    async def find_by_field(self, field: str, value) -> List[dict]:
        if field not in SEARCHABLE_FIELDS:
            raise ValueError(f"Cannot search games by {field}")
        docs = [doc for doc in self._docs.values() if doc.get(field) == value]
        return copy.deepcopy(docs)

    async def insert(self, doc: dict) -> dict:
        rec = GameRec(copy.deepcopy(doc))
        while rec.id in self._docs:
            rec.id = new_game_id()
        self._docs[rec.id] = rec.to_dict()
        logger.debug(f"Stored game {rec.id} in memory")
        return copy.deepcopy(self._docs[rec.id])

    async def update_by_id(self, game_id: str, changes: dict) -> Optional[dict]:
        doc = self._docs.get(game_id)
        if doc is None:
            return None
        updates = {field: copy.deepcopy(changes[field]) for field in UPDATABLE_FIELDS if field in changes}
        if updates:
            doc.update(updates)
            doc['updated_at'] = time.time()
        return copy.deepcopy(doc)

    async def delete_by_id(self, game_id: str) -> bool:
        return self._docs.pop(game_id, None) is not None

    async def ping(self) -> bool:
        return True
