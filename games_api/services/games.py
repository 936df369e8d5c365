"""Resource operations for games.

Each operation checks the caller against the authorization gate, calls the
store once or twice and maps empty results to NotFound. Request bodies arrive
already validated as GameCreate / GameUpdate models.
"""
from typing import List, Optional
from ..config import auth
from ..core.errors import BadRequest, Forbidden, NotFound
from ..core.security import Identity, can_edit, require_admin, require_authenticated
from ..core.validation import check_game_type, escape
from ..database.store import GameStore
from ..models.data import detail_view, summary_view
from ..models.game import GameCreate, GameUpdate
from ..logger import get_logger

logger = get_logger()

class GameService:
    def __init__(self, store: GameStore):
        self.store = store

    async def create(self, identity: Optional[Identity], payload: GameCreate) -> dict:
        identity = require_admin(identity)
        doc = payload.model_dump()
        doc['leaderboard'] = []
        stored = await self.store.insert(doc)
        logger.info(f"Game {stored['id']} created by {identity.user_id}")
        return detail_view(stored)

    async def list_games(self, identity: Optional[Identity]) -> List[dict]:
        require_authenticated(identity)
        docs = await self.store.find(projection=('name', 'image', 'type'))
        return [summary_view(doc) for doc in docs]

    async def get_game(self, identity: Optional[Identity], game_id: str) -> dict:
        require_authenticated(identity)
        doc = await self.store.find_by_id(game_id)
        if doc is None:
            logger.warning(f"Game {game_id} not found")
            raise NotFound()
        return detail_view(doc)

    async def get_by_type(self, identity: Optional[Identity], game_type: str) -> List[dict]:
        if not auth.PUBLIC_TYPE_LISTING:
            require_authenticated(identity)
        try:
            check_game_type(game_type)
        except ValueError as e:
            raise BadRequest(str(e))
        # stored types are escaped on create
        docs = await self.store.find_by_field('type', escape(game_type))
        if not docs:
            logger.warning(f"No games of type {game_type}")
            raise NotFound(f"No games of type {game_type}")
        return [detail_view(doc) for doc in docs]

    async def update_game(self, identity: Optional[Identity], game_id: str, payload: GameUpdate) -> dict:
        identity = require_authenticated(identity)
        if not can_edit(identity):
            raise Forbidden("Not allowed to edit this game")
        changes = payload.changes()
        doc = await self.store.update_by_id(game_id, changes)
        if doc is None:
            logger.warning(f"Game {game_id} not found for update")
            raise NotFound()
        logger.info(f"Game {game_id} updated by {identity.user_id}: {sorted(changes)}")
        return detail_view(doc)

    async def delete_game(self, identity: Optional[Identity], game_id: str) -> None:
        identity = require_admin(identity)
        if not await self.store.delete_by_id(game_id):
            logger.warning(f"Game {game_id} not found for delete")
            raise NotFound()
        logger.info(f"Game {game_id} deleted by {identity.user_id}")
