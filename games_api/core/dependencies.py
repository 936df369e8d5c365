from fastapi import Depends, Request
from ..database import DatabaseManager, GameStore
from ..services.games import GameService

async def get_game_store(request: Request) -> GameStore:
    """The store set on the app at startup, else the shared Postgres store"""
    store = getattr(request.app.state, 'game_store', None)
    if store is not None:
        return store
    db = await DatabaseManager.get_instance()
    return await db.get_store()

async def get_game_service(store: GameStore = Depends(get_game_store)) -> GameService:
    return GameService(store)
