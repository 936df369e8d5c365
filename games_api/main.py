from typing import Optional
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from .config import server
from .core.errors import request_validation_handler
from .core.events import lifespan
from .database import GameStore
from .routes import games, health

def create_app(store: Optional[GameStore] = None) -> FastAPI:
    """Build the API; pass a store to skip database setup (tests, local runs)"""
    app = FastAPI(
        default_response_class=ORJSONResponse,
        title="Games API",
        description="Games (quizzes/trivia with leaderboards) REST API",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.game_store = store
    app.state.owns_database = False

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(health.router)
    app.include_router(games.router)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "games_api.main:app",
        host=server.host,
        port=server.port,
        workers=server.workers,
        loop="uvloop",
        http="httptools",
        log_level=server.log_level.lower()
    )
