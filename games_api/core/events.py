import asyncio
from contextlib import asynccontextmanager
from fastapi import FastAPI
from ..config import storage
from ..database import DatabaseManager, InMemoryGameStore
from ..logger import get_logger

logger = get_logger()

async def startup_event(app: FastAPI):
    """Attach the configured game store to the app"""
    if getattr(app.state, 'game_store', None) is not None:
        logger.info("Using preconfigured game store")
        return

    if storage.backend == 'memory':
        app.state.game_store = InMemoryGameStore()
        logger.info("Using in-memory game store")
        return

    try:
        db = await DatabaseManager.get_instance()
        await db.initialize()
        app.state.game_store = db.games
        app.state.owns_database = True
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

async def shutdown_event(app: FastAPI):
    """Close database connections"""
    if not getattr(app.state, 'owns_database', False):
        return
    try:
        async with asyncio.timeout(5.0):
            db = await DatabaseManager.get_instance()
            await db.close()
            logger.info("Database connections closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out, database pool left to the interpreter")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")
    finally:
        app.state.game_store = None
        app.state.owns_database = False

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event(app)
    yield
    await shutdown_event(app)
