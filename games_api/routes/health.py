import time
from fastapi import APIRouter, Request
from ..models.response import HealthResponse
from ..logger import get_logger

logger = get_logger()
router = APIRouter(tags=["Health"])

# Track application start time
start_time = time.time()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    store = getattr(request.app.state, 'game_store', None)
    reachable = False
    if store is not None:
        try:
            reachable = await store.ping()
        except Exception as e:
            logger.error(f"Health check could not reach storage: {e}")
    response = HealthResponse(
        uptime=time.time() - start_time,
        storage="up" if reachable else "down"
    )
    logger.debug(f"Health check response: {response.model_dump()}")
    return response
