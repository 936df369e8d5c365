from typing import List
from fastapi import APIRouter, Depends, Path, Request, Response, status
from pydantic import ValidationError
from ..core.dependencies import get_game_service
from ..core.errors import GamesAPIError, PersistenceError, ValidationFailed, format_validation_errors
from ..core.security import Identity, admin_user, authenticated_user, type_listing_user
from ..models.game import GameCreate, GameUpdate
from ..models.response import GameDetail, GameSummary
from ..services.games import GameService
from ..logger import get_logger

logger = get_logger()
router = APIRouter(prefix="/games", tags=["Games"])

ERROR_RESPONSES = {
    400: {"description": "Invalid or missing data"},
    401: {"description": "Authentication required"},
    403: {"description": "Permission denied"},
    404: {"description": "Game not found"},
    500: {"description": "Something went wrong"},
}

def _responses(*codes):
    return {code: ERROR_RESPONSES[code] for code in codes}

def _inline_refs(node, defs):
    if isinstance(node, dict):
        if '$ref' in node:
            return _inline_refs(defs[node['$ref'].rsplit('/', 1)[-1]], defs)
        return {key: _inline_refs(value, defs) for key, value in node.items()}
    if isinstance(node, list):
        return [_inline_refs(value, defs) for value in node]
    return node

def _json_body(model):
    """OpenAPI request body for routes that parse their own JSON"""
    schema = model.model_json_schema()
    defs = schema.pop('$defs', {})
    return {"requestBody": {"required": True, "content": {
        "application/json": {"schema": _inline_refs(schema, defs)}}}}

def _parsed_body(model, gate):
    """Dependency that parses `model` from the body once the caller has passed `gate`.

    A declared body parameter would be decoded before any dependency runs.
    """
    async def parse(request: Request, identity: Identity = Depends(gate)):
        try:
            return model.model_validate_json(await request.body())
        except ValidationError as e:
            raise ValidationFailed(format_validation_errors(e.errors()))
    return parse

@router.post("/", response_model=GameDetail, status_code=201,
             responses=_responses(400, 401, 403, 500), openapi_extra=_json_body(GameCreate))
async def create_game(
    data: GameCreate = Depends(_parsed_body(GameCreate, admin_user)),
    identity: Identity = Depends(admin_user),
    service: GameService = Depends(get_game_service)
):
    """
    Create a new game. Admin only.

    - **name**: Game name
    - **image**: URL of the game image
    - **type**: Game category, e.g. Quiz
    - **points**: Total points the game is worth
    - **questions**: Questions, each with options and the correct answer
    """
    try:
        logger.info(f"Creating game {data.name!r} of type {data.type!r}")
        return await service.create(identity, data)
    except GamesAPIError:
        raise
    except Exception as e:
        logger.error(f"Error creating game: {e}")
        raise PersistenceError("Failed to create game")

@router.get("/", response_model=List[GameSummary], responses=_responses(401, 500))
async def list_games(
    identity: Identity = Depends(authenticated_user),
    service: GameService = Depends(get_game_service)
):
    """List every game with its name, image and type."""
    try:
        games = await service.list_games(identity)
        logger.info(f"Listed {len(games)} games")
        return games
    except GamesAPIError:
        raise
    except Exception as e:
        logger.error(f"Error listing games: {e}")
        raise PersistenceError("Failed to list games")

@router.get("/type/{game_type}", response_model=List[GameDetail], responses=_responses(400, 401, 404, 500))
async def get_games_by_type(
    game_type: str = Path(..., min_length=1, max_length=100, description="Game type"),
    identity: Identity = Depends(type_listing_user),
    service: GameService = Depends(get_game_service)
):
    """List the full details of every game of the given type."""
    try:
        logger.info(f"Getting games of type {game_type}")
        return await service.get_by_type(identity, game_type)
    except GamesAPIError:
        raise
    except Exception as e:
        logger.error(f"Error getting games of type {game_type}: {e}")
        raise PersistenceError("Failed to get games by type")

@router.get("/{game_id}", response_model=GameDetail, responses=_responses(401, 404, 500))
async def get_game(
    game_id: str = Path(..., min_length=1, max_length=64, description="Game ID"),
    identity: Identity = Depends(authenticated_user),
    service: GameService = Depends(get_game_service)
):
    """Get a game with its questions and leaderboard."""
    try:
        return await service.get_game(identity, game_id)
    except GamesAPIError:
        raise
    except Exception as e:
        logger.error(f"Error getting game {game_id}: {e}")
        raise PersistenceError("Failed to get game")

@router.put("/{game_id}", response_model=GameDetail, responses=_responses(400, 401, 403, 404, 500),
            openapi_extra=_json_body(GameUpdate))
async def update_game(
    data: GameUpdate = Depends(_parsed_body(GameUpdate, authenticated_user)),
    game_id: str = Path(..., min_length=1, max_length=64, description="Game ID"),
    identity: Identity = Depends(authenticated_user),
    service: GameService = Depends(get_game_service)
):
    """
    Change some of a game's fields. Fields left out of the body keep their value.

    - **name**, **image**, **points**, **questions**: all optional
    """
    try:
        logger.info(f"Updating game {game_id}")
        return await service.update_game(identity, game_id, data)
    except GamesAPIError:
        raise
    except Exception as e:
        logger.error(f"Error updating game {game_id}: {e}")
        raise PersistenceError("Failed to update game")

@router.delete("/{game_id}", status_code=204, response_class=Response,
               responses=_responses(401, 403, 404, 500))
async def delete_game(
    game_id: str = Path(..., min_length=1, max_length=64, description="Game ID"),
    identity: Identity = Depends(admin_user),
    service: GameService = Depends(get_game_service)
):
    """Delete a game permanently. Admin only."""
    try:
        logger.info(f"Deleting game {game_id}")
        await service.delete_game(identity, game_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except GamesAPIError:
        raise
    except Exception as e:
        logger.error(f"Error deleting game {game_id}: {e}")
        raise PersistenceError("Failed to delete game")
