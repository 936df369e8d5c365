from typing import Dict, List, Optional
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

class GamesAPIError(HTTPException):
    """Base class for errors raised by the games resource.

    Subclasses fix the HTTP status so handlers only pick a message.
    """
    status_code = 500
    default_detail = "Internal server error"

    def __init__(self, detail=None, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail if detail is not None else self.default_detail,
            headers=headers
        )

class Unauthenticated(GamesAPIError):
    status_code = 401
    default_detail = "Authentication required"

    def __init__(self, detail=None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})

class Forbidden(GamesAPIError):
    status_code = 403
    default_detail = "Permission denied"

class BadRequest(GamesAPIError):
    status_code = 400
    default_detail = "Bad request"

class NotFound(GamesAPIError):
    status_code = 404
    default_detail = "Game not found"

class PersistenceError(GamesAPIError):
    status_code = 500
    default_detail = "Internal server error"

class ValidationFailed(GamesAPIError):
    status_code = 400

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__(detail=errors)

def _field_path(loc) -> str:
    # drop the 'body'/'path'/'query' prefix FastAPI puts on every location
    parts = [str(p) for p in loc]
    if parts and parts[0] in ('body', 'path', 'query', 'header'):
        parts = parts[1:]
    return '.'.join(parts) or 'body'

def _message(error: dict, field: str) -> str:
    if error.get('type') == 'missing':
        return f"{field} is required"
    msg = error.get('msg', 'Invalid value')
    # pydantic prefixes custom validator messages
    if msg.startswith('Value error, '):
        msg = msg[len('Value error, '):]
    return msg

def format_validation_errors(raw_errors) -> List[Dict[str, str]]:
    """Turn pydantic error dicts into (field, message) pairs, keeping their order"""
    errors = []
    for error in raw_errors:
        field = _field_path(error.get('loc', ()))
        errors.append({'field': field, 'message': _message(error, field)})
    return errors

async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as a 400 with every violation listed"""
    failure = ValidationFailed(format_validation_errors(exc.errors()))
    return ORJSONResponse(status_code=failure.status_code, content={"detail": failure.errors})
