from typing import Optional
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from ..config import auth
from .errors import Forbidden, Unauthenticated
from ..logger import get_logger

logger = get_logger()

bearer_scheme = HTTPBearer(auto_error=False, description="Bearer Token")

class Identity:
    __slots__ = ('user_id', 'role')
    def __init__(self, user_id: str, role: Optional[str] = None):
        self.user_id = user_id
        self.role = role

    @property
    def is_admin(self) -> bool:
        return self.role == auth.ADMIN_ROLE

    def __repr__(self):
        return f"Identity(user_id={self.user_id!r}, role={self.role!r})"

def decode_token(token: str) -> Identity:
    """Verify a bearer token and return the caller it identifies.

    Raises Unauthenticated for expired, malformed or badly signed tokens
    and for tokens that carry no user id.
    """
    try:
        claims = jwt.decode(token, auth.JWT_SECRET, algorithms=[auth.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.warning("Rejected expired token")
        raise Unauthenticated("Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected invalid token: {e}")
        raise Unauthenticated("Invalid token")

    user_id = claims.get('id') or claims.get('sub')
    if not user_id:
        logger.warning("Rejected token without a user id")
        raise Unauthenticated("Invalid token")
    return Identity(str(user_id), claims.get(auth.ROLE_CLAIM))

def require_authenticated(identity: Optional[Identity]) -> Identity:
    if identity is None:
        raise Unauthenticated()
    return identity

def require_admin(identity: Optional[Identity]) -> Identity:
    identity = require_authenticated(identity)
    if not identity.is_admin:
        raise Forbidden("Admin role required")
    return identity

def can_edit(identity: Optional[Identity], game: Optional[dict] = None) -> bool:
    """Edit policy for existing games; games carry no owner so only the role matters"""
    if identity is None:
        return False
    if auth.EDIT_POLICY == 'admin':
        return identity.is_admin
    return True

# --- FastAPI dependencies ---
async def current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Optional[Identity]:
    """Resolve the caller; a request without a token is anonymous"""
    if credentials is None:
        return None
    return decode_token(credentials.credentials)

async def authenticated_user(identity: Optional[Identity] = Depends(current_identity)) -> Identity:
    return require_authenticated(identity)

async def admin_user(identity: Optional[Identity] = Depends(current_identity)) -> Identity:
    return require_admin(identity)

async def type_listing_user(identity: Optional[Identity] = Depends(current_identity)) -> Optional[Identity]:
    if auth.PUBLIC_TYPE_LISTING:
        return identity
    return require_authenticated(identity)
