"""
Bearer token authentication gates.

Validates access tokens, re-fetches the user and hands the resulting
identity to route handlers as a typed dependency value.
"""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError, UserNotFoundError
from modules.auth.interfaces import IUserDirectory
from modules.auth.tokens import TokenService
from shared.exceptions import AuthenticationError
from shared.models import ANONYMOUS, AuthenticatedIdentity, Identity

from ..dependencies import get_token_service, get_user_directory

logger = logging.getLogger(__name__)

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def authenticate(
    credentials: Optional[HTTPAuthorizationCredentials],
    tokens: TokenService,
    directory: IUserDirectory,
) -> AuthenticatedIdentity:
    """
    Resolve bearer credentials to the identity of an existing user.

    Raises:
        MissingTokenError: If no bearer token was sent
        InvalidTokenError: If the token is forged, malformed or expired
        UserNotFoundError: If the token's user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    claims = tokens.verify(credentials.credentials)

    # Re-fetch so deleted users are locked out even with a valid token
    user = directory.get_by_id(claims.user_id)
    if user is None:
        raise UserNotFoundError(claims.user_id)

    return user.to_identity()


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
    directory: IUserDirectory = Depends(get_user_directory),
) -> AuthenticatedIdentity:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. It is a plain
    function so FastAPI runs it, and the directory lookup, in its threadpool.

    Usage:
        @router.get("/protected")
        async def protected_route(
            identity: AuthenticatedIdentity = Depends(get_current_identity),
        ):
            return {"user_id": identity.id}
    """
    try:
        return authenticate(credentials, tokens, directory)
    except AuthenticationError as e:
        logger.warning(f"Rejected request: {e.code}")
        raise


def get_optional_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
    directory: IUserDirectory = Depends(get_user_directory),
) -> Identity:
    """
    Dependency that resolves the caller if possible.

    Use this for endpoints that work with or without authentication. Any
    authentication failure yields ANONYMOUS; storage failures still raise.

    Usage:
        @router.get("/public")
        async def public_route(identity: Identity = Depends(get_optional_identity)):
            if isinstance(identity, AuthenticatedIdentity):
                return {"message": f"Hello, {identity.first_name}"}
            return {"message": "Hello, anonymous"}
    """
    if credentials is None:
        return ANONYMOUS

    try:
        return authenticate(credentials, tokens, directory)
    except AuthenticationError as e:
        logger.debug(f"Optional auth fell back to anonymous: {e.code}")
        return ANONYMOUS


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_identity)
OptionalAuth = Depends(get_optional_identity)
