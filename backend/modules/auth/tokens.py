"""
Access token issuance and verification.

Tokens are HS256 JWTs whose only durable claim is the user ID (``sub``).
They are stateless: a token stays valid until it expires, regardless of
later changes to the account.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ConfigurationError

from .exceptions import ExpiredTokenError, InvalidTokenError
from .models import TokenClaims

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_EXPIRY = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    Holds nothing but the signing secret and expiry, both fixed at
    construction, so a single instance is shared by all requests.
    """

    def __init__(
        self,
        secret: str,
        expiry: timedelta = DEFAULT_EXPIRY,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ConfigurationError(
                "Token signing secret is not configured. Set JWT_SECRET.",
                code="JWT_SECRET_MISSING",
            )
        self._secret = secret
        self._expiry = expiry
        self._clock = clock or _utcnow

    @property
    def expiry(self) -> timedelta:
        return self._expiry

    def issue(self, user_id: int) -> str:
        """Create a token for ``user_id`` expiring ``expiry`` after issuance."""
        issued_at = self._clock()
        payload = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expiry).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        Check signature and expiry and return the decoded claims.

        Expiry is judged against the service's clock, the same one ``issue``
        stamps tokens with.

        Raises:
            ExpiredTokenError: If the expiry time has passed
            InvalidTokenError: If the token is malformed, forged, or its
                subject is not a user ID
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "require": ["sub", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        try:
            claims = TokenClaims(**payload)
            int(claims.sub)
        except (PydanticValidationError, ValueError):
            logger.warning("Token has a well-formed signature but an unusable subject or timestamps")
            raise InvalidTokenError("Token claims are not a user ID with timestamps")

        if claims.exp <= int(self._clock().timestamp()):
            raise ExpiredTokenError()

        return claims
