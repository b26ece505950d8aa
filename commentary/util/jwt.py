"""Bearer token verification.

Tokens are minted by the identity service in front of this one. Only the
``sub`` claim (the caller's user ID) is required; ``exp`` is honoured when
present.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel

from commentary.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims this service reads from a token."""

    sub: str
    exp: datetime | None = None


class JWTError(Exception):
    """Token rejected."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is expired, badly signed, malformed or has no
            ``sub`` claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": ["sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.MissingRequiredClaimError as e:
        raise JWTError("Token has no subject") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    return TokenPayload.model_validate(claims)
