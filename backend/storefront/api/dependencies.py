"""Request Dependencies — auth gate and per-request service wiring.

Invariants:
    - Auth gate is terminal per request: no header -> MissingTokenError (401),
      header present but unverifiable -> InvalidTokenError (401)
    - Resolved UserId is handed to the route; nothing is stored across requests
    - Token is read from the custom `auth-token` header, not Authorization

Design Decisions:
    - Settings-derived collaborators built through Depends so tests override
      get_settings once and every dependency follows
"""

from fastapi import Depends, Header

from storefront.config import Settings, get_settings
from storefront.core.domain_types import UserId
from storefront.core.errors import MissingTokenError
from storefront.infrastructure.password_hasher import PasswordHasher
from storefront.infrastructure.token_service import TokenService

AUTH_HEADER = "auth-token"


def get_token_service(
    settings: Settings = Depends(get_settings),
) -> TokenService:
    return TokenService(settings.jwt_secret, settings.jwt_algorithm)


def get_password_hasher(
    settings: Settings = Depends(get_settings),
) -> PasswordHasher:
    return PasswordHasher(settings.bcrypt_rounds)


async def get_current_user_id(
    auth_token: str | None = Header(None, alias=AUTH_HEADER),
    tokens: TokenService = Depends(get_token_service),
) -> UserId:
    """Resolve the caller's identity from the auth-token header."""
    if not auth_token:
        raise MissingTokenError()
    return tokens.verify(auth_token)
