"""Auth Routes — signup and login, both answering with a bearer token.

Invariants:
    - Signup token lifetime = settings.signup_token_ttl_seconds (None = unbounded)
    - Login token lifetime = settings.login_token_ttl_seconds (one hour by default)
    - Duplicate email and bad credentials answer 400 with success=False
"""

from datetime import timedelta

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.dependencies import get_password_hasher, get_token_service
from storefront.config import Settings, get_settings
from storefront.core.domain_types import UserId
from storefront.infrastructure.database import get_db
from storefront.infrastructure.password_hasher import PasswordHasher
from storefront.infrastructure.token_service import TokenService
from storefront.schemas.auth import LoginRequest, SignupRequest, TokenResponse
from storefront.services.credential_store import CredentialStore

router = APIRouter(tags=["auth"])


def _ttl(seconds: int | None) -> timedelta | None:
    return timedelta(seconds=seconds) if seconds is not None else None


@router.post("/signup", response_model=TokenResponse)
async def signup(
    body: SignupRequest,
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    store = CredentialStore(db, hasher)
    user = await store.register(body.username, body.email, body.password)
    token = tokens.issue(
        UserId(user.id), _ttl(settings.signup_token_ttl_seconds),
    )
    return TokenResponse(token=token)


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
):
    store = CredentialStore(
        db, hasher, uniform_login_errors=settings.auth_uniform_login_errors,
    )
    user = await store.authenticate(body.email, body.password)
    token = tokens.issue(
        UserId(user.id), _ttl(settings.login_token_ttl_seconds),
    )
    return TokenResponse(token=token)
