"""Credential Store — user registration and password authentication.

Invariants:
    - email unique: checked up front and enforced by the unique index at commit
    - Passwords stored only as bcrypt hashes (PasswordHasher, per-record salt)
    - A new user starts with every cart slot at zero, written in the same
      transaction as the user row
    - Unknown email and wrong password are distinct InvalidCredentialsError
      subclasses unless uniform_login_errors is set

Design Decisions:
    - Hashing awaited through the hasher's threadpool wrapper: the slow bcrypt
      work factor never blocks other requests
    - IntegrityError on commit mapped to EmailTakenError: covers two signups
      racing on the same email past the up-front check
"""

import logging
import uuid

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import CART_SLOTS, UserId
from storefront.core.errors import (
    EmailTakenError, InvalidCredentialsError, UnknownEmailError,
    WrongPasswordError,
)
from storefront.infrastructure.password_hasher import PasswordHasher
from storefront.models.cart_slot import CartSlot
from storefront.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """User persistence and authentication."""

    def __init__(
        self,
        db: AsyncSession,
        hasher: PasswordHasher,
        uniform_login_errors: bool = False,
    ):
        self.db = db
        self.hasher = hasher
        self.uniform_login_errors = uniform_login_errors

    async def get(self, user_id: UserId) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def register(self, name: str, email: str, password: str) -> User:
        """Create a user with an all-zero cart. Raises EmailTakenError."""
        if await self.get_by_email(email) is not None:
            raise EmailTakenError()

        password_hash = await self.hasher.hash(password)
        user = User(
            id=uuid.uuid4(), name=name, email=email,
            password_hash=password_hash,
        )
        self.db.add(user)
        try:
            await self.db.flush()
            await self.db.execute(
                insert(CartSlot),
                [
                    {"user_id": user.id, "slot": slot, "quantity": 0}
                    for slot in range(CART_SLOTS)
                ],
            )
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Signup lost race on duplicate email")
            raise EmailTakenError()

        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """Return the user for valid credentials or raise InvalidCredentialsError."""
        user = await self.get_by_email(email)
        if user is None:
            raise self._login_error(UnknownEmailError())
        if not await self.hasher.verify(password, user.password_hash):
            raise self._login_error(WrongPasswordError())
        return user

    def _login_error(
        self, error: InvalidCredentialsError,
    ) -> InvalidCredentialsError:
        if self.uniform_login_errors:
            return InvalidCredentialsError()
        return error
