"""Password Hasher — bcrypt salted one-way hashing with constant-time verify.

Invariants:
    - Every hash call draws a fresh random salt (bcrypt.gensalt)
    - verify never raises on a malformed stored hash; it returns False
    - Hashing runs in a worker thread: bcrypt is deliberately slow and must not
      block the event loop

Design Decisions:
    - Work factor is a constructor argument (settings.bcrypt_rounds) so tests
      can use the minimum cost
"""

import bcrypt
from fastapi.concurrency import run_in_threadpool


class PasswordHasher:
    """Tunable-cost bcrypt hasher."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_sync(self, password: str, password_hash: str) -> bool:
        # bcrypt.checkpw compares in constant time
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8"),
            )
        except ValueError:
            return False

    async def hash(self, password: str) -> str:
        return await run_in_threadpool(self.hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await run_in_threadpool(self.verify_sync, password, password_hash)
