"""bcrypt password hasher."""

import asyncio
import secrets

import bcrypt

from threadify.domain.service.password_service import PasswordHasher

# bcrypt only looks at the first 72 bytes of input
_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """Password hasher backed by bcrypt.

    Both operations run in a worker thread; bcrypt is CPU-bound.
    """

    def __init__(self, rounds: int = 10) -> None:
        """Initialize hasher.

        Args:
            rounds: bcrypt cost factor
        """
        self.rounds = rounds
        self._dummy_digest = bcrypt.hashpw(
            secrets.token_bytes(16), bcrypt.gensalt(rounds=rounds)
        ).decode("utf-8")

    @property
    def dummy_digest(self) -> str:
        return self._dummy_digest

    async def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        digest = await asyncio.to_thread(bcrypt.hashpw, _encode(plaintext), salt)
        return digest.decode("utf-8")

    async def verify(self, plaintext: str, digest: str) -> bool:
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, _encode(plaintext), digest.encode("utf-8")
            )
        except ValueError:
            # Stored digest is not a bcrypt hash
            return False


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:_MAX_PASSWORD_BYTES]
