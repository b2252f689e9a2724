"""Password hashing contract."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Abstract slow, salted password hasher.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Hash a plaintext password with a fresh salt.

        Args:
            plaintext: Password as typed by the user

        Returns:
            Encoded digest including algorithm, cost and salt
        """
        pass

    @abstractmethod
    async def verify(self, plaintext: str, digest: str) -> bool:
        """Check a plaintext password against a stored digest.

        Args:
            plaintext: Password as typed by the user
            digest: Stored digest from ``hash``

        Returns:
            True if the password matches
        """
        pass

    @property
    @abstractmethod
    def dummy_digest(self) -> str:
        """Digest at the configured cost that matches no real password.

        Verified against when no user exists, so a sign-in costs the same
        whether or not the email is registered.
        """
        pass
