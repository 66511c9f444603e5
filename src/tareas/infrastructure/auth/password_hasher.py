"""Password hashing utility using Argon2.

Provides secure password hashing and verification using the Argon2id algorithm,
which is the winner of the Password Hashing Competition and recommended by OWASP.
The work factor (time cost, memory cost, parallelism) is configurable so tests
can run with cheap parameters and deployments can raise them.
"""

from functools import cached_property

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError

from tareas.core.config import Settings


class PasswordHasher:
    """Salted one-way hashing with a tunable Argon2id work factor."""

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ) -> None:
        """Initialize the hasher.

        Args:
            time_cost: Number of Argon2 iterations.
            memory_cost: Memory usage in KiB.
            parallelism: Number of parallel lanes.
        """
        self._hasher = Argon2Hasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    @cached_property
    def dummy_hash(self) -> str:
        """A hash of a throwaway password, made with this hasher's parameters.

        Verified against when a login names an unknown email, so the response
        time does not reveal whether the account exists.
        """
        return self.hash("tareas-dummy-password")

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        return cls(
            time_cost=settings.password_time_cost,
            memory_cost=settings.password_memory_cost,
            parallelism=settings.password_parallelism,
        )

    def hash(self, password: str) -> str:
        """Hash a password using Argon2id.

        A fresh random salt is generated on every call, so hashing the same
        password twice yields different digests.

        Args:
            password: The plaintext password to hash.

        Returns:
            The encoded hash string (``$argon2id$...``).
        """
        return self._hasher.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash.

        Uses constant-time comparison to prevent timing attacks. A digest
        that is not a valid Argon2 hash yields False rather than an error.

        Args:
            password: The plaintext password to verify.
            hashed: The hashed password to verify against.

        Returns:
            True if the password matches, False otherwise.
        """
        try:
            return self._hasher.verify(hashed, password)
        except (VerificationError, InvalidHashError, UnicodeEncodeError):
            return False

    def needs_rehash(self, hashed: str) -> bool:
        """Check if a hash was produced with parameters other than the configured ones.

        Args:
            hashed: The hashed password to check.

        Returns:
            True if the hash should be updated, False otherwise.
        """
        try:
            return self._hasher.check_needs_rehash(hashed)
        except InvalidHashError:
            return True


# Default hasher instance
_default_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password with the default parameters.

    Example:
        >>> hashed = hash_password("SecureP@ss123!")
        >>> hashed.startswith("$argon2id$")
        True
    """
    return _default_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password with the default hasher.

    Example:
        >>> hashed = hash_password("SecureP@ss123!")
        >>> verify_password("SecureP@ss123!", hashed)
        True
        >>> verify_password("wrong", hashed)
        False
    """
    return _default_hasher.verify(password, hashed)


def needs_rehash(hashed: str) -> bool:
    """Check a hash against the default parameters."""
    return _default_hasher.needs_rehash(hashed)
