"""User entity for authentication."""

from dataclasses import dataclass
from typing import Any


@dataclass
class User:
    """A registered user.

    Attributes:
        id: Positive integer, assigned as the number of existing users plus one.
        email: Unique across all users (case-sensitive).
        password_hash: Hashed password (never store plaintext).
    """

    id: int
    email: str
    password_hash: str

    def __post_init__(self) -> None:
        """Validate user data after initialization."""
        if self.id < 1:
            raise ValueError("User ID must be a positive integer")
        if not self.email:
            raise ValueError("Email is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")

    def to_dict(self) -> dict[str, Any]:
        # "password" is the key the snapshot file has always used for the hash
        return {"id": self.id, "email": self.email, "password": self.password_hash}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=int(data["id"]),
            email=str(data["email"]),
            password_hash=str(data["password"]),
        )
