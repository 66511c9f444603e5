"""Token claim and verification result types."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TokenErrorKind(str, Enum):
    """Why a token was rejected."""

    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TokenClaims:
    """Identity resolved from a verified bearer token."""

    subject_id: int
    subject_email: str
    issued_at: datetime
    expires_at: datetime

    @property
    def id(self) -> int:
        """Alias for subject_id to maintain compatibility with code expecting user.id."""
        return self.subject_id

    @property
    def email(self) -> str:
        return self.subject_email


@dataclass(frozen=True)
class TokenVerification:
    """Tagged outcome of a verification: exactly one of claims or error is set."""

    claims: TokenClaims | None = None
    error: TokenErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.claims is not None
