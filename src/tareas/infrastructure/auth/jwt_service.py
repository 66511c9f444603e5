"""JWT token service.

Issues and verifies signed, time-bounded bearer tokens carrying a user
identity. Tokens are stateless: verification needs only the signing key
and the token's own expiry, never a store lookup.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from tareas.core.config import Settings
from tareas.domain.entities import User
from tareas.infrastructure.auth.token_types import (
    TokenClaims,
    TokenErrorKind,
    TokenVerification,
)

DEFAULT_TTL = timedelta(hours=1)
REQUIRED_CLAIMS = ["sub", "iat", "exp"]


class TokenError(Exception):
    """Base exception for token verification failures."""

    kind: TokenErrorKind = TokenErrorKind.MALFORMED


class MalformedTokenError(TokenError):
    """Raised when a token cannot be decoded or lacks required claims."""

    kind = TokenErrorKind.MALFORMED


class InvalidSignatureError(TokenError):
    """Raised when a token was not signed with our key."""

    kind = TokenErrorKind.INVALID_SIGNATURE


class TokenExpiredError(TokenError):
    """Raised when a correctly signed token is past its expiry."""

    kind = TokenErrorKind.EXPIRED


class TokenService:
    """Service for issuing and verifying access tokens.

    The signing key is injected at construction and held for the lifetime
    of the instance.
    """

    def __init__(
        self,
        secret_key: str,
        ttl: timedelta = DEFAULT_TTL,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize the token service.

        Args:
            secret_key: Secret key for signing tokens.
            ttl: How long an issued token stays valid.
            algorithm: HMAC algorithm used for signing.
        """
        if not secret_key:
            raise ValueError("secret_key is required")
        self._secret_key = secret_key
        self.ttl = ttl
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.secret_key,
            ttl=timedelta(minutes=settings.access_token_expire_minutes),
            algorithm=settings.jwt_algorithm,
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self.ttl.total_seconds())

    def issue(self, user: User, issued_at: datetime | None = None) -> str:
        """Create a signed access token for a user.

        Args:
            user: The authenticated user.
            issued_at: Issue time. Defaults to now; back-dating is useful for
                       tooling and tests.

        Returns:
            Encoded JWT access token.
        """
        now = issued_at or datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "id": user.id,
            "email": user.email,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a token.

        The signature is checked before the expiry, so a token signed with
        another key is reported as an invalid signature even when expired.

        Args:
            token: The encoded JWT token.

        Returns:
            The identity carried by the token.

        Raises:
            InvalidSignatureError: If the signature does not match.
            TokenExpiredError: If the token has expired.
            MalformedTokenError: If the token cannot be decoded or its claims are wrong.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.InvalidSignatureError as e:
            raise InvalidSignatureError("Token signature is invalid") from e
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Malformed token: {e}") from e

        return self._claims_from_payload(payload)

    def check(self, token: str) -> TokenVerification:
        """Verify a token without raising.

        Returns:
            A TokenVerification holding either the claims or the error kind.
        """
        try:
            return TokenVerification(claims=self.verify(token))
        except TokenError as e:
            return TokenVerification(error=e.kind)

    @staticmethod
    def _claims_from_payload(payload: dict[str, Any]) -> TokenClaims:
        subject_id = payload.get("id")
        email = payload.get("email")
        if isinstance(subject_id, bool) or not isinstance(subject_id, int) or subject_id < 1:
            raise MalformedTokenError("Malformed token: bad 'id' claim")
        if not isinstance(email, str) or not email:
            raise MalformedTokenError("Malformed token: bad 'email' claim")
        if payload["sub"] != str(subject_id):
            raise MalformedTokenError("Malformed token: 'sub' does not match 'id'")

        return TokenClaims(
            subject_id=subject_id,
            subject_email=email,
            issued_at=_timestamp_claim(payload, "iat"),
            expires_at=_timestamp_claim(payload, "exp"),
        )


def _timestamp_claim(payload: dict[str, Any], name: str) -> datetime:
    # PyJWT accepts anything int() can coerce, including numeric strings.
    value = payload[name]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedTokenError(f"Malformed token: bad '{name}' claim")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as e:
        raise MalformedTokenError(f"Malformed token: bad '{name}' claim") from e
