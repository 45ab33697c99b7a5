"""Password hashing, signed access tokens, and the token-gated authorization check."""

from datetime import UTC, datetime, timedelta
from enum import Enum
from functools import cached_property
from typing import Any

import bcrypt
import jwt
from pydantic import BaseModel, ValidationError

from app.core.errors import AccessDeniedError, ErrorKind

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12
# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72

# Min/max lengths for admin username and password.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128

ROLE_USER = "user"
ROLE_ADMIN = "admin"

_REQUIRED_CLAIMS = ["sub", "role", "iat", "exp"]


class PasswordHasher:
    """One-way salted hashing of plaintext secrets with bcrypt."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. A fresh salt is drawn on every call."""
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, plain_password: str, hashed: str) -> bool:
        """Verify a plain password against a stored hash; malformed hashes verify as False."""
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False

    @cached_property
    def dummy_hash(self) -> str:
        """Hash checked when an identity is unknown, so lookups cost the same either way."""
        return self.hash("not-a-real-password")


class TokenClaims(BaseModel):
    """Identity and role embedded in a verified token, echoed as of issuance."""

    subject_id: int
    identity: str
    role: str
    issued_at: datetime
    expires_at: datetime


class TokenErrorKind(str, Enum):
    BAD_SIGNATURE = "BadSignature"
    EXPIRED = "Expired"


class TokenError(Exception):
    """Raised when a token fails verification."""

    def __init__(self, kind: TokenErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)


class TokenIssuer:
    """
    Creates and verifies HMAC-signed JWT access tokens.

    Tokens are stateless: nothing is recorded server-side, so a token stays
    valid until exp unless the signing secret changes.
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self.algorithm = algorithm

    def issue(
        self,
        subject_id: int,
        identity: str,
        role: str,
        ttl: timedelta,
        now: datetime | None = None,
    ) -> str:
        """Create a token for subject_id with exp = iat + ttl (whole seconds)."""
        issued_at = int((now or datetime.now(UTC)).timestamp())
        payload: dict[str, Any] = {
            "sub": str(subject_id),
            "identity": identity,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + int(ttl.total_seconds()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str, now: datetime | None = None) -> TokenClaims:
        """
        Check the signature, then expiry, and return the typed claims.

        Raises TokenError(BAD_SIGNATURE) for tampered, foreign or malformed tokens
        and TokenError(EXPIRED) once now >= exp.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                # Expiry is checked below against the injected clock.
                options={"verify_exp": False, "verify_iat": False, "require": _REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError as e:
            raise TokenError(TokenErrorKind.BAD_SIGNATURE, "Invalid token signature") from e

        try:
            claims = TokenClaims(
                subject_id=int(payload["sub"]),
                identity=str(payload.get("identity", "")),
                role=payload["role"],
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (TypeError, ValueError, OverflowError, ValidationError) as e:
            raise TokenError(TokenErrorKind.BAD_SIGNATURE, "Invalid token payload") from e

        current = now or datetime.now(UTC)
        if current >= claims.expires_at:
            raise TokenError(TokenErrorKind.EXPIRED, "Token has expired")
        return claims


def authorize(
    token: str | None,
    issuer: TokenIssuer,
    required_role: str = ROLE_ADMIN,
    now: datetime | None = None,
) -> TokenClaims:
    """
    Admit a request carrying a valid token for required_role and return its claims.

    Raises AccessDeniedError with kind MISSING_TOKEN, INVALID_TOKEN or FORBIDDEN.
    """
    if not token:
        raise AccessDeniedError("Access denied. No token provided.", ErrorKind.MISSING_TOKEN)
    try:
        claims = issuer.verify(token, now=now)
    except TokenError as e:
        message = "Token expired" if e.kind is TokenErrorKind.EXPIRED else "Invalid token"
        raise AccessDeniedError(message, ErrorKind.INVALID_TOKEN) from e
    if claims.role != required_role:
        raise AccessDeniedError(
            f"Access denied. {required_role.capitalize()} only.", ErrorKind.FORBIDDEN
        )
    return claims
