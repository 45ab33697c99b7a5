"""Unit tests for app.core.security: password hashing, token issue/verify, and the admin gate."""

import base64
import json
import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.errors import AccessDeniedError, ErrorKind
from app.core.security import (
    ROLE_ADMIN,
    ROLE_USER,
    PasswordHasher,
    TokenError,
    TokenErrorKind,
    TokenIssuer,
    authorize,
)

SECRET = "unit-test-secret-0123456789abcdef0123"
OTHER_SECRET = "another-secret-0123456789abcdef012345"
T0 = datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC)


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


class TestPasswordHasher(unittest.TestCase):
    """Bcrypt hashing with a fresh salt per call."""

    def setUp(self) -> None:
        self.hasher = PasswordHasher(rounds=4)

    def test_same_plaintext_hashes_differently(self) -> None:
        first = self.hasher.hash("pw123")
        second = self.hasher.hash("pw123")
        self.assertNotEqual(first, second)
        self.assertNotIn("pw123", first)

    def test_verify_accepts_correct_and_rejects_wrong(self) -> None:
        hashed = self.hasher.hash("correct horse")
        self.assertTrue(self.hasher.verify("correct horse", hashed))
        self.assertFalse(self.hasher.verify("wrong horse", hashed))

    def test_malformed_hash_returns_false(self) -> None:
        self.assertFalse(self.hasher.verify("anything", "not-a-bcrypt-hash"))
        self.assertFalse(self.hasher.verify("anything", ""))

    def test_input_beyond_72_bytes_is_truncated(self) -> None:
        base = "a" * 72
        hashed = self.hasher.hash(base + "tail-one")
        self.assertTrue(self.hasher.verify(base + "tail-two", hashed))

    def test_dummy_hash_is_reused(self) -> None:
        self.assertIs(self.hasher.dummy_hash, self.hasher.dummy_hash)
        self.assertFalse(self.hasher.verify("pw", self.hasher.dummy_hash))


class TestTokenIssuer(unittest.TestCase):
    """Signed tokens: claims round-trip, expiry boundary, tamper detection."""

    def setUp(self) -> None:
        self.issuer = TokenIssuer(SECRET)

    def test_claims_echo_issued_values(self) -> None:
        token = self.issuer.issue(7, "alice@x.com", ROLE_USER, timedelta(hours=24), now=T0)
        claims = self.issuer.verify(token, now=T0 + timedelta(minutes=1))
        self.assertEqual(claims.subject_id, 7)
        self.assertEqual(claims.identity, "alice@x.com")
        self.assertEqual(claims.role, ROLE_USER)
        self.assertEqual(claims.issued_at, T0)
        self.assertEqual(claims.expires_at, T0 + timedelta(hours=24))

    def test_accepted_until_just_before_expiry(self) -> None:
        ttl = timedelta(hours=8)
        token = self.issuer.issue(1, "admin", ROLE_ADMIN, ttl, now=T0)
        claims = self.issuer.verify(token, now=T0 + ttl - timedelta(seconds=1))
        self.assertEqual(claims.subject_id, 1)

    def test_rejected_at_and_after_expiry(self) -> None:
        ttl = timedelta(hours=8)
        token = self.issuer.issue(1, "admin", ROLE_ADMIN, ttl, now=T0)
        for when in (T0 + ttl, T0 + ttl + timedelta(days=3)):
            with self.assertRaises(TokenError) as ctx:
                self.issuer.verify(token, now=when)
            self.assertEqual(ctx.exception.kind, TokenErrorKind.EXPIRED)

    def test_other_secret_is_bad_signature(self) -> None:
        token = TokenIssuer(OTHER_SECRET).issue(
            1, "a@x.com", ROLE_USER, timedelta(hours=1), now=T0
        )
        with self.assertRaises(TokenError) as ctx:
            self.issuer.verify(token, now=T0)
        self.assertEqual(ctx.exception.kind, TokenErrorKind.BAD_SIGNATURE)

    def test_altered_payload_is_bad_signature(self) -> None:
        token = self.issuer.issue(1, "a@x.com", ROLE_USER, timedelta(hours=1), now=T0)
        header, payload, signature = token.split(".")
        claims = json.loads(_b64url_decode(payload))
        claims["role"] = ROLE_ADMIN
        forged = ".".join([header, _b64url(json.dumps(claims).encode()), signature])
        with self.assertRaises(TokenError) as ctx:
            self.issuer.verify(forged, now=T0)
        self.assertEqual(ctx.exception.kind, TokenErrorKind.BAD_SIGNATURE)

    def test_signature_checked_before_expiry(self) -> None:
        token = TokenIssuer(OTHER_SECRET).issue(
            1, "a@x.com", ROLE_USER, timedelta(hours=1), now=T0
        )
        with self.assertRaises(TokenError) as ctx:
            self.issuer.verify(token, now=T0 + timedelta(days=30))
        self.assertEqual(ctx.exception.kind, TokenErrorKind.BAD_SIGNATURE)

    def test_garbage_token_is_bad_signature(self) -> None:
        with self.assertRaises(TokenError) as ctx:
            self.issuer.verify("not.a.token")
        self.assertEqual(ctx.exception.kind, TokenErrorKind.BAD_SIGNATURE)

    def test_missing_claims_is_bad_signature(self) -> None:
        token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")
        with self.assertRaises(TokenError) as ctx:
            self.issuer.verify(token)
        self.assertEqual(ctx.exception.kind, TokenErrorKind.BAD_SIGNATURE)

    def test_non_numeric_subject_is_bad_signature(self) -> None:
        iat = int(T0.timestamp())
        token = jwt.encode(
            {"sub": "abc", "role": ROLE_USER, "iat": iat, "exp": iat + 60},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(TokenError) as ctx:
            self.issuer.verify(token, now=T0)
        self.assertEqual(ctx.exception.kind, TokenErrorKind.BAD_SIGNATURE)

    def test_empty_secret_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TokenIssuer("")


class TestAuthorize(unittest.TestCase):
    """authorize(): missing, invalid, wrong-role and admitted tokens."""

    def setUp(self) -> None:
        self.issuer = TokenIssuer(SECRET)

    def _assert_denied(self, token: str | None, kind: ErrorKind, now: datetime = T0) -> None:
        with self.assertRaises(AccessDeniedError) as ctx:
            authorize(token, self.issuer, now=now)
        self.assertEqual(ctx.exception.kind, kind)

    def test_missing_token(self) -> None:
        self._assert_denied(None, ErrorKind.MISSING_TOKEN)
        self._assert_denied("", ErrorKind.MISSING_TOKEN)

    def test_forged_token_is_invalid(self) -> None:
        token = TokenIssuer(OTHER_SECRET).issue(1, "admin", ROLE_ADMIN, timedelta(hours=8), now=T0)
        self._assert_denied(token, ErrorKind.INVALID_TOKEN)

    def test_expired_token_is_invalid(self) -> None:
        token = self.issuer.issue(1, "admin", ROLE_ADMIN, timedelta(hours=8), now=T0)
        self._assert_denied(token, ErrorKind.INVALID_TOKEN, now=T0 + timedelta(hours=8))

    def test_user_token_is_forbidden(self) -> None:
        token = self.issuer.issue(1, "a@x.com", ROLE_USER, timedelta(hours=24), now=T0)
        self._assert_denied(token, ErrorKind.FORBIDDEN)

    def test_admin_token_is_admitted(self) -> None:
        token = self.issuer.issue(3, "admin", ROLE_ADMIN, timedelta(hours=8), now=T0)
        claims = authorize(token, self.issuer, now=T0 + timedelta(hours=1))
        self.assertEqual(claims.subject_id, 3)
        self.assertEqual(claims.role, ROLE_ADMIN)

    def test_status_codes(self) -> None:
        with self.assertRaises(AccessDeniedError) as ctx:
            authorize(None, self.issuer)
        self.assertEqual(ctx.exception.status_code, 401)
        token = self.issuer.issue(1, "a@x.com", ROLE_USER, timedelta(hours=24), now=T0)
        with self.assertRaises(AccessDeniedError) as ctx:
            authorize(token, self.issuer, now=T0)
        self.assertEqual(ctx.exception.status_code, 403)


if __name__ == "__main__":
    unittest.main()
