"""Authentication service: registration and login for users and admins."""

import logging
from dataclasses import dataclass
from datetime import timedelta

from app.core.errors import DuplicateIdentityError, InvalidCredentialsError, InvalidInputError
from app.core.security import PasswordHasher, TokenIssuer
from app.services.credentials import Account, AccountStore

logger = logging.getLogger(__name__)

USER_TOKEN_TTL = timedelta(hours=24)
ADMIN_TOKEN_TTL = timedelta(hours=8)

# Same text whether the identity is unknown or the password is wrong.
USER_LOGIN_FAILED = "Invalid email or password"
ADMIN_LOGIN_FAILED = "Invalid credentials"


@dataclass
class AuthResult:
    """Issued token plus the account it was issued for."""

    token: str
    account: Account


def _blank(*values: str | None) -> bool:
    return any(v is None or not v.strip() for v in values)


class AuthService:
    """
    Stateless orchestration of register and login.

    All collaborators are injected; nothing is read from global state.
    """

    def __init__(
        self,
        users: AccountStore,
        admins: AccountStore,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        user_ttl: timedelta = USER_TOKEN_TTL,
        admin_ttl: timedelta = ADMIN_TOKEN_TTL,
    ) -> None:
        self.users = users
        self.admins = admins
        self.hasher = hasher
        self.issuer = issuer
        self.user_ttl = user_ttl
        self.admin_ttl = admin_ttl

    def register(self, name: str, email: str, password: str) -> AuthResult:
        """
        Create a user account and return a user token.

        Raises InvalidInputError when a field is blank and DuplicateIdentityError
        when the email is already registered (including when a concurrent registration
        won the insert).
        """
        if _blank(name, email, password):
            raise InvalidInputError("All fields are required")

        if self.users.find_by_identity(email) is not None:
            raise DuplicateIdentityError(self.users.duplicate_message)

        user = self.users.create(
            email,
            self.hasher.hash(password),
            name=name.strip(),
        )
        logger.info("Registered user id=%s", user.id)
        token = self.issuer.issue(user.id, user.email, user.role, self.user_ttl)
        return AuthResult(token=token, account=user)

    def login_user(self, email: str, password: str) -> AuthResult:
        if _blank(email) or not password:
            raise InvalidInputError("Email and password are required")
        return self._login(self.users, email, password, self.user_ttl, USER_LOGIN_FAILED)

    def login_admin(self, username: str, password: str) -> AuthResult:
        if _blank(username) or not password:
            raise InvalidInputError("Username and password are required")
        return self._login(self.admins, username, password, self.admin_ttl, ADMIN_LOGIN_FAILED)

    def _login(
        self,
        store: AccountStore,
        identity: str,
        password: str,
        ttl: timedelta,
        failure_message: str,
    ) -> AuthResult:
        account = store.find_by_identity(identity)
        if account is None:
            # Burn one verification so unknown identities take as long as wrong passwords.
            self.hasher.verify(password, self.hasher.dummy_hash)
            logger.info("Rejected %s login", store.role)
            raise InvalidCredentialsError(failure_message)
        if not self.hasher.verify(password, account.password_hash):
            logger.info("Rejected %s login", store.role)
            raise InvalidCredentialsError(failure_message)

        identity_value = getattr(account, store.identity_field)
        token = self.issuer.issue(account.id, identity_value, account.role, ttl)
        return AuthResult(token=token, account=account)
