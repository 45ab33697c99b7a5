"""Error taxonomy shared by services, the authorization gate and the HTTP layer."""

from enum import Enum


class ErrorKind(str, Enum):
    """Stable, client-facing error kinds."""

    INVALID_INPUT = "InvalidInput"
    DUPLICATE_IDENTITY = "DuplicateIdentity"
    INVALID_CREDENTIALS = "InvalidCredentials"
    MISSING_TOKEN = "MissingToken"
    INVALID_TOKEN = "InvalidToken"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    TIMEOUT = "Timeout"
    INTERNAL = "Internal"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.DUPLICATE_IDENTITY: 400,
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.MISSING_TOKEN: 401,
    ErrorKind.INVALID_TOKEN: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.METHOD_NOT_ALLOWED: 405,
    ErrorKind.TIMEOUT: 504,
    ErrorKind.INTERNAL: 500,
}


class ServiceError(Exception):
    """Base for errors that are rendered verbatim as {success: false, message, error}."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class InvalidInputError(ServiceError):
    kind = ErrorKind.INVALID_INPUT


class DuplicateIdentityError(ServiceError):
    kind = ErrorKind.DUPLICATE_IDENTITY


class InvalidCredentialsError(ServiceError):
    kind = ErrorKind.INVALID_CREDENTIALS


class AccessDeniedError(ServiceError):
    """Raised by the authorization gate (MissingToken, InvalidToken or Forbidden)."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
