from enum import Enum
from typing import ClassVar, Optional


class ErrorKind(str, Enum):
    CREDENTIAL = "credential"
    CONFLICT = "conflict"
    PROVISIONING = "provisioning"
    GENERATION = "generation"


ERROR_PREFIX: dict[ErrorKind, str] = {
    ErrorKind.CREDENTIAL: "API Key Error",
    ErrorKind.CONFLICT: "Server Error",
    ErrorKind.PROVISIONING: "Server Error",
    ErrorKind.GENERATION: "URL Generation Error",
}
UNEXPECTED_ERROR_PREFIX = "Unexpected error"

_AUTH_MARKERS = ("Invalid", "invalid", "unauthorized", "401")
_CONFLICT_MARKER = "already exists"


class BillingMCPError(Exception):
    """Base user-facing application error."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class CredentialError(BillingMCPError):
    kind = ErrorKind.CREDENTIAL


class MissingCredentialError(CredentialError):
    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class ProvisioningError(BillingMCPError):
    kind = ErrorKind.PROVISIONING


class ServerConflictError(ProvisioningError):
    kind = ErrorKind.CONFLICT

    def __init__(self, server_name: str, cause: Optional[BaseException] = None) -> None:
        self.server_name = server_name
        super().__init__(
            f"MCP server with name '{server_name}' already exists with different "
            "configuration. Please use a different server name or delete the "
            "existing server.",
            cause,
        )


class GenerationError(BillingMCPError):
    kind = ErrorKind.GENERATION


class MissingFieldError(GenerationError):
    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class PlatformError(Exception):
    """Failure reported by (or while talking to) the automation platform."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status = status
        self.code = code
        super().__init__(message)


def error_prefix(kind: ErrorKind) -> str:
    return ERROR_PREFIX[kind]


def is_auth_failure(error: BaseException) -> bool:
    if isinstance(error, PlatformError) and error.status is not None:
        return error.status in (401, 403)
    # Only errors without an HTTP status fall back to message text.
    text = str(error)
    return any(marker in text for marker in _AUTH_MARKERS)


def is_name_conflict(error: BaseException) -> bool:
    if isinstance(error, PlatformError) and (
        error.status is not None or error.code is not None
    ):
        if error.status == 409:
            return True
        return bool(error.code) and "ALREADY_EXISTS" in str(error.code).upper()
    # Older platform responses carry no structured status or code.
    return _CONFLICT_MARKER in str(error)
