"""
Translate backend, transport and validation faults into a single
`ClassifiedError` value, and render it for the tool caller.

The original exception is kept on the classified value for diagnostics only;
it never reaches the caller-facing text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final, Optional

import openai
from pydantic import ValidationError

__all__: tuple[str, ...] = (
    "ErrorKind",
    "ClassifiedError",
    "V0Error",
    "EmptyResponseError",
    "ConfigError",
    "classify_error",
    "user_message",
    "should_retry",
    "retry_delay",
)

_logger = logging.getLogger(__name__)

MAX_RETRY_DELAY_MS: Final[int] = 30_000


class ErrorKind(StrEnum):
    AUTHENTICATION = "AUTHENTICATION_ERROR"
    RATE_LIMIT = "RATE_LIMIT_ERROR"
    TIMEOUT = "TIMEOUT_ERROR"
    BACKEND = "API_ERROR"
    NETWORK = "NETWORK_ERROR"
    VALIDATION = "VALIDATION_ERROR"
    UNKNOWN = "UNKNOWN_ERROR"


@dataclass(frozen=True, slots=True)
class ClassifiedError:
    """A fault reduced to one of the `ErrorKind` values.

    Attributes:
        kind: Which branch of the taxonomy the fault landed in.
        message: Internal message, echoed to the caller only for
            VALIDATION and non-retryable BACKEND errors.
        status_code: HTTP status reported by the backend, if any.
        retryable: Whether a caller may reasonably try again.
        context: Name of the operation that failed.
        cause: The original exception.
    """

    kind: ErrorKind
    message: str
    retryable: bool
    context: str
    status_code: Optional[int] = None
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def as_metadata(self) -> dict[str, object]:
        metadata: dict[str, object] = {
            "errorType": self.kind.value,
            "retryable": self.retryable,
            "context": self.context,
        }
        if self.status_code is not None:
            metadata["statusCode"] = self.status_code
        return metadata


class V0Error(RuntimeError):
    """Raised to carry an already classified fault across a failure boundary."""

    error: ClassifiedError

    def __init__(self, error: ClassifiedError) -> None:
        super().__init__(error.message)
        self.error = error
        if error.cause is not None:
            self.__cause__ = error.cause


class EmptyResponseError(ValueError):
    """The backend answered but produced no content."""


class ConfigError(RuntimeError):
    """Required configuration is missing or malformed."""


# Substrings of OS / resolver messages that point at the network layer.
_NETWORK_PATTERNS: Final[tuple[str, ...]] = (
    "econnrefused",
    "enotfound",
    "etimedout",
    "econnreset",
    "connection refused",
    "name or service not known",
    "nodename nor servname",
    "connection reset",
)

_TIMEOUT_PATTERNS: Final[tuple[str, ...]] = ("timeout", "timed out")

_STATUS_KINDS: Final[dict[int, tuple[ErrorKind, bool]]] = {
    401: (ErrorKind.AUTHENTICATION, False),
    429: (ErrorKind.RATE_LIMIT, True),
    408: (ErrorKind.TIMEOUT, True),
    504: (ErrorKind.TIMEOUT, True),
    500: (ErrorKind.BACKEND, True),
    502: (ErrorKind.BACKEND, True),
    503: (ErrorKind.BACKEND, True),
}


def _classify_status(exc: openai.APIStatusError, context: str) -> ClassifiedError:
    status = exc.status_code
    kind, retryable = _STATUS_KINDS.get(status, (ErrorKind.BACKEND, status >= 500))
    return ClassifiedError(
        kind=kind,
        message=f"v0 API Error ({status}): {exc.message}",
        status_code=status,
        retryable=retryable,
        context=context,
        cause=exc,
    )


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def _classify_generic(exc: BaseException, context: str) -> ClassifiedError:
    message = str(exc) or exc.__class__.__name__
    lowered = message.lower()

    if isinstance(exc, ValidationError):
        kind, retryable = ErrorKind.VALIDATION, False
        message = _validation_message(exc)
    elif isinstance(exc, (openai.APITimeoutError, TimeoutError)):
        kind, retryable = ErrorKind.TIMEOUT, True
    elif isinstance(exc, (openai.APIConnectionError, ConnectionError)):
        kind, retryable = ErrorKind.NETWORK, True
    elif isinstance(exc, EmptyResponseError):
        kind, retryable = ErrorKind.BACKEND, False
    elif any(p in lowered for p in _NETWORK_PATTERNS):
        kind, retryable = ErrorKind.NETWORK, True
    elif any(p in lowered for p in _TIMEOUT_PATTERNS):
        kind, retryable = ErrorKind.TIMEOUT, True
    elif "validation" in lowered:
        kind, retryable = ErrorKind.VALIDATION, False
    else:
        kind, retryable = ErrorKind.UNKNOWN, False

    return ClassifiedError(
        kind=kind,
        message=message,
        retryable=retryable,
        context=context,
        cause=exc,
    )


def classify_error(
    exc: BaseException,
    context: str,
    logger: Optional[logging.Logger] = None,
) -> ClassifiedError:
    """
    Reduce *exc* to a `ClassifiedError` and log it with full detail.

    Args:
        exc: The caught exception.
        context: Name of the operation that was running.
        logger: Logger for recording the fault.

    Returns:
        The classified error. A `V0Error` yields the value it already carries.
    """
    log = logger or _logger

    if isinstance(exc, V0Error):
        return exc.error

    if isinstance(exc, openai.APIStatusError):
        error = _classify_status(exc, context)
    else:
        error = _classify_generic(exc, context)

    log.warning(
        "[%s] %s: %s (status=%s, retryable=%s)",
        context,
        error.kind.value,
        error.message,
        error.status_code,
        error.retryable,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return error


def user_message(error: ClassifiedError) -> str:
    """Return the sentence shown to the tool caller for *error*."""
    match error.kind:
        case ErrorKind.AUTHENTICATION:
            return "Authentication failed. Please check your v0 API key."
        case ErrorKind.RATE_LIMIT:
            return "Rate limit exceeded. Please try again later."
        case ErrorKind.TIMEOUT:
            return "Request timed out. Please try again."
        case ErrorKind.NETWORK:
            return "Network error occurred. Please check your connection and try again."
        case ErrorKind.VALIDATION:
            return f"Invalid input: {error.message}"
        case ErrorKind.BACKEND:
            if error.retryable:
                return "v0 API is temporarily unavailable. Please try again later."
            return f"API error: {error.message}"
        case ErrorKind.UNKNOWN:
            return "An unexpected error occurred. Please try again."


def should_retry(error: ClassifiedError, attempt: int, max_retries: int = 3) -> bool:
    if attempt >= max_retries:
        return False
    return error.retryable


def retry_delay(attempt: int, base_delay: int = 1000) -> int:
    """Exponential backoff in milliseconds, capped at 30 seconds."""
    return min(base_delay * (2**attempt), MAX_RETRY_DELAY_MS)
