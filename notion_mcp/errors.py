"""
Errors - Assembly Error Kinds and Classification

Every failure raised while assembling a page is one of the kinds below.
Components never retry; errors travel up to the route layer, where
classify_error() turns them into a user-facing status.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


RATE_LIMIT_MARKERS = ("Too many API calls", "Too many subrequests")
DEFAULT_ERROR_MESSAGE = "An error occurred processing the page"


class ErrorKind(str, Enum):
    """Externally visible failure classes."""
    RATE_LIMITED = "rate_limited"
    INTERNAL = "internal"


class AssemblyError(Exception):
    """Base class for failures raised while assembling a page."""
    kind = ErrorKind.INTERNAL


class BudgetExceeded(AssemblyError):
    """Raised by CallBudget when a guarded call is attempted past the ceiling."""
    kind = ErrorKind.RATE_LIMITED

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Too many API calls: {label}")


class UpstreamRateLimited(AssemblyError):
    """The Notion API itself reported that we are over quota."""
    kind = ErrorKind.RATE_LIMITED

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"Too many subrequests: {resource} returned 429")


class UpstreamFailure(AssemblyError):
    """Any other transport or API error (auth, not found, bad payload)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class InternalError(AssemblyError):
    """Local data did not have the shape we rely on."""


@dataclass
class ClassifiedError:
    """A failure reduced to what the caller is allowed to see."""
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return 429 if self.kind == ErrorKind.RATE_LIMITED else 500

    def to_payload(self) -> dict:
        return {"error": self.message}


def classify_error(exc: BaseException) -> ClassifiedError:
    """
    Map an exception to RATE_LIMITED or INTERNAL.

    Typed rate-limit errors are recognised directly; anything else is
    matched on its message so that rate-limit signals wrapped by other
    layers still come out as RATE_LIMITED.

    Args:
        exc: The exception raised while serving the request

    Returns:
        ClassifiedError with the message to show the caller
    """
    message = str(exc) or DEFAULT_ERROR_MESSAGE

    if isinstance(exc, AssemblyError) and exc.kind == ErrorKind.RATE_LIMITED:
        return ClassifiedError(ErrorKind.RATE_LIMITED, message)

    if any(marker in message for marker in RATE_LIMIT_MARKERS):
        return ClassifiedError(ErrorKind.RATE_LIMITED, message)

    return ClassifiedError(ErrorKind.INTERNAL, message)
