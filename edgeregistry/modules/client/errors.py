"""
Error taxonomy for registry operations.

Every failure raised by this package is a ``RegistryError`` carrying an
``ErrorKind``. Callers branch on ``err.kind`` rather than parsing messages.

Local failures (``ARGUMENT_EMPTY``, ``INVALID_URL``) are raised before any
request is built. Everything else describes what happened to the one
outbound HTTP exchange.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..models import ErrorResponse


class ErrorKind(str, Enum):
    """Discriminant for registry errors."""

    ARGUMENT_EMPTY = "argument_empty"
    INVALID_URL = "invalid_url"
    EMPTY_RESPONSE = "empty_response"
    HTTP_STATUS = "http_status"
    TRANSPORT = "transport"
    SERIALIZATION = "serialization"
    DESERIALIZATION = "deserialization"


class RegistryError(Exception):
    """Base class for all registry client errors."""

    kind: ErrorKind

    def __str__(self) -> str:
        message = super().__str__()
        return f"[{self.kind.value}] {message}" if message else f"[{self.kind.value}]"


class ArgumentEmptyError(RegistryError, ValueError):
    """An identifier or constructor argument was empty or whitespace-only."""

    kind = ErrorKind.ARGUMENT_EMPTY

    def __init__(self, argument: str):
        super().__init__(f"Argument {argument!r} must not be empty")
        self.argument = argument


class InvalidUrlError(RegistryError, ValueError):
    """The registry base URL is not an absolute http(s) URL."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str):
        super().__init__(f"Invalid registry URL: {url!r}")
        self.url = url


class EmptyResponseError(RegistryError):
    """The server answered 2xx without the body the operation requires."""

    kind = ErrorKind.EMPTY_RESPONSE

    def __init__(self, method: str = "", path: str = ""):
        detail = f"{method} {path}".strip()
        super().__init__(f"Empty response body for {detail}" if detail else "Empty response body")
        self.method = method
        self.path = path


class HttpStatusError(RegistryError):
    """
    The server answered with a non-2xx status.

    ``error_response`` holds the parsed remote error payload when the body
    contained one, otherwise ``None``.
    """

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int, error_response: Optional["ErrorResponse"] = None):
        if error_response is not None and error_response.message:
            message = f"HTTP {status_code}: {error_response.message}"
        else:
            message = f"HTTP {status_code}"
        super().__init__(message)
        self.status_code = status_code
        self.error_response = error_response


class RegistryTransportError(RegistryError):
    """The transport failed before a response was received."""

    kind = ErrorKind.TRANSPORT


class SerializationError(RegistryError):
    """A request body could not be encoded as JSON."""

    kind = ErrorKind.SERIALIZATION


class DeserializationError(RegistryError):
    """A response body was not valid JSON of the expected shape."""

    kind = ErrorKind.DESERIALIZATION
