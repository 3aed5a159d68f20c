"""
Client Module - Black Box Interface

Purpose: Perform single typed calls against the registry REST API
Interface: RegistryClient.request(), ensure_not_empty(), RegistryError family
Hidden: URL building, JSON marshaling, conditional headers, status mapping

The transport is injected, so any httpx-compatible client can be swapped in.
"""

from .client import RegistryClient
from .errors import (
    ArgumentEmptyError,
    DeserializationError,
    EmptyResponseError,
    ErrorKind,
    HttpStatusError,
    InvalidUrlError,
    RegistryError,
    RegistryTransportError,
    SerializationError,
)
from .interfaces import HttpTransport
from .validation import ensure_not_empty

__all__ = [
    "ArgumentEmptyError",
    "DeserializationError",
    "EmptyResponseError",
    "ErrorKind",
    "HttpStatusError",
    "HttpTransport",
    "InvalidUrlError",
    "RegistryClient",
    "RegistryError",
    "RegistryTransportError",
    "SerializationError",
    "ensure_not_empty",
]
