"""
Generic registry REST client.

This module is a black box that:
- Builds request URLs from a base URL, a resource path and the API version
- Serializes request bodies and deserializes responses with pydantic
- Attaches the "If-Match: *" precondition when asked to
- Maps every failure onto the RegistryError taxonomy
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..models import ErrorResponse
from .errors import (
    DeserializationError,
    HttpStatusError,
    InvalidUrlError,
    RegistryTransportError,
    SerializationError,
)
from .interfaces import HttpTransport
from .validation import ensure_not_empty

logger = logging.getLogger(__name__)

API_VERSION_PARAM = "api-version"
IF_MATCH_ANY = "*"
JSON_CONTENT_TYPE = "application/json"


@lru_cache(maxsize=64)
def _type_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


class RegistryClient:
    """
    Performs single calls against the device registry REST API.

    Holds no mutable state after construction, so one instance can serve
    concurrent calls.
    """

    def __init__(self, transport: HttpTransport, api_version: str, base_url: str):
        """
        Initialize the client with an injected transport.

        Args:
            transport: Async HTTP transport (normally httpx.AsyncClient)
            api_version: API version sent as the api-version query parameter
            base_url: Absolute http(s) URL of the registry

        Raises:
            ArgumentEmptyError: If api_version or base_url is empty
            InvalidUrlError: If base_url is not an absolute http(s) URL or
                carries an out-of-range port
        """
        self._transport = transport
        self._api_version = ensure_not_empty("api_version", api_version).strip()

        base_url = ensure_not_empty("base_url", base_url).strip()
        try:
            parts = urlsplit(base_url)
            parts.port  # raises ValueError when out of range
        except ValueError as e:
            raise InvalidUrlError(base_url) from e
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise InvalidUrlError(base_url)
        self._base_url = base_url.rstrip("/")

    @property
    def api_version(self) -> str:
        return self._api_version

    @property
    def base_url(self) -> str:
        return self._base_url

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        response_type: Any = None,
        query: Optional[Mapping[str, str]] = None,
        add_if_match: bool = False,
    ) -> Optional[Any]:
        """
        Perform one API call.

        Args:
            method: HTTP method
            path: Resource path with segments already encoded
            body: Optional value serialized to the JSON request body
            response_type: Type the JSON response is validated into; None
                discards the response body
            query: Extra query parameters sent alongside api-version
            add_if_match: Attach "If-Match: *" so the write only applies to
                an existing resource, whatever its current version

        Returns:
            The deserialized response, or None when the server sent no body
            or no response_type was requested

        Raises:
            SerializationError: If the body cannot be encoded
            InvalidUrlError: If the transport rejects the request URL
            RegistryTransportError: If the transport fails
            HttpStatusError: If the server answers with a non-2xx status
            DeserializationError: If the response body does not match response_type
        """
        url = self._build_url(path)

        params: Dict[str, str] = dict(query or {})
        params[API_VERSION_PARAM] = self._api_version

        headers: Dict[str, str] = {}
        content = None
        if body is not None:
            content = self._serialize(body)
            headers["Content-Type"] = JSON_CONTENT_TYPE
        if add_if_match:
            headers["If-Match"] = IF_MATCH_ANY

        logger.debug("%s %s (if-match: %s)", method, path, add_if_match)

        try:
            response = await self._transport.request(
                method, url, content=content, params=params, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise RegistryTransportError(f"{method} {path} failed: {e}") from e
        except httpx.InvalidURL as e:
            logger.error("%s %s rejected: %s", method, path, e)
            raise InvalidUrlError(url) from e

        if not response.is_success:
            error_response = self._parse_error(response)
            logger.warning(
                "%s %s returned %s: %s",
                method,
                path,
                response.status_code,
                error_response.message if error_response else "<no error body>",
            )
            raise HttpStatusError(response.status_code, error_response)

        if response_type is None or not response.content.strip():
            return None

        try:
            return _type_adapter(response_type).validate_json(response.content)
        except ValidationError as e:
            raise DeserializationError(
                f"{method} {path}: response does not match {response_type!r}: {e}"
            ) from e

    def _build_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}{path}"

    @staticmethod
    def _serialize(body: Any) -> bytes:
        """Encode a request body as UTF-8 JSON with wire aliases and no null fields."""
        try:
            if isinstance(body, BaseModel):
                return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
            return _type_adapter(type(body)).dump_json(body, by_alias=True, exclude_none=True)
        except (PydanticSerializationError, PydanticSchemaGenerationError) as e:
            raise SerializationError(f"Cannot serialize {type(body).__name__}: {e}") from e

    @staticmethod
    def _parse_error(response: httpx.Response) -> Optional[ErrorResponse]:
        if not response.content.strip():
            return None
        try:
            return ErrorResponse.model_validate_json(response.content)
        except ValidationError:
            logger.debug("Unparseable error body: %r", response.content[:200])
            return None

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self._transport.aclose()

    async def __aenter__(self) -> "RegistryClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
