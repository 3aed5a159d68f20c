"""Transport interfaces following Black Box Design principles."""
from typing import Any, Mapping, Optional, Protocol

import httpx


class HttpTransport(Protocol):
    """
    Protocol for the HTTP transport injected into RegistryClient.

    ``httpx.AsyncClient`` satisfies it; connection pooling, TLS and
    timeouts belong to the transport.
    """

    async def request(
        self,
        method: str,
        url: str,
        *,
        content: Optional[bytes] = None,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Send one request and return the complete response.

        Raises:
            httpx.HTTPError: On connection or protocol failure
        """
        ...

    async def aclose(self) -> None:
        """Release pooled connections."""
        ...
