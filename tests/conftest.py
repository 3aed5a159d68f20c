"""
Shared pytest fixtures for edge registry tests.

This module provides common fixtures including:
- RegistryStub: Stub registry server built on httpx.MockTransport
- Device client fixtures wired to the stub
"""

import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from edgeregistry.factory import RegistryFactory


# =============================================================================
# Registry Stub Infrastructure
# =============================================================================

@dataclass
class StubResponse:
    """Represents a canned registry response."""
    status_code: int = 200
    body: Optional[Union[dict, list, str, bytes]] = None
    headers: Dict[str, str] = field(default_factory=dict)

    def to_httpx(self, request: httpx.Request) -> httpx.Response:
        """Convert to an httpx.Response for the given request."""
        if self.body is None:
            content = b""
        elif isinstance(self.body, bytes):
            content = self.body
        elif isinstance(self.body, str):
            content = self.body.encode("utf-8")
        else:
            content = json.dumps(self.body).encode("utf-8")

        headers = dict(self.headers)
        if content and "content-type" not in {k.lower() for k in headers}:
            headers["Content-Type"] = "application/json"
        return httpx.Response(self.status_code, content=content, headers=headers, request=request)


@dataclass
class RecordedRequest:
    """Record of a request received by the stub."""
    method: str
    path: str
    raw_path: str
    params: Dict[str, str]
    headers: httpx.Headers
    body: bytes

    def json(self) -> Any:
        """Decode the request body as JSON."""
        return json.loads(self.body)


Handler = Callable[[RecordedRequest], StubResponse]


class RegistryStub:
    """
    Stub device registry with per-route responses.

    Usage:
        def test_list(registry_stub, device_client):
            registry_stub.register("GET", "/devices/d1/modules", StubResponse(body=[]))

            modules = await device_client.list_modules()

            assert registry_stub.call_count == 1
    """

    def __init__(self):
        self._routes: Dict[Tuple[str, str], Union[StubResponse, Handler]] = {}
        self._call_history: List[RecordedRequest] = []
        self._default_response = StubResponse(
            status_code=404, body={"Message": "stub not configured for this route"}
        )
        self.raise_on_request: Optional[Exception] = None

    def register(
        self,
        method: str,
        path: str,
        response: Union[StubResponse, Handler],
    ) -> "RegistryStub":
        """
        Register a response (or a handler computing one) for a route.

        Returns:
            self for chaining
        """
        self._routes[(method.upper(), path)] = response
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        """Entry point for httpx.MockTransport."""
        if self.raise_on_request is not None:
            raise self.raise_on_request

        recorded = RecordedRequest(
            method=request.method,
            path=request.url.path,
            raw_path=request.url.raw_path.split(b"?")[0].decode("ascii"),
            params=dict(request.url.params),
            headers=request.headers,
            body=request.content,
        )
        self._call_history.append(recorded)

        response = self._routes.get((recorded.method, recorded.path), self._default_response)
        if callable(response):
            response = response(recorded)
        return response.to_httpx(request)

    @property
    def calls(self) -> List[RecordedRequest]:
        """Get all requests received during the test."""
        return self._call_history

    @property
    def call_count(self) -> int:
        """Get the number of requests received."""
        return len(self._call_history)

    @property
    def last_call(self) -> RecordedRequest:
        """Get the most recent request."""
        return self._call_history[-1]


def echo_module(generation_id: str = "g1", managed_by: str = "iotedge") -> Handler:
    """Handler that echoes the request body with server-assigned fields added."""

    def handler(request: RecordedRequest) -> StubResponse:
        body = request.json()
        body["generationId"] = generation_id
        body["managedBy"] = managed_by
        return StubResponse(body=body)

    return handler


@pytest.fixture
def registry_stub():
    """Fixture that provides an empty RegistryStub."""
    return RegistryStub()


@pytest_asyncio.fixture
async def http_transport(registry_stub):
    """httpx.AsyncClient whose requests are answered by the stub, closed after the test."""
    transport = httpx.AsyncClient(transport=httpx.MockTransport(registry_stub.handle))
    yield transport
    await transport.aclose()


@pytest_asyncio.fixture
async def device_client(http_transport):
    """DeviceClient for device "d1" wired to the stub registry."""
    return RegistryFactory.build_for_testing(http_transport, device_id="d1", api_version="2018-04-10")
