"""
Unit tests for the registry client factory.
"""

import httpx
import pytest

from conftest import StubResponse
from edgeregistry.config.provider import RegistryConfig
from edgeregistry.factory import RegistryFactory
from edgeregistry.modules.client import ArgumentEmptyError, InvalidUrlError
from edgeregistry.modules.device import DeviceClient


class StaticConfigProvider:
    """ConfigProvider returning a fixed configuration."""

    def __init__(self, config: RegistryConfig):
        self.config = config

    def get_registry_config(self) -> RegistryConfig:
        return self.config


@pytest.mark.asyncio
async def test_build_from_provider():
    """Test the composition root wires config into every layer."""
    config = RegistryConfig(
        base_url="https://myhub.azure-devices.net/",
        device_id="edge-device-1",
        api_version="2018-04-11",
        timeout_seconds=7.5,
        authorization="SharedAccessSignature sr=hub&sig=x",
    )

    device_client = RegistryFactory.build(StaticConfigProvider(config))

    assert isinstance(device_client, DeviceClient)
    assert device_client.device_id == "edge-device-1"
    assert device_client.client.base_url == "https://myhub.azure-devices.net"
    assert device_client.client.api_version == "2018-04-11"
    await device_client.client.aclose()


@pytest.mark.asyncio
async def test_transport_carries_authorization_and_timeout():
    config = RegistryConfig(
        base_url="https://myhub.azure-devices.net",
        device_id="d1",
        timeout_seconds=7.5,
        authorization="SharedAccessSignature sr=hub&sig=x",
    )

    transport = RegistryFactory.build_transport(config)

    assert transport.headers["Authorization"] == "SharedAccessSignature sr=hub&sig=x"
    assert transport.headers["Accept"] == "application/json"
    assert transport.timeout == httpx.Timeout(7.5)
    await transport.aclose()


@pytest.mark.asyncio
async def test_transport_without_authorization():
    transport = RegistryFactory.build_transport(
        RegistryConfig(base_url="http://localhost", device_id="d1")
    )

    assert "Authorization" not in transport.headers
    await transport.aclose()


def test_build_rejects_empty_device():
    with pytest.raises(ArgumentEmptyError):
        RegistryFactory.build_from_config(RegistryConfig(base_url="http://localhost", device_id=" "))


def test_build_rejects_bad_url():
    with pytest.raises(InvalidUrlError):
        RegistryFactory.build_from_config(RegistryConfig(base_url="myhub", device_id="d1"))


@pytest.mark.asyncio
async def test_build_for_testing_uses_injected_transport(http_transport, registry_stub):
    registry_stub.register("GET", "/devices/d2/modules", StubResponse(body=[]))
    device_client = RegistryFactory.build_for_testing(http_transport, device_id="d2")

    assert await device_client.list_modules() == []
    assert registry_stub.last_call.params["api-version"] == "2018-06-30"
