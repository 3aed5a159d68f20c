"""
Registry client factory following Black Box Design principles.

This factory:
- Constructs the HTTP transport from configuration
- Wires the generic client and the device client together
- Returns only the device client facade
"""

import logging
from typing import Optional

import httpx

from .config.provider import DEFAULT_API_VERSION, ConfigProvider, RegistryConfig
from .modules.client import HttpTransport, RegistryClient
from .modules.device import DeviceClient

logger = logging.getLogger(__name__)


class RegistryFactory:
    """
    Factory for building the registry client stack.

    This is the composition root that:
    - Creates the transport
    - Injects it into RegistryClient
    - Binds a DeviceClient to the configured device
    """

    @staticmethod
    def build_transport(config: RegistryConfig) -> httpx.AsyncClient:
        """Create the httpx transport described by the configuration."""
        headers = {"Accept": "application/json"}
        if config.authorization:
            headers["Authorization"] = config.authorization

        if not config.uses_tls:
            logger.warning("Using HTTP without TLS - this should only be used for local development!")

        return httpx.AsyncClient(
            headers=headers,
            timeout=httpx.Timeout(config.timeout_seconds),
            verify=config.verify_ssl,
        )

    @staticmethod
    def build_from_config(config: RegistryConfig) -> DeviceClient:
        """
        Build a device client from an explicit configuration.

        Raises:
            ArgumentEmptyError: If a required value is empty
            InvalidUrlError: If the base URL is malformed
        """
        transport = RegistryFactory.build_transport(config)
        client = RegistryClient(transport, config.api_version, config.base_url)
        device_client = DeviceClient(client, config.device_id)

        logger.info(
            "Registry client ready for device %s at %s (api-version %s)",
            config.device_id,
            client.base_url,
            config.api_version,
        )
        return device_client

    @staticmethod
    def build(config_provider: ConfigProvider) -> DeviceClient:
        """
        Build the complete registry client stack.

        Args:
            config_provider: Configuration provider

        Returns:
            DeviceClient bound to the configured device
        """
        return RegistryFactory.build_from_config(config_provider.get_registry_config())

    @staticmethod
    def build_for_testing(
        transport: HttpTransport,
        device_id: str = "d1",
        base_url: str = "http://localhost",
        api_version: Optional[str] = None,
    ) -> DeviceClient:
        """
        Build a device client over an injected transport.

        Args:
            transport: Stub transport, e.g. httpx.AsyncClient(transport=httpx.MockTransport(...))
            device_id: Device to bind
            base_url: Registry base URL
            api_version: API version, defaults to the production default
        """
        client = RegistryClient(transport, api_version or DEFAULT_API_VERSION, base_url)
        return DeviceClient(client, device_id)
