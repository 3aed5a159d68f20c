"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

DEFAULT_API_VERSION = "2018-06-30"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class RegistryConfig:
    """Registry connection configuration."""
    base_url: str
    device_id: str
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    verify_ssl: bool = True
    # Pre-acquired Authorization header value, e.g. a SharedAccessSignature token
    authorization: Optional[str] = None

    @property
    def uses_tls(self) -> bool:
        """Check if the registry is reached over HTTPS."""
        return self.base_url.lower().startswith("https://")


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_registry_config(self) -> RegistryConfig:
        """Get registry configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_registry_config(self) -> RegistryConfig:
        """Get registry configuration from environment variables."""
        base_url = os.getenv("EDGE_REGISTRY_URL")
        if not base_url:
            raise ValueError(
                "EDGE_REGISTRY_URL environment variable is required. "
                "Example: https://myhub.azure-devices.net"
            )

        device_id = os.getenv("EDGE_DEVICE_ID")
        if not device_id:
            raise ValueError("EDGE_DEVICE_ID environment variable is required.")

        timeout_env = os.getenv("EDGE_REGISTRY_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
        try:
            timeout_seconds = float(timeout_env)
        except ValueError:
            raise ValueError(f"EDGE_REGISTRY_TIMEOUT must be a number, got {timeout_env!r}") from None

        return RegistryConfig(
            base_url=base_url,
            device_id=device_id,
            api_version=os.getenv("EDGE_REGISTRY_API_VERSION", DEFAULT_API_VERSION),
            timeout_seconds=timeout_seconds,
            verify_ssl=os.getenv("EDGE_REGISTRY_SSL_VERIFY", "true").lower() == "true",
            authorization=os.getenv("EDGE_REGISTRY_AUTHORIZATION") or None,
        )
