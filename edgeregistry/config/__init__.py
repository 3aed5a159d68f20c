"""Configuration providers for the edge registry client."""

from .provider import ConfigProvider, EnvConfigProvider, RegistryConfig

__all__ = ["ConfigProvider", "EnvConfigProvider", "RegistryConfig"]
