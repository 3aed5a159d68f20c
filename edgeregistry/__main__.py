"""
Edge Registry - Command Line Entry Point

Thin wrapper over DeviceClient for operators. Connection settings come from
the environment (or a .env file), see EnvConfigProvider.
"""

import asyncio
import json
from typing import Any, Awaitable, Callable, Optional

import click
from dotenv import load_dotenv

from edgeregistry.config.provider import EnvConfigProvider
from edgeregistry.factory import RegistryFactory
from edgeregistry.logging_config import configure_logging
from edgeregistry.modules.client import RegistryError
from edgeregistry.modules.device import DeviceClient
from edgeregistry.modules.models import (
    AuthMechanism,
    AuthType,
    CertificateAuthorityAuth,
    NoAuth,
    SymmetricKey,
    SymmetricKeyAuth,
    X509Thumbprint,
    X509ThumbprintAuth,
)

AUTH_TYPES = [t.value for t in AuthType]


def build_authentication(
    auth_type: Optional[str],
    primary_key: Optional[str] = None,
    secondary_key: Optional[str] = None,
    primary_thumbprint: Optional[str] = None,
    secondary_thumbprint: Optional[str] = None,
) -> Optional[AuthMechanism]:
    """
    Build an authentication mechanism from command line options.

    Key options imply "sas" and thumbprint options imply "selfSigned" when
    no type is given. Returns None when nothing was specified.

    Raises:
        click.BadParameter: If key or thumbprint options do not belong to the
            chosen type
    """
    has_keys = bool(primary_key or secondary_key)
    has_thumbprints = bool(primary_thumbprint or secondary_thumbprint)
    if auth_type is None:
        if has_keys:
            auth_type = AuthType.SAS.value
        elif has_thumbprints:
            auth_type = AuthType.SELF_SIGNED.value
        else:
            return None

    if has_keys and auth_type != AuthType.SAS.value:
        raise click.BadParameter(
            f"--primary-key/--secondary-key require --auth-type sas, not {auth_type}"
        )
    if has_thumbprints and auth_type != AuthType.SELF_SIGNED.value:
        raise click.BadParameter(
            f"--primary-thumbprint/--secondary-thumbprint require --auth-type selfSigned, not {auth_type}"
        )

    if auth_type == AuthType.SAS.value:
        symmetric_key = None
        if has_keys:
            symmetric_key = SymmetricKey(primary_key=primary_key, secondary_key=secondary_key)
        return SymmetricKeyAuth(symmetric_key=symmetric_key)
    if auth_type == AuthType.SELF_SIGNED.value:
        thumbprint = None
        if has_thumbprints:
            thumbprint = X509Thumbprint(
                primary_thumbprint=primary_thumbprint,
                secondary_thumbprint=secondary_thumbprint,
            )
        return X509ThumbprintAuth(x509_thumbprint=thumbprint)
    if auth_type == AuthType.CERTIFICATE_AUTHORITY.value:
        return CertificateAuthorityAuth()
    if auth_type == AuthType.NONE.value:
        return NoAuth()
    raise click.BadParameter(f"Unknown authentication type: {auth_type}")


def _run(operation: Callable[[DeviceClient], Awaitable[Any]]) -> Any:
    """Run one operation against the configured registry, then close the transport."""

    async def runner():
        device_client = RegistryFactory.build(EnvConfigProvider())
        async with device_client.client:
            return await operation(device_client)

    try:
        return asyncio.run(runner())
    except RegistryError as e:
        raise click.ClickException(str(e)) from e
    except ValueError as e:
        raise click.ClickException(f"Configuration error: {e}") from e


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def auth_options(func):
    """Attach the authentication options shared by create and update."""
    options = [
        click.option("--auth-type", type=click.Choice(AUTH_TYPES), default=None,
                     help="Authentication mechanism (server default when omitted)"),
        click.option("--primary-key", default=None, help="Primary symmetric key"),
        click.option("--secondary-key", default=None, help="Secondary symmetric key"),
        click.option("--primary-thumbprint", default=None, help="Primary X.509 thumbprint"),
        click.option("--secondary-thumbprint", default=None, help="Secondary X.509 thumbprint"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--log-level", default="WARNING", show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
def cli(log_level: str):
    """Manage module identities of an edge device."""
    load_dotenv()
    configure_logging(log_level)


@cli.command("list")
def list_command():
    """List the modules of the device."""
    modules = _run(lambda device: device.list_modules())
    _echo_json([module.to_wire() for module in modules])


@cli.command("get")
@click.argument("module_id")
def get_command(module_id: str):
    """Show one module."""
    module = _run(lambda device: device.get_module_by_id(module_id))
    _echo_json(module.to_wire())


@cli.command("create")
@click.argument("module_id")
@auth_options
def create_command(module_id: str, **auth):
    """Create a module identity."""
    authentication = build_authentication(**auth)
    module = _run(lambda device: device.create_module(module_id, authentication))
    _echo_json(module.to_wire())


@cli.command("update")
@click.argument("module_id")
@auth_options
def update_command(module_id: str, **auth):
    """Overwrite an existing module identity."""
    authentication = build_authentication(**auth)
    module = _run(lambda device: device.update_module(module_id, authentication))
    _echo_json(module.to_wire())


@cli.command("delete")
@click.argument("module_id")
def delete_command(module_id: str):
    """Delete a module identity."""
    _run(lambda device: device.delete_module(module_id))
    click.echo(f"Deleted module {module_id}")


if __name__ == "__main__":
    cli()
