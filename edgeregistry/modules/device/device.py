"""
Module operations scoped to one device.

Each operation validates its identifiers, builds the resource path and body,
and makes exactly one call through RegistryClient. Create and update share
one upsert path and differ only in the If-Match precondition: the registry
treats PUT as an idempotent upsert, and "If-Match: *" restricts it to a
module that already exists.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from ..client import EmptyResponseError, RegistryClient, ensure_not_empty
from ..models import AuthMechanism, Module

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    # "$" stays literal for system modules like "$edgeAgent"
    return quote(value, safe="$")


class DeviceClient:
    """Manages the module identities of a single device."""

    def __init__(self, client: RegistryClient, device_id: str):
        """
        Initialize the device client.

        Args:
            client: Generic registry client used for every call
            device_id: Device whose modules are managed

        Raises:
            ArgumentEmptyError: If device_id is empty or whitespace-only
        """
        self._client = client
        self._device_id = ensure_not_empty("device_id", device_id)

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def client(self) -> RegistryClient:
        return self._client

    def _modules_path(self) -> str:
        return f"/devices/{_segment(self._device_id)}/modules"

    def _module_path(self, module_id: str) -> str:
        return f"{self._modules_path()}/{_segment(module_id)}"

    async def create_module(
        self, module_id: str, authentication: Optional[AuthMechanism] = None
    ) -> Module:
        """
        Register a new module identity.

        Args:
            module_id: Module to create
            authentication: Optional mechanism; the server picks one when omitted

        Returns:
            The module as stored by the registry
        """
        return await self._upsert_module(module_id, authentication, add_if_match=False)

    async def update_module(
        self, module_id: str, authentication: Optional[AuthMechanism] = None
    ) -> Module:
        """
        Overwrite an existing module identity, whatever its current generation.

        Args:
            module_id: Module to update
            authentication: Optional mechanism; the server picks one when omitted

        Returns:
            The module as stored by the registry
        """
        return await self._upsert_module(module_id, authentication, add_if_match=True)

    async def _upsert_module(
        self,
        module_id: str,
        authentication: Optional[AuthMechanism],
        add_if_match: bool,
    ) -> Module:
        module_id = ensure_not_empty("module_id", module_id)

        module = Module(device_id=self._device_id, module_id=module_id)
        if authentication is not None:
            module = module.model_copy(update={"authentication": authentication})

        path = self._module_path(module_id)
        result = await self._client.request(
            "PUT",
            path,
            body=module,
            response_type=Module,
            add_if_match=add_if_match,
        )
        if result is None:
            raise EmptyResponseError("PUT", path)

        logger.info(
            "%s module %s/%s (generation %s)",
            "Updated" if add_if_match else "Created",
            self._device_id,
            module_id,
            result.generation_id,
        )
        return result

    async def get_module_by_id(self, module_id: str) -> Module:
        """Fetch one module identity."""
        module_id = ensure_not_empty("module_id", module_id)

        path = self._module_path(module_id)
        result = await self._client.request("GET", path, response_type=Module)
        if result is None:
            raise EmptyResponseError("GET", path)
        return result

    async def list_modules(self) -> List[Module]:
        """
        List all module identities of the device.

        Returns:
            Modules in the order the registry returned them (possibly empty)
        """
        path = self._modules_path()
        result = await self._client.request("GET", path, response_type=List[Module])
        if result is None:
            raise EmptyResponseError("GET", path)
        return result

    async def delete_module(self, module_id: str) -> None:
        """
        Delete a module identity, whatever its current generation.

        Any response body is ignored.
        """
        module_id = ensure_not_empty("module_id", module_id)

        await self._client.request("DELETE", self._module_path(module_id), add_if_match=True)
        logger.info("Deleted module %s/%s", self._device_id, module_id)
