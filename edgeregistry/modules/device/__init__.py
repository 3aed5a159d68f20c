"""
Device Module - Black Box Interface

Purpose: Manage the module identities of one device
Interface: create_module(), get_module_by_id(), list_modules(),
           update_module(), delete_module()
Hidden: Resource paths, request bodies, precondition policy per operation
"""

from .device import DeviceClient

__all__ = ["DeviceClient"]
