"""
Edge Registry - Module Identity Client

A typed client for managing module identities on a cloud-hosted device
registry from an edge runtime.

Architecture:
- Each module is self-contained with clear interfaces
- The HTTP transport is injected, never constructed inside a module
- No local caching: the remote registry is the source of truth

Modules:
- client: Generic REST request plumbing and error taxonomy
- models: Module and authentication mechanism data models
- device: Module operations scoped to a single device
"""

__version__ = "1.0.0"
