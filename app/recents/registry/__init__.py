"""Recent files registry backends.

This module exports the registry interface and its file-backed implementation.
"""

from recents.registry.base import RegistryGateway
from recents.registry.store import FileRegistry

__all__ = ["FileRegistry", "RegistryGateway"]
