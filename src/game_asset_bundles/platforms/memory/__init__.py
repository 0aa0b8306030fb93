"""In-memory catalog platform.

This platform resolves guids from a dictionary supplied by the caller.
"""

from collections.abc import Mapping

from .catalog import InMemoryCatalog

# Auto-register with the registry
from ...registry import CatalogRegistry


def _create_memory_catalog(mapping: Mapping[str, str] | None = None, **kwargs) -> InMemoryCatalog:
    """Factory function for creating in-memory catalogs.

    Args:
        mapping: Initial guid -> path mapping
        **kwargs: Additional parameters (unused for in-memory catalogs)
    """
    return InMemoryCatalog(mapping)


# Auto-register at module import
CatalogRegistry.register_factory("memory", _create_memory_catalog)

__all__ = ["InMemoryCatalog"]
