"""Unity project catalog platform.

This platform resolves guids by reading the ``.meta`` files of a Unity
project, allowing collections to be edited outside the editor.

Usage:
    >>> from game_asset_bundles import CatalogRegistry
    >>> collection = CatalogRegistry.create_collection(
    ...     'unity',
    ...     configuration_path,
    ...     project_root=Path('/projects/MyGame'),
    ... )
"""

from pathlib import Path

from .catalog import MetaFileCatalog, read_meta_guid, validate_path_safety

# Auto-register with the registry
from ...registry import CatalogRegistry


def _create_unity_catalog(project_root: Path, **kwargs) -> MetaFileCatalog:
    """Factory function for creating Unity catalogs.

    Args:
        project_root: Unity project directory
        **kwargs: Additional parameters (unused for Unity catalogs)
    """
    return MetaFileCatalog(project_root)


# Auto-register at module import
CatalogRegistry.register_factory("unity", _create_unity_catalog)

__all__ = [
    "MetaFileCatalog",
    "read_meta_guid",
    "validate_path_safety",
]
