"""Catalog registry for factory-based collection creation.

This module provides a central registry for asset catalog factories,
enabling platform-agnostic collection creation and automatic
platform discovery.
"""

import importlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from .errors import UnknownCatalogError

if TYPE_CHECKING:
    from .catalogs.base import AssetCatalog
    from .collection import BundleCollection

logger = logging.getLogger(__name__)


class CatalogRegistry:
    """Central registry for asset catalog factories.

    Platforms register a factory when imported, and the registry can
    automatically discover all available platforms. This keeps the
    collection itself unaware of how a project stores its asset guids.
    """

    _factories: dict[str, Callable[..., "AssetCatalog"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "AssetCatalog"]) -> None:
        """Register a factory function for creating catalogs.

        Args:
            name: Name of the catalog (e.g., 'unity', 'memory')
            factory: Callable that creates an AssetCatalog instance

        Example:
            >>> def create_memory_catalog(mapping=None, **kwargs):
            ...     return InMemoryCatalog(mapping)
            >>> CatalogRegistry.register_factory('memory', create_memory_catalog)
        """
        cls._factories[name] = factory

    @classmethod
    def create_catalog(cls, catalog_name: str, **kwargs) -> "AssetCatalog":
        """Create a catalog from a registered factory.

        Args:
            catalog_name: Name of the registered catalog
            **kwargs: Arguments passed to the catalog factory

        Raises:
            UnknownCatalogError: If catalog_name is not registered
        """
        if catalog_name not in cls._factories:
            available = ", ".join(sorted(cls._factories)) or "none"
            raise UnknownCatalogError(
                f"Unknown catalog: '{catalog_name}'. Available catalogs: {available}"
            )

        return cls._factories[catalog_name](**kwargs)

    @classmethod
    def create_collection(
        cls, catalog_name: str, configuration_path: Path | None = None, **kwargs
    ) -> "BundleCollection":
        """Create a bundle collection backed by a registered catalog.

        Args:
            catalog_name: Name of the registered catalog
            configuration_path: Location of the collection document. Defaults
                to the conventional path under ``project_root`` (or the current
                directory when no project root is given)
            **kwargs: Arguments passed to the catalog factory

        Returns:
            An empty BundleCollection; call ``load()`` to read the document

        Example:
            >>> collection = CatalogRegistry.create_collection(
            ...     'unity',
            ...     Path('MyGame/Assets/GameFramework/Configs/AssetBundleCollection.json'),
            ...     project_root=Path('MyGame'),
            ... )
        """
        # Import here to avoid circular dependency
        from .collection import BundleCollection
        from .config import resolve_configuration_path

        if configuration_path is None:
            project_root = kwargs.get("project_root") or Path.cwd()
            configuration_path = resolve_configuration_path(project_root)

        catalog = cls.create_catalog(catalog_name, **kwargs)
        return BundleCollection(catalog, configuration_path)

    @classmethod
    def list_catalogs(cls) -> list[str]:
        """List all registered catalog names.

        Example:
            >>> CatalogRegistry.list_catalogs()
            ['memory', 'unity']
        """
        return sorted(cls._factories)

    @classmethod
    def discover_platforms(cls) -> None:
        """Auto-discover and import all platforms.

        This method iterates through the platforms/ directory and imports
        each platform package. Platforms register their factories when
        imported via their __init__.py files.
        """
        platforms_dir = Path(__file__).parent / "platforms"

        if not platforms_dir.exists():
            return

        for platform_path in sorted(platforms_dir.iterdir()):
            if not platform_path.is_dir():
                continue

            if not (platform_path / "__init__.py").exists():
                continue

            try:
                importlib.import_module(
                    f".platforms.{platform_path.name}",
                    package="game_asset_bundles",
                )
            except ImportError as e:
                # Platform dependencies not installed
                logger.debug("Skipping platform %s: %s", platform_path.name, e)
