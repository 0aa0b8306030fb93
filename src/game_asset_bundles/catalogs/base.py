"""Base abstraction for asset catalogs.

A catalog is the collection's only view of the project's content: it maps
a stable asset guid to the asset's current path. Platform-specific
implementations live in the platforms/ directory.
"""

from abc import ABC, abstractmethod


class AssetCatalog(ABC):
    """Abstract base class for guid-to-path lookups.

    The collection never mutates a catalog; it only asks it to resolve
    guids when assets are assigned and when asset paths are displayed.
    """

    @abstractmethod
    def resolve_path(self, guid: str) -> str | None:
        """Resolve an asset guid to its current path.

        Args:
            guid: Stable identifier of the content item

        Returns:
            Project-relative path using forward slashes, or None if the
            guid is unknown or the asset has been deleted
        """
        pass

    def contains(self, guid: str) -> bool:
        return self.resolve_path(guid) is not None
