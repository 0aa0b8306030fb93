"""In-memory asset catalog.

This module provides a dictionary-backed catalog, useful for scripts that
already know their guid-to-path mapping and for tests.
"""

from collections.abc import Mapping

from ...catalogs.base import AssetCatalog


class InMemoryCatalog(AssetCatalog):
    """Catalog backed by a plain guid -> path dictionary.

    Example:
        >>> catalog = InMemoryCatalog({"a1": "Assets/UI/button.png"})
        >>> catalog.resolve_path("a1")
        'Assets/UI/button.png'
    """

    def __init__(self, mapping: Mapping[str, str] | None = None):
        self._paths: dict[str, str] = dict(mapping or {})

    def resolve_path(self, guid: str) -> str | None:
        return self._paths.get(guid) or None

    def register(self, guid: str, path: str) -> None:
        self._paths[guid] = path

    def forget(self, guid: str) -> None:
        """Drop a guid, as if its asset had been deleted."""
        self._paths.pop(guid, None)

    def __len__(self) -> int:
        return len(self._paths)
