"""Asset catalogs for bundle collections.

This package contains the catalog interface. Platform-specific
implementations live in the platforms/ directory.
"""

from .base import AssetCatalog

__all__ = ["AssetCatalog"]
