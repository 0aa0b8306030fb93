"""Catalog platforms for bundle collections.

This package contains self-contained platform modules that provide
asset catalog implementations for different project layouts.

Each platform module auto-registers itself with the CatalogRegistry
when imported.
"""

# Platform modules are imported dynamically by CatalogRegistry.discover_platforms()
