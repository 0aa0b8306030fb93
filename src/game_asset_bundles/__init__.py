"""Game Asset Bundles - bundle collection registry.

This package groups project assets into named, deployable bundles and
persists the grouping as a validated JSON document for the build
pipeline.
"""

# Core library interface
from .collection import SCENE_SUFFIX, BundleCollection, LoadProgress
from .models import Asset, Bundle
from .registry import CatalogRegistry
from .catalogs import AssetCatalog

# Core utilities
from .core import BundleType, CollectionDocument, LoadType
from .core import is_valid_bundle_name, is_valid_name, is_valid_variant
from .core import validate_document, validate_document_with_error_details
from .config import DEFAULT_CONFIGURATION_PATH, resolve_configuration_path
from .errors import CollectionError, CorruptDocumentError, UnknownCatalogError

__version__ = "0.1.0"

# Auto-discover and register all platforms
CatalogRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "BundleCollection",
    "LoadProgress",
    "CatalogRegistry",
    "AssetCatalog",
    "Bundle",
    "Asset",
    "SCENE_SUFFIX",
    # Core utilities
    "BundleType",
    "CollectionDocument",
    "LoadType",
    "is_valid_bundle_name",
    "is_valid_name",
    "is_valid_variant",
    "validate_document",
    "validate_document_with_error_details",
    "DEFAULT_CONFIGURATION_PATH",
    "resolve_configuration_path",
    # Errors
    "CollectionError",
    "CorruptDocumentError",
    "UnknownCatalogError",
]
