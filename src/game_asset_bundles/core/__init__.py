"""Core utilities for bundle collections.

This package contains name validation, schema validation and type
definitions that are shared by the collection, the codec and the CLI.
"""

from .naming import (
    get_bundle_key,
    get_full_name,
    is_valid_bundle_name,
    is_valid_name,
    is_valid_variant,
)
from .types import AssetRecord, BundleRecord, BundleType, CollectionDocument, LoadType
from .validator import validate_document, validate_document_with_error_details

__all__ = [
    "AssetRecord",
    "BundleRecord",
    "BundleType",
    "CollectionDocument",
    "LoadType",
    "get_bundle_key",
    "get_full_name",
    "is_valid_bundle_name",
    "is_valid_name",
    "is_valid_variant",
    "validate_document",
    "validate_document_with_error_details",
]
