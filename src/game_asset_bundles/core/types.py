"""Type definitions for bundle collection documents.

This module defines the enums used by bundle records and the TypedDict
classes that mirror the JSON schema in schemas/collection.schema.json.
"""

from enum import Enum, IntEnum
from typing import TypedDict


class LoadType(IntEnum):
    """Named load strategies. Any integer is preserved, not only these."""

    LOAD_FROM_FILE = 0
    LOAD_FROM_MEMORY = 1
    LOAD_FROM_MEMORY_AND_QUICK_DECRYPT = 2
    LOAD_FROM_MEMORY_AND_DECRYPT = 3


class BundleType(Enum):
    """Content kind of a bundle, fixed by its first assigned asset."""

    UNTYPED = "untyped"
    ASSET_ONLY = "asset_only"
    SCENE_ONLY = "scene_only"


class _BundleRecordRequired(TypedDict):
    name: str
    load_type: int


class BundleRecord(_BundleRecordRequired, total=False):
    """Persisted bundle attributes."""

    variant: str  # Omitted when the bundle has no variant
    packed: bool
    resource_groups: list[str]  # Omitted when empty


class _AssetRecordRequired(TypedDict):
    guid: str
    bundle_name: str


class AssetRecord(_AssetRecordRequired, total=False):
    """Persisted asset assignment."""

    bundle_variant: str  # Omitted when the owning bundle has no variant


class CollectionDocument(TypedDict):
    """Complete persisted collection."""

    bundles: list[BundleRecord]
    assets: list[AssetRecord]
