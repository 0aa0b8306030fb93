"""Asset bundle collection.

This module provides the registry that groups assets into bundles and
persists the grouping. It enforces the rules that keep the bundle
namespace well formed:

- full names (``name`` or ``name.variant``) are unique, ignoring case;
- no bundle name is a path prefix of another (``ui`` vs ``ui/common``);
- bundles sharing an exact name either all have a variant or none does;
- a bundle holds either scenes or other assets, never both;
- no two assets in a bundle share a path, ignoring case.

Every operation reports failure through its return value and leaves the
collection untouched when it fails.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from .catalogs.base import AssetCatalog
from .codec import encode_document, read_document, write_document
from .core.naming import get_bundle_key, get_full_name, is_valid_bundle_name
from .core.types import CollectionDocument, LoadType
from .errors import CollectionError, CorruptDocumentError
from .hierarchy import HierarchyIndex
from .models import Asset, Bundle

logger = logging.getLogger(__name__)

# Assets whose path ends with this suffix are scenes
SCENE_SUFFIX = ".unity"


class LoadProgress(Protocol):
    """Callbacks fired synchronously by ``BundleCollection.load()``.

    Implementations may define only the callbacks they need.
    """

    def on_loading_bundle(self, index: int, count: int) -> None: ...

    def on_loading_asset(self, index: int, count: int) -> None: ...

    def on_load_completed(self) -> None: ...


def _notify(progress: LoadProgress | None, event: str, *args: int) -> None:
    callback = getattr(progress, event, None)
    if callback is not None:
        callback(*args)


def is_scene_path(path: str) -> bool:
    return path.endswith(SCENE_SUFFIX)


def _group_list(resource_groups: Iterable[str] | str) -> list[str]:
    # A bare string is one tag, not a sequence of one-letter tags
    if isinstance(resource_groups, str):
        return [resource_groups]
    return list(resource_groups)


class BundleCollection:
    """Registry of bundles and the assets assigned to them.

    Example:
        >>> collection = BundleCollection(catalog, Path('AssetBundleCollection.json'))
        >>> collection.add_bundle('ui/common')
        True
        >>> collection.assign_asset('5f3c2a...', 'ui/common')
        True
        >>> collection.save()
        True
    """

    def __init__(self, catalog: AssetCatalog, configuration_path: Path):
        """Initialize an empty collection.

        Args:
            catalog: Resolves asset guids to their current paths
            configuration_path: Location of the collection document
        """
        self.catalog = catalog
        self.configuration_path = Path(configuration_path)
        self._bundles: dict[str, Bundle] = {}
        self._assets: dict[str, Asset] = {}
        self._hierarchy = HierarchyIndex()

    @property
    def bundle_count(self) -> int:
        return len(self._bundles)

    @property
    def asset_count(self) -> int:
        return len(self._assets)

    def clear(self) -> None:
        self._bundles.clear()
        self._assets.clear()
        self._hierarchy.clear()

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self, progress: LoadProgress | None = None) -> bool:
        """Replace the collection with the stored document.

        Bundles are replayed through ``add_bundle`` and assets through
        ``assign_asset``, so records that break a rule are skipped with a
        warning instead of corrupting the collection. A document that can
        not be parsed is deleted.

        Args:
            progress: Optional callbacks for per-item and completion events

        Returns:
            True if a document was read, False if none exists or it was
            corrupt (the collection is empty in both cases)
        """
        self.clear()

        if not self.configuration_path.exists():
            logger.info("No collection document at %s", self.configuration_path)
            return False

        try:
            document = read_document(self.configuration_path)
        except CorruptDocumentError as e:
            logger.warning(
                "Discarding collection document %s: %s", self.configuration_path, e
            )
            self._discard_document()
            _notify(progress, "on_load_completed")
            return False
        except OSError as e:
            logger.error("Failed to read %s: %s", self.configuration_path, e)
            _notify(progress, "on_load_completed")
            return False

        bundle_records = document["bundles"]
        count = len(bundle_records)
        for index, record in enumerate(bundle_records):
            _notify(progress, "on_loading_bundle", index, count)

            name = record["name"]
            variant = record.get("variant")
            if not self.add_bundle(
                name,
                variant,
                record["load_type"],
                record.get("packed", False),
                record.get("resource_groups", ()),
            ):
                logger.warning("Can not add bundle '%s'.", get_full_name(name, variant))

        asset_records = document["assets"]
        count = len(asset_records)
        for index, record in enumerate(asset_records):
            _notify(progress, "on_loading_asset", index, count)

            guid = record["guid"]
            name = record["bundle_name"]
            variant = record.get("bundle_variant")
            if not self.assign_asset(guid, name, variant):
                logger.warning(
                    "Can not assign asset '%s' to bundle '%s'.",
                    guid,
                    get_full_name(name, variant),
                )

        _notify(progress, "on_load_completed")
        return True

    def save(self) -> bool:
        """Write the collection document.

        Bundles are written in key order and assets in guid order. On
        failure the previous document, if any, is left untouched.

        Returns:
            True if the document was written
        """
        document = self.to_document()

        try:
            write_document(self.configuration_path, document)
        except (OSError, CollectionError) as e:
            logger.error("Failed to save collection to %s: %s", self.configuration_path, e)
            return False

        return True

    def to_document(self) -> CollectionDocument:
        """Encode the collection as a document dictionary."""
        return encode_document(
            self.get_bundles(),
            ((asset, self._bundles[asset.bundle_key]) for asset in self.get_assets()),
        )

    def _discard_document(self) -> None:
        self.clear()
        try:
            self.configuration_path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("Failed to delete %s: %s", self.configuration_path, e)

    # ------------------------------------------------------------------
    # Bundles
    # ------------------------------------------------------------------

    def get_bundles(self) -> list[Bundle]:
        return [self._bundles[key] for key in sorted(self._bundles)]

    def get_bundle(self, name: str, variant: str | None = None) -> Bundle | None:
        if not is_valid_bundle_name(name, variant):
            return None

        return self._bundles.get(get_bundle_key(name, variant))

    def has_bundle(self, name: str, variant: str | None = None) -> bool:
        return self.get_bundle(name, variant) is not None

    def is_name_available(
        self, name: str, variant: str | None = None, excluding: Bundle | None = None
    ) -> bool:
        """Check whether a bundle identity fits into the namespace.

        Args:
            name: Candidate bundle name
            variant: Candidate variant
            excluding: Bundle to ignore, so a bundle may be renamed to an
                identity that only collides with itself

        Returns:
            True if the identity is free
        """
        existing = self._bundles.get(get_bundle_key(name, variant))
        if existing is not None:
            return existing is excluding

        excluded_key = excluding.key if excluding is not None else None
        return self._hierarchy.is_available(name, variant is not None, excluded_key)

    def add_bundle(
        self,
        name: str,
        variant: str | None = None,
        load_type: int = LoadType.LOAD_FROM_FILE,
        packed: bool = False,
        resource_groups: Iterable[str] | str = (),
    ) -> bool:
        """Add an empty, untyped bundle.

        Returns:
            False if the name or variant is malformed or not available
        """
        if not is_valid_bundle_name(name, variant):
            logger.debug("Invalid bundle name '%s' / variant '%s'", name, variant)
            return False

        if not self.is_name_available(name, variant):
            logger.debug("Bundle name '%s' is not available", get_full_name(name, variant))
            return False

        bundle = Bundle(
            name=name,
            variant=variant,
            load_type=int(load_type),
            packed=bool(packed),
            resource_groups=_group_list(resource_groups),
        )
        self._insert_bundle(bundle)
        return True

    def rename_bundle(
        self,
        old_name: str,
        old_variant: str | None,
        new_name: str,
        new_variant: str | None,
    ) -> bool:
        """Rename a bundle, keeping its assets and settings.

        Returns:
            False if either identity is malformed, the bundle does not
            exist, or the new identity collides with another bundle
        """
        if not is_valid_bundle_name(old_name, old_variant) or not is_valid_bundle_name(
            new_name, new_variant
        ):
            return False

        bundle = self.get_bundle(old_name, old_variant)
        if bundle is None:
            return False

        if not self.is_name_available(new_name, new_variant, excluding=bundle):
            logger.debug(
                "Can not rename '%s' to '%s'",
                bundle.full_name,
                get_full_name(new_name, new_variant),
            )
            return False

        self._detach_bundle(bundle)
        bundle.rename(new_name, new_variant)
        self._insert_bundle(bundle)

        for guid in bundle.asset_guids:
            self._assets[guid].bundle_key = bundle.key

        return True

    def remove_bundle(self, name: str, variant: str | None = None) -> bool:
        """Remove a bundle and every asset assigned to it."""
        bundle = self.get_bundle(name, variant)
        if bundle is None:
            return False

        for guid in list(bundle.asset_guids):
            bundle.detach(guid)
            del self._assets[guid]

        self._detach_bundle(bundle)
        return True

    def set_bundle_load_type(self, name: str, variant: str | None, load_type: int) -> bool:
        bundle = self.get_bundle(name, variant)
        if bundle is None:
            return False

        bundle.load_type = int(load_type)
        return True

    def set_bundle_packed(self, name: str, variant: str | None, packed: bool) -> bool:
        bundle = self.get_bundle(name, variant)
        if bundle is None:
            return False

        bundle.packed = bool(packed)
        return True

    def set_bundle_resource_groups(
        self, name: str, variant: str | None, resource_groups: Iterable[str] | str
    ) -> bool:
        bundle = self.get_bundle(name, variant)
        if bundle is None:
            return False

        bundle.resource_groups = _group_list(resource_groups)
        return True

    def add_bundle_resource_group(self, name: str, variant: str | None, group: str) -> bool:
        bundle = self.get_bundle(name, variant)
        if bundle is None:
            return False

        bundle.resource_groups.append(group)
        return True

    def remove_bundle_resource_group(self, name: str, variant: str | None, group: str) -> bool:
        """Remove the first occurrence of a resource group tag.

        Returns:
            False if the bundle does not exist or does not carry the tag
        """
        bundle = self.get_bundle(name, variant)
        if bundle is None or group not in bundle.resource_groups:
            return False

        bundle.resource_groups.remove(group)
        return True

    def _insert_bundle(self, bundle: Bundle) -> None:
        self._bundles[bundle.key] = bundle
        self._hierarchy.add(bundle.key, bundle.name, bundle.variant is not None)

    def _detach_bundle(self, bundle: Bundle) -> None:
        del self._bundles[bundle.key]
        self._hierarchy.remove(bundle.key, bundle.name)

    # ------------------------------------------------------------------
    # Assets
    # ------------------------------------------------------------------

    def get_assets(self) -> list[Asset]:
        return [self._assets[guid] for guid in sorted(self._assets)]

    def get_bundle_assets(self, name: str, variant: str | None = None) -> list[Asset]:
        bundle = self.get_bundle(name, variant)
        if bundle is None:
            return []

        return [self._assets[guid] for guid in bundle.asset_guids]

    def get_asset(self, guid: str) -> Asset | None:
        if not guid:
            return None

        return self._assets.get(guid)

    def has_asset(self, guid: str) -> bool:
        return self.get_asset(guid) is not None

    def get_asset_path(self, guid: str) -> str | None:
        """Current path of an asset, as reported by the catalog."""
        if not guid:
            return None

        return self.catalog.resolve_path(guid)

    def get_asset_bundle(self, guid: str) -> Bundle | None:
        asset = self.get_asset(guid)
        if asset is None:
            return None

        return self._bundles[asset.bundle_key]

    def assign_asset(self, guid: str, bundle_name: str, bundle_variant: str | None = None) -> bool:
        """Assign an asset to a bundle, moving it if already assigned.

        Args:
            guid: Catalog guid of the asset
            bundle_name: Target bundle name
            bundle_variant: Target bundle variant

        Returns:
            False if the guid is empty or unknown to the catalog, the bundle
            does not exist, another asset in the bundle has the same path,
            or the asset kind conflicts with the bundle type
        """
        if not guid:
            return False

        bundle = self.get_bundle(bundle_name, bundle_variant)
        if bundle is None:
            return False

        asset_path = self.catalog.resolve_path(guid)
        if not asset_path:
            logger.debug("Asset '%s' is unknown to the catalog", guid)
            return False

        lowered_path = asset_path.lower()
        for other_guid in bundle.asset_guids:
            other_path = self.catalog.resolve_path(other_guid)
            if other_path is None or other_path == asset_path:
                continue

            if other_path.lower() == lowered_path:
                logger.debug("Bundle '%s' already holds '%s'", bundle.full_name, other_path)
                return False

        is_scene = is_scene_path(asset_path)
        if not bundle.accepts(is_scene):
            logger.debug(
                "Bundle '%s' is %s and can not hold '%s'",
                bundle.full_name,
                bundle.type.value,
                asset_path,
            )
            return False

        asset = self._assets.get(guid)
        if asset is None:
            asset = Asset(guid=guid, bundle_key=bundle.key)
            self._assets[guid] = asset
        elif asset.bundle_key != bundle.key:
            self._bundles[asset.bundle_key].detach(guid)
            asset.bundle_key = bundle.key

        bundle.attach(guid, is_scene)
        return True

    def unassign_asset(self, guid: str) -> bool:
        """Remove an asset from its bundle and from the collection.

        Returns:
            False only for an empty guid; unknown guids are a no-op
        """
        if not guid:
            return False

        asset = self._assets.pop(guid, None)
        if asset is not None:
            self._bundles[asset.bundle_key].detach(guid)

        return True
