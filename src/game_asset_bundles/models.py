"""Bundle and asset records held by a collection.

Assets refer to their owning bundle by registry key rather than by object,
and bundles list their assets by guid. The collection is responsible for
keeping both sides consistent.
"""

from dataclasses import dataclass, field

from .core.naming import get_bundle_key, get_full_name
from .core.types import BundleType


@dataclass
class Bundle:
    """A named group of assets destined for one build artifact.

    Attributes:
        name: Slash-separated bundle name
        variant: Optional lowercase variant tag
        load_type: Load strategy, an integer owned by the build step
        packed: Whether the bundle belongs to the packed output subset
        resource_groups: Free-form tags in insertion order
        type: Content kind, fixed by the first assigned asset
        asset_guids: Guids of the owned assets in assignment order
    """

    name: str
    variant: str | None = None
    load_type: int = 0
    packed: bool = False
    resource_groups: list[str] = field(default_factory=list)
    type: BundleType = BundleType.UNTYPED
    asset_guids: dict[str, None] = field(default_factory=dict, repr=False)

    @property
    def full_name(self) -> str:
        return get_full_name(self.name, self.variant)

    @property
    def key(self) -> str:
        return get_bundle_key(self.name, self.variant)

    @property
    def asset_count(self) -> int:
        return len(self.asset_guids)

    def rename(self, name: str, variant: str | None) -> None:
        self.name = name
        self.variant = variant

    def attach(self, guid: str, is_scene: bool) -> None:
        """Add an asset guid and fix the bundle type if still untyped."""
        self.asset_guids[guid] = None
        if self.type is BundleType.UNTYPED:
            self.type = BundleType.SCENE_ONLY if is_scene else BundleType.ASSET_ONLY

    def detach(self, guid: str) -> None:
        self.asset_guids.pop(guid, None)

    def accepts(self, is_scene: bool) -> bool:
        """Whether an asset of the given kind may join this bundle."""
        if self.type is BundleType.ASSET_ONLY:
            return not is_scene
        if self.type is BundleType.SCENE_ONLY:
            return is_scene
        return True


@dataclass
class Asset:
    """A content item assigned to exactly one bundle.

    The asset path is not stored; it is resolved through the catalog
    whenever it is needed.
    """

    guid: str
    bundle_key: str
