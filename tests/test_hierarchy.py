"""Tests for the bundle name prefix tree."""

from game_asset_bundles.hierarchy import HierarchyIndex


def make_index(*names: tuple[str, bool]) -> HierarchyIndex:
    index = HierarchyIndex()
    for name, has_variant in names:
        index.add(name.lower(), name, has_variant)
    return index


class TestPrefixCollisions:
    """Test file/directory collisions between bundle names."""

    def test_rejects_child_of_existing_bundle(self) -> None:
        """Test that 'a/b' collides with an existing 'a'."""
        index = make_index(("a", False))
        assert not index.is_available("a/b", has_variant=False)
        assert not index.is_available("a/b/c", has_variant=False)

    def test_rejects_parent_of_existing_bundle(self) -> None:
        """Test that 'a' collides with an existing 'a/b/c'."""
        index = make_index(("a/b/c", False))
        assert not index.is_available("a", has_variant=False)
        assert not index.is_available("a/b", has_variant=False)

    def test_allows_shared_prefix_without_boundary(self) -> None:
        """Test that 'a' and 'ab' do not collide."""
        index = make_index(("a", False))
        assert index.is_available("ab", has_variant=False)
        assert index.is_available("a.b/c", has_variant=False)

    def test_allows_siblings(self) -> None:
        """Test that bundles in the same directory do not collide."""
        index = make_index(("ui/common", False))
        assert index.is_available("ui/shop", has_variant=False)

    def test_ignores_case(self) -> None:
        """Test that prefixes are compared case-insensitively."""
        index = make_index(("UI", False))
        assert not index.is_available("ui/common", has_variant=False)

    def test_ignores_variants(self) -> None:
        """Test that variants do not relax the prefix rule."""
        index = make_index(("a", True))
        assert not index.is_available("a/b", has_variant=True)

    def test_excluded_bundle_does_not_collide(self) -> None:
        """Test that a bundle being renamed is ignored."""
        index = make_index(("a", False))
        assert index.is_available("a/b", has_variant=False, excluding="a")


class TestVariantMixing:
    """Test that a name either always or never carries a variant."""

    def test_rejects_variant_next_to_plain_bundle(self) -> None:
        """Test that 'x.v1' can not join a plain 'x'."""
        index = make_index(("x", False))
        assert not index.is_available("x", has_variant=True)

    def test_rejects_plain_bundle_next_to_variant(self) -> None:
        """Test that a plain 'x' can not join 'x.v1'."""
        index = HierarchyIndex()
        index.add("x.v1", "x", True)
        assert not index.is_available("x", has_variant=False)

    def test_allows_several_variants(self) -> None:
        """Test that 'x.v2' can join 'x.v1'."""
        index = HierarchyIndex()
        index.add("x.v1", "x", True)
        assert index.is_available("x", has_variant=True)

    def test_variant_mixing_compares_names_exactly(self) -> None:
        """Test that 'x.v1' can join a plain 'X' but 'X.v1' can not."""
        index = HierarchyIndex()
        index.add("x", "X", False)
        assert index.is_available("x", has_variant=True)
        assert not index.is_available("X", has_variant=True)


class TestRemoval:
    """Test index maintenance."""

    def test_remove_frees_prefix(self) -> None:
        """Test that removing a bundle frees its path."""
        index = make_index(("a", False))
        index.remove("a", "a")
        assert index.is_available("a/b", has_variant=False)

    def test_remove_prunes_only_empty_branches(self) -> None:
        """Test that removing a leaf keeps its siblings indexed."""
        index = make_index(("a/b", False), ("a/c", False))
        index.remove("a/b", "a/b")
        assert not index.is_available("a", has_variant=False)
        assert index.is_available("a/b", has_variant=False)

    def test_remove_unknown_is_noop(self) -> None:
        """Test that removing an unknown name does nothing."""
        index = make_index(("a", False))
        index.remove("b/c", "b/c")
        assert not index.is_available("a/b", has_variant=False)

    def test_clear(self) -> None:
        """Test that clearing empties the index."""
        index = make_index(("a", False))
        index.clear()
        assert index.is_available("a/b", has_variant=False)
