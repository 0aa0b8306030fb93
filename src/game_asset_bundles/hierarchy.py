"""Prefix tree over bundle names.

Bundle names are virtual paths, so a bundle can not be both a "file" and a
"directory": ``ui`` and ``ui/common`` can not coexist, while ``ui`` and
``uikit`` can. The index stores every bundle name split into lower-cased
segments, which turns the collision checks into a single walk down the tree
instead of a scan over every bundle.
"""

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    # Bundles whose name ends at this node: registry key -> (exact name, has variant)
    bundles: dict[str, tuple[str, bool]] = field(default_factory=dict)


def _split(name: str) -> list[str]:
    return name.lower().split("/")


class HierarchyIndex:
    """Index of bundle names by path segment.

    The index knows nothing about name syntax or full-name uniqueness; the
    collection validates those before consulting it. Variants only matter
    for bundles sharing a name: the prefix checks ignore them.

    Example:
        >>> index = HierarchyIndex()
        >>> index.add("ui", "ui", has_variant=False)
        >>> index.is_available("ui/common", has_variant=False)
        False
        >>> index.is_available("uikit", has_variant=False)
        True
    """

    def __init__(self) -> None:
        self._root = _Node()

    def add(self, key: str, name: str, has_variant: bool) -> None:
        node = self._root
        for segment in _split(name):
            node = node.children.setdefault(segment, _Node())
        node.bundles[key] = (name, has_variant)

    def remove(self, key: str, name: str) -> None:
        """Remove a bundle, pruning branches left without bundles."""
        path = [self._root]
        for segment in _split(name):
            child = path[-1].children.get(segment)
            if child is None:
                return
            path.append(child)

        path[-1].bundles.pop(key, None)

        segments = _split(name)
        for depth in range(len(segments), 0, -1):
            node = path[depth]
            if node.bundles or node.children:
                break
            del path[depth - 1].children[segments[depth - 1]]

    def clear(self) -> None:
        self._root = _Node()

    def is_available(self, name: str, has_variant: bool, excluding: str | None = None) -> bool:
        """Check whether a bundle name fits into the hierarchy.

        Args:
            name: Candidate bundle name
            has_variant: Whether the candidate carries a variant
            excluding: Registry key of a bundle to ignore (the bundle being
                renamed)

        Returns:
            False if an existing name is a proper path prefix of ``name`` or
            the other way round, or if a bundle with the same name disagrees
            about having a variant. True otherwise.
        """
        segments = _split(name)
        node = self._root
        for depth, segment in enumerate(segments):
            child = node.children.get(segment)
            if child is None:
                return True
            node = child
            if depth < len(segments) - 1 and _has_other(node, excluding):
                return False

        # Variant mixing compares names exactly; only the prefix checks ignore case
        for key, (other_name, other_has_variant) in node.bundles.items():
            if key == excluding or other_name != name:
                continue
            if other_has_variant != has_variant:
                return False

        pending = list(node.children.values())
        while pending:
            descendant = pending.pop()
            if _has_other(descendant, excluding):
                return False
            pending.extend(descendant.children.values())

        return True


def _has_other(node: _Node, excluding: str | None) -> bool:
    return any(key != excluding for key in node.bundles)
