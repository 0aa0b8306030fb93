"""Unity project asset catalog.

This module provides a catalog that reads the ``.meta`` sidecar files
Unity writes next to every asset and maps each sidecar's guid to the
project-relative path of the asset it describes.
"""

import logging
import os
from pathlib import Path

import yaml

from ...catalogs.base import AssetCatalog

logger = logging.getLogger(__name__)

META_SUFFIX = ".meta"
ASSETS_DIRECTORY = "Assets"


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


def is_ignored_name(name: str) -> bool:
    """Unity skips hidden entries and entries ending with a tilde."""
    return name.startswith(".") or name.endswith("~")


def read_meta_guid(meta_path: Path) -> str | None:
    """Read the guid field of a Unity ``.meta`` file.

    The base loader keeps every scalar a string, so numeric-looking guids
    keep their leading zeros.

    Raises:
        OSError: If the file can not be read
        yaml.YAMLError: If the file is not valid YAML
    """
    with meta_path.open("r", encoding="utf-8") as f:
        data = yaml.load(f, Loader=yaml.BaseLoader)

    if not isinstance(data, dict):
        return None

    guid = data.get("guid")
    return guid if isinstance(guid, str) and guid else None


class MetaFileCatalog(AssetCatalog):
    """Catalog for a Unity project directory.

    The guid index is built on first use and rebuilt by ``refresh()``.

    Example:
        >>> catalog = MetaFileCatalog(Path('/projects/MyGame'))
        >>> catalog.resolve_path('5f3c2a...')
        'Assets/Scenes/Main.unity'
    """

    def __init__(self, project_root: Path):
        """Initialize the catalog.

        Args:
            project_root: Unity project directory (the one holding Assets/)

        Raises:
            ValueError: If path doesn't exist or isn't a directory
        """
        self.project_root = Path(project_root).resolve()

        if not self.project_root.exists():
            raise ValueError(f"Path does not exist: {self.project_root}")

        if not self.project_root.is_dir():
            raise ValueError(f"Path is not a directory: {self.project_root}")

        self._paths: dict[str, str] | None = None

    def resolve_path(self, guid: str) -> str | None:
        if self._paths is None:
            self.refresh()
        return self._paths.get(guid)  # type: ignore[union-attr]

    def refresh(self) -> None:
        """Rescan the project for ``.meta`` files."""
        self._paths = self._scan_meta_files()

    def __len__(self) -> int:
        if self._paths is None:
            self.refresh()
        return len(self._paths)  # type: ignore[arg-type]

    def _scan_meta_files(self) -> dict[str, str]:
        paths: dict[str, str] = {}
        assets_root = self.project_root / ASSETS_DIRECTORY

        if not assets_root.is_dir():
            logger.warning("No %s directory under %s", ASSETS_DIRECTORY, self.project_root)
            return paths

        for dirpath, dirnames, filenames in os.walk(assets_root):
            dirnames[:] = sorted(d for d in dirnames if not is_ignored_name(d))

            for filename in sorted(filenames):
                if not filename.endswith(META_SUFFIX) or is_ignored_name(filename):
                    continue

                meta_path = Path(dirpath) / filename
                asset_path = meta_path.with_name(filename[: -len(META_SUFFIX)])

                # Folders have sidecars too, but are not content items
                if asset_path.is_dir() or not asset_path.exists():
                    continue

                try:
                    validate_path_safety(asset_path, self.project_root)
                    guid = read_meta_guid(meta_path)
                except (OSError, ValueError, yaml.YAMLError) as e:
                    logger.warning("Failed to process %s: %s", meta_path, e)
                    continue

                if guid is None:
                    logger.warning("No guid in %s", meta_path)
                    continue

                relative_path = asset_path.resolve().relative_to(self.project_root).as_posix()
                if guid in paths:
                    logger.warning(
                        "Duplicate guid %s in %s, keeping %s", guid, relative_path, paths[guid]
                    )
                    continue

                paths[guid] = relative_path

        return paths
