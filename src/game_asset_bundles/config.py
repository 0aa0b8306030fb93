"""Location of the collection document.

The document lives inside the project so it can be versioned with the
assets it describes. The location can be overridden per call or through
the ``ASSET_BUNDLE_COLLECTION_PATH`` environment variable.
"""

import os
from pathlib import Path

DEFAULT_CONFIGURATION_PATH = Path("Assets/GameFramework/Configs/AssetBundleCollection.json")
CONFIGURATION_PATH_ENV = "ASSET_BUNDLE_COLLECTION_PATH"


def resolve_configuration_path(project_root: Path, override: str | Path | None = None) -> Path:
    """Resolve where the collection document is stored.

    Args:
        project_root: Project directory
        override: Explicit document path; takes precedence over the
            environment variable

    Returns:
        Absolute path of the collection document. Relative overrides are
        resolved against the project root.
    """
    root = Path(project_root).resolve()

    if override is None:
        override = os.environ.get(CONFIGURATION_PATH_ENV) or None

    if override is None:
        return root / DEFAULT_CONFIGURATION_PATH

    path = Path(override).expanduser()
    return path if path.is_absolute() else root / path
