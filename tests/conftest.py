"""Shared fixtures for bundle collection tests."""

from pathlib import Path

import pytest

from game_asset_bundles.collection import BundleCollection
from game_asset_bundles.config import CONFIGURATION_PATH_ENV
from game_asset_bundles.platforms.memory import InMemoryCatalog

CATALOG_PATHS = {
    "guid-button": "Assets/UI/button.png",
    "guid-icon": "Assets/UI/icon.png",
    "guid-button-upper": "Assets/ui/BUTTON.png",
    "guid-main": "Assets/Scenes/Main.unity",
    "guid-menu": "Assets/Scenes/Menu.unity",
    "guid-music": "Assets/Audio/theme.ogg",
}


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIGURATION_PATH_ENV, raising=False)


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog(CATALOG_PATHS)


@pytest.fixture
def configuration_path(tmp_path: Path) -> Path:
    return tmp_path / "Configs" / "AssetBundleCollection.json"


@pytest.fixture
def collection(catalog: InMemoryCatalog, configuration_path: Path) -> BundleCollection:
    return BundleCollection(catalog, configuration_path)


class RecordingProgress:
    """Load progress listener that records every callback."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def on_loading_bundle(self, index: int, count: int) -> None:
        self.events.append(("bundle", index, count))

    def on_loading_asset(self, index: int, count: int) -> None:
        self.events.append(("asset", index, count))

    def on_load_completed(self) -> None:
        self.events.append(("completed",))


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()
