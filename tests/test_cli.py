"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest

from game_asset_bundles.cli import main
from game_asset_bundles.config import DEFAULT_CONFIGURATION_PATH

BUTTON_GUID = "5f3c2a0e9b1d4c7a8e6f2b3c4d5e6f7a"


@pytest.fixture
def project(tmp_path: Path) -> Path:
    asset = tmp_path / "Assets" / "UI" / "button.png"
    asset.parent.mkdir(parents=True)
    asset.write_bytes(b"png")
    Path(f"{asset}.meta").write_text(
        f"fileFormatVersion: 2\nguid: {BUTTON_GUID}\n", encoding="utf-8"
    )
    return tmp_path


def run(project: Path, *args: str) -> None:
    main(["--project", str(project), *args])


def read_document(project: Path) -> dict:
    return json.loads((project / DEFAULT_CONFIGURATION_PATH).read_text(encoding="utf-8"))


class TestMutatingCommands:
    """Test commands that change the collection."""

    def test_add_and_assign(self, project: Path) -> None:
        """Test that changes are saved to the default location."""
        run(project, "add", "ui/common", "--variant", "hd", "--packed", "--group", "base", "ui")
        run(project, "assign", BUTTON_GUID, "ui/common", "--variant", "hd")

        document = read_document(project)
        assert document["bundles"] == [
            {
                "name": "ui/common",
                "variant": "hd",
                "load_type": 0,
                "packed": True,
                "resource_groups": ["base", "ui"],
            }
        ]
        assert document["assets"] == [
            {"guid": BUTTON_GUID, "bundle_name": "ui/common", "bundle_variant": "hd"}
        ]

    def test_rename_set_unassign_remove(self, project: Path) -> None:
        """Test the remaining editing commands."""
        run(project, "add", "ui")
        run(project, "assign", BUTTON_GUID, "ui")
        run(project, "rename", "ui", "hud", "--new-variant", "sd")
        run(project, "set", "hud", "--variant", "sd", "--load-type", "2", "--packed")

        document = read_document(project)
        assert document["bundles"][0]["name"] == "hud"
        assert document["bundles"][0]["load_type"] == 2
        assert document["bundles"][0]["packed"] is True
        assert document["assets"][0]["bundle_variant"] == "sd"

        run(project, "unassign", BUTTON_GUID)
        assert read_document(project)["assets"] == []

        run(project, "remove", "hud", "--variant", "sd")
        assert read_document(project)["bundles"] == []

    def test_rejected_command_exits(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that a rejected operation exits with status 1 and saves nothing."""
        run(project, "add", "ui")

        with pytest.raises(SystemExit) as exc_info:
            run(project, "add", "ui/common")

        assert exc_info.value.code == 1
        assert "'add' was rejected" in capsys.readouterr().err
        assert [b["name"] for b in read_document(project)["bundles"]] == ["ui"]

    def test_unreadable_document_is_not_overwritten(
        self, project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Test that a document that exists but can not be read aborts the command."""
        run(project, "add", "ui")

        def deny(path: Path) -> dict:
            raise PermissionError(f"Permission denied: {path}")

        monkeypatch.setattr("game_asset_bundles.collection.read_document", deny)

        with pytest.raises(SystemExit) as exc_info:
            run(project, "add", "audio")

        assert exc_info.value.code == 1
        assert "Could not load" in capsys.readouterr().err
        assert [b["name"] for b in read_document(project)["bundles"]] == ["ui"]

    def test_custom_config_location(self, project: Path) -> None:
        """Test that --config moves the document."""
        run(project, "--config", "Configs/bundles.json", "add", "ui")

        assert (project / "Configs" / "bundles.json").exists()
        assert not (project / DEFAULT_CONFIGURATION_PATH).exists()


class TestReadCommands:
    """Test commands that only read the collection."""

    def test_list(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that list prints the document as JSON."""
        run(project, "add", "ui")
        capsys.readouterr()

        run(project, "list")

        output = json.loads(capsys.readouterr().out)
        assert output == {
            "bundles": [{"name": "ui", "load_type": 0, "packed": False}],
            "assets": [],
        }

    def test_validate(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        """Test validation of a stored document."""
        run(project, "add", "ui")
        run(project, "validate")
        assert "Validation successful!" in capsys.readouterr().err

        (project / DEFAULT_CONFIGURATION_PATH).write_text('{"bundles": []}', encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            run(project, "validate")
        assert exc_info.value.code == 1

    def test_validate_missing_document(self, project: Path) -> None:
        """Test that validating without a document fails."""
        with pytest.raises(SystemExit) as exc_info:
            run(project, "validate")
        assert exc_info.value.code == 1

    def test_unknown_catalog(self, project: Path, capsys: pytest.CaptureFixture) -> None:
        """Test that an unknown catalog is reported."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--project", str(project), "--catalog", "perforce", "list"])

        assert exc_info.value.code == 1
        assert "Unknown catalog" in capsys.readouterr().err

    def test_missing_project(self, tmp_path: Path) -> None:
        """Test that the project directory must exist."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--project", str(tmp_path / "missing"), "list"])
        assert exc_info.value.code == 1
