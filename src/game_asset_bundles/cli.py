"""Command-line interface for editing bundle collections.

This module provides the CLI entry point for inspecting and editing the
collection document of a project without opening the editor.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .collection import BundleCollection
from .config import resolve_configuration_path
from .core.types import LoadType
from .core.validator import validate_document_with_error_details
from .errors import UnknownCatalogError
from .registry import CatalogRegistry


def open_collection(project: Path, catalog: str, config: str | None = None) -> BundleCollection:
    """Create a collection for a project and load its document.

    Args:
        project: Project root directory
        catalog: Name of a registered catalog
        config: Optional override for the document location

    Returns:
        The loaded collection (empty if no document exists yet)

    Exits with status 1 if a document exists but can not be read.

    Raises:
        UnknownCatalogError: If the catalog is not registered
        ValueError: If the catalog rejects the project directory
    """
    configuration_path = resolve_configuration_path(project, config)
    collection = CatalogRegistry.create_collection(
        catalog, configuration_path, project_root=project
    )

    # A document that exists but could not be read must not be overwritten
    if not collection.load() and configuration_path.exists():
        print(f"Error: Could not load {configuration_path}", file=sys.stderr)
        sys.exit(1)

    return collection


def _cmd_list(collection: BundleCollection, args: argparse.Namespace) -> bool:
    json.dump(collection.to_document(), sys.stdout, indent=2)
    print()
    return True


def _cmd_add(collection: BundleCollection, args: argparse.Namespace) -> bool:
    return collection.add_bundle(
        args.name, args.variant, args.load_type, args.packed, args.group or ()
    )


def _cmd_remove(collection: BundleCollection, args: argparse.Namespace) -> bool:
    return collection.remove_bundle(args.name, args.variant)


def _cmd_rename(collection: BundleCollection, args: argparse.Namespace) -> bool:
    return collection.rename_bundle(args.old, args.variant, args.new, args.new_variant)


def _cmd_assign(collection: BundleCollection, args: argparse.Namespace) -> bool:
    return collection.assign_asset(args.guid, args.bundle, args.variant)


def _cmd_unassign(collection: BundleCollection, args: argparse.Namespace) -> bool:
    return collection.unassign_asset(args.guid)


def _cmd_set(collection: BundleCollection, args: argparse.Namespace) -> bool:
    if not collection.has_bundle(args.name, args.variant):
        return False

    if args.load_type is not None:
        collection.set_bundle_load_type(args.name, args.variant, args.load_type)
    if args.packed is not None:
        collection.set_bundle_packed(args.name, args.variant, args.packed)
    if args.group is not None:
        collection.set_bundle_resource_groups(args.name, args.variant, args.group)
    return True


MUTATING_COMMANDS = {
    "add": _cmd_add,
    "remove": _cmd_remove,
    "rename": _cmd_rename,
    "assign": _cmd_assign,
    "unassign": _cmd_unassign,
    "set": _cmd_set,
}


def _validate(configuration_path: Path) -> None:
    if not configuration_path.exists():
        print(f"Error: No collection document at {configuration_path}", file=sys.stderr)
        sys.exit(1)

    try:
        document = json.loads(configuration_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        print(f"Error: Could not read {configuration_path}: {e}", file=sys.stderr)
        sys.exit(1)

    is_valid, error_msg = validate_document_with_error_details(document)
    if not is_valid:
        print("Error: Collection validation failed:", file=sys.stderr)
        print(error_msg, file=sys.stderr)
        sys.exit(1)

    print("Validation successful!", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect and edit asset bundle collections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the collection of the project in the current directory
  asset-bundles list

  # Add a bundle with a variant and assign an asset to it
  asset-bundles --project MyGame add ui/common --variant hd --group base
  asset-bundles --project MyGame assign 5f3c2a0e9b1d4c7a8e6f2b3c4d5e6f7a ui/common --variant hd

  # Keep the document outside the project
  asset-bundles --project MyGame --config ../configs/bundles.json list
        """,
    )

    parser.add_argument("--project", default=".", help="Project root directory (default: .)")
    parser.add_argument("--config", help="Collection document path (absolute or project-relative)")
    parser.add_argument(
        "--catalog",
        default="unity",
        help="Asset catalog used to resolve guids (default: unity)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log rejected operations")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Print the collection as JSON")
    subparsers.add_parser("validate", help="Validate the stored document against the schema")

    add = subparsers.add_parser("add", help="Add a bundle")
    add.add_argument("name")
    add.add_argument("--variant")
    add.add_argument("--load-type", type=int, default=int(LoadType.LOAD_FROM_FILE))
    add.add_argument("--packed", action="store_true")
    add.add_argument("--group", nargs="+", help="Resource groups (space-separated)")

    remove = subparsers.add_parser("remove", help="Remove a bundle and its assets")
    remove.add_argument("name")
    remove.add_argument("--variant")

    rename = subparsers.add_parser("rename", help="Rename a bundle")
    rename.add_argument("old")
    rename.add_argument("new")
    rename.add_argument("--variant", help="Current variant")
    rename.add_argument("--new-variant", help="New variant")

    assign = subparsers.add_parser("assign", help="Assign an asset to a bundle")
    assign.add_argument("guid")
    assign.add_argument("bundle")
    assign.add_argument("--variant")

    unassign = subparsers.add_parser("unassign", help="Remove an asset from its bundle")
    unassign.add_argument("guid")

    update = subparsers.add_parser("set", help="Change bundle settings")
    update.add_argument("name")
    update.add_argument("--variant")
    update.add_argument("--load-type", type=int)
    update.add_argument("--packed", action=argparse.BooleanOptionalAction, default=None)
    update.add_argument("--group", nargs="*", help="Replace resource groups")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the bundle collection tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    project = Path(args.project)
    if not project.is_dir():
        print(f"Error: Project directory does not exist: {project}", file=sys.stderr)
        sys.exit(1)

    if args.command == "validate":
        _validate(resolve_configuration_path(project, args.config))
        return

    try:
        collection = open_collection(project, args.catalog, args.config)
    except (UnknownCatalogError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "list":
        _cmd_list(collection, args)
        return

    if not MUTATING_COMMANDS[args.command](collection, args):
        print(f"Error: '{args.command}' was rejected", file=sys.stderr)
        sys.exit(1)

    if not collection.save():
        print(f"Error: Failed to save {collection.configuration_path}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Saved {collection.bundle_count} bundles and {collection.asset_count} assets "
        f"to {collection.configuration_path}",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
