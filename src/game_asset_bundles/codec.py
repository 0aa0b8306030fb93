"""Encoding and storage of collection documents.

Documents are JSON validated against schemas/collection.schema.json on
both read and write. Writes go through a temporary sibling file that
replaces the target only once it is complete, so an interrupted or failed
save never leaves a truncated document behind.
"""

import json
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from jsonschema import ValidationError

from .core.types import AssetRecord, BundleRecord, CollectionDocument
from .core.validator import format_validation_error, validate_document
from .errors import CorruptDocumentError
from .models import Asset, Bundle


def encode_bundle(bundle: Bundle) -> BundleRecord:
    record: BundleRecord = {"name": bundle.name, "load_type": int(bundle.load_type)}
    if bundle.variant is not None:
        record["variant"] = bundle.variant
    record["packed"] = bundle.packed
    if bundle.resource_groups:
        record["resource_groups"] = list(bundle.resource_groups)
    return record


def encode_asset(asset: Asset, bundle: Bundle) -> AssetRecord:
    record: AssetRecord = {"guid": asset.guid, "bundle_name": bundle.name}
    if bundle.variant is not None:
        record["bundle_variant"] = bundle.variant
    return record


def encode_document(
    bundles: Iterable[Bundle], assets: Iterable[tuple[Asset, Bundle]]
) -> CollectionDocument:
    """Build a collection document.

    Args:
        bundles: Bundles in the order they should be written
        assets: (asset, owning bundle) pairs in the order they should be written

    Returns:
        Document dictionary conforming to the JSON schema
    """
    return {
        "bundles": [encode_bundle(bundle) for bundle in bundles],
        "assets": [encode_asset(asset, bundle) for asset, bundle in assets],
    }


def decode_document(text: str) -> CollectionDocument:
    """Parse and validate a collection document.

    Unknown fields are kept in the returned records; callers read only the
    fields they know.

    Raises:
        CorruptDocumentError: If the text is not JSON or fails the schema
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptDocumentError(f"Collection document is not valid JSON: {e}") from e

    try:
        validate_document(document)
    except ValidationError as e:
        raise CorruptDocumentError(format_validation_error(e)) from e

    return document  # type: ignore[no-any-return]


def read_document(path: Path) -> CollectionDocument:
    """Read a collection document from disk.

    Raises:
        FileNotFoundError: If no document exists at ``path``
        CorruptDocumentError: If the document is unreadable or invalid
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CorruptDocumentError(f"Collection document is not UTF-8: {e}") from e

    return decode_document(text)


def write_document(path: Path, document: CollectionDocument) -> None:
    """Validate and atomically write a collection document.

    The parent directory is created if missing. The previous document, if
    any, stays in place until the new one has been fully written.

    Raises:
        CorruptDocumentError: If the document fails the schema
        OSError: If the directory or file can not be written
    """
    try:
        validate_document(document)
    except ValidationError as e:
        raise CorruptDocumentError(
            f"Refusing to write invalid document: {format_validation_error(e)}"
        ) from e

    path.parent.mkdir(parents=True, exist_ok=True)

    handle, temp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(handle, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
