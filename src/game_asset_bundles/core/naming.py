"""Bundle name and variant syntax rules.

Bundle names double as virtual paths inside the build output, so they are
restricted to simple path segments joined by single forward slashes.
Variants are lowercase tags appended to the name with a dot.
"""

import re

BUNDLE_NAME_PATTERN = re.compile(r"^([A-Za-z0-9._-]+/)*[A-Za-z0-9._-]+$")
BUNDLE_VARIANT_PATTERN = re.compile(r"^[a-z0-9_-]+$")


def is_valid_name(name: str | None) -> bool:
    """Check bundle name syntax.

    Example:
        >>> is_valid_name("ui/common")
        True
        >>> is_valid_name("ui//common")
        False
    """
    if not name:
        return False

    return BUNDLE_NAME_PATTERN.fullmatch(name) is not None


def is_valid_variant(variant: str | None) -> bool:
    """Check variant syntax. ``None`` means "no variant" and is always valid."""
    if variant is None:
        return True

    return BUNDLE_VARIANT_PATTERN.fullmatch(variant) is not None


def is_valid_bundle_name(name: str | None, variant: str | None) -> bool:
    return is_valid_name(name) and is_valid_variant(variant)


def get_full_name(name: str, variant: str | None) -> str:
    """Join a bundle name and its optional variant.

    Example:
        >>> get_full_name("ui/common", "hd")
        'ui/common.hd'
    """
    return f"{name}.{variant}" if variant else name


def get_bundle_key(name: str, variant: str | None) -> str:
    """Registry key for a bundle: the full name, lower-cased."""
    return get_full_name(name, variant).lower()
