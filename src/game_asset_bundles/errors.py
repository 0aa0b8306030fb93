"""Exceptions raised inside the package.

None of these cross the public boundary of ``BundleCollection``; its
operations report failure through their return values.
"""


class CollectionError(Exception):
    """Base class for bundle collection errors."""


class CorruptDocumentError(CollectionError):
    """A stored collection document could not be parsed or failed the schema."""


class UnknownCatalogError(CollectionError, ValueError):
    """No catalog factory is registered under the requested name."""
