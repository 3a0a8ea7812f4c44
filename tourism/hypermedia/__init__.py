"""Hypermedia document handling."""

from tourism.hypermedia.catalog import (
    DEFAULT_ROOT_KEY,
    Catalog,
    LinkDescriptor,
    VersionDescriptor,
)

__all__ = [
    "DEFAULT_ROOT_KEY",
    "Catalog",
    "LinkDescriptor",
    "VersionDescriptor",
]
