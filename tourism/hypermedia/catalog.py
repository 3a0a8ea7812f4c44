"""Hypermedia catalog.

Maps version -> resource name -> CatalogEntry, built once from the
hypermedia document served at an endpoint's home URI:

    {
        "citysdk-tourism": [
            {
                "version": "1.0",
                "_links": {
                    "find-poi": {"href": "https://x/poi{?category,tag}", "templated": true}
                }
            }
        ]
    }

The catalog is read-only after construction and can be shared freely.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from tourism.core.types import CatalogEntry
from tourism.exceptions import MalformedCatalog

logger = logging.getLogger(__name__)

DEFAULT_ROOT_KEY = "citysdk-tourism"


class LinkDescriptor(BaseModel):
    """A resource link as served in the document."""

    href: str
    templated: bool = False


class VersionDescriptor(BaseModel):
    """One API version and its resource links."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    version: str
    links: dict[str, LinkDescriptor] = Field(alias="_links")


_VERSIONS_ADAPTER = TypeAdapter(list[VersionDescriptor])


class Catalog:
    """Immutable version/resource index of a hypermedia document."""

    def __init__(self, entries: Mapping[str, Mapping[str, CatalogEntry]]):
        self._entries = MappingProxyType(
            {version: MappingProxyType(dict(links)) for version, links in entries.items()}
        )

    @classmethod
    def from_document(cls, document: Any, root_key: str = DEFAULT_ROOT_KEY) -> "Catalog":
        """Build a catalog from a decoded hypermedia document.

        Args:
            document: Decoded JSON; either a mapping holding the version
                list under ``root_key`` or the version list itself
            root_key: Top-level key of the version list

        Raises:
            MalformedCatalog: the version list is missing or a version
                descriptor lacks its identifier or links
        """
        if isinstance(document, Mapping):
            if root_key not in document:
                raise MalformedCatalog(f"Hypermedia document has no '{root_key}' version list")
            versions = document[root_key]
        else:
            versions = document

        try:
            descriptors = _VERSIONS_ADAPTER.validate_python(versions)
        except ValidationError as e:
            raise MalformedCatalog(f"Invalid hypermedia document: {e.error_count()} errors") from e

        entries: dict[str, dict[str, CatalogEntry]] = {}
        for descriptor in descriptors:
            if descriptor.version in entries:
                logger.warning("[CATALOG] Duplicate version %s, keeping the last one", descriptor.version)
            entries[descriptor.version] = {
                name: CatalogEntry(href=link.href, templated=link.templated)
                for name, link in descriptor.links.items()
            }
            logger.debug(
                "[CATALOG] Version %s: %d resources", descriptor.version, len(descriptor.links)
            )

        logger.info("[CATALOG] Loaded %d versions", len(entries))
        return cls(entries)

    @property
    def versions(self) -> list[str]:
        return list(self._entries)

    def has_version(self, version: str | None) -> bool:
        return version is not None and version in self._entries

    def resources(self, version: str) -> list[str]:
        """Get resource names of a version in document order."""
        return list(self._entries.get(version, {}))

    def get(self, version: str, resource: str) -> CatalogEntry | None:
        links = self._entries.get(version)
        if links is None:
            return None
        return links.get(resource)

    def has_resource(self, version: str, resource: str) -> bool:
        return self.get(version, resource) is not None

    def __len__(self) -> int:
        return len(self._entries)
