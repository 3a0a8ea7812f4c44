"""Resource resolver.

Turns a resource name plus caller parameters into a request URI, after
running the gates in order:

1. Version: an active version is set and served by the endpoint
2. Resource: the resource is listed under the active version
3. Term/relation: categorization ``list`` terms and relations are whitelisted
4. Parameter: every parameter is declared by a templated resource's href

The first failing gate raises; nothing is partially resolved.
"""

import logging
from collections.abc import Mapping
from typing import Any

from tourism.core.types import CatalogEntry, ListTerm, RelationTerm
from tourism.exceptions import (
    InvalidParameter,
    InvalidTerm,
    ResourceNotAvailable,
    VersionNotAvailable,
)
from tourism.hypermedia.catalog import Catalog
from tourism.uri_template import UriTemplate

logger = logging.getLogger(__name__)


class ResourceResolver:
    """Validates and builds resource URIs against a catalog.

    Usage:
        resolver = ResourceResolver(catalog)
        resolver.set_active_version("1.0")
        uri = resolver.resolve("find-poi", {"category": ["Museum"], "limit": 10})
    """

    def __init__(self, catalog: Catalog, version: str | None = None):
        self._catalog = catalog
        self._version = version

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def active_version(self) -> str | None:
        return self._version

    def set_active_version(self, version: str | None) -> None:
        """Select the version used by later calls.

        Not validated here; the version gate of each call checks it.
        """
        self._version = version

    # =========================================================================
    # QUERIES
    # =========================================================================

    def list_resources(self) -> list[str]:
        """Get resource names of the active version.

        Raises:
            VersionNotAvailable: version unset or not served
        """
        version = self._verify_version()
        return self._catalog.resources(version)

    def has_resource(self, resource: str) -> bool:
        version = self._verify_version()
        return self._catalog.has_resource(version, resource)

    def has_resource_parameter(self, resource: str, parameter: str) -> bool:
        """Check if a resource's href declares a parameter.

        Returns False for resources the active version does not list.
        """
        version = self._verify_version()
        entry = self._catalog.get(version, resource)
        if entry is None:
            return False
        return UriTemplate(entry.href).has_parameter(parameter)

    def entry(self, resource: str) -> CatalogEntry:
        """Get the catalog entry of a resource after the version and resource gates."""
        version = self._verify_version()
        return self._validate_resource(version, resource)

    # =========================================================================
    # RESOLUTION
    # =========================================================================

    def resolve(self, resource: str, parameters: Mapping[str, Any] | None = None) -> str:
        """Build the request URI of a listing resource.

        Args:
            resource: Resource name (e.g., 'find-poi')
            parameters: Template variable bindings

        Returns:
            The built URI, or the href unchanged for non-templated resources

        Raises:
            VersionNotAvailable, ResourceNotAvailable, InvalidParameter,
            InvalidValueType
        """
        entry = self.entry(resource)
        parameters = self._validate_parameters(entry, parameters)
        return self._build(entry, parameters)

    def resolve_categorization(
        self, resource: str, parameters: Mapping[str, Any] | None = None
    ) -> str:
        """Build the URI of a categories/tags resource.

        The ``list`` parameter is required and must name poi, event or route.

        Raises:
            VersionNotAvailable, ResourceNotAvailable, InvalidTerm,
            InvalidParameter, InvalidValueType
        """
        entry = self.entry(resource)
        if parameters is not None and not isinstance(parameters, Mapping):
            raise InvalidParameter("Parameters must be a mapping of names to values")
        parameters = dict(parameters or {})
        if "list" not in parameters:
            logger.debug("[RESOLVER] %s called without a list term", resource)
            raise InvalidTerm("list parameter must be set")
        self._validate_term(parameters["list"])
        parameters = self._validate_parameters(entry, parameters)
        return self._build(entry, parameters)

    def resolve_relation(self, resource: str, base: str, id: str, relation: str) -> str:
        """Build the URI of a relation resource for the object at base + id.

        Raises:
            VersionNotAvailable, ResourceNotAvailable, InvalidTerm
        """
        entry = self.entry(resource)
        self._validate_relation(relation)
        return self._build(entry, {"base": base, "id": id, "relation": relation})

    # =========================================================================
    # GATES
    # =========================================================================

    def _verify_version(self) -> str:
        if self._version is None:
            logger.debug("[RESOLVER] No active version")
            raise VersionNotAvailable("Version must be set")
        if not self._catalog.has_version(self._version):
            logger.debug("[RESOLVER] Version %s not in catalog", self._version)
            raise VersionNotAvailable(f"{self._version} is not available in this server")
        return self._version

    def _validate_resource(self, version: str, resource: str) -> CatalogEntry:
        entry = self._catalog.get(version, resource)
        if entry is None:
            logger.debug("[RESOLVER] Resource %s not in version %s", resource, version)
            raise ResourceNotAvailable(f"{resource} is not available in this server")
        return entry

    def _validate_term(self, term: Any) -> None:
        try:
            ListTerm(term)
        except (ValueError, TypeError):
            logger.debug("[RESOLVER] Invalid list term %r", term)
            raise InvalidTerm(f"{term} is an invalid term") from None

    def _validate_relation(self, relation: Any) -> None:
        try:
            RelationTerm(relation)
        except (ValueError, TypeError):
            logger.debug("[RESOLVER] Invalid relation %r", relation)
            raise InvalidTerm(f"{relation} is an invalid relation") from None

    def _validate_parameters(
        self, entry: CatalogEntry, parameters: Mapping[str, Any] | None
    ) -> Mapping[str, Any]:
        if parameters is None:
            return {}
        if not isinstance(parameters, Mapping):
            raise InvalidParameter("Parameters must be a mapping of names to values")
        if not entry.templated:
            # Non-templated resources take no parameters; extra ones are unused
            if parameters:
                logger.debug("[RESOLVER] Ignoring %d parameters for %s", len(parameters), entry.href)
            return parameters

        template = UriTemplate(entry.href)
        declared = set(template.parameters)
        for name in parameters:
            if name not in declared:
                logger.debug("[RESOLVER] %s is not declared by %s", name, entry.href)
                raise InvalidParameter(f"{name} is not a valid parameter")
        return parameters

    def _build(self, entry: CatalogEntry, parameters: Mapping[str, Any]) -> str:
        if not entry.templated:
            return entry.href

        template = UriTemplate(entry.href)
        for name, value in parameters.items():
            template.set(name, value)
        uri = template.build()
        logger.debug("[RESOLVER] Built %s", uri)
        return uri
