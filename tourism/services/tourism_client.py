"""Tourism API client.

Discovers the versions and resources an endpoint serves from its
hypermedia document, then resolves and fetches POIs, events, routes,
categories and tags. Each call makes exactly one HTTP round trip and
returns the decoded JSON body.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from tourism.exceptions import MalformedCatalog, ServerError, TourismError
from tourism.hypermedia.catalog import DEFAULT_ROOT_KEY, Catalog
from tourism.services.resolver import ResourceResolver
from tourism.transport.client import Transport, TransportClient
from tourism.utilities.cache import HypermediaCache

logger = logging.getLogger(__name__)

# Resource names published by tourism endpoints
FIND_POI = "find-poi"
FIND_EVENT = "find-event"
FIND_ROUTE = "find-route"
FIND_CATEGORIES = "find-categories"
FIND_TAGS = "find-tags"
FIND_POI_RELATION = "find-poi-relation"
FIND_EVENT_RELATION = "find-event-relation"


class TourismClient:
    """Client for a hypermedia-driven tourism endpoint.

    Usage:
        with TourismClient("https://example.org/tourism/") as client:
            client.use_version("1.0")
            pois = client.get_pois({"category": ["Museum"], "limit": 10})
            for poi in pois["poi"]:
                detail = client.get_poi(poi["base"], poi["id"])
    """

    def __init__(
        self,
        home_uri: str,
        transport: Transport | None = None,
        cache: HypermediaCache | None = None,
        root_key: str = DEFAULT_ROOT_KEY,
    ):
        """Fetch (or reuse) the hypermedia document of an endpoint.

        Args:
            home_uri: Home URI of the endpoint
            transport: Transport to use (default: TransportClient())
            cache: Shared document cache, keyed by home URI
            root_key: Top-level key of the version list

        Raises:
            ServerError: the home URI did not answer with 200
            MalformedCatalog: the document is not valid JSON or lacks versions
        """
        self._home_uri = home_uri
        self._transport = transport or TransportClient()
        self._cache = cache
        try:
            document = self._load_hypermedia(root_key)
            catalog = Catalog.from_document(document, root_key)
        except TourismError:
            # Caller never receives a client to close
            if transport is None:
                self._transport.close()
            raise
        self._resolver = ResourceResolver(catalog)

    def _load_hypermedia(self, root_key: str) -> Any:
        if self._cache is not None:
            cached = self._cache.get(self._home_uri)
            if cached is not None:
                return cached

        logger.info("[CLIENT] Fetching hypermedia from %s", self._home_uri)
        response = self._transport.execute(self._home_uri)
        if not response.ok:
            raise ServerError(f"Server returned {response.status_code}", response.status_code)
        try:
            document = response.json()
        except json.JSONDecodeError as e:
            raise MalformedCatalog(f"Hypermedia document is not JSON: {e}") from e

        if self._cache is not None:
            self._cache.put(self._home_uri, document)
        return document

    @property
    def home_uri(self) -> str:
        return self._home_uri

    @property
    def resolver(self) -> ResourceResolver:
        return self._resolver

    @property
    def active_version(self) -> str | None:
        return self._resolver.active_version

    def use_version(self, version: str | None) -> None:
        """Tell the client which API version to use."""
        self._resolver.set_active_version(version)

    def get_versions(self) -> list[str]:
        return self._resolver.catalog.versions

    def get_resources(self) -> list[str]:
        """Get resources available for the active version."""
        return self._resolver.list_resources()

    def has_resource(self, resource: str) -> bool:
        return self._resolver.has_resource(resource)

    def has_resource_parameter(self, resource: str, parameter: str) -> bool:
        return self._resolver.has_resource_parameter(resource, parameter)

    # =========================================================================
    # LISTINGS
    # =========================================================================

    def get_pois(self, parameters: Mapping[str, Any] | None = None) -> Any:
        """Get Points of Interest matching the parameters."""
        return self._call(self._resolver.resolve(FIND_POI, parameters))

    def get_events(self, parameters: Mapping[str, Any] | None = None) -> Any:
        """Get events matching the parameters."""
        return self._call(self._resolver.resolve(FIND_EVENT, parameters))

    def get_routes(self, parameters: Mapping[str, Any] | None = None) -> Any:
        """Get routes matching the parameters."""
        return self._call(self._resolver.resolve(FIND_ROUTE, parameters))

    def get_categories(self, parameters: Mapping[str, Any]) -> Any:
        """Get categories of POIs, events or routes.

        Args:
            parameters: Must contain "list" set to poi, event or route
        """
        return self._call(self._resolver.resolve_categorization(FIND_CATEGORIES, parameters))

    def get_tags(self, parameters: Mapping[str, Any]) -> Any:
        """Get tags of POIs, events or routes.

        Args:
            parameters: Must contain "list" set to poi, event or route
        """
        return self._call(self._resolver.resolve_categorization(FIND_TAGS, parameters))

    # =========================================================================
    # SINGLE OBJECTS AND RELATIONS
    # =========================================================================

    def get_poi(self, base: str, id: str) -> Any:
        """Get a single POI, event or route by its base URI and id."""
        return self._call(f"{base}{id}")

    def get_poi_relation(self, base: str, id: str, relation: str) -> Any:
        """Get POIs that are the parent or child of the POI at base + id."""
        return self._call(self._resolver.resolve_relation(FIND_POI_RELATION, base, id, relation))

    def get_event_relation(self, base: str, id: str, relation: str) -> Any:
        """Get events that are the parent or child of the event at base + id."""
        return self._call(
            self._resolver.resolve_relation(FIND_EVENT_RELATION, base, id, relation)
        )

    def _call(self, uri: str) -> Any:
        response = self._transport.execute(uri)
        if not response.ok:
            raise ServerError(f"Server returned {response.status_code}", response.status_code)
        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise ServerError(f"Server returned a body that is not JSON: {e}", response.status_code) from e

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> "TourismClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
