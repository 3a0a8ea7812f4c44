"""Client for hypermedia-driven tourism APIs.

Usage:
    from tourism import TourismClient

    client = TourismClient("https://example.org/tourism/")
    client.use_version("1.0")
    pois = client.get_pois({"category": ["Museum", "Garden"], "limit": 10})

The URI template engine is usable on its own:

    from tourism import UriTemplate

    template = UriTemplate("https://x/poi{?category,limit}")
    template.set("category", ["Museum", "Garden"])
    template.build()  # "https://x/poi?category=Museum,Garden"
"""

from tourism.config import TourismSettings, get_settings
from tourism.exceptions import (
    InvalidParameter,
    InvalidTerm,
    InvalidValueType,
    MalformedCatalog,
    ResourceNotAvailable,
    ServerError,
    TourismError,
    VersionNotAvailable,
)
from tourism.hypermedia import Catalog
from tourism.services import ResourceResolver, TourismClient, create_tourism_client
from tourism.transport import TransportClient
from tourism.uri_template import UriTemplate
from tourism.utilities import HypermediaCache, setup_logging

__all__ = [
    # Main API
    "TourismClient",
    "create_tourism_client",
    "ResourceResolver",
    "Catalog",
    "UriTemplate",
    "TransportClient",
    "HypermediaCache",
    # Configuration
    "TourismSettings",
    "get_settings",
    "setup_logging",
    # Errors
    "TourismError",
    "VersionNotAvailable",
    "ResourceNotAvailable",
    "InvalidParameter",
    "InvalidValueType",
    "InvalidTerm",
    "ServerError",
    "MalformedCatalog",
]
