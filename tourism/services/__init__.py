"""Service layer: resource resolution and the tourism client."""

from tourism.config import TourismSettings, get_settings
from tourism.services.resolver import ResourceResolver
from tourism.services.tourism_client import TourismClient
from tourism.transport.client import Transport, TransportClient
from tourism.utilities.cache import HypermediaCache


def create_tourism_client(
    settings: TourismSettings | None = None,
    transport: Transport | None = None,
    cache: HypermediaCache | None = None,
) -> TourismClient:
    """Create a TourismClient from settings.

    Args:
        settings: Client settings (default: read from the environment)
        transport: Transport to use (default: TransportClient with the
            configured timeout and Accept header)
        cache: Shared hypermedia cache

    Raises:
        ValueError: no home URI configured
    """
    settings = settings or get_settings()
    if not settings.home_uri:
        raise ValueError("No home URI configured - set TOURISM_HOME_URI")

    transport = transport or TransportClient(timeout=settings.timeout, accept=settings.accept)
    client = TourismClient(
        settings.home_uri,
        transport=transport,
        cache=cache,
        root_key=settings.root_key,
    )
    if settings.version:
        client.use_version(settings.version)
    return client


__all__ = [
    "ResourceResolver",
    "TourismClient",
    "create_tourism_client",
]
