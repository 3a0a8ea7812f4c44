"""Client configuration.

Settings come from environment variables, falling back to defaults:

- TOURISM_HOME_URI: home URI of the endpoint (no default)
- TOURISM_API_VERSION: version to activate on startup (no default)
- TOURISM_HTTP_TIMEOUT: request timeout in seconds (default 10)
- TOURISM_LOG_LEVEL: package log level (default INFO)
- TOURISM_ROOT_KEY: top-level key of the hypermedia version list
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from tourism.hypermedia.catalog import DEFAULT_ROOT_KEY
from tourism.transport.client import DEFAULT_ACCEPT, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class TourismSettings:
    """Resolved client settings."""

    home_uri: str | None = None
    version: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    accept: str = DEFAULT_ACCEPT
    log_level: str = DEFAULT_LOG_LEVEL
    root_key: str = DEFAULT_ROOT_KEY


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Invalid TOURISM_HTTP_TIMEOUT %r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning("TOURISM_HTTP_TIMEOUT must be positive, using %s", DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


def get_settings(environ: Mapping[str, str] | None = None) -> TourismSettings:
    """Build settings from the environment.

    Args:
        environ: Variables to read (default: os.environ)
    """
    env = os.environ if environ is None else environ
    return TourismSettings(
        home_uri=env.get("TOURISM_HOME_URI") or None,
        version=env.get("TOURISM_API_VERSION") or None,
        timeout=_parse_timeout(env.get("TOURISM_HTTP_TIMEOUT")),
        log_level=(env.get("TOURISM_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        root_key=env.get("TOURISM_ROOT_KEY") or DEFAULT_ROOT_KEY,
    )
