"""Errors raised by the tourism client.

Every public operation either returns a fully resolved value or raises
exactly one of these. Nothing is retried internally.
"""


class TourismError(RuntimeError):
    """Base class for all client errors."""


class VersionNotAvailable(TourismError):
    """Raised when the active version is unset or not served by the endpoint."""


class ResourceNotAvailable(TourismError):
    """Raised when a resource is not listed under the active version."""


class InvalidParameter(TourismError):
    """Raised when a parameter is not declared by a templated resource."""


class InvalidValueType(TourismError):
    """Raised when a template value is neither a scalar, a list nor a map."""


class InvalidTerm(TourismError):
    """Raised when a list term or a relation is outside its whitelist."""


class ServerError(TourismError):
    """Raised when the server answers with a non-success status.

    ``status_code`` is None when no response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedCatalog(TourismError):
    """Raised when a hypermedia document does not have the expected shape."""


__all__ = [
    "InvalidParameter",
    "InvalidTerm",
    "InvalidValueType",
    "MalformedCatalog",
    "ResourceNotAvailable",
    "ServerError",
    "TourismError",
    "VersionNotAvailable",
]
