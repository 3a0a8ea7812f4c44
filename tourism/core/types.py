"""Core data types for the tourism client.

All data structures are dataclasses with attribute access.
Catalog entries and transport responses are immutable once built.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class CatalogEntry:
    """A named link of one API version."""

    href: str  # may contain URI template expressions
    templated: bool = False


@dataclass(frozen=True)
class TransportResponse:
    """Result of a single HTTP round trip."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


@dataclass(frozen=True)
class ImageContent:
    """An image referenced by a POI, either a URI or inline base-64 data."""

    content: str
    is_uri: bool = True


@dataclass(frozen=True)
class GeometryContent:
    """A single WGS84 position."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class PointGeometry:
    geometry: GeometryContent

    @property
    def size(self) -> int:
        return 1


@dataclass(frozen=True)
class LineGeometry:
    first_point: GeometryContent
    second_point: GeometryContent

    @property
    def size(self) -> int:
        return 2


@dataclass
class PolygonGeometry:
    points: list[GeometryContent] = field(default_factory=list)

    def add_point(self, point: GeometryContent) -> None:
        self.points.append(point)

    @property
    def size(self) -> int:
        return len(self.points)


Geometry = PointGeometry | LineGeometry | PolygonGeometry


# =============================================================================
# TERM VOCABULARIES
# =============================================================================


class ListTerm(str, Enum):
    """Object kinds accepted by the categorization resources."""

    POI = "poi"
    EVENT = "event"
    ROUTE = "route"


class RelationTerm(str, Enum):
    """Relations accepted by the relation resources."""

    PARENT = "parent"
    CHILD = "child"


class AuthorTerm(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    CONTRIBUTER = "contributer"
    EDITOR = "editor"
    PUBLISHER = "publisher"


class LabelTerm(str, Enum):
    PRIMARY = "primary"
    NOTE = "note"


class TimeTerm(str, Enum):
    START = "start"
    END = "end"
    INSTANT = "instant"
    OPEN = "open"


class LinkTerm(str, Enum):
    """Link relations a POI may carry."""

    SOURCE = "source"
    ALTERNATE = "alternate"  # often a permalink
    CANONICAL = "canonical"  # preferred version among near-identical POIs
    COPYRIGHT = "copyright"
    DESCRIBEDBY = "describedby"
    EDIT = "edit"
    ENCLOSURE = "enclosure"  # large resource, may need special handling
    ICON = "icon"
    LATEST_VERSION = "latest-version"
    LICENSE = "license"
    RELATED = "related"
    SEARCH = "search"
    PARENT = "parent"  # enclosing entity
    CHILD = "child"  # enclosed entity
    HISTORIC = "historic"
    FUTURE = "future"


class PointTerm(str, Enum):
    CENTER = "center"
    NAVIGATION_POINT = "navigation point"
    ENTRANCE = "entrance"


class RelationshipTerm(str, Enum):
    EQUALS = "equals"
    DISJOINT = "disjoint"
    CROSSES = "crosses"
    OVERLAPS = "overlaps"
    WITHIN = "within"
    CONTAINS = "contains"
    TOUCHES = "touches"
