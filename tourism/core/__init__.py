"""Core types shared across the tourism client."""

from tourism.core.types import (
    AuthorTerm,
    CatalogEntry,
    Geometry,
    GeometryContent,
    ImageContent,
    LabelTerm,
    LineGeometry,
    LinkTerm,
    ListTerm,
    PointGeometry,
    PointTerm,
    PolygonGeometry,
    RelationshipTerm,
    RelationTerm,
    TimeTerm,
    TransportResponse,
)

__all__ = [
    # Types
    "CatalogEntry",
    "TransportResponse",
    "ImageContent",
    "Geometry",
    "GeometryContent",
    "PointGeometry",
    "LineGeometry",
    "PolygonGeometry",
    # Terms
    "AuthorTerm",
    "LabelTerm",
    "LinkTerm",
    "ListTerm",
    "PointTerm",
    "RelationshipTerm",
    "RelationTerm",
    "TimeTerm",
]
