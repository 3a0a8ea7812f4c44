"""Field extraction for decoded POI, event and route objects.

Every helper takes the decoded JSON object of a single POI-like resource
and pulls one kind of value out of it. Helpers returning a single value
give None when the field is absent; helpers returning collections give an
empty list.

Language matching only compares the language part of a locale, so
"pt_PT", "pt-BR" and "pt" all match each other. Entries without their own
"lang" inherit the object's "lang".
"""

import logging
from typing import Any

from tourism.core.types import (
    Geometry,
    GeometryContent,
    ImageContent,
    LabelTerm,
    LineGeometry,
    LinkTerm,
    PointGeometry,
    PolygonGeometry,
)

logger = logging.getLogger(__name__)

DEFAULT_LANG = "en_GB"

PRICE_TYPE = "X-citysdk/price"
WAITING_TIME_TYPE = "X-citysdk/waiting-time"
OCCUPATION_TYPE = "X-citysdk/occupation"
CALENDAR_TYPE = "text/calendar"


def _language(locale: str | None) -> str:
    """Get the language part of a locale ('pt_PT' -> 'pt')."""
    if not locale:
        return ""
    return locale.replace("-", "_").split("_")[0].lower()


def _same_language(a: str | None, b: str | None) -> bool:
    return _language(a) == _language(b)


def _entry_lang(entry: dict, poi: dict) -> str:
    return entry.get("lang") or poi.get("lang") or DEFAULT_LANG


def _pick_by_language(entries: list[dict], poi: dict, lang: str | None) -> str | None:
    """Get the value of the entry in the wanted language.

    Falls back to the last entry when none matches.
    """
    fallback = None
    for entry in entries:
        if lang is not None and _same_language(lang, _entry_lang(entry, poi)):
            return entry.get("value")
        fallback = entry.get("value")
    return fallback


# =============================================================================
# LABELS AND DESCRIPTIONS
# =============================================================================


def get_available_languages(poi: dict | None, field: str = "label") -> dict[str, str] | None:
    """Get the languages a label or description is available in.

    Args:
        poi: Decoded POI object
        field: "label" or "description"

    Returns:
        Mapping of language -> locale as served (e.g., {"pt": "pt_PT"})
    """
    if poi is None or field not in ("label", "description"):
        return None

    languages: dict[str, str] = {}
    for entry in poi.get(field, []):
        locale = entry.get("lang")
        if locale:
            languages[_language(locale)] = locale
    return languages


def get_label(
    poi: dict | None, term: str = LabelTerm.PRIMARY, lang: str = DEFAULT_LANG
) -> str | None:
    """Get the label with a given term, preferably in the wanted language."""
    if poi is None:
        return None
    labels = [label for label in poi.get("label", []) if label.get("term") == term]
    return _pick_by_language(labels, poi, lang)


def get_description(poi: dict | None, lang: str = DEFAULT_LANG) -> str | None:
    """Get the free-text description, preferably in the wanted language."""
    if poi is None:
        return None
    descriptions = [d for d in poi.get("description", []) if not d.get("type")]
    return _pick_by_language(descriptions, poi, lang)


def _get_value_with_type(poi: dict | None, content_type: str, lang: str | None) -> str | None:
    if poi is None:
        return None
    typed = [d for d in poi.get("description", []) if d.get("type") == content_type]
    return _pick_by_language(typed, poi, lang)


def get_price(poi: dict | None, lang: str = DEFAULT_LANG) -> str | None:
    """Get the price description, preferably in the wanted language."""
    return _get_value_with_type(poi, PRICE_TYPE, lang)


def get_waiting_time(poi: dict | None) -> str | None:
    """Get the waiting time in seconds."""
    return _get_value_with_type(poi, WAITING_TIME_TYPE, None)


def get_occupation(poi: dict | None) -> str | None:
    """Get the occupation (0 to 100)."""
    return _get_value_with_type(poi, OCCUPATION_TYPE, None)


# =============================================================================
# LINKS AND IMAGES
# =============================================================================


def get_thumbnails(poi: dict | None) -> list[ImageContent]:
    """Get icon links, as URIs or inline base-64 data."""
    if poi is None:
        return []

    thumbnails = []
    for link in poi.get("link", []):
        if link.get("term") != LinkTerm.ICON:
            continue
        if link.get("href"):
            thumbnails.append(ImageContent(link["href"]))
        elif link.get("value"):
            thumbnails.append(ImageContent(link["value"], is_uri=False))
    return thumbnails


def get_images_uri(poi: dict | None) -> list[ImageContent]:
    """Get related links that point to images."""
    if poi is None:
        return []
    return [
        ImageContent(link["href"])
        for link in poi.get("link", [])
        if link.get("term") == LinkTerm.RELATED
        and "image/" in (link.get("type") or "")
        and link.get("href")
    ]


def get_link(poi: dict | None, term: str) -> str | None:
    """Get the href of the first link with a given term."""
    if poi is None:
        return None
    for link in poi.get("link", []):
        if link.get("term") == term:
            return link.get("href")
    return None


# =============================================================================
# CONTACTS AND TIME
# =============================================================================


def get_contacts(poi: dict | None) -> str | None:
    """Get contacts in vCard format."""
    if poi is None:
        return None
    address = (poi.get("location") or {}).get("address")
    if not address:
        return None
    return address.get("value")


def get_calendar(poi: dict | None, term: str) -> str | None:
    """Get the iCalendar entry with a given term."""
    if poi is None:
        return None
    for time in poi.get("time", []):
        if time.get("type") == CALENDAR_TYPE and time.get("term") == term:
            return time.get("value")
    return None


# =============================================================================
# LOCATIONS
# =============================================================================


def _parse_position(text: str) -> GeometryContent | None:
    """Parse a "lat lon" position."""
    parts = text.split()
    if len(parts) < 2:
        return None
    try:
        return GeometryContent(float(parts[0]), float(parts[1]))
    except ValueError:
        return None


def _parse_pos_list(pos_list: str) -> list[GeometryContent] | None:
    """Parse a comma-separated list of positions, or None if any is malformed."""
    positions = []
    for chunk in pos_list.split(","):
        position = _parse_position(chunk)
        if position is None:
            logger.debug("Skipping malformed posList: %r", pos_list)
            return None
        positions.append(position)
    return positions


def _location_items(poi: dict, kind: str, term: str) -> list[dict]:
    location = poi.get("location") or {}
    return [item for item in location.get(kind, []) if item.get("term") == term]


def get_location_point(poi: dict | None, term: str) -> list[PointGeometry]:
    if poi is None:
        return []

    points = []
    for item in _location_items(poi, "point", term):
        position = _parse_position(item.get("Point", {}).get("posList", ""))
        if position is not None:
            points.append(PointGeometry(position))
    return points


def get_location_line(poi: dict | None, term: str) -> list[LineGeometry]:
    if poi is None:
        return []

    lines = []
    for item in _location_items(poi, "line", term):
        positions = _parse_pos_list(item.get("LineString", {}).get("posList", ""))
        if positions and len(positions) >= 2:
            lines.append(LineGeometry(positions[0], positions[1]))
    return lines


def get_location_polygon(poi: dict | None, term: str) -> list[PolygonGeometry]:
    if poi is None:
        return []

    polygons = []
    for item in _location_items(poi, "polygon", term):
        positions = _parse_pos_list(item.get("SimplePolygon", {}).get("posList", ""))
        if positions:
            polygons.append(PolygonGeometry(positions))
    return polygons


def get_locations(poi: dict | None, term: str) -> list[Geometry]:
    """Get points, then lines, then polygons with a given term."""
    if poi is None:
        return []
    return [
        *get_location_point(poi, term),
        *get_location_line(poi, term),
        *get_location_polygon(poi, term),
    ]


def get_relationship(poi: dict | None, term: str, field: str = "base") -> Any:
    """Get the base or id of the relationship with a given term.

    Args:
        poi: Decoded POI object
        term: Relationship term (e.g., "within")
        field: "base" or "id"
    """
    if poi is None or field not in ("base", "id"):
        return None
    for relationship in _location_items(poi, "relationship", term):
        return relationship.get(field)
    return None
