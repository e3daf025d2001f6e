# Copyright 2016 DataStax, Inc.
#
# Licensed under the DataStax DSE Driver License;
# you may not use this file except in compliance with the License.
#
# You may obtain a copy of the License at
#
# http://www.datastax.com/terms/datastax-dse-driver-license-terms
"""
WKT (Well-Known Text) reading and writing for polygons and multi-polygons, including those with holes.

Geometry is exchanged as nested lists: a list of polygons, each polygon a list of rings (the first
one exterior, the rest holes), each ring a list of :class:`.Point`.

Reading is permissive: :func:`parse_wkt` never raises and returns an empty geometry for anything it
does not understand. Writing is strict: :func:`to_wkt_string` returns the caller's fallback literal
rather than emit a geometry with an empty or unclosed ring.
"""

import logging
import math

from geosystems.scanner import scan, WKTSyntaxError
from geosystems.util import Point

log = logging.getLogger(__name__)

POLYGON_KEY = 'POLYGON'
MULTIPOLYGON_KEY = 'MULTIPOLYGON'

EMPTY_POINT = 'POINT EMPTY'
EMPTY_LINESTRING = 'LINESTRING EMPTY'
EMPTY_MULTIPOINT = 'MULTIPOINT EMPTY'
EMPTY_POLYGON = 'POLYGON EMPTY'
EMPTY_MULTILINESTRING = 'MULTILINESTRING EMPTY'
EMPTY_MULTIPOLYGON = 'MULTIPOLYGON EMPTY'
EMPTY_GEOMETRYCOLLECTION = 'GEOMETRYCOLLECTION EMPTY'

EMPTY_LITERALS = (EMPTY_POINT, EMPTY_LINESTRING, EMPTY_MULTIPOINT, EMPTY_POLYGON,
                  EMPTY_MULTILINESTRING, EMPTY_MULTIPOLYGON, EMPTY_GEOMETRYCOLLECTION)

DEFAULT_FALLBACK = EMPTY_POLYGON
"""
Literal returned by :func:`to_wkt_string` for invalid geometry when no ``default_value`` is given.
"""


def parse_wkt(text):
    """
    Parses a POLYGON or MULTIPOLYGON WKT string into nested polygon/ring/point lists.

    Returns ``[]`` for ``None``, blank text, any of the ``EMPTY`` literals, an unsupported keyword
    or text that does not scan, and for anything that is not a ``str``. Never raises.
    """
    if text is None:
        return []
    if not isinstance(text, str):
        log.debug("Cannot parse %r as WKT, returning empty geometry", text)
        return []
    if not text.strip():
        return []

    text = text.strip()
    if text in EMPTY_LITERALS:
        return []

    try:
        keyword, body = scan(text)
        if body is None and keyword in EMPTY_LITERALS:
            # irregular spacing such as "POLYGON   EMPTY"
            return []
        if body is None:
            raise WKTSyntaxError("No coordinates following %r" % (keyword,))
        if keyword == POLYGON_KEY:
            return [_polygon_from_body(body)]
        if keyword == MULTIPOLYGON_KEY:
            if not all(isinstance(group, list) for group in body):
                raise WKTSyntaxError("MULTIPOLYGON members must be parenthesised polygons")
            return [_polygon_from_body(group) for group in body]
        raise WKTSyntaxError("Unsupported geometry type %r" % (keyword,))
    except WKTSyntaxError as exc:
        log.debug("Could not parse WKT %r, returning empty geometry: %s", text, exc)
        return []


def _polygon_from_body(body):
    polygon = []
    for ring in body:
        if not isinstance(ring, list) or not all(isinstance(point, Point) for point in ring):
            raise WKTSyntaxError("Polygon rings must be lists of coordinates, found %r" % (ring,))
        polygon.append(ring)
    return polygon


def is_multipolygon(geometry):
    """
    Returns True if the geometry has more than one polygon, or its only polygon has holes.
    """
    return len(geometry) > 1 or (len(geometry) == 1 and len(geometry[0]) > 1)


def _ring_is_valid(ring):
    return len(ring) > 0 and tuple(ring[0]) == tuple(ring[-1])


def _invalid_reason(geometry):
    if not geometry:
        return "geometry has no polygons"
    for i, polygon in enumerate(geometry):
        if not polygon:
            return "polygon %d has no rings" % (i,)
        for j, ring in enumerate(polygon):
            if not ring:
                return "ring %d of polygon %d has no points" % (j, i)
            if not _ring_is_valid(ring):
                return "ring %d of polygon %d is not closed" % (j, i)
            if not all(math.isfinite(x) and math.isfinite(y) for x, y in ring):
                return "ring %d of polygon %d has a non-finite coordinate" % (j, i)
    return None


def format_coordinate(value):
    """
    Integral values print without a fraction (``30.0`` -> ``30``); anything else uses ``repr``.
    """
    if isinstance(value, float) and value.is_integer():
        return '%d' % value
    return repr(value)


def _format_ring(ring):
    return '(%s)' % ', '.join('%s %s' % (format_coordinate(x), format_coordinate(y)) for x, y in ring)


def _format_polygon(polygon):
    return '(%s)' % ', '.join(_format_ring(ring) for ring in polygon)


def to_wkt_string(geometry, force_multipolygon=False, default_value=DEFAULT_FALLBACK):
    """
    Serializes nested polygon/ring/point lists as a POLYGON or MULTIPOLYGON WKT string.

    A single polygon without holes becomes ``POLYGON((...))`` unless `force_multipolygon` is set;
    everything else becomes ``MULTIPOLYGON(((...), (...)), ((...)))``. There is no space between the
    keyword and the first parenthesis.

    `default_value` is returned whole when the geometry is empty, a polygon has no rings, or any
    ring is empty, does not end on its first point, or holds an infinite or NaN coordinate. Rings
    are never closed automatically.
    """
    reason = _invalid_reason(geometry)
    if reason:
        log.debug("Cannot serialize geometry as WKT (%s), returning %r", reason, default_value)
        return default_value

    if force_multipolygon or is_multipolygon(geometry):
        return MULTIPOLYGON_KEY + '(%s)' % ', '.join(_format_polygon(polygon) for polygon in geometry)

    return POLYGON_KEY + _format_polygon(geometry[0])


def sanitize_wkt_string(text):
    """
    Drops line breaks, normalizes ``),(`` to ``), (`` and trims surrounding whitespace.

    :func:`parse_wkt` does not need this; it is meant for producing comparable text.
    """
    return text.replace('),(', '), (').replace('\r', '').replace('\n', '').strip()
