# Copyright 2016 DataStax, Inc.
#
# Licensed under the DataStax DSE Driver License;
# you may not use this file except in compliance with the License.
#
# You may obtain a copy of the License at
#
# http://www.datastax.com/terms/datastax-dse-driver-license-terms
"""
Pure functions over nested polygon/ring/point geometry: bounds, rotation, translation, area and
centroid.

Every function returns new lists and leaves its input untouched, except where noted for a zero
translation.
"""

import logging
import math

from geosystems.util import Point, iter_points
from geosystems.wkt import parse_wkt, to_wkt_string

log = logging.getLogger(__name__)

ORIGIN = Point(0.0, 0.0)


def points_to_bounds(geometry):
    """
    Returns the ``(min_bounds, max_bounds)`` corners of the axis-aligned box around all points.

    An empty geometry is logged as an error and gives two zero points.
    """
    if not geometry:
        log.error("Geometry is empty, returning zero bounds instead")
        return ORIGIN, ORIGIN

    xs = []
    ys = []
    for x, y in iter_points(geometry):
        xs.append(x)
        ys.append(y)

    if not xs:
        log.error("Geometry has no points, returning zero bounds instead")
        return ORIGIN, ORIGIN

    return Point(min(xs), min(ys)), Point(max(xs), max(ys))


def center_from_bounds(min_bounds, max_bounds):
    return Point((min_bounds[0] + max_bounds[0]) / 2.0, (min_bounds[1] + max_bounds[1]) / 2.0)


def normalize_degrees(degrees):
    """
    Maps any angle into ``[0, 360)``: -5 gives 355, 370 gives 10.
    """
    degrees %= 360
    if degrees < 0:
        degrees += 360
    return degrees


def _map_points(geometry, func):
    return [[[func(point) for point in ring] for ring in polygon] for polygon in geometry]


def rotate_points(geometry, degrees, clockwise=False, origin=ORIGIN):
    """
    Rotates every point around `origin`. Positive `degrees` turn counter-clockwise unless
    `clockwise` is set.
    """
    radians = math.radians(normalize_degrees(degrees))
    if clockwise:
        radians = -radians

    cos = math.cos(radians)
    sin = math.sin(radians)
    ox, oy = origin

    def rotate(point):
        dx = point[0] - ox
        dy = point[1] - oy
        return Point(dx * cos - dy * sin + ox, dx * sin + dy * cos + oy)

    return _map_points(geometry, rotate)


def rotate_wkt_string_as_points(text, degrees, clockwise=False, origin=ORIGIN):
    return rotate_points(parse_wkt(text), degrees, clockwise, origin)


def rotate_wkt_string(text, degrees, clockwise=False, origin=ORIGIN, **kwargs):
    """
    Rotates a WKT geometry and serializes the result. Extra keyword arguments go to
    :func:`.to_wkt_string`.
    """
    return to_wkt_string(rotate_wkt_string_as_points(text, degrees, clockwise, origin), **kwargs)


def translate(geometry, translation):
    """
    Moves every point by `translation`. A zero translation returns `geometry` itself.
    """
    tx, ty = translation
    if tx == 0 and ty == 0:
        return geometry

    return _map_points(geometry, lambda point: Point(point[0] + tx, point[1] + ty))


def translate_wkt_string(text, translation, **kwargs):
    """
    Moves a WKT geometry by `translation`. A zero translation returns `text` unchanged, without
    reformatting it.
    """
    tx, ty = translation
    if tx == 0 and ty == 0:
        return text

    return to_wkt_string(translate(parse_wkt(text), translation), **kwargs)


def _shoelace_terms(ring):
    count = len(ring)
    for i in range(count):
        x1, y1 = ring[i]
        x2, y2 = ring[(i + 1) % count]
        yield x1, y1, x2, y2, x1 * y2 - x2 * y1


def calculate_ring_area(ring):
    """
    Signed shoelace area; positive for counter-clockwise rings, negative for clockwise ones.
    """
    return sum(cross for _, _, _, _, cross in _shoelace_terms(ring)) / 2.0


def calculate_ring_centroid(ring):
    """
    Centroid of the area enclosed by `ring`, or ``None`` when that area is zero.
    """
    area = 0.0
    cx = 0.0
    cy = 0.0
    for x1, y1, x2, y2, cross in _shoelace_terms(ring):
        area += cross
        cx += (x1 + x2) * cross
        cy += (y1 + y2) * cross

    if area == 0:
        return None

    # area above is twice the signed area, hence 3 instead of 6
    return Point(cx / (3.0 * area), cy / (3.0 * area))


def _polygon_area(polygon):
    area = 0.0
    for i, ring in enumerate(polygon):
        ring_area = abs(calculate_ring_area(ring))
        area += ring_area if i == 0 else -ring_area
    return area


def calculate_surface_area(geometry):
    """
    Total area: per polygon the exterior ring area minus the absolute area of each hole. Always
    positive; 0 for an empty geometry.
    """
    return abs(sum(_polygon_area(polygon) for polygon in geometry))


def calculate_centroid(geometry):
    """
    Area-weighted centroid of all polygons.

    Each polygon contributes the centroid of its exterior ring, weighted by its surface area (holes
    subtracted). Polygons without area are skipped; if nothing has area the result is ``(0, 0)``.
    """
    total_area = 0.0
    sum_x = 0.0
    sum_y = 0.0
    for polygon in geometry:
        if not polygon:
            continue
        centroid = calculate_ring_centroid(polygon[0])
        area = _polygon_area(polygon)
        if centroid is None or area == 0:
            continue
        sum_x += centroid.x * area
        sum_y += centroid.y * area
        total_area += area

    if total_area == 0:
        return ORIGIN

    return Point(sum_x / total_area, sum_y / total_area)
