# Copyright 2016 DataStax, Inc.
#
# Licensed under the DataStax DSE Driver License;
# you may not use this file except in compliance with the License.
#
# You may obtain a copy of the License at
#
# http://www.datastax.com/terms/datastax-dse-driver-license-terms

from collections import namedtuple
from itertools import chain


class Point(namedtuple('Point', ('x', 'y'))):
    """
    Immutable 2D coordinate. Compares exactly, and equal to a plain ``(x, y)`` tuple.
    """

    __slots__ = ()

    def __new__(cls, x=0.0, y=0.0):
        return super(Point, cls).__new__(cls, x, y)

    def __str__(self):
        return "POINT (%r %r)" % (self.x, self.y)

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__, self.x, self.y)


def _as_point(value):
    if isinstance(value, Point):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise TypeError("Could not create Point from %r" % (value,))
    return Point(x, y)


class Ring(object):
    # no validation, no implicit closing; validity is only checked when serializing

    def __init__(self, coords=()):
        self.coords = tuple(_as_point(c) for c in coords)

    @property
    def is_empty(self):
        return not self.coords

    def is_closed(self):
        return bool(self.coords) and self.coords[0] == self.coords[-1]

    @property
    def is_valid(self):
        """
        True if the ring holds at least one point and its first point equals its last.
        """
        return not self.is_empty and self.is_closed()

    def __len__(self):
        return len(self.coords)

    def __iter__(self):
        return iter(self.coords)

    def __eq__(self, other):
        if not isinstance(other, Ring):
            return NotImplemented
        return self.coords == other.coords

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash(self.coords)

    def __str__(self):
        if not self.coords:
            return "LINEARRING EMPTY"
        return "LINEARRING (%s)" % ', '.join("%r %r" % (x, y) for x, y in self.coords)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, [tuple(p) for p in self.coords])


class Polygon(object):
    """
    One exterior :class:`.Ring` and an ordered sequence of interior rings (holes).
    """

    def __init__(self, exterior=(), interiors=None):
        self.exterior = exterior if isinstance(exterior, Ring) else Ring(exterior)
        self.interiors = tuple(r if isinstance(r, Ring) else Ring(r) for r in interiors) if interiors else tuple()

    @classmethod
    def from_rings(cls, rings):
        """
        Builds a polygon from a nested ring list; the first ring is the exterior.
        """
        rings = list(rings)
        if not rings:
            return cls()
        return cls(rings[0], rings[1:])

    @property
    def rings(self):
        return (self.exterior,) + self.interiors

    @property
    def is_empty(self):
        return self.exterior.is_empty

    def to_rings(self):
        return [list(ring.coords) for ring in self.rings]

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        return self.exterior == other.exterior and self.interiors == other.interiors

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((self.exterior, self.interiors))

    def __str__(self):
        from geosystems.wkt import to_wkt_string
        return to_wkt_string([self.to_rings()])

    def __repr__(self):
        return "%s(%r, %r)" % (self.__class__.__name__,
                               [tuple(p) for p in self.exterior.coords],
                               [[tuple(p) for p in ring.coords] for ring in self.interiors])


def copy_geometry(geometry):
    """
    Returns a structural copy of a nested geometry: new lists at every level, points copied as values.
    """
    return [[[_as_point(point) for point in ring] for ring in polygon] for polygon in geometry]


def geometry_equals(geometry, other):
    """
    Order-sensitive, exact comparison of two nested geometries. ``None`` never compares equal.
    """
    if geometry is None or other is None:
        return False

    if len(geometry) != len(other):
        return False

    for polygon, other_polygon in zip(geometry, other):
        if len(polygon) != len(other_polygon):
            return False
        for ring, other_ring in zip(polygon, other_polygon):
            if len(ring) != len(other_ring):
                return False
            for point, other_point in zip(ring, other_ring):
                if tuple(point) != tuple(other_point):
                    return False

    return True


def to_polygons(geometry):
    return [Polygon.from_rings(polygon) for polygon in geometry]


def from_polygons(polygons):
    return [polygon.to_rings() for polygon in polygons]


def iter_rings(geometry):
    return chain.from_iterable(geometry)


def iter_points(geometry):
    return chain.from_iterable(iter_rings(geometry))
