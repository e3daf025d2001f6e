# Copyright 2016 DataStax, Inc.

from geosystems.operations import calculate_centroid
from geosystems.util import copy_geometry, geometry_equals, iter_points, iter_rings, to_polygons
from geosystems.wkt import parse_wkt, to_wkt_string, DEFAULT_FALLBACK, EMPTY_MULTIPOLYGON


class MultiPolygon(object):
    """
    Several polygons handled as a single entity.

    Construct from a WKT string (unparseable text gives an empty geometry) or from nested
    polygon/ring/point lists, which are kept as given without copying or validation.
    """

    geometry = None
    """
    Nested lists: polygons, each a list of rings, each a list of points. Free to mutate; validity is
    only checked by :meth:`to_wkt_string`.
    """

    def __init__(self, source=None):
        if source is None:
            self.geometry = []
        elif isinstance(source, str):
            self.geometry = parse_wkt(source)
        elif isinstance(source, list):
            self.geometry = source
        else:
            raise TypeError("Could not create MultiPolygon from %r" % (source,))

    @classmethod
    def from_wkt_string(cls, text):
        return cls(parse_wkt(text))

    @property
    def rings(self):
        """
        All rings of all polygons.
        """
        return list(iter_rings(self.geometry))

    @property
    def points(self):
        """
        All points of all rings of all polygons.
        """
        return list(iter_points(self.geometry))

    @property
    def polygons(self):
        return to_polygons(self.geometry)

    @property
    def centroid(self):
        """
        Area-weighted centroid, see :func:`.calculate_centroid`.
        """
        return calculate_centroid(self.geometry)

    @property
    def is_empty(self):
        return not self.geometry

    def clone_as_multipolygon(self):
        """
        Returns a new :class:`.MultiPolygon` whose geometry shares no list with this one.
        """
        return self.__class__(copy_geometry(self.geometry))

    def __copy__(self):
        return self.clone_as_multipolygon()

    def __deepcopy__(self, memo):
        return self.clone_as_multipolygon()

    def equals_other_geometry(self, other):
        """
        Compares polygon by polygon, ring by ring and point by point, in order. `other` may be a
        :class:`.MultiPolygon` or nested lists; ``None`` gives False.
        """
        if isinstance(other, MultiPolygon):
            other = other.geometry
        return geometry_equals(self.geometry, other)

    def to_wkt_string(self, force_multipolygon=False, default_value=DEFAULT_FALLBACK):
        return to_wkt_string(self.geometry, force_multipolygon, default_value)

    def __eq__(self, other):
        if not isinstance(other, MultiPolygon):
            return NotImplemented
        return self.equals_other_geometry(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __str__(self):
        return self.to_wkt_string(force_multipolygon=True, default_value=EMPTY_MULTIPOLYGON)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__,
                           [[[tuple(p) for p in ring] for ring in polygon] for polygon in self.geometry])
