# Copyright 2016 DataStax, Inc.

__version_info__ = (1, 0, 0)
__version__ = '.'.join(map(str, __version_info__))

from geosystems.util import Point, Ring, Polygon, copy_geometry, geometry_equals  # noqa
from geosystems.wkt import (parse_wkt, is_multipolygon, to_wkt_string, sanitize_wkt_string,  # noqa
                            EMPTY_POINT, EMPTY_LINESTRING, EMPTY_MULTIPOINT, EMPTY_POLYGON,
                            EMPTY_MULTILINESTRING, EMPTY_MULTIPOLYGON, EMPTY_GEOMETRYCOLLECTION)
from geosystems.multipolygon import MultiPolygon  # noqa
