"""The Earth's globe as an ellipsoid of revolution."""

import math
from dataclasses import dataclass

from meeus.base import angle_from_sec

ROTATION_RATE_1996_5 = 7.292114992e-5
"""Rotational angular velocity of the Earth at epoch 1996.5, radian/second."""


@dataclass(frozen=True)
class Coord:
    """Geographic coordinates; longitude is positive westward."""

    lat: float
    lon: float


def _sincos2(x):
    s, c = math.sin(x), math.cos(x)
    return s * s, c * c


@dataclass(frozen=True)
class Ellipsoid:
    """Ellipsoid of revolution with equatorial radius er and flattening fl."""

    er: float
    fl: float

    def a(self):
        """Equatorial radius."""
        return self.er

    def b(self):
        """Polar radius."""
        return self.er * (1 - self.fl)

    def eccentricity(self):
        """Eccentricity of a meridian."""
        return math.sqrt((2 - self.fl) * self.fl)

    def parallax_constants(self, lat, height):
        """Return (ρ sin φ′, ρ cos φ′) for latitude and height in meters."""
        boa = 1 - self.fl
        u = math.atan(boa * math.tan(lat))
        su, cu = math.sin(u), math.cos(u)
        s, c = math.sin(lat), math.cos(lat)
        hoa = height * 1e-3 / self.er
        return su * boa + hoa * s, cu + hoa * c

    def radius_at_latitude(self, lat):
        """Radius of the parallel of latitude lat."""
        s, c = math.sin(lat), math.cos(lat)
        return self.a() * c / math.sqrt(1 - (2 - self.fl) * self.fl * s * s)

    def radius_of_curvature(self, lat):
        """Radius of curvature of the meridian at latitude lat."""
        s = math.sin(lat)
        e2 = (2 - self.fl) * self.fl
        return self.a() * (1 - e2) / math.pow(1 - e2 * s * s, 1.5)

    def distance(self, c1, c2):
        """Distance between two points along the surface of the ellipsoid."""
        s2f, c2f = _sincos2((c1.lat + c2.lat) / 2)
        s2g, c2g = _sincos2((c1.lat - c2.lat) / 2)
        s2l, c2l = _sincos2((c1.lon - c2.lon) / 2)
        s = s2g * c2l + c2f * s2l
        c = c2g * c2l + s2f * s2l
        w = math.atan(math.sqrt(s / c))
        r = math.sqrt(s * c) / w
        d = 2 * w * self.er
        h1 = (3 * r - 1) / (2 * c)
        h2 = (3 * r + 1) / (2 * s)
        return d * (1 + self.fl * (h1 * s2f * c2g - h2 * c2f * s2g))


EARTH76 = Ellipsoid(er=6378.14, fl=1 / 298.257)
"""IAU 1976 values, radius in km."""


def rho(lat):
    """Distance from Earth center at latitude lat, in equatorial radii."""
    return 0.9983271 + 0.0016764 * math.cos(2 * lat) - 0.0000035 * math.cos(4 * lat)


def one_degree_of_longitude(rp):
    """Length of one degree along a parallel of radius rp."""
    return rp * math.pi / 180


def one_degree_of_latitude(rm):
    """Length of one degree along a meridian of curvature radius rm."""
    return rm * math.pi / 180


def geocentric_latitude_difference(lat):
    """Geographic minus geocentric latitude for geographic latitude lat."""
    return angle_from_sec(692.73 * math.sin(2 * lat) - 1.16 * math.sin(4 * lat))


def approx_angular_distance(p1, p2):
    """Cosine of the angle between two points on the globe."""
    s1, c1 = math.sin(p1.lat), math.cos(p1.lat)
    s2, c2 = math.sin(p2.lat), math.cos(p2.lat)
    return s1 * s2 + c1 * c2 * math.cos(p1.lon - p2.lon)


def approx_linear_distance(d):
    """Linear distance in km for a geocentric angular distance on a sphere."""
    return 6371 * d