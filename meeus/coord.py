"""Transformations between ecliptic, equatorial, horizontal and galactic
coordinates.

Angles are in radians.  Sidereal time st is Greenwich sidereal time
expressed as an angle in radians; it must be apparent if the coordinates
are apparent.  Observer longitude is measured positively westward.
"""

import math
from dataclasses import dataclass

from meeus.base import pmod, ra_from_hms

_TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class Obliquity:
    """Sine and cosine of the obliquity of the ecliptic."""

    s: float
    c: float

    @classmethod
    def from_angle(cls, eps):
        """Build from the obliquity angle eps."""
        return cls(math.sin(eps), math.cos(eps))


def eq_to_ecl(ra, dec, s_eps, c_eps):
    """Convert equatorial coordinates to ecliptic (lon, lat)."""
    sa, ca = math.sin(ra), math.cos(ra)
    sd, cd = math.sin(dec), math.cos(dec)
    lon = math.atan2(sa * c_eps + (sd / cd) * s_eps, ca)
    lat = math.asin(sd * c_eps - cd * s_eps * sa)
    return lon, lat


def ecl_to_eq(lon, lat, s_eps, c_eps):
    """Convert ecliptic coordinates to equatorial (ra, dec)."""
    sl, cl = math.sin(lon), math.cos(lon)
    sb, cb = math.sin(lat), math.cos(lat)
    ra = pmod(math.atan2(sl * c_eps - (sb / cb) * s_eps, cl), _TWO_PI)
    dec = math.asin(sb * c_eps + cb * s_eps * sl)
    return ra, dec


def hz_to_eq(az, alt, lat, lon, st):
    """Convert horizontal coordinates to equatorial (ra, dec)."""
    sa, ca = math.sin(az), math.cos(az)
    sh, ch = math.sin(alt), math.cos(alt)
    sp, cp = math.sin(lat), math.cos(lat)
    h = math.atan2(sa, ca * sp + sh / ch * cp)
    ra = pmod(st - lon - h, _TWO_PI)
    dec = math.asin(sp * sh - cp * ch * ca)
    return ra, dec


def eq_to_hz(ra, dec, lat, lon, st):
    """Convert equatorial coordinates to horizontal (az, alt).

    Azimuth is measured westward from the South.
    """
    h = st - lon - ra
    sh, ch = math.sin(h), math.cos(h)
    sp, cp = math.sin(lat), math.cos(lat)
    sd, cd = math.sin(dec), math.cos(dec)
    az = math.atan2(sh, ch * sp - (sd / cd) * cp)
    alt = math.asin(sp * sd + cp * cd * ch)
    return az, alt


GALACTIC_NORTH_1950_RA = ra_from_hms(12, 49, 0)
GALACTIC_NORTH_1950_DEC = math.radians(27.4)
GALACTIC_0_LON_1950 = math.radians(33)
"""Origin of galactic longitudes relative to the galactic ascending node."""


def gal_to_eq(lon, lat):
    """Convert galactic coordinates to equatorial (ra, dec) at B1950.0."""
    a = lon - GALACTIC_0_LON_1950 - math.pi / 2
    sdl, cdl = math.sin(a), math.cos(a)
    sg, cg = math.sin(GALACTIC_NORTH_1950_DEC), math.cos(GALACTIC_NORTH_1950_DEC)
    sb, cb = math.sin(lat), math.cos(lat)
    y = math.atan2(sdl, cdl * sg - (sb / cb) * cg)
    ra = pmod(y + GALACTIC_NORTH_1950_RA - math.pi, _TWO_PI)
    dec = math.asin(sb * sg + cb * cg * cdl)
    return ra, dec


def eq_to_gal(ra, dec):
    """Convert equatorial coordinates at B1950.0 to galactic (lon, lat)."""
    da = GALACTIC_NORTH_1950_RA - ra
    sda, cda = math.sin(da), math.cos(da)
    sg, cg = math.sin(GALACTIC_NORTH_1950_DEC), math.cos(GALACTIC_NORTH_1950_DEC)
    sd, cd = math.sin(dec), math.cos(dec)
    x = math.atan2(sda, cda * sg - (sd / cd) * cg)
    lon = pmod(GALACTIC_0_LON_1950 + 1.5 * math.pi - x, _TWO_PI)
    lat = math.asin(sd * sg + cd * cg * cda)
    return lon, lat


@dataclass(frozen=True)
class Ecliptic:
    """Ecliptic longitude and latitude."""

    lon: float
    lat: float

    def to_equatorial(self, obliquity):
        """Equatorial coordinates for the given Obliquity."""
        return Equatorial(*ecl_to_eq(self.lon, self.lat, obliquity.s, obliquity.c))


@dataclass(frozen=True)
class Equatorial:
    """Right ascension and declination."""

    ra: float
    dec: float

    def to_ecliptic(self, obliquity):
        """Ecliptic coordinates for the given Obliquity."""
        return Ecliptic(*eq_to_ecl(self.ra, self.dec, obliquity.s, obliquity.c))

    def to_horizontal(self, observer, st):
        """Horizontal coordinates for an observer (a globe.Coord) at sidereal time st."""
        return Horizontal(*eq_to_hz(self.ra, self.dec, observer.lat, observer.lon, st))

    def to_galactic(self):
        """Galactic coordinates; self must be referred to B1950.0."""
        return Galactic(*eq_to_gal(self.ra, self.dec))


@dataclass(frozen=True)
class Horizontal:
    """Azimuth (westward from South) and altitude."""

    az: float
    alt: float

    def to_equatorial(self, observer, st):
        """Equatorial coordinates for an observer at sidereal time st."""
        return Equatorial(*hz_to_eq(self.az, self.alt, observer.lat, observer.lon, st))


@dataclass(frozen=True)
class Galactic:
    """Galactic longitude and latitude."""

    lon: float
    lat: float

    def to_equatorial(self):
        """Equatorial coordinates referred to B1950.0."""
        return Equatorial(*gal_to_eq(self.lon, self.lat))