"""Illuminated fraction of the disk and visual magnitude of a planet.

Distances are in AU and angles in radians.
"""

import math

from meeus.base import horner, j2000_century

_P = math.pi / 180


def phase_angle(r, delta, big_r):
    """Phase angle from planet-Sun r, planet-Earth delta and Sun-Earth big_r."""
    return math.acos((r * r + delta * delta - big_r * big_r) / (2 * r * delta))


def fraction(r, delta, big_r):
    """Illuminated fraction of the disk from the three distances."""
    s = r + delta
    return (s * s - big_r * big_r) / (4 * r * delta)


def phase_angle2(lon, lat, r, lon0, r0, delta):
    """Phase angle from heliocentric coordinates of the planet and Earth."""
    return math.acos((r - r0 * math.cos(lat) * math.cos(lon - lon0)) / delta)


def phase_angle3(lon, lat, x, y, z, delta):
    """Phase angle from heliocentric lon, lat and rectangular x, y, z."""
    sl, cl = math.sin(lon), math.cos(lon)
    sb, cb = math.sin(lat), math.cos(lat)
    return math.acos((x * cb * cl + y * cb * sl + z * sb) / delta)


def fraction_venus(jde):
    """Approximate illuminated fraction of Venus."""
    t = j2000_century(jde)
    v = 261.51 * _P + 22518.443 * _P * t
    m = 177.53 * _P + 35999.05 * _P * t
    n = 50.42 * _P + 58517.811 * _P * t
    w = v + 1.91 * _P * math.sin(m) + 0.78 * _P * math.sin(n)
    d = math.sqrt(1.52321 + 1.44666 * math.cos(w))
    s = 0.72333 + d
    return (s * s - 1) / 2.89332 / d


def _log_rd(r, delta):
    return 5 * math.log10(r * delta)


def mercury(r, delta, i):
    """Visual magnitude of Mercury at phase angle i."""
    s = math.degrees(i) - 50
    return 1.16 + _log_rd(r, delta) + (0.02838 + 0.0001023 * s) * s


def venus(r, delta, i):
    """Visual magnitude of Venus at phase angle i."""
    d = math.degrees(i)
    return -4 + _log_rd(r, delta) + (0.01322 + 0.0000004247 * d * d) * d


def mars(r, delta, i):
    """Visual magnitude of Mars at phase angle i."""
    return -1.3 + _log_rd(r, delta) + 0.01486 * math.degrees(i)


def jupiter(r, delta):
    """Visual magnitude of Jupiter."""
    return -8.93 + _log_rd(r, delta)


def saturn(r, delta, b, du):
    """Visual magnitude of Saturn.

    b is the Saturnicentric latitude of the Earth referred to the ring plane;
    du is the difference of Saturnicentric longitudes of Sun and Earth.
    """
    s = abs(math.sin(b))
    return -8.68 + _log_rd(r, delta) + 0.044 * abs(math.degrees(du)) - 2.6 * s + 1.25 * s * s


def uranus(r, delta):
    """Visual magnitude of Uranus."""
    return -6.85 + _log_rd(r, delta)


def neptune(r, delta):
    """Visual magnitude of Neptune."""
    return -7.05 + _log_rd(r, delta)


def mercury84(r, delta, i):
    """Visual magnitude of Mercury, Astronomical Almanac 1984 formula."""
    return horner(math.degrees(i), -0.42 + _log_rd(r, delta), 0.038, -0.000273, 0.000002)


def venus84(r, delta, i):
    """Visual magnitude of Venus, Astronomical Almanac 1984 formula."""
    return horner(math.degrees(i), -4.4 + _log_rd(r, delta), 0.0009, -0.000239, 0.00000065)


def mars84(r, delta, i):
    """Visual magnitude of Mars, Astronomical Almanac 1984 formula."""
    return -1.52 + _log_rd(r, delta) + 0.016 * math.degrees(i)


def jupiter84(r, delta, i):
    """Visual magnitude of Jupiter, Astronomical Almanac 1984 formula."""
    return -9.4 + _log_rd(r, delta) + 0.005 * math.degrees(i)


def saturn84(r, delta, b, du):
    """Visual magnitude of Saturn, Astronomical Almanac 1984 formula."""
    s = abs(math.sin(b))
    return -8.88 + _log_rd(r, delta) + 0.044 / abs(math.degrees(du)) - 2.6 * s + 1.25 * s * s


def uranus84(r, delta):
    """Visual magnitude of Uranus, Astronomical Almanac 1984 formula."""
    return -7.19 + _log_rd(r, delta)


def neptune84(r, delta):
    """Visual magnitude of Neptune, Astronomical Almanac 1984 formula."""
    return -6.87 + _log_rd(r, delta)


def pluto84(r, delta):
    """Visual magnitude of Pluto, Astronomical Almanac 1984 formula."""
    return -1 + _log_rd(r, delta)