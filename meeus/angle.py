"""Angular separation and relative position of two bodies.

Coordinates may be right ascension and declination, or longitude and
latitude, all in radians.
"""

import math

from meeus.base import COS_SMALL_ANGLE, hav


def sep(r1, d1, r2, d2):
    """Angular separation between two bodies.

    Numerically naive; patched for small separations but unstable near π.
    """
    sd1, cd1 = math.sin(d1), math.cos(d1)
    sd2, cd2 = math.sin(d2), math.cos(d2)
    cd = sd1 * sd2 + cd1 * cd2 * math.cos(r1 - r2)
    if cd < COS_SMALL_ANGLE:
        return math.acos(cd)
    return math.hypot((r2 - r1) * cd1, d2 - d1)


def sep_hav(r1, d1, r2, d2):
    """Angular separation using the haversine formula."""
    return 2 * math.asin(
        math.sqrt(hav(d2 - d1) + math.cos(d1) * math.cos(d2) * hav(r2 - r1))
    )


def sep_pauwels(r1, d1, r2, d2):
    """Angular separation by a numerically stable formula."""
    sd1, cd1 = math.sin(d1), math.cos(d1)
    sd2, cd2 = math.sin(d2), math.cos(d2)
    cdr = math.cos(r2 - r1)
    x = cd1 * sd2 - sd1 * cd2 * cdr
    y = cd2 * math.sin(r2 - r1)
    z = sd1 * sd2 + cd1 * cd2 * cdr
    return math.atan2(math.hypot(x, y), z)


def relative_position(r1, d1, r2, d2):
    """Position angle of one body with respect to another.

    Measured counter-clockwise from North.
    """
    sdr, cdr = math.sin(r2 - r1), math.cos(r2 - r1)
    sd2, cd2 = math.sin(d2), math.cos(d2)
    return math.atan2(sdr, cd2 * math.tan(d1) - sd2 * cdr)