"""Constants, time scales and helper functions shared by the other modules.

Angles are plain floats in radians throughout the package.
"""

import math

K = 0.01720209895
"""Gaussian gravitational constant."""

AU = 149597870
"""One astronomical unit in km."""

S_OBL_J2000 = 0.397777156
"""Sine of the obliquity of the ecliptic at J2000."""

C_OBL_J2000 = 0.917482062
"""Cosine of the obliquity of the ecliptic at J2000."""

J_MOD = 2400000.5
"""Julian date of the modified Julian date epoch."""

J2000 = 2451545.0
J1900 = 2415020.0
B1900 = 2415020.3135
B1950 = 2433282.4235

JULIAN_YEAR = 365.25
JULIAN_CENTURY = 36525
BESSELIAN_YEAR = 365.2421988

SMALL_ANGLE = math.radians(10 / 60)
"""Threshold for switching from trigonometric to Pythagorean formulas."""

COS_SMALL_ANGLE = math.cos(SMALL_ANGLE)


def light_time(distance):
    """Return light travel time in days for a distance in AU."""
    return 0.0057755183 * distance


def julian_year_to_jde(jy):
    """Return the Julian ephemeris day for a Julian year."""
    return J2000 + JULIAN_YEAR * (jy - 2000)


def jde_to_julian_year(jde):
    """Return the Julian year for a Julian ephemeris day."""
    return 2000 + (jde - J2000) / JULIAN_YEAR


def besselian_year_to_jde(by):
    """Return the Julian ephemeris day for a Besselian year."""
    return B1900 + BESSELIAN_YEAR * (by - 1900)


def jde_to_besselian_year(jde):
    """Return the Besselian year for a Julian ephemeris day."""
    return 1900 + (jde - B1900) / BESSELIAN_YEAR


def j2000_century(jde):
    """Return the number of Julian centuries since J2000."""
    return (jde - J2000) / JULIAN_CENTURY


def hav(a):
    """Haversine of angle a (radians)."""
    return 0.5 * (1 - math.cos(a))


def horner(x, *args):
    """Evaluate a polynomial at x; args are coefficients, constant term first."""
    if not args:
        raise ValueError("horner requires at least one coefficient")
    y = 0.0
    first = True
    for c in reversed(args):
        if first:
            y = c
            first = False
        else:
            y = y * x + c
    return y


def floor_div(x, y):
    """Integer floor of x / y; raises ZeroDivisionError when y is 0."""
    return x // y


def cmp(a, b):
    """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def pmod(x, y):
    """Return x modulo y, in the range [0, y) for positive y."""
    r = math.fmod(x, y)
    if r < 0:
        r += y
    return r


def from_sexa(neg, d, m, s):
    """Combine sexagesimal components into one value; negate if neg is true."""
    v = d + m / 60 + s / 3600
    return -v if neg else v


def angle_from_dms(neg, d, m, s):
    """Return an angle in radians from degrees, minutes and seconds."""
    return math.radians(from_sexa(neg, d, m, s))


def angle_from_sec(sec):
    """Return an angle in radians from arc seconds."""
    return math.radians(sec / 3600)


def ra_from_hms(h, m, s):
    """Return a right ascension in radians from hours, minutes and seconds."""
    return pmod(math.radians(from_sexa(False, h, m, s) * 15), 2 * math.pi)


def illuminated(i):
    """Illuminated fraction of a body's disk for phase angle i."""
    return (1 + math.cos(i)) * 0.5


def limb(ra, dec, ra0, dec0):
    """Position angle of the midpoint of the illuminated limb.

    ra, dec locate the body; ra0, dec0 are apparent coordinates of the Sun.
    """
    sd, cd = math.sin(dec), math.cos(dec)
    sd0, cd0 = math.sin(dec0), math.cos(dec0)
    sa, ca = math.sin(ra0 - ra), math.cos(ra0 - ra)
    chi = math.atan2(cd0 * sa, sd0 * cd - cd0 * sd * ca)
    if chi < 0:
        chi += 2 * math.pi
    return chi