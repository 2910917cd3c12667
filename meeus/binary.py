"""Positions of the components of binary stars.

Angles are in radians.
"""

import math

from meeus.base import pmod

_TWO_PI = 2 * math.pi


def mean_anomaly(year, t, period):
    """Mean anomaly at a decimal year.

    t is the time of periastron as a decimal year; period is the period of
    revolution in mean solar years.
    """
    n = _TWO_PI / period
    return pmod(n * (year - t), _TWO_PI)


def position(e, a, i, node, peri, ecc_anomaly):
    """Return (theta, rho): apparent position angle and angular distance.

    e is the eccentricity, a the angular apparent semimajor axis, i the
    inclination, node the position angle of the ascending node, peri the
    longitude of periastron and ecc_anomaly the eccentric anomaly.
    """
    r = a * (1 - e * math.cos(ecc_anomaly))
    nu = 2 * math.atan(math.sqrt((1 + e) / (1 - e)) * math.tan(ecc_anomaly / 2))
    snw, cnw = math.sin(nu + peri), math.cos(nu + peri)
    num = snw * math.cos(i)
    theta = pmod(math.atan2(num, cnw) + node, _TWO_PI)
    rho = r * math.sqrt(num * num + cnw * cnw)
    return theta, rho


def apparent_eccentricity(e, i, peri):
    """Apparent eccentricity of a binary star's orbit."""
    ci = math.cos(i)
    sw, cw = math.sin(peri), math.cos(peri)
    a = (1 - e * e * cw * cw) * ci * ci
    b = e * e * sw * cw * ci
    c = 1 - e * e * sw * sw
    d = a - c
    sd = math.sqrt(d * d + 4 * b * b)
    return math.sqrt(2 * sd / (a + c + sd))