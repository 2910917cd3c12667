"""Perigee and apogee of the Moon.

Years are decimal years; results are Julian ephemeris days, and parallaxes
are angles in radians.
"""

import math
from dataclasses import dataclass

from meeus.base import angle_from_sec, horner

_CK = 1 / 1325.55
"""Conversion factor from k to T."""

_P = math.pi / 180


def _mean(t):
    return horner(t, 2451534.6698, 27.55454989 / _CK, -0.0006691, -0.000001098, 0.0000000052)


def _snap(year, half):
    """Return k at half-integer offset `half` nearest the decimal year."""
    k = (year - 1999.97) * 13.2555
    return math.floor(k - half + 0.5) + half


@dataclass(frozen=True)
class _Arguments:
    """Time and fundamental arguments for one apsis."""

    t: float
    d: float
    m: float
    f: float

    @classmethod
    def near(cls, year, half):
        k = _snap(year, half)
        t = k * _CK
        d = horner(t, 171.9179 * _P, 335.9106046 * _P / _CK,
                   -0.0100383 * _P, -0.00001156 * _P, 0.000000055 * _P)
        m = horner(t, 347.3477 * _P, 27.1577721 * _P / _CK,
                   -0.000813 * _P, -0.000001 * _P)
        f = horner(t, 316.6109 * _P, 364.5287911 * _P / _CK,
                   -0.0125053 * _P, -0.0000148 * _P)
        return cls(t, d, m, f)

    def perigee_correction(self):
        T, D, M, F = self.t, self.d, self.m, self.f
        sin = math.sin
        return (
            -1.6769 * sin(2 * D)
            + 0.4589 * sin(4 * D)
            - 0.1856 * sin(6 * D)
            + 0.0883 * sin(8 * D)
            + (-0.0773 + 0.00019 * T) * sin(2 * D - M)
            + (0.0502 - 0.00013 * T) * sin(M)
            - 0.046 * sin(10 * D)
            + (0.0422 - 0.00011 * T) * sin(4 * D - M)
            - 0.0256 * sin(6 * D - M)
            + 0.0253 * sin(12 * D)
            + 0.0237 * sin(D)
            + 0.0162 * sin(8 * D - M)
            - 0.0145 * sin(14 * D)
            + 0.0129 * sin(2 * F)
            - 0.0112 * sin(3 * D)
            - 0.0104 * sin(10 * D - M)
            + 0.0086 * sin(16 * D)
            + 0.0069 * sin(12 * D - M)
            + 0.0066 * sin(5 * D)
            - 0.0053 * sin(2 * (D + F))
            - 0.0052 * sin(18 * D)
            - 0.0046 * sin(14 * D - M)
            - 0.0041 * sin(7 * D)
            + 0.004 * sin(2 * D + M)
            + 0.0032 * sin(20 * D)
            - 0.0032 * sin(D + M)
            + 0.0031 * sin(16 * D - M)
            - 0.0029 * sin(4 * D + M)
            + 0.0027 * sin(9 * D)
            + 0.0027 * sin(4 * D + 2 * F)
            - 0.0027 * sin(2 * (D - M))
            + 0.0024 * sin(4 * D - 2 * M)
            - 0.0021 * sin(6 * D - 2 * M)
            - 0.0021 * sin(22 * D)
            - 0.0021 * sin(18 * D - M)
            + 0.0019 * sin(6 * D + M)
            - 0.0018 * sin(11 * D)
            - 0.0014 * sin(8 * D + M)
            - 0.0014 * sin(4 * D - 2 * F)
            - 0.0014 * sin(6 * D + 2 * F)
            + 0.0014 * sin(3 * D + M)
            - 0.0014 * sin(5 * D + M)
            + 0.0013 * sin(13 * D)
            + 0.0013 * sin(20 * D - M)
            + 0.0011 * sin(3 * D + 2 * M)
            - 0.0011 * sin(2 * (2 * D + F - M))
            - 0.001 * sin(D + 2 * M)
            - 0.0009 * sin(22 * D - M)
            - 0.0008 * sin(4 * F)
            + 0.0008 * sin(6 * D - 2 * F)
            + 0.0008 * sin(2 * (D - F) + M)
            + 0.0007 * sin(2 * M)
            + 0.0007 * sin(2 * F - M)
            + 0.0007 * sin(2 * D + 4 * F)
            - 0.0006 * sin(2 * (F - M))
            - 0.0006 * sin(2 * (D - F + M))
            + 0.0006 * sin(24 * D)
            + 0.0005 * sin(4 * (D - F))
            + 0.0005 * sin(2 * (D + M))
            - 0.0004 * sin(D - M)
        )

    def apogee_correction(self):
        T, D, M, F = self.t, self.d, self.m, self.f
        sin = math.sin
        return (
            0.4392 * sin(2 * D)
            + 0.0684 * sin(4 * D)
            + (0.0456 - 0.00011 * T) * sin(M)
            + (0.0426 - 0.00011 * T) * sin(2 * D - M)
            + 0.0212 * sin(2 * F)
            - 0.0189 * sin(D)
            + 0.0144 * sin(6 * D)
            + 0.0113 * sin(4 * D - M)
            + 0.0047 * sin(2 * (D + F))
            + 0.0036 * sin(D + M)
            + 0.0035 * sin(8 * D)
            + 0.0034 * sin(6 * D - M)
            - 0.0034 * sin(2 * (D - F))
            + 0.0022 * sin(2 * (D - M))
            - 0.0017 * sin(3 * D)
            + 0.0013 * sin(4 * D + 2 * F)
            + 0.0011 * sin(8 * D - M)
            + 0.001 * sin(4 * D - 2 * M)
            + 0.0009 * sin(10 * D)
            + 0.0007 * sin(3 * D + M)
            + 0.0006 * sin(2 * M)
            + 0.0005 * sin(2 * D + M)
            + 0.0005 * sin(2 * (D + M))
            + 0.0004 * sin(6 * D + 2 * F)
            + 0.0004 * sin(6 * D - 2 * M)
            + 0.0004 * sin(10 * D - M)
            - 0.0004 * sin(5 * D)
            - 0.0004 * sin(4 * D - 2 * F)
            + 0.0003 * sin(2 * F + M)
            + 0.0003 * sin(12 * D)
            + 0.0003 * sin(2 * D + 2 * F - M)
            - 0.0003 * sin(D - M)
        )

    def apogee_parallax(self):
        T, D, M, F = self.t, self.d, self.m, self.f
        cos = math.cos
        return angle_from_sec(
            3245.251
            - 9.147 * cos(2 * D)
            - 0.841 * cos(D)
            + 0.697 * cos(2 * F)
            + (-0.656 + 0.0016 * T) * cos(M)
            + 0.355 * cos(4 * D)
            + 0.159 * cos(2 * D - M)
            + 0.127 * cos(D + M)
            + 0.065 * cos(4 * D - M)
            + 0.052 * cos(6 * D)
            + 0.043 * cos(2 * D + M)
            + 0.031 * cos(2 * (D + F))
            - 0.023 * cos(2 * (D - F))
            + 0.022 * cos(2 * (D - M))
            + 0.019 * cos(2 * (D + M))
            - 0.016 * cos(2 * M)
            + 0.014 * cos(6 * D - M)
            + 0.01 * cos(8 * D)
        )

    def perigee_parallax(self):
        T, D, M, F = self.t, self.d, self.m, self.f
        cos = math.cos
        return angle_from_sec(
            3629.215
            + 63.224 * cos(2 * D)
            - 6.990 * cos(4 * D)
            + (2.834 - 0.0071 * T) * cos(2 * D - M)
            + 1.927 * cos(6 * D)
            - 1.263 * cos(D)
            - 0.702 * cos(8 * D)
            + (0.696 - 0.0017 * T) * cos(M)
            - 0.690 * cos(2 * F)
            + (-0.629 + 0.0016 * T) * cos(4 * D - M)
            - 0.392 * cos(2 * (D - F))
            + 0.297 * cos(10 * D)
            + 0.260 * cos(6 * D - M)
            + 0.201 * cos(3 * D)
            - 0.161 * cos(2 * D + M)
            + 0.157 * cos(D + M)
            - 0.138 * cos(12 * D)
            - 0.127 * cos(8 * D - M)
            + 0.104 * cos(2 * (D + F))
            + 0.104 * cos(2 * (D - M))
            - 0.079 * cos(5 * D)
            + 0.068 * cos(14 * D)
            + 0.067 * cos(10 * D - M)
            + 0.054 * cos(4 * D + M)
            - 0.038 * cos(12 * D - M)
            - 0.038 * cos(4 * D - 2 * M)
            + 0.037 * cos(7 * D)
            - 0.037 * cos(4 * D + 2 * F)
            - 0.035 * cos(16 * D)
            - 0.030 * cos(3 * D + M)
            + 0.029 * cos(D - M)
            - 0.025 * cos(6 * D + M)
            + 0.023 * cos(2 * M)
            + 0.023 * cos(14 * D - M)
            - 0.023 * cos(2 * (D + M))
            + 0.022 * cos(6 * D - 2 * M)
            - 0.021 * cos(2 * D - 2 * F - M)
            - 0.020 * cos(9 * D)
            + 0.019 * cos(18 * D)
            + 0.017 * cos(6 * D + 2 * F)
            + 0.014 * cos(2 * F - M)
            - 0.014 * cos(16 * D - M)
            + 0.013 * cos(4 * D - 2 * F)
            + 0.012 * cos(8 * D + M)
            + 0.011 * cos(11 * D)
            + 0.010 * cos(5 * D + M)
            - 0.010 * cos(20 * D)
        )


def mean_perigee(year):
    """JDE of the mean perigee of the Moon nearest the decimal year."""
    return _mean(_snap(year, 0) * _CK)


def perigee(year):
    """JDE of the perigee of the Moon nearest the decimal year."""
    args = _Arguments.near(year, 0)
    return _mean(args.t) + args.perigee_correction()


def mean_apogee(year):
    """JDE of the mean apogee of the Moon nearest the decimal year."""
    return _mean(_snap(year, 0.5) * _CK)


def apogee(year):
    """JDE of the apogee of the Moon nearest the decimal year."""
    args = _Arguments.near(year, 0.5)
    return _mean(args.t) + args.apogee_correction()


def apogee_parallax(year):
    """Equatorial horizontal parallax of the Moon at the nearest apogee."""
    return _Arguments.near(year, 0.5).apogee_parallax()


def perigee_parallax(year):
    """Equatorial horizontal parallax of the Moon at the nearest perigee."""
    return _Arguments.near(year, 0).perigee_parallax()