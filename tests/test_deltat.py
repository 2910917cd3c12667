import math

import pytest

from meeus.base import jde_to_julian_year
from meeus.deltat import (
    poly_1800_to_1899,
    poly_1800_to_1997,
    poly_1900_to_1997,
    poly_948_to_1600,
    poly_after_2000,
    poly_before_948,
)


def _gregorian_jd(y, m, d):
    if m < 3:
        y -= 1
        m += 12
    a = y // 100
    b = 2 - a + a // 4
    return (math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1))
            + b + d - 1524.5)


def test_poly_1900_to_1997_example_10a():
    # 1977 February 18 at 3h37m40s UT
    jd = 2443192.5 + (3 * 3600 + 37 * 60 + 40) / 86400
    assert jde_to_julian_year(jd) == pytest.approx(1977.1, abs=0.05)
    assert poly_1900_to_1997(jd) == pytest.approx(47.1, abs=0.05)


def test_poly_before_948_example_10b():
    assert poly_before_948(333.1) == pytest.approx(6146, abs=0.5)


@pytest.mark.parametrize("year, expected", [(1800, 13.1), (1900, -2.8), (1996, 61.6)])
def test_poly_1800_to_1997(year, expected):
    assert abs(poly_1800_to_1997(_gregorian_jd(year, 0, 0)) - expected) <= 2.3


@pytest.mark.parametrize("year, expected", [(1800, 13.1), (1850, 6.8), (1898, -4.7)])
def test_poly_1800_to_1899(year, expected):
    assert abs(poly_1800_to_1899(_gregorian_jd(year, 0, 0)) - expected) <= 1


@pytest.mark.parametrize("year, expected", [(1900, -2.8), (1950, 29.1), (1996, 61.6)])
def test_poly_1900_to_1997(year, expected):
    assert abs(poly_1900_to_1997(_gregorian_jd(year, 0, 0)) - expected) <= 1


def test_poly_948_to_1600_at_2000_is_constant_term():
    assert poly_948_to_1600(2000) == pytest.approx(102)


def test_poly_after_2000_matches_without_correction_from_2100():
    assert poly_after_2000(2100) == pytest.approx(poly_948_to_1600(2100))
    assert poly_after_2000(2150) == pytest.approx(poly_948_to_1600(2150))


def test_poly_after_2000_corrected_before_2100():
    assert poly_after_2000(2000) == pytest.approx(102 - 37)