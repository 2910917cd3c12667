import math

import pytest

from meeus import apsis


def test_mean_apogee_example_50a():
    assert apsis.mean_apogee(1988.75) == pytest.approx(2447442.8191, abs=5e-5)


def test_apogee_example_50a():
    # 1988 October 7 at 20h30m TD
    assert apsis.apogee(1988.75) == pytest.approx(2447442.3543, abs=5e-5)


def test_apogee_parallax_example_50a():
    p = apsis.apogee_parallax(1988.75)
    assert math.degrees(p) * 3600 == pytest.approx(3240.679, abs=5e-4)


@pytest.mark.parametrize(
    "decimal_year, jd",
    [
        (1997.93, 2450792.2042),  # 1997 Dec 9 16.9h
        (1998.01, 2450816.8542),  # 1998 Jan 3 8.5h
        (1990.92, 2448227.9500),  # 1990 Dec 2 10.8h
        (1991.0, 2448256.4917),  # 1990 Dec 30 23.8h
    ],
)
def test_perigee_p361(decimal_year, jd):
    assert abs(apsis.perigee(decimal_year) - jd) <= 0.1


def test_perigee_parallax_larger_than_apogee_parallax():
    pp = math.degrees(apsis.perigee_parallax(1997.93)) * 3600
    ap = math.degrees(apsis.apogee_parallax(1997.93)) * 3600
    assert 3500 < pp < 3700
    assert pp > ap