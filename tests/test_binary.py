import math

import pytest

from meeus import binary


def test_mean_anomaly_example_57a():
    m = binary.mean_anomaly(1980, 1934.008, 41.623)
    assert math.degrees(m) == pytest.approx(37.788, abs=5e-4)


def test_position_example_57a():
    # E = 49.896° as given in the book.
    theta, rho = binary.position(
        0.2763,
        math.radians(0.907 / 3600),
        math.radians(59.025),
        math.radians(23.717),
        math.radians(219.907),
        math.radians(49.896),
    )
    assert math.degrees(theta) == pytest.approx(318.4, abs=0.05)
    assert math.degrees(rho) * 3600 == pytest.approx(0.411, abs=5e-4)


def test_apparent_eccentricity_example_57b():
    e = binary.apparent_eccentricity(0.2763, math.radians(59.025), math.radians(219.907))
    assert e == pytest.approx(0.860, abs=5e-4)


def test_mean_anomaly_in_range():
    m = binary.mean_anomaly(1900, 1934.008, 41.623)
    assert 0 <= m < 2 * math.pi


def test_face_on_circular_orbit_has_zero_apparent_eccentricity():
    assert binary.apparent_eccentricity(0.0, 0.0, 1.0) == pytest.approx(0.0, abs=1e-9)