import math

import pytest

from meeus import illum


def test_phase_angle_example_41a():
    i = illum.phase_angle(0.724604, 0.910947, 0.983824)
    assert math.cos(i) == pytest.approx(0.29312, abs=5e-6)


def test_fraction_example_41a():
    assert illum.fraction(0.724604, 0.910947, 0.983824) == pytest.approx(0.647, abs=5e-4)


def test_phase_angle2_example_41a():
    i = illum.phase_angle2(
        math.radians(26.10588),
        math.radians(-2.62102),
        0.724604,
        math.radians(88.35704),
        0.983824,
        0.910947,
    )
    assert math.cos(i) == pytest.approx(0.29312, abs=5e-6)


def test_phase_angle3_example_41a():
    i = illum.phase_angle3(
        math.radians(26.10588),
        math.radians(-2.62102),
        0.621794,
        -0.664905,
        -0.033138,
        0.910947,
    )
    assert math.cos(i) == pytest.approx(0.29312, abs=5e-6)


def test_fraction_venus_example_41b():
    assert illum.fraction_venus(2448976.5) == pytest.approx(0.640, abs=5e-4)


def test_venus_example_41c():
    assert illum.venus(0.724604, 0.910947, math.radians(72.96)) == pytest.approx(-3.8, abs=0.05)


def test_saturn_example_41d():
    v = illum.saturn(9.867882, 10.464606, math.radians(16.442), math.radians(4.198))
    assert v == pytest.approx(0.9, abs=0.05)


def test_magnitudes_brighten_closer():
    near = illum.jupiter(5.0, 4.0)
    far = illum.jupiter(5.0, 6.0)
    assert near < far
    assert illum.uranus(1.0, 1.0) == pytest.approx(-6.85)
    assert illum.neptune(1.0, 1.0) == pytest.approx(-7.05)
    assert illum.pluto84(1.0, 1.0) == pytest.approx(-1.0)
    assert illum.neptune84(1.0, 1.0) == pytest.approx(-6.87)
    assert illum.uranus84(1.0, 1.0) == pytest.approx(-7.19)


def test_zero_phase_1984_formulas():
    assert illum.mercury84(1.0, 1.0, 0.0) == pytest.approx(-0.42)
    assert illum.venus84(1.0, 1.0, 0.0) == pytest.approx(-4.4)
    assert illum.mars84(1.0, 1.0, 0.0) == pytest.approx(-1.52)
    assert illum.jupiter84(1.0, 1.0, 0.0) == pytest.approx(-9.4)
    assert illum.mars(1.0, 1.0, 0.0) == pytest.approx(-1.3)