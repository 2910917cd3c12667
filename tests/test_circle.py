import math

from meeus.base import angle_from_dms, ra_from_hms
from meeus.circle import smallest


def test_example_20a_type_ii():
    r1 = ra_from_hms(12, 41, 8.64)
    r2 = ra_from_hms(12, 52, 5.21)
    r3 = ra_from_hms(12, 39, 28.11)
    d1 = angle_from_dms(True, 5, 37, 54.2)
    d2 = angle_from_dms(True, 4, 22, 26.2)
    d3 = angle_from_dms(True, 1, 50, 3.7)
    d, type_i = smallest(r1, d1, r2, d2, r3, d3)
    assert abs(math.degrees(d) - 4.26363) < 1e-5
    assert type_i is False


def test_exercise_type_i():
    r1 = ra_from_hms(9, 5, 41.44)
    r2 = ra_from_hms(9, 9, 29)
    r3 = ra_from_hms(8, 59, 47.14)
    d1 = angle_from_dms(False, 18, 30, 30)
    d2 = angle_from_dms(False, 17, 43, 56.7)
    d3 = angle_from_dms(False, 17, 49, 36.8)
    d, type_i = smallest(r1, d1, r2, d2, r3, d3)
    assert abs(math.degrees(d) * 60 - (2 * 60 + 19)) < 0.5
    assert type_i is True