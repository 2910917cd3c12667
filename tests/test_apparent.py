import math

import pytest

from meeus.apparent import aberration_ron_vondrak
from meeus.base import angle_from_dms, ra_from_hms

# 2028 November 13.19 TD
JD = 2462088.69


def test_aberration_ron_vondrak_example_23b():
    ra = ra_from_hms(2, 44, 12.9747)
    dec = angle_from_dms(False, 49, 13, 39.896)
    d_ra, d_dec = aberration_ron_vondrak(ra, dec, JD)
    assert d_ra == pytest.approx(0.000145252, abs=6e-10)
    assert d_dec == pytest.approx(0.000032723, abs=6e-10)


def test_aberration_bounded_by_constant_of_aberration():
    # The total displacement never greatly exceeds about 20.5 arc seconds.
    limit = math.radians(21 / 3600)
    for ra_deg in range(0, 360, 45):
        d_ra, d_dec = aberration_ron_vondrak(math.radians(ra_deg), 0.0, JD)
        assert math.hypot(d_ra, d_dec) < limit