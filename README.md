# meeus

Classic astronomical algorithms in plain Python, with no third-party
dependencies. Angles are floats in radians throughout; times are Julian
(ephemeris) days unless noted.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `meeus.base`: constants (`J2000`, `JULIAN_YEAR`, `S_OBL_J2000`, ...),
  conversions between Julian days and Julian or Besselian years,
  `j2000_century`, `light_time`, `horner`, `hav`, `floor_div`, `cmp`, `pmod`,
  sexagesimal helpers (`from_sexa`, `angle_from_dms`, `angle_from_sec`,
  `ra_from_hms`), and the phase functions `illuminated` and `limb`.
- `meeus.globe`: the Earth as an ellipsoid (`Ellipsoid`, `EARTH76`, `Coord`),
  parallax constants, radii of parallels and of meridian curvature, lengths of
  a degree, geocentric latitude difference and geodesic distance.
- `meeus.easter`: month and day of Easter in the Gregorian and Julian calendars.
- `meeus.fit`: least-squares fits: `linear`, `correlation_coefficient`,
  `quadratic`, `func3`, `func1`. Sample data is an iterable of `(x, y)` pairs.
- `meeus.angle`: angular separation (`sep`, `sep_hav`, `sep_pauwels`) and
  `relative_position`.
- `meeus.circle`: `smallest`, the smallest circle containing three bodies.
- `meeus.elementequinox`: `Elements` and their reduction from B1950 to J2000,
  with or without the FK4 to FK5 change.
- `meeus.coord`: ecliptic, equatorial, horizontal and galactic coordinates,
  as functions (`eq_to_ecl`, `ecl_to_eq`, `eq_to_hz`, `hz_to_eq`, `eq_to_gal`,
  `gal_to_eq`) and as dataclasses with conversion methods. Sidereal time is
  passed in as an angle in radians.
- `meeus.apsis`: mean and true perigee and apogee of the Moon, and the Moon's
  parallax at those times.
- `meeus.illum`: planetary phase angles, illuminated fraction, and visual
  magnitudes of the planets (classic and 1984 formulas).
- `meeus.binary`: mean anomaly, apparent position and apparent eccentricity
  of binary stars.
- `meeus.apparent`: `aberration_ron_vondrak`, corrections for aberration.
- `meeus.deltat`: polynomial approximations of ΔT in seconds.
- `meeus.elliptic`: orbital velocities and lengths of elliptical orbits.

## Examples

```python
from meeus import easter, apsis, elliptic

easter.gregorian(2000)          # (4, 23): April 23
apsis.mean_apogee(1988.75)      # 2447442.8191...
elliptic.length4(17.9400782, 0.96727426)   # about 77.07 AU
```

```python
from meeus import angle, base

r1 = base.ra_from_hms(14, 15, 39.7)
d1 = base.angle_from_dms(False, 19, 10, 57)
r2 = base.ra_from_hms(13, 25, 11.6)
d2 = base.angle_from_dms(True, 11, 9, 41)
angle.sep_hav(r1, d1, r2, d2)   # about 32°47′35″, in radians
```

## What the package does not do

- It has no conversion between calendar dates and Julian days, and no
  sidereal time: callers supply Julian days and sidereal time themselves.
- It has no planetary theory, nutation or precession, so it does not compute
  positions of planets or the Sun, apparent places of stars beyond the
  aberration correction, or the equation of time.
- It has no interpolation over ephemerides, so it does not find conjunctions
  or minimum separations of moving bodies.
- It has no command-line program; it is a library only.