"""Astronomical algorithms: time scales, coordinates, orbits and phenomena."""

__version__ = "3.0.0"

__all__ = [
    "angle",
    "apparent",
    "apsis",
    "base",
    "binary",
    "circle",
    "coord",
    "deltat",
    "easter",
    "elementequinox",
    "elliptic",
    "fit",
    "globe",
    "illum",
]