"""Curve fitting by least squares.

Sample data is an iterable of (x, y) pairs.
"""

import math


def _pairs(points):
    return [(float(x), float(y)) for x, y in points]


def _solve_normal3(m, p, q, r, s, t, u, v, w):
    """Solve the symmetric 3x3 normal equations by Cramer's rule.

    The matrix is [[m, p, q], [p, r, s], [q, s, t]], right-hand side (u, v, w).
    """
    det = m * r * t + 2 * p * q * s - m * s * s - r * q * q - t * p * p
    a = (u * (r * t - s * s) + v * (q * s - p * t) + w * (p * s - q * r)) / det
    b = (u * (s * q - p * t) + v * (m * t - q * q) + w * (p * q - m * s)) / det
    c = (u * (p * s - r * q) + v * (p * q - m * s) + w * (m * r - p * p)) / det
    return a, b, c


def linear(points):
    """Return (a, b) of the best fit line y = ax + b."""
    pts = _pairs(points)
    n = len(pts)
    sx = sum(x for x, _ in pts)
    sy = sum(y for _, y in pts)
    sx2 = sum(x * x for x, _ in pts)
    sxy = sum(x * y for x, y in pts)
    det = n * sx2 - sx * sx
    return (n * sxy - sx * sy) / det, (sy * sx2 - sx * sxy) / det


def correlation_coefficient(points):
    """Return the correlation coefficient of the sample data."""
    pts = _pairs(points)
    n = len(pts)
    sx = sum(x for x, _ in pts)
    sy = sum(y for _, y in pts)
    sx2 = sum(x * x for x, _ in pts)
    sy2 = sum(y * y for _, y in pts)
    sxy = sum(x * y for x, y in pts)
    spread_x = math.sqrt(n * sx2 - sx * sx)
    spread_y = math.sqrt(n * sy2 - sy * sy)
    return (n * sxy - sx * sy) / (spread_x * spread_y)


def quadratic(points):
    """Return (a, b, c) of the best fit y = ax² + bx + c."""
    pts = _pairs(points)
    n = len(pts)
    sx = sum(x for x, _ in pts)
    sx2 = sum(x * x for x, _ in pts)
    sx3 = sum(x ** 3 for x, _ in pts)
    sx4 = sum(x ** 4 for x, _ in pts)
    sy = sum(y for _, y in pts)
    sxy = sum(x * y for x, y in pts)
    sx2y = sum(x * x * y for x, y in pts)
    return _solve_normal3(sx4, sx3, sx2, sx2, sx, n, sx2y, sxy, sy)


def func3(points, f0, f1, f2):
    """Return (a, b, c) fitting y = a·f0(x) + b·f1(x) + c·f2(x)."""
    rows = [(f0(x), f1(x), f2(x), y) for x, y in _pairs(points)]
    return _solve_normal3(
        sum(g0 * g0 for g0, _, _, _ in rows),
        sum(g0 * g1 for g0, g1, _, _ in rows),
        sum(g0 * g2 for g0, _, g2, _ in rows),
        sum(g1 * g1 for _, g1, _, _ in rows),
        sum(g1 * g2 for _, g1, g2, _ in rows),
        sum(g2 * g2 for _, _, g2, _ in rows),
        sum(y * g0 for g0, _, _, y in rows),
        sum(y * g1 for _, g1, _, y in rows),
        sum(y * g2 for _, _, g2, y in rows),
    )


def func1(points, f):
    """Return a fitting y = a·f(x)."""
    values = [(f(x), y) for x, y in _pairs(points)]
    return sum(y * fx for fx, y in values) / sum(fx * fx for fx, _ in values)