"""Polynomial approximations of ΔT = TD - UT, in seconds."""

from meeus.base import J1900, JULIAN_CENTURY, horner


def _c2000(year):
    """Centuries from calendar year 2000.0."""
    return (year - 2000) * 0.01


def _jc1900(jde):
    """Julian centuries from epoch J1900.0."""
    return (jde - J1900) / JULIAN_CENTURY


def poly_before_948(year):
    """ΔT for calendar years before 948."""
    return horner(_c2000(year), 2177, 497, 44.1)


def poly_948_to_1600(year):
    """ΔT for calendar years 948 to 1600."""
    return horner(_c2000(year), 102, 102, 25.3)


def poly_after_2000(year):
    """ΔT for calendar years after 2000."""
    dt = poly_948_to_1600(year)
    if year < 2100:
        dt += 0.37 * (year - 2100)
    return dt


def poly_1800_to_1997(jde):
    """ΔT for years 1800 to 1997, accurate within 2.3 seconds."""
    return horner(_jc1900(jde),
                  -1.02, 91.02, 265.90, -839.16, -1545.20,
                  3603.62, 4385.98, -6993.23, -6090.04,
                  6298.12, 4102.86, -2137.64, -1081.51)


def poly_1800_to_1899(jde):
    """ΔT for years 1800 to 1899, accurate within 0.9 seconds."""
    return horner(_jc1900(jde),
                  -2.50, 228.95, 5218.61, 56282.84, 324011.78,
                  1061660.75, 2087298.89, 2513807.78,
                  1818961.41, 727058.63, 123563.95)


def poly_1900_to_1997(jde):
    """ΔT for years 1900 to 1997, accurate within 0.9 seconds."""
    return horner(_jc1900(jde),
                  -2.44, 87.24, 815.20, -2637.80, -18756.33,
                  124906.15, -303191.19, 372919.88,
                  -232424.66, 58353.42)