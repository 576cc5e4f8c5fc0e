"""Data module for unit definitions and conversions."""

from math_util.data.units import (
    KM_TO_MILES,
    MILES_TO_KM,
    Quantity,
    Unit,
    UnitSpec,
    celsius_to_fahrenheit,
    convert,
    degrees_to_radians,
    fahrenheit_to_celsius,
    get_quantity,
    get_spec,
    km_to_miles,
    list_units,
    miles_to_km,
    radians_to_degrees,
)

__all__ = [
    "KM_TO_MILES",
    "MILES_TO_KM",
    "Quantity",
    "Unit",
    "UnitSpec",
    "celsius_to_fahrenheit",
    "convert",
    "degrees_to_radians",
    "fahrenheit_to_celsius",
    "get_quantity",
    "get_spec",
    "km_to_miles",
    "list_units",
    "miles_to_km",
    "radians_to_degrees",
]
