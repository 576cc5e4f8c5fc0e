"""
Unit Definitions and Conversions - Single Source of Truth

This module defines the supported measurement units, the physical quantity
each belongs to, and the conversion formulas between them.

Conversion factors for length are the rounded published values
(1 km = 0.621371 mi, 1 mi = 1.60934 km); they are deliberately not
reciprocals of each other, so a km -> mi -> km round trip is only
approximately lossless.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from math_util.errors import DomainError


class Quantity(Enum):
    """Physical quantities with convertible units."""

    ANGLE = "angle"
    TEMPERATURE = "temperature"
    LENGTH = "length"


class Unit(Enum):
    """Supported measurement units."""

    DEGREES = "degrees"
    RADIANS = "radians"
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KILOMETERS = "kilometers"
    MILES = "miles"


@dataclass(frozen=True, slots=True)
class UnitSpec:
    """Specification for a measurement unit."""

    unit: Unit
    quantity: Quantity
    symbol: str
    aliases: tuple[str, ...] = ()


# =============================================================================
# CONVERSION CONSTANTS
# =============================================================================

KM_TO_MILES: Final[float] = 0.621371
MILES_TO_KM: Final[float] = 1.60934

DEGREES_PER_RADIAN: Final[float] = 180 / math.pi
RADIANS_PER_DEGREE: Final[float] = math.pi / 180

FAHRENHEIT_OFFSET: Final[float] = 32.0


# =============================================================================
# UNIT SPECIFICATIONS
# =============================================================================

_UNIT_SPECS: dict[Unit, UnitSpec] = {
    Unit.DEGREES: UnitSpec(
        unit=Unit.DEGREES,
        quantity=Quantity.ANGLE,
        symbol="°",
        aliases=("deg", "degree"),
    ),
    Unit.RADIANS: UnitSpec(
        unit=Unit.RADIANS,
        quantity=Quantity.ANGLE,
        symbol="rad",
        aliases=("rad", "radian"),
    ),
    Unit.CELSIUS: UnitSpec(
        unit=Unit.CELSIUS,
        quantity=Quantity.TEMPERATURE,
        symbol="°C",
        aliases=("c", "degc"),
    ),
    Unit.FAHRENHEIT: UnitSpec(
        unit=Unit.FAHRENHEIT,
        quantity=Quantity.TEMPERATURE,
        symbol="°F",
        aliases=("f", "degf"),
    ),
    Unit.KILOMETERS: UnitSpec(
        unit=Unit.KILOMETERS,
        quantity=Quantity.LENGTH,
        symbol="km",
        aliases=("km", "kilometer"),
    ),
    Unit.MILES: UnitSpec(
        unit=Unit.MILES,
        quantity=Quantity.LENGTH,
        symbol="mi",
        aliases=("mi", "mile"),
    ),
}


# =============================================================================
# DIRECT CONVERTERS
# =============================================================================


def degrees_to_radians(degrees: float) -> float:
    return degrees * RADIANS_PER_DEGREE


def radians_to_degrees(radians: float) -> float:
    return radians * DEGREES_PER_RADIAN


def celsius_to_fahrenheit(celsius: float) -> float:
    """°F = °C × 9/5 + 32."""
    return celsius * 9 / 5 + FAHRENHEIT_OFFSET


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """°C = (°F − 32) × 5/9."""
    return (fahrenheit - FAHRENHEIT_OFFSET) * 5 / 9


def km_to_miles(km: float) -> float:
    return km * KM_TO_MILES


def miles_to_km(miles: float) -> float:
    return miles * MILES_TO_KM


_CONVERSIONS: dict[tuple[Unit, Unit], Callable[[float], float]] = {
    (Unit.DEGREES, Unit.RADIANS): degrees_to_radians,
    (Unit.RADIANS, Unit.DEGREES): radians_to_degrees,
    (Unit.CELSIUS, Unit.FAHRENHEIT): celsius_to_fahrenheit,
    (Unit.FAHRENHEIT, Unit.CELSIUS): fahrenheit_to_celsius,
    (Unit.KILOMETERS, Unit.MILES): km_to_miles,
    (Unit.MILES, Unit.KILOMETERS): miles_to_km,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def get_spec(unit: Unit | str) -> UnitSpec:
    """
    Get the full specification for a unit.

    Args:
        unit: Unit (enum or string like 'km', 'Celsius', 'deg')

    Returns:
        UnitSpec with quantity, symbol and aliases

    Raises:
        DomainError: If unit is unknown
    """
    if isinstance(unit, str):
        unit = _parse_unit(unit)
    return _UNIT_SPECS[unit]


def get_quantity(unit: Unit | str) -> Quantity:
    """
    Get the physical quantity measured by a unit.

    Example:
        >>> get_quantity("mi")
        <Quantity.LENGTH: 'length'>
    """
    return get_spec(unit).quantity


def convert(value: float, from_unit: Unit | str, to_unit: Unit | str) -> float:
    """
    Convert a value between two units of the same quantity.

    Args:
        value: Magnitude in from_unit
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Magnitude in to_unit (value itself when both units are the same)

    Raises:
        DomainError: If a unit is unknown or the units measure different
            quantities

    Example:
        >>> convert(100, "celsius", "fahrenheit")
        212.0
    """
    source = get_spec(from_unit)
    target = get_spec(to_unit)

    if source.quantity is not target.quantity:
        raise DomainError(
            f"Cannot convert {source.quantity.value} ({source.unit.value}) "
            f"to {target.quantity.value} ({target.unit.value})"
        )

    if source.unit is target.unit:
        return value

    return _CONVERSIONS[(source.unit, target.unit)](value)


def list_units(quantity: Quantity | None = None) -> list[Unit]:
    """
    List supported units, optionally restricted to one quantity.

    Returns:
        Units in declaration order
    """
    return [
        spec.unit
        for spec in _UNIT_SPECS.values()
        if quantity is None or spec.quantity is quantity
    ]


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _parse_unit(name: str) -> Unit:
    """Parse a string (value or alias, any case) into a Unit enum."""
    normalized = name.strip().lower().replace("°", "deg").replace(" ", "")

    for spec in _UNIT_SPECS.values():
        if normalized == spec.unit.value or normalized in spec.aliases:
            return spec.unit

    valid = [u.value for u in Unit]
    raise DomainError(f"Unknown unit: '{name}'. Valid: {valid}")


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
