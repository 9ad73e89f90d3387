"""Unit normalization and input placeholder helpers."""

from health_calculator.domain.bmi import HeightUnit, WeightUnit

LBS_PER_KG = 2.20462
METERS_PER_FOOT = 0.3048
CM_PER_METER = 100.0

_WEIGHT_PLACEHOLDERS = {
    WeightUnit.KG: "Enter weight in kg",
    WeightUnit.LBS: "Enter weight in lbs",
}

_HEIGHT_PLACEHOLDERS = {
    HeightUnit.M: "Enter height in meters",
    HeightUnit.FT: "Enter height in feet",
    HeightUnit.CM: "Enter height in cm",
}


def to_kilograms(weight: float, unit: WeightUnit) -> float:
    """Convert a weight to kilograms."""
    if unit == WeightUnit.LBS:
        return weight / LBS_PER_KG
    return weight


def to_meters(height: float, unit: HeightUnit) -> float:
    """Convert a height to meters."""
    if unit == HeightUnit.FT:
        return height * METERS_PER_FOOT
    if unit == HeightUnit.CM:
        return height / CM_PER_METER
    return height


def weight_placeholder(unit: WeightUnit | str) -> str:
    """Return the input hint for a weight unit."""
    try:
        return _WEIGHT_PLACEHOLDERS[WeightUnit(unit)]
    except ValueError:
        return "Enter weight"


def height_placeholder(unit: HeightUnit | str) -> str:
    """Return the input hint for a height unit."""
    try:
        return _HEIGHT_PLACEHOLDERS[HeightUnit(unit)]
    except ValueError:
        return "Enter height"
