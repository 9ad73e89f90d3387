"""BMI domain models."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class WeightUnit(StrEnum):
    """Supported weight units."""

    KG = "kg"
    LBS = "lbs"


class HeightUnit(StrEnum):
    """Supported height units."""

    M = "m"
    FT = "ft"
    CM = "cm"


class BMICategory(StrEnum):
    """BMI classification labels."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @property
    def css_class(self) -> str:
        """Short style class used by the presentation layer."""
        return _CSS_CLASSES[self]


_CSS_CLASSES = {
    BMICategory.UNDERWEIGHT: "underweight",
    BMICategory.NORMAL: "normal",
    BMICategory.OVERWEIGHT: "overweight",
    BMICategory.OBESE: "obese",
}


@dataclass(frozen=True)
class BMIInput:
    """Weight and height as entered, with their units."""

    weight: float | None
    height: float | None
    weight_unit: WeightUnit = WeightUnit.KG
    height_unit: HeightUnit = HeightUnit.M


@dataclass(frozen=True)
class BMIResult:
    """Computed BMI together with the original, unconverted measurements."""

    weight: float
    weight_unit: WeightUnit
    height: float
    height_unit: HeightUnit
    bmi: float
    category: BMICategory
    timestamp: datetime
