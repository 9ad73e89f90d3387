"""Pydantic models for calculator requests."""

import math
import re

from pydantic import BaseModel

from health_calculator.domain.bmi import BMIInput, HeightUnit, WeightUnit
from health_calculator.domain.calories import CalorieInput

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

RawNumber = str | float | None


def parse_number(raw: RawNumber) -> float | None:
    """Parse user-entered text into a finite number.

    Leading numeric text is accepted ("12g" -> 12.0); blank, unparseable or
    non-finite input gives None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        value = float(raw)
    else:
        match = _LEADING_NUMBER.match(raw)
        if match is None:
            return None
        value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


class CalorieRequest(BaseModel):
    """Raw macronutrient fields from the calorie form."""

    carbs: RawNumber = None
    protein: RawNumber = None
    fats: RawNumber = None

    def to_input(self) -> CalorieInput:
        """Build a calorie input; missing or unparseable fields count as 0."""
        return CalorieInput(
            carbs_g=parse_number(self.carbs) or 0.0,
            protein_g=parse_number(self.protein) or 0.0,
            fat_g=parse_number(self.fats) or 0.0,
        )


class BMIRequest(BaseModel):
    """Raw measurement fields from the BMI form."""

    weight: RawNumber = None
    height: RawNumber = None
    weight_unit: WeightUnit = WeightUnit.KG
    height_unit: HeightUnit = HeightUnit.M

    def to_input(self) -> BMIInput:
        """Build a BMI input; unparseable measurements become None."""
        return BMIInput(
            weight=parse_number(self.weight),
            height=parse_number(self.height),
            weight_unit=self.weight_unit,
            height_unit=self.height_unit,
        )
