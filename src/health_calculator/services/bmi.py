"""BMI calculator service."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from health_calculator.domain.bmi import (
    BMICategory,
    BMIInput,
    BMIResult,
    HeightUnit,
    WeightUnit,
)
from health_calculator.domain.errors import InvalidMeasurementError
from health_calculator.services.history import HistoryService
from health_calculator.services.units import to_kilograms, to_meters

UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class BMIService:
    """Computes BMI values and saves them to history."""

    history: HistoryService
    clock: Callable[[], datetime] = field(default=_utc_now)

    def compute_bmi(self, bmi_input: BMIInput) -> BMIResult:
        """Validate measurements, compute BMI and save the result."""
        result = calculate_bmi(bmi_input, timestamp=self.clock())
        self.history.append_bmi(result)
        _logger.info("BMI calculated: %.1f (%s)", result.bmi, result.category)
        return result


def calculate_bmi(bmi_input: BMIInput, timestamp: datetime) -> BMIResult:
    """Return the BMI for validated measurements.

    The result keeps the measurements exactly as entered; only the formula
    works on kilograms and meters.
    """
    weight = _require_positive(bmi_input.weight)
    height = _require_positive(bmi_input.height)
    try:
        weight_unit = WeightUnit(bmi_input.weight_unit)
        height_unit = HeightUnit(bmi_input.height_unit)
    except ValueError as exc:
        raise InvalidMeasurementError("Unsupported measurement unit") from exc
    weight_kg = to_kilograms(weight, weight_unit)
    height_m = to_meters(height, height_unit)
    bmi = weight_kg / (height_m * height_m)
    return BMIResult(
        weight=weight,
        weight_unit=weight_unit,
        height=height,
        height_unit=height_unit,
        bmi=bmi,
        category=classify_bmi(bmi),
        timestamp=timestamp,
    )


def classify_bmi(bmi: float) -> BMICategory:
    """Return the category for a BMI value; boundaries go to the higher band."""
    if bmi < UNDERWEIGHT_BELOW:
        return BMICategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return BMICategory.NORMAL
    if bmi < OBESE_FROM:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def _require_positive(value: float | None) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidMeasurementError()
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidMeasurementError() from exc
    if not math.isfinite(number) or number <= 0:
        raise InvalidMeasurementError()
    return number
