"""Calorie calculator service."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from health_calculator.domain.calories import (
    CARB_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    CalorieInput,
    CalorieResult,
)
from health_calculator.domain.errors import (
    AllZeroMacronutrientsError,
    NegativeMacronutrientError,
)
from health_calculator.services.history import HistoryService

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class CalorieService:
    """Computes calorie breakdowns and saves them to history."""

    history: HistoryService
    clock: Callable[[], datetime] = field(default=_utc_now)

    def compute_calories(self, calorie_input: CalorieInput) -> CalorieResult:
        """Validate macros, compute calories and save the result."""
        result = calculate_calories(calorie_input, timestamp=self.clock())
        self.history.append_calorie(result)
        _logger.info(
            "Calories calculated: total=%.1f carbs=%s protein=%s fat=%s",
            result.total_calories,
            result.carbs_g,
            result.protein_g,
            result.fat_g,
        )
        return result


def calculate_calories(
    calorie_input: CalorieInput, timestamp: datetime
) -> CalorieResult:
    """Return the calorie breakdown for validated macronutrient grams."""
    amounts = (calorie_input.carbs_g, calorie_input.protein_g, calorie_input.fat_g)
    if any(not math.isfinite(amount) or amount < 0 for amount in amounts):
        raise NegativeMacronutrientError()
    if all(amount == 0 for amount in amounts):
        raise AllZeroMacronutrientsError()

    carb_calories = calorie_input.carbs_g * CARB_KCAL_PER_G
    protein_calories = calorie_input.protein_g * PROTEIN_KCAL_PER_G
    fat_calories = calorie_input.fat_g * FAT_KCAL_PER_G
    return CalorieResult(
        carbs_g=calorie_input.carbs_g,
        protein_g=calorie_input.protein_g,
        fat_g=calorie_input.fat_g,
        carb_calories=carb_calories,
        protein_calories=protein_calories,
        fat_calories=fat_calories,
        total_calories=carb_calories + protein_calories + fat_calories,
        timestamp=timestamp,
    )
