"""Calorie domain models."""

from dataclasses import dataclass
from datetime import datetime

CARB_KCAL_PER_G = 4.0
PROTEIN_KCAL_PER_G = 4.0
FAT_KCAL_PER_G = 9.0


@dataclass(frozen=True)
class CalorieInput:
    """Macronutrient grams entered by the user."""

    carbs_g: float
    protein_g: float
    fat_g: float


@dataclass(frozen=True)
class CalorieResult:
    """Calorie breakdown for a set of macronutrients."""

    carbs_g: float
    protein_g: float
    fat_g: float
    carb_calories: float
    protein_calories: float
    fat_calories: float
    total_calories: float
    timestamp: datetime

    @property
    def carb_percentage(self) -> float:
        """Share of calories from carbohydrates, rounded to one decimal."""
        return _percentage(self.carb_calories, self.total_calories)

    @property
    def protein_percentage(self) -> float:
        """Share of calories from protein, rounded to one decimal."""
        return _percentage(self.protein_calories, self.total_calories)

    @property
    def fat_percentage(self) -> float:
        """Share of calories from fat, rounded to one decimal."""
        return _percentage(self.fat_calories, self.total_calories)


def _percentage(part: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return round(part / total * 100, 1)
