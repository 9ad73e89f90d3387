"""Serialization of saved results to plain JSON-compatible records."""

from datetime import UTC, datetime

from health_calculator.domain.bmi import BMICategory, BMIResult, HeightUnit, WeightUnit
from health_calculator.domain.calories import CalorieResult
from health_calculator.domain.errors import HistoryReadError


def encode_calorie(result: CalorieResult) -> dict[str, object]:
    """Return the stored form of a calorie result."""
    return {
        "carbs": result.carbs_g,
        "protein": result.protein_g,
        "fats": result.fat_g,
        "totalCalories": result.total_calories,
        "carbCalories": result.carb_calories,
        "proteinCalories": result.protein_calories,
        "fatCalories": result.fat_calories,
        "timestamp": result.timestamp.isoformat(),
    }


def decode_calorie(record: dict[str, object]) -> CalorieResult:
    """Rebuild a calorie result from its stored form."""
    try:
        return CalorieResult(
            carbs_g=float(record["carbs"]),
            protein_g=float(record["protein"]),
            fat_g=float(record["fats"]),
            carb_calories=float(record["carbCalories"]),
            protein_calories=float(record["proteinCalories"]),
            fat_calories=float(record["fatCalories"]),
            total_calories=float(record["totalCalories"]),
            timestamp=_parse_timestamp(record["timestamp"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        raise HistoryReadError(f"Malformed calorie record: {exc}") from exc


def encode_bmi(result: BMIResult) -> dict[str, object]:
    """Return the stored form of a BMI result."""
    return {
        "weight": result.weight,
        "height": result.height,
        "weightUnit": result.weight_unit.value,
        "heightUnit": result.height_unit.value,
        "bmi": result.bmi,
        "category": result.category.value,
        "timestamp": result.timestamp.isoformat(),
    }


def decode_bmi(record: dict[str, object]) -> BMIResult:
    """Rebuild a BMI result from its stored form."""
    try:
        return BMIResult(
            weight=float(record["weight"]),
            weight_unit=WeightUnit(record["weightUnit"]),
            height=float(record["height"]),
            height_unit=HeightUnit(record["heightUnit"]),
            bmi=float(record["bmi"]),
            category=BMICategory(record["category"]),
            timestamp=_parse_timestamp(record["timestamp"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as exc:
        raise HistoryReadError(f"Malformed BMI record: {exc}") from exc


def _parse_timestamp(raw: object) -> datetime:
    if not isinstance(raw, str):
        raise TypeError("timestamp must be a string")
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed
