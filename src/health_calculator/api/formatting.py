"""Display formatting for calculator results."""

from health_calculator.domain.bmi import BMIResult
from health_calculator.domain.calories import CalorieResult
from health_calculator.domain.history import HistoryEntry
from health_calculator.services.records import encode_bmi, encode_calorie

CARB_COLOR = "#00d4ff"
PROTEIN_COLOR = "#00ff88"
FAT_COLOR = "#ff9500"


def format_one_decimal(value: float) -> str:
    """Format a number with exactly one decimal place."""
    return f"{value:.1f}"


def format_amount(value: float) -> str:
    """Format an entered amount without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def calorie_summary(result: CalorieResult) -> dict[str, object]:
    """Return the calorie breakdown shown after a calculation."""
    return {
        "total_calories": format_one_decimal(result.total_calories),
        "carbs": {
            "calories": format_one_decimal(result.carb_calories),
            "percentage": format_one_decimal(result.carb_percentage),
        },
        "protein": {
            "calories": format_one_decimal(result.protein_calories),
            "percentage": format_one_decimal(result.protein_percentage),
        },
        "fats": {
            "calories": format_one_decimal(result.fat_calories),
            "percentage": format_one_decimal(result.fat_percentage),
        },
        "chart": chart_slices(result),
    }


def chart_slices(result: CalorieResult) -> list[dict[str, object]]:
    """Return pie chart slices for macronutrients that contribute calories."""
    components = [
        ("Carbohydrates", result.carb_calories, result.carb_percentage, CARB_COLOR),
        ("Proteins", result.protein_calories, result.protein_percentage, PROTEIN_COLOR),
        ("Fats", result.fat_calories, result.fat_percentage, FAT_COLOR),
    ]
    return [
        {
            "label": label,
            "calories": calories,
            "color": color,
            "tooltip": (
                f"{label}: {format_one_decimal(calories)} cal "
                f"({format_one_decimal(percentage)}%)"
            ),
        }
        for label, calories, percentage, color in components
        if calories > 0
    ]


def bmi_summary(result: BMIResult) -> dict[str, object]:
    """Return the BMI values shown after a calculation."""
    return {
        "bmi": format_one_decimal(result.bmi),
        "category": result.category.value,
        "category_class": result.category.css_class,
    }


def history_item(entry: HistoryEntry) -> dict[str, object]:
    """Return a saved result formatted for the combined history list."""
    payload = entry.payload
    if isinstance(payload, CalorieResult):
        record = encode_calorie(payload)
        values = [
            f"{format_one_decimal(payload.total_calories)} cal",
            f"{format_amount(payload.carbs_g)}g carbs",
            f"{format_amount(payload.protein_g)}g protein",
            f"{format_amount(payload.fat_g)}g fats",
        ]
    else:
        record = encode_bmi(payload)
        values = [
            f"BMI: {format_one_decimal(payload.bmi)}",
            payload.category.value,
            (
                f"{format_amount(payload.weight)}{payload.weight_unit.value} / "
                f"{format_amount(payload.height)}{payload.height_unit.value}"
            ),
        ]
    return {
        "type": entry.type.value,
        "timestamp": entry.timestamp.isoformat(),
        "display_time": entry.timestamp.strftime("%Y-%m-%d %H:%M"),
        "record": record,
        "values": values,
    }
