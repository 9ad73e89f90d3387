"""Domain models for saved results."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from health_calculator.domain.bmi import BMIResult
from health_calculator.domain.calories import CalorieResult


class HistoryEntryType(StrEnum):
    """Origin of a saved result."""

    CALORIE = "calorie"
    BMI = "bmi"


@dataclass(frozen=True)
class HistoryEntry:
    """A saved result tagged with its origin."""

    type: HistoryEntryType
    payload: CalorieResult | BMIResult

    @property
    def timestamp(self) -> datetime:
        """When the underlying result was computed."""
        return self.payload.timestamp
