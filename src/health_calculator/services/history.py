"""History store for saved calculator results."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from health_calculator.domain.bmi import BMIResult
from health_calculator.domain.calories import CalorieResult
from health_calculator.domain.errors import HistoryReadError, HistoryWriteError
from health_calculator.domain.history import HistoryEntry, HistoryEntryType
from health_calculator.services.records import (
    decode_bmi,
    decode_calorie,
    encode_bmi,
    encode_calorie,
)

DEFAULT_CALORIE_SLOT = "calorieHistory"
DEFAULT_BMI_SLOT = "bmiHistory"
DEFAULT_HISTORY_LIMIT = 10

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class HistoryRepository(Protocol):
    """Persistence interface for named history slots."""

    def read_slot(self, slot: str) -> list[dict[str, object]]:
        """Return the stored records for a slot, or an empty list if absent.

        Raises HistoryReadError when the stored data is corrupt.
        """

    def write_slot(self, slot: str, records: list[dict[str, object]]) -> None:
        """Replace the stored records for a slot.

        Raises HistoryWriteError when the data cannot be persisted.
        """

    def delete_slot(self, slot: str) -> None:
        """Remove a slot entirely."""


@dataclass
class HistoryService:
    """Bounded, newest-first history of calorie and BMI results.

    Nothing is cached: every call reads the repository again, and every
    mutation writes the whole slot back before returning.
    """

    repository: HistoryRepository
    calorie_slot: str = DEFAULT_CALORIE_SLOT
    bmi_slot: str = DEFAULT_BMI_SLOT
    limit: int = DEFAULT_HISTORY_LIMIT

    def append_calorie(self, result: CalorieResult) -> None:
        """Save a calorie result at the front of its history."""
        history = [result, *self.list_calories()]
        self._write(self.calorie_slot, [encode_calorie(item) for item in history])

    def append_bmi(self, result: BMIResult) -> None:
        """Save a BMI result at the front of its history."""
        history = [result, *self.list_bmi()]
        self._write(self.bmi_slot, [encode_bmi(item) for item in history])

    def list_calories(self) -> list[CalorieResult]:
        """Return saved calorie results, newest first."""
        return self._decode_slot(self.calorie_slot, decode_calorie)

    def list_bmi(self) -> list[BMIResult]:
        """Return saved BMI results, newest first."""
        return self._decode_slot(self.bmi_slot, decode_bmi)

    def load_all(self) -> list[HistoryEntry]:
        """Return every saved result sorted by timestamp, newest first."""
        entries = [
            HistoryEntry(type=HistoryEntryType.CALORIE, payload=result)
            for result in self.list_calories()
        ]
        entries.extend(
            HistoryEntry(type=HistoryEntryType.BMI, payload=result)
            for result in self.list_bmi()
        )
        return sorted(entries, key=lambda entry: entry.timestamp, reverse=True)

    def clear(self) -> None:
        """Remove both histories. Callers confirm with the user beforehand."""
        for slot in (self.calorie_slot, self.bmi_slot):
            try:
                self.repository.delete_slot(slot)
            except HistoryWriteError:
                _logger.exception("Failed to clear history slot %s", slot)
                raise
        _logger.info("History cleared")

    def _write(self, slot: str, records: list[dict[str, object]]) -> None:
        try:
            self.repository.write_slot(slot, records[: self.limit])
        except HistoryWriteError:
            _logger.exception("Failed to save result to %s", slot)
            raise

    def _decode_slot(
        self, slot: str, decode: Callable[[dict[str, object]], T]
    ) -> list[T]:
        try:
            return [decode(record) for record in self.repository.read_slot(slot)]
        except HistoryReadError as exc:
            _logger.warning("Ignoring unreadable history slot %s: %s", slot, exc)
            return []
