"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from health_calculator.config import Settings
from health_calculator.containers import AppContainer
from health_calculator.domain.errors import HistoryReadError, HistoryWriteError
from health_calculator.services.bmi import BMIService
from health_calculator.services.calories import CalorieService
from health_calculator.services.history import HistoryRepository, HistoryService


@dataclass
class InMemoryHistoryRepository(HistoryRepository):
    """In-memory history repository for tests."""

    slots: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    corrupt_slots: set[str] = field(default_factory=set)
    fail_writes: bool = False
    writes: list[str] = field(default_factory=list)

    def read_slot(self, slot: str) -> list[dict[str, object]]:
        if slot in self.corrupt_slots:
            raise HistoryReadError(f"corrupt slot {slot}")
        return [dict(record) for record in self.slots.get(slot, [])]

    def write_slot(self, slot: str, records: list[dict[str, object]]) -> None:
        if self.fail_writes:
            raise HistoryWriteError("disk full")
        self.writes.append(slot)
        self.corrupt_slots.discard(slot)
        self.slots[slot] = [dict(record) for record in records]

    def delete_slot(self, slot: str) -> None:
        if self.fail_writes:
            raise HistoryWriteError("disk full")
        self.corrupt_slots.discard(slot)
        self.slots.pop(slot, None)


@dataclass
class SteppingClock:
    """Clock that advances by a fixed step on every call."""

    start: datetime = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
    step: timedelta = timedelta(minutes=1)
    calls: int = 0

    def __call__(self) -> datetime:
        current = self.start + self.step * self.calls
        self.calls += 1
        return current


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(history_dir=tmp_path / "history")


@pytest.fixture
def history_repository() -> InMemoryHistoryRepository:
    return InMemoryHistoryRepository()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def history_service(
    history_repository: InMemoryHistoryRepository,
) -> HistoryService:
    return HistoryService(history_repository)


@pytest.fixture
def calorie_service(
    history_service: HistoryService, clock: Callable[[], datetime]
) -> CalorieService:
    return CalorieService(history_service, clock=clock)


@pytest.fixture
def bmi_service(
    history_service: HistoryService, clock: Callable[[], datetime]
) -> BMIService:
    return BMIService(history_service, clock=clock)


@pytest.fixture
def container(
    settings: Settings,
    history_service: HistoryService,
    calorie_service: CalorieService,
    bmi_service: BMIService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        history_service=history_service,
        calorie_service=calorie_service,
        bmi_service=bmi_service,
    )
