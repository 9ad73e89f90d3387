"""Dependency container wiring for the application."""

from dataclasses import dataclass

from health_calculator.adapters.json_file_history_repository import (
    JsonFileHistoryRepository,
)
from health_calculator.config import Settings
from health_calculator.services.bmi import BMIService
from health_calculator.services.calories import CalorieService
from health_calculator.services.history import HistoryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    history_service: HistoryService
    calorie_service: CalorieService
    bmi_service: BMIService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    history_service = HistoryService(
        repository=JsonFileHistoryRepository(resolved_settings.history_dir),
        calorie_slot=resolved_settings.calorie_history_slot,
        bmi_slot=resolved_settings.bmi_history_slot,
        limit=resolved_settings.history_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        history_service=history_service,
        calorie_service=CalorieService(history_service),
        bmi_service=BMIService(history_service),
    )
