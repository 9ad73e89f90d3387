"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from health_calculator.api.formatting import bmi_summary, calorie_summary, history_item
from health_calculator.api.models import BMIRequest, CalorieRequest
from health_calculator.app_logging import configure_logging
from health_calculator.containers import AppContainer
from health_calculator.domain.errors import HistoryWriteError, InputValidationError
from health_calculator.services.units import height_placeholder, weight_placeholder


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(InputValidationError)
    async def input_validation_handler(
        request: Request, exc: InputValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "error": exc.kind},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/calories")
    async def calculate_calories(
        payload: CalorieRequest, request: Request
    ) -> dict[str, object]:
        """Compute a calorie breakdown from macronutrient grams."""
        state_container: AppContainer = request.app.state.container
        try:
            result = state_container.calorie_service.compute_calories(
                payload.to_input()
            )
        except HistoryWriteError as exc:
            logger.exception("Failed to save calorie result")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error saving result",
            ) from exc
        return {
            **calorie_summary(result),
            "message": "Calories calculated successfully!",
        }

    @app.post("/bmi")
    async def calculate_bmi(payload: BMIRequest, request: Request) -> dict[str, object]:
        """Compute BMI from weight and height."""
        state_container: AppContainer = request.app.state.container
        try:
            result = state_container.bmi_service.compute_bmi(payload.to_input())
        except HistoryWriteError as exc:
            logger.exception("Failed to save BMI result")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error saving result",
            ) from exc
        return {
            **bmi_summary(result),
            "message": f"BMI calculated: {result.category.value}",
        }

    @app.get("/history")
    async def history(request: Request) -> dict[str, object]:
        """Return saved results from both calculators, newest first."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.history_service.load_all()
        items = [history_item(entry) for entry in entries]
        if not items:
            return {"results": [], "message": "No saved results yet"}
        return {"results": items}

    @app.delete("/history")
    async def clear_history(request: Request, confirm: bool = False) -> dict[str, str]:
        """Clear all saved results once the user has confirmed."""
        if not confirm:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Confirmation required to clear history",
            )
        state_container: AppContainer = request.app.state.container
        try:
            state_container.history_service.clear()
        except HistoryWriteError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error clearing history",
            ) from exc
        return {"status": "ok", "message": "History cleared successfully"}

    @app.get("/units/weight/{unit}/placeholder")
    async def weight_unit_placeholder(unit: str) -> dict[str, str]:
        """Return the input hint for a weight unit."""
        return {"placeholder": weight_placeholder(unit)}

    @app.get("/units/height/{unit}/placeholder")
    async def height_unit_placeholder(unit: str) -> dict[str, str]:
        """Return the input hint for a height unit."""
        return {"placeholder": height_placeholder(unit)}

    return app
