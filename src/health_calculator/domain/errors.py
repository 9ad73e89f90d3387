"""Errors raised by the calculators and the history store."""


class InputValidationError(ValueError):
    """Base class for rejected user input."""

    kind = "invalid_input"
    default_message = "Invalid input"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NegativeMacronutrientError(InputValidationError):
    """A macronutrient amount is negative or not a finite number."""

    kind = "negative"
    default_message = "Please enter valid positive numbers"


class AllZeroMacronutrientsError(InputValidationError):
    """No macronutrient amount was entered."""

    kind = "all_zero"
    default_message = "Please enter at least one macronutrient value"


class InvalidMeasurementError(InputValidationError):
    """Weight or height is missing, non-numeric or not positive."""

    kind = "invalid_measurement"
    default_message = "Please enter valid weight and height values"


class HistoryReadError(RuntimeError):
    """Persisted history could not be read or decoded."""


class HistoryWriteError(RuntimeError):
    """Persisted history could not be written."""
