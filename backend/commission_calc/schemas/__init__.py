"""Pydantic schemas."""
from commission_calc.schemas.commission import (
    CalculationInput,
    CalculationResult,
    CommissionSummary,
    GraceExceededResult,
    NoParticipantsResult,
    SuccessResult,
    ValidationErrorResult,
)

__all__ = [
    "CalculationInput",
    "CalculationResult",
    "CommissionSummary",
    "GraceExceededResult",
    "NoParticipantsResult",
    "SuccessResult",
    "ValidationErrorResult",
]
