"""Commission calculation schemas."""
from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

VALIDATION_MESSAGE = "All values must be valid and greater than zero where applicable."
NO_PARTICIPANTS_MESSAGE = "At least one person (technical or non-technical) must be involved."

ZERO = Decimal("0.00")


class CalculationInput(BaseModel):
    """Project and team values as entered on the calculator form.

    Only types are enforced here. Range checks are the engine's job so that
    out-of-range values come back as a validation_error outcome.
    """

    budget: Decimal = Decimal(1000)
    commission_pct: Decimal = Decimal(5)
    estimated_days: Decimal = Decimal(10)
    actual_days: Decimal = Decimal(8)
    grace_period: Decimal = Decimal(0)
    technical_count: int = 2
    non_technical_count: int = 1

    class Config:
        frozen = True


class ValidationErrorResult(BaseModel):
    status: Literal["validation_error"] = "validation_error"
    message: str = VALIDATION_MESSAGE

    class Config:
        frozen = True


class GraceExceededResult(BaseModel):
    """Delivery finished after estimate + grace. No commission is awarded."""

    status: Literal["grace_exceeded"] = "grace_exceeded"
    commission_pool: Decimal = ZERO
    speed_multiplier: Decimal = ZERO
    final_pool: Decimal = ZERO
    technical_share: Decimal = ZERO
    non_technical_share: Decimal = ZERO

    class Config:
        frozen = True


class NoParticipantsResult(BaseModel):
    status: Literal["no_participants"] = "no_participants"
    message: str = NO_PARTICIPANTS_MESSAGE

    class Config:
        frozen = True


class SuccessResult(BaseModel):
    """Pools and per-person shares, rounded for presentation.

    A share is None when nobody is in that role category.
    """

    status: Literal["success"] = "success"
    commission_pool: Decimal
    speed_multiplier: Decimal
    final_pool: Decimal
    technical_share: Decimal | None = None
    non_technical_share: Decimal | None = None

    class Config:
        frozen = True


CalculationResult = Annotated[
    Union[ValidationErrorResult, GraceExceededResult, NoParticipantsResult, SuccessResult],
    Field(discriminator="status"),
]


class CommissionSummary(BaseModel):
    status: str
    lines: list[str]
