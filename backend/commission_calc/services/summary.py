"""Display lines for a commission result."""
from decimal import Decimal

from commission_calc.schemas.commission import (
    CalculationResult,
    CommissionSummary,
    GraceExceededResult,
    NoParticipantsResult,
    SuccessResult,
    ValidationErrorResult,
)

GRACE_EXCEEDED_MESSAGE = "Project exceeded the grace period. No commission awarded."


def _money(value: Decimal) -> str:
    return f"${value:.2f}"


def _pct(value: Decimal) -> str:
    # 5 -> "5", 2.50 -> "2.5"
    return format(value.normalize(), "f")


def summarize(result: CalculationResult, commission_pct: Decimal) -> CommissionSummary:
    """Render a result the way the calculator form shows it."""
    if isinstance(result, (ValidationErrorResult, NoParticipantsResult)):
        return CommissionSummary(status=result.status, lines=[result.message])

    if isinstance(result, GraceExceededResult):
        return CommissionSummary(status=result.status, lines=[GRACE_EXCEEDED_MESSAGE])

    if isinstance(result, SuccessResult):
        lines = [
            f"Base Commission Pool ({_pct(commission_pct)}%): {_money(result.commission_pool)}",
            f"Speed Multiplier: {result.speed_multiplier:.2f}x",
            f"Total Adjusted Pool: {_money(result.final_pool)}",
        ]
        if result.technical_share is not None:
            lines.append(f"Per Technical Person Share: {_money(result.technical_share)}")
        if result.non_technical_share is not None:
            lines.append(f"Per Non-Technical Person Share: {_money(result.non_technical_share)}")
        return CommissionSummary(status=result.status, lines=lines)

    raise TypeError(f"Unknown commission result: {type(result).__name__}")
