"""Commission calculator API routes."""
from fastapi import APIRouter

from commission_calc.engine.calculator import CommissionEngine
from commission_calc.schemas.commission import CalculationInput, CalculationResult, CommissionSummary
from commission_calc.services.summary import summarize

router = APIRouter(prefix="/commission", tags=["commission"])


@router.get("/defaults", response_model=CalculationInput)
async def get_defaults():
    """Initial form values."""
    return CalculationInput()


@router.post("/calculate", response_model=CalculationResult)
async def calculate_commission(data: CalculationInput):
    """
    Recompute on every form change. Every engine outcome is a 200;
    the client switches on `status`:
    validation_error, grace_exceeded, no_participants or success.
    """
    engine = CommissionEngine()
    return engine.calculate(data)


@router.post("/summary", response_model=CommissionSummary)
async def get_summary(data: CalculationInput):
    engine = CommissionEngine()
    result = engine.calculate(data)
    return summarize(result, data.commission_pct)
