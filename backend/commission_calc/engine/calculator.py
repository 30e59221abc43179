"""Commission engine - deterministic, Decimal only. Durations are in days."""
import logging
from decimal import Context, Decimal, ROUND_HALF_UP, getcontext

from commission_calc.config import Settings, get_settings
from commission_calc.schemas.commission import (
    CalculationInput,
    CalculationResult,
    GraceExceededResult,
    NoParticipantsResult,
    SuccessResult,
    ValidationErrorResult,
)

logger = logging.getLogger(__name__)


def _is_valid(data: CalculationInput) -> bool:
    """Budget, rate and both durations must be positive; grace and counts non-negative."""
    return (
        data.budget > 0
        and data.commission_pct > 0
        and data.estimated_days > 0
        and data.actual_days > 0
        and data.grace_period >= 0
        and data.technical_count >= 0
        and data.non_technical_count >= 0
    )


class CommissionEngine:
    """Speed-adjusted commission pool split across technical and non-technical roles."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.technical_weight = Decimal(str(self.settings.technical_weight))
        self.non_technical_weight = Decimal(str(self.settings.non_technical_weight))
        self.multiplier_min = Decimal(str(self.settings.speed_multiplier_min))
        self.multiplier_max = Decimal(str(self.settings.speed_multiplier_max))

    def _round(self, value: Decimal) -> Decimal:
        """Round half away from zero to the configured number of places."""
        places = self.settings.rounding_places
        quantize = Decimal(10) ** -places
        # Quantizing needs every integer digit plus the decimal places
        context = Context(prec=max(getcontext().prec, value.adjusted() + places + 2))
        return value.quantize(quantize, rounding=ROUND_HALF_UP, context=context)

    def grace_exceeded(self, data: CalculationInput) -> bool:
        """Finishing after estimate + grace forfeits the whole commission."""
        return data.actual_days > data.estimated_days + data.grace_period

    def commission_pool(self, data: CalculationInput) -> Decimal:
        """Commission Pool = Budget × Commission % / 100."""
        return data.budget * data.commission_pct / Decimal(100)

    def speed_multiplier(self, data: CalculationInput) -> Decimal:
        """Estimated / actual days, clamped to [min, max]."""
        raw = data.estimated_days / data.actual_days
        return max(self.multiplier_min, min(self.multiplier_max, raw))

    def total_weight(self, data: CalculationInput) -> Decimal:
        return (
            data.technical_count * self.technical_weight
            + data.non_technical_count * self.non_technical_weight
        )

    def calculate(self, data: CalculationInput) -> CalculationResult:
        """Run validation, grace gate, pool, multiplier and distribution in that order."""
        if not _is_valid(data):
            logger.debug("Rejected commission input: %s", data)
            return ValidationErrorResult()

        if self.grace_exceeded(data):
            logger.debug(
                "Grace period exceeded: actual=%s limit=%s",
                data.actual_days,
                data.estimated_days + data.grace_period,
            )
            return GraceExceededResult()

        pool = self.commission_pool(data)
        multiplier = self.speed_multiplier(data)
        final_pool = pool * multiplier

        total_weight = self.total_weight(data)
        if total_weight == 0:
            logger.debug("No participants to distribute %s to", final_pool)
            return NoParticipantsResult()

        per_weight_share = final_pool / total_weight
        technical_share = None
        if data.technical_count > 0:
            technical_share = self._round(per_weight_share * self.technical_weight)
        non_technical_share = None
        if data.non_technical_count > 0:
            non_technical_share = self._round(per_weight_share * self.non_technical_weight)

        result = SuccessResult(
            commission_pool=self._round(pool),
            speed_multiplier=self._round(multiplier),
            final_pool=self._round(final_pool),
            technical_share=technical_share,
            non_technical_share=non_technical_share,
        )
        logger.debug("Commission calculated: %s", result)
        return result


def calculate(data: CalculationInput) -> CalculationResult:
    """Calculate with the application settings."""
    return CommissionEngine().calculate(data)
