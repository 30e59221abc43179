from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from commission_calc.config import Settings, get_settings
from commission_calc.engine.calculator import CommissionEngine
from commission_calc.schemas.commission import CalculationInput


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine() -> CommissionEngine:
    return CommissionEngine(Settings())


@pytest.fixture
def case_a() -> CalculationInput:
    return CalculationInput(
        budget=Decimal(1000),
        commission_pct=Decimal(5),
        estimated_days=Decimal(10),
        actual_days=Decimal(8),
        grace_period=Decimal(0),
        technical_count=2,
        non_technical_count=1,
    )


@pytest.fixture
def client() -> TestClient:
    from commission_calc.main import app

    return TestClient(app)
