import pytest
from battery_engine_tou.types import BatteryConfig


@pytest.fixture
def battery_config():
    """10 kWh, volledig bruikbaar, 100% rendement (makkelijk rekenen)."""
    return BatteryConfig(
        capacity_kwh=10,
        usable_capacity_percent=100,
        round_trip_efficiency_percent=100,
        purchase_price=6000,
        lifespan_years=15,
    )
