import pytest
from battery_engine_tou.battery_model import BatteryModel
from battery_engine_tou.types import BatteryConfig


def test_battery_model_init_basic():
    """Bruikbare capaciteit en rendement uit percentages."""
    batt = BatteryModel(capacity_kwh=10, usable_capacity_percent=90, round_trip_efficiency_percent=95)

    assert batt.usable_capacity_kwh == pytest.approx(9.0)
    assert batt.efficiency == pytest.approx(0.95)


def test_out_of_range_inputs_are_clamped():
    batt = BatteryModel(capacity_kwh=-5, usable_capacity_percent=150, round_trip_efficiency_percent=-10)

    assert batt.capacity_kwh == 0.0
    assert batt.usable_capacity_percent == 100.0
    assert batt.usable_capacity_kwh == 0.0
    assert batt.efficiency == 0.0


def test_from_config(battery_config):
    batt = BatteryModel.from_config(battery_config)
    assert batt.usable_capacity_kwh == 10.0
    assert batt.efficiency == 1.0


def test_from_config_derated():
    cfg = BatteryConfig(
        capacity_kwh=13.5,
        usable_capacity_percent=80,
        round_trip_efficiency_percent=90,
        purchase_price=8000,
    )
    batt = BatteryModel.from_config(cfg)
    assert batt.usable_capacity_kwh == pytest.approx(10.8)
    assert batt.efficiency == pytest.approx(0.9)
