import pytest

from battery_engine_tou.roi_engine import ROIConfig, ROIEngine


def make_cfg(**overrides):
    values = dict(
        total_consumption_kwh=100.0,
        total_injection_kwh=80.0,
        total_grid_purchased_kwh=40.0,
        total_battery_discharged_kwh=60.0,
        cost_without_battery=30.0,
        cost_with_battery=10.0,
        days_observed=73,
        purchase_price=5000.0,
        lifespan_years=10,
    )
    values.update(overrides)
    return ROIConfig(**values)


def test_annualized_savings_and_payback():
    """
    73 dagen → factor 5
    besparing 20 € * 5 = 100 €/jaar → payback 50 jaar
    """
    res = ROIEngine.compute(make_cfg())

    assert res.annual_savings == pytest.approx(100.0)
    assert res.payback_years == pytest.approx(50.0)
    assert res.lifetime_savings == pytest.approx(1000.0)
    assert res.roi_percent == pytest.approx(-80.0)


def test_self_consumption_and_grid_reduction():
    res = ROIEngine.compute(make_cfg())

    # geen direct verbruik bekend → "voor" blijft 0
    assert res.self_consumption_before == 0.0
    # 60 uit batterij / 80 productie
    assert res.self_consumption_after == pytest.approx(75.0)
    assert res.grid_reduction_percent == pytest.approx(60.0)


def test_self_consumption_after_is_capped():
    res = ROIEngine.compute(make_cfg(total_battery_discharged_kwh=120.0))
    assert res.self_consumption_after == pytest.approx(100.0)


def test_direct_use_feeds_self_consumption_before():
    res = ROIEngine.compute(make_cfg(total_solar_used_directly_kwh=20.0))

    # productie = 80 + 20
    assert res.self_consumption_before == pytest.approx(20.0)
    assert res.self_consumption_after == pytest.approx(80.0)


def test_negative_savings_never_pays_back():
    res = ROIEngine.compute(make_cfg(cost_with_battery=35.0))

    assert res.annual_savings < 0
    assert res.payback_years is None
    assert res.roi_percent == 0.0


def test_zero_division_guards():
    res = ROIEngine.compute(
        make_cfg(
            total_consumption_kwh=0.0,
            total_injection_kwh=0.0,
            total_grid_purchased_kwh=0.0,
            total_battery_discharged_kwh=0.0,
            cost_without_battery=0.0,
            cost_with_battery=0.0,
            days_observed=0,
        )
    )

    assert res.grid_reduction_percent == 0.0
    assert res.self_consumption_before == 0.0
    assert res.self_consumption_after == 0.0
    assert res.annual_savings == 0.0
    assert res.payback_years is None
