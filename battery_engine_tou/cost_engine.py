# battery_engine_tou/cost_engine.py

from __future__ import annotations

from .tariff_model import TariffModel
from .types import EnergyInterval


class CostEngine:
    """Kostenregels per interval (afname tegen tijdsblok, injectie vlak)."""

    def __init__(self, tariff: TariffModel):
        self.tariff = tariff

    def cost_without_battery(self, interval: EnergyInterval, rate: float) -> float:
        # afname betalen, injectie terugkrijgen (nooit tegen het tijdsblok)
        return (
            interval.consumption_kwh * rate
            - interval.injection_kwh * self.tariff.get_export_price()
        )

    def export_credit(self, kwh: float) -> float:
        return kwh * self.tariff.get_export_price()

    def grid_cost(self, kwh: float, rate: float) -> float:
        return kwh * rate
