# battery_engine_tou/roi_engine.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .types import ROIResult


DAYS_PER_YEAR = 365


@dataclass
class ROIConfig:
    """
    Totalen van één simulatierun, input voor de ROI-berekening.
    """
    total_consumption_kwh: float
    total_injection_kwh: float
    total_grid_purchased_kwh: float
    total_battery_discharged_kwh: float
    cost_without_battery: float
    cost_with_battery: float
    days_observed: int
    purchase_price: float
    lifespan_years: int = 15
    # Direct eigen verbruik van PV: de intervaldata bevat enkel netto
    # afname/injectie, dus dit blijft 0 tenzij apart aangeleverd.
    total_solar_used_directly_kwh: float = 0.0


def _percent(part: float, whole: float) -> float:
    if whole <= 0:
        return 0.0
    return part / whole * 100.0


class ROIEngine:
    """
    Berekent zelfconsumptie, netreductie, jaarlijkse besparing en terugverdientijd.
    """

    @staticmethod
    def compute(cfg: ROIConfig) -> ROIResult:
        """
        - zelfconsumptie voor/na t.o.v. totale PV-productie (injectie + direct verbruik)
        - netreductie = (afname - netaankoop) / afname
        - besparing wordt geëxtrapoleerd naar 365 dagen
        - payback = aankoopprijs / jaarlijkse besparing, None als er geen besparing is
        """

        solar_production = cfg.total_injection_kwh + cfg.total_solar_used_directly_kwh

        self_consumption_before = _percent(cfg.total_solar_used_directly_kwh, solar_production)

        solar_used_after = cfg.total_solar_used_directly_kwh + cfg.total_battery_discharged_kwh
        self_consumption_after = _percent(min(solar_used_after, solar_production), solar_production)

        grid_reduction = _percent(
            cfg.total_consumption_kwh - cfg.total_grid_purchased_kwh,
            cfg.total_consumption_kwh,
        )

        # Extrapolatie naar een volledig jaar
        annualization = DAYS_PER_YEAR / cfg.days_observed if cfg.days_observed > 0 else 1.0
        annual_savings = (cfg.cost_without_battery - cfg.cost_with_battery) * annualization

        payback: Optional[float] = None
        if annual_savings > 0:
            payback = cfg.purchase_price / annual_savings

        # Geen degradatie: besparing blijft elk jaar gelijk
        lifetime_savings = annual_savings * max(cfg.lifespan_years, 0)
        if cfg.purchase_price > 0 and annual_savings > 0:
            roi_percent = (lifetime_savings - cfg.purchase_price) / cfg.purchase_price * 100.0
        else:
            roi_percent = 0.0

        return ROIResult(
            annual_savings=annual_savings,
            payback_years=payback,
            self_consumption_before=self_consumption_before,
            self_consumption_after=self_consumption_after,
            grid_reduction_percent=grid_reduction,
            lifetime_savings=lifetime_savings,
            roi_percent=roi_percent,
        )
