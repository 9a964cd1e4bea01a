# battery_engine_tou/types.py

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional


# ============================================================
# EnergyInterval: één meetvenster (kwartier) uit de meterdata
# ============================================================

@dataclass(frozen=True)
class EnergyInterval:
    start_time: datetime
    end_time: datetime
    consumption_kwh: float     # afname van het net (kWh)
    injection_kwh: float       # injectie in het net (kWh)

    def to_dict(self):
        return {
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "consumption_kwh": self.consumption_kwh,
            "injection_kwh": self.injection_kwh,
        }


# ============================================================
# Tariefschema: tijdsblokken per uur, week en weekend
# ============================================================

@dataclass
class TariffTierDefinition:
    id: str
    name: str
    rate: float                # €/kWh voor afname
    color: str = ""            # alleen voor de frontend

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "rate": self.rate,
            "color": self.color,
        }


HourlySchedule = Dict[int, str]


@dataclass
class RateSchedule:
    tiers: List[TariffTierDefinition]
    weekday_schedule: HourlySchedule
    weekend_schedule: HourlySchedule
    injection_rate: float      # €/kWh, vlak tarief (niet tijdsafhankelijk)

    def find_tier(self, tier_id: str) -> Optional[TariffTierDefinition]:
        for tier in self.tiers:
            if tier.id == tier_id:
                return tier
        return None

    def to_dict(self):
        return {
            "tiers": [t.to_dict() for t in self.tiers],
            "weekday_schedule": dict(self.weekday_schedule),
            "weekend_schedule": dict(self.weekend_schedule),
            "injection_rate": self.injection_rate,
        }


# ============================================================
# Battery Configuration: input voor BatteryModel & ROI
# ============================================================

@dataclass
class BatteryConfig:
    capacity_kwh: float                    # nominale capaciteit
    usable_capacity_percent: float         # 0–100 (DoD-limiet)
    round_trip_efficiency_percent: float   # 0–100, verlies bij het laden
    purchase_price: float                  # € (batterij + installatie)
    lifespan_years: int = 15

    def to_dict(self):
        return {
            "capacity_kwh": self.capacity_kwh,
            "usable_capacity_percent": self.usable_capacity_percent,
            "round_trip_efficiency_percent": self.round_trip_efficiency_percent,
            "purchase_price": self.purchase_price,
            "lifespan_years": self.lifespan_years,
        }


# ============================================================
# DailyResult: resultaat per kalenderdag
# ============================================================

@dataclass
class DailyResult:
    date: date
    consumption_kwh: float = 0.0
    injection_kwh: float = 0.0
    battery_charged_kwh: float = 0.0
    battery_discharged_kwh: float = 0.0
    grid_purchased_kwh: float = 0.0
    cost_without_battery: float = 0.0
    cost_with_battery: float = 0.0

    def to_dict(self):
        return {
            "date": self.date.isoformat(),
            "consumption_kwh": self.consumption_kwh,
            "injection_kwh": self.injection_kwh,
            "battery_charged_kwh": self.battery_charged_kwh,
            "battery_discharged_kwh": self.battery_discharged_kwh,
            "grid_purchased_kwh": self.grid_purchased_kwh,
            "cost_without_battery": self.cost_without_battery,
            "cost_with_battery": self.cost_with_battery,
        }


# ============================================================
# ROI Result: jaarlijkse besparing, payback & zelfconsumptie
# ============================================================

@dataclass
class ROIResult:
    annual_savings: float
    payback_years: Optional[float]         # None = nooit terugverdiend
    self_consumption_before: float         # %
    self_consumption_after: float          # %
    grid_reduction_percent: float
    lifetime_savings: float
    roi_percent: float

    def to_dict(self):
        return {
            "annual_savings": self.annual_savings,
            "payback_years": self.payback_years,
            "self_consumption_before": self.self_consumption_before,
            "self_consumption_after": self.self_consumption_after,
            "grid_reduction_percent": self.grid_reduction_percent,
            "lifetime_savings": self.lifetime_savings,
            "roi_percent": self.roi_percent,
        }


# ============================================================
# SimulationResult: totaal van één simulatierun
# ============================================================

@dataclass
class SimulationResult:
    total_consumption_kwh: float
    total_injection_kwh: float
    cost_without_battery: float
    cost_with_battery: float
    annual_savings: float
    payback_years: Optional[float]
    self_consumption_before: float
    self_consumption_after: float
    grid_reduction_percent: float
    daily_results: List[DailyResult] = field(default_factory=list)
    lifetime_savings: float = 0.0
    roi_percent: float = 0.0

    def to_dict(self):
        return {
            "total_consumption_kwh": self.total_consumption_kwh,
            "total_injection_kwh": self.total_injection_kwh,
            "cost_without_battery": self.cost_without_battery,
            "cost_with_battery": self.cost_with_battery,
            "annual_savings": self.annual_savings,
            "payback_years": self.payback_years,
            "self_consumption_before": self.self_consumption_before,
            "self_consumption_after": self.self_consumption_after,
            "grid_reduction_percent": self.grid_reduction_percent,
            "lifetime_savings": self.lifetime_savings,
            "roi_percent": self.roi_percent,
            "daily_results": [d.to_dict() for d in self.daily_results],
        }


# ============================================================
# Aliases voor duidelijkheid
# ============================================================

TierId = str
