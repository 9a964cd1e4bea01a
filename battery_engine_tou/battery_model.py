# battery_engine_tou/battery_model.py

from __future__ import annotations
from dataclasses import dataclass

from .types import BatteryConfig


@dataclass
class BatteryModel:
    """
    Afgeleide batterijparameters voor de simulatie.
    """

    capacity_kwh: float                    # nominale capaciteit (kWh)
    usable_capacity_percent: float         # 0..100
    round_trip_efficiency_percent: float   # 0..100

    # Afgeleide velden
    usable_capacity_kwh: float = 0.0
    efficiency: float = 1.0

    def __post_init__(self) -> None:

        # -----------------------------
        # Bounds & correcties
        # -----------------------------
        self.capacity_kwh = max(0.0, float(self.capacity_kwh))
        self.usable_capacity_percent = min(max(float(self.usable_capacity_percent), 0.0), 100.0)
        self.round_trip_efficiency_percent = min(
            max(float(self.round_trip_efficiency_percent), 0.0), 100.0
        )

        # -----------------------------
        # Bruikbare capaciteit (DoD) en rendement
        # Het volledige verlies wordt bij het laden toegepast.
        # -----------------------------
        self.usable_capacity_kwh = self.capacity_kwh * (self.usable_capacity_percent / 100.0)
        self.efficiency = self.round_trip_efficiency_percent / 100.0

    @classmethod
    def from_config(cls, cfg: BatteryConfig) -> "BatteryModel":
        return cls(
            capacity_kwh=cfg.capacity_kwh,
            usable_capacity_percent=cfg.usable_capacity_percent,
            round_trip_efficiency_percent=cfg.round_trip_efficiency_percent,
        )
