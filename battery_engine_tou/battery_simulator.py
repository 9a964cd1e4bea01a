# battery_engine_tou/battery_simulator.py

from __future__ import annotations
import logging
from datetime import date
from typing import Dict, Iterable, List

from .battery_model import BatteryModel
from .cost_engine import CostEngine
from .roi_engine import ROIConfig, ROIEngine
from .tariff_model import TariffModel
from .types import (
    BatteryConfig,
    DailyResult,
    EnergyInterval,
    RateSchedule,
    SimulationResult,
)

logger = logging.getLogger(__name__)


# ============================================================
# BATTERY SIMULATOR
# ============================================================

class BatterySimulator:
    """
    Speelt de historische intervallen af tegen één batterij:
    - kosten zonder batterij (afname tegen tijdsblok, injectie vlak vergoed)
    - kosten met batterij (eerst laden uit injectie, dan ontladen voor afname)

    Eén instantie = één run. De batterijstand leeft alleen in deze instantie.
    """

    def __init__(
        self,
        intervals: Iterable[EnergyInterval],
        battery_config: BatteryConfig,
        schedule: RateSchedule,
    ):
        self.intervals = list(intervals)
        self.config = battery_config
        self.battery = BatteryModel.from_config(battery_config)
        self.tariff = TariffModel(schedule)
        self.costs = CostEngine(self.tariff)

        self.battery_level = 0.0
        self.level_profile: List[float] = []

    # -------------------------------------------------
    # EÉN RUN
    # -------------------------------------------------
    def run(self) -> SimulationResult:
        """
        Intervallen worden verwerkt in de aangeleverde volgorde; er wordt
        niet gesorteerd of op overlap gecontroleerd.
        """
        usable = self.battery.usable_capacity_kwh
        efficiency = self.battery.efficiency

        self.battery_level = 0.0
        self.level_profile = []

        days: Dict[date, DailyResult] = {}

        total_consumption = 0.0
        total_injection = 0.0
        total_cost_without = 0.0
        total_cost_with = 0.0
        total_discharged = 0.0

        for interval in self.intervals:
            day_key = interval.start_time.date()
            rate = self.tariff.get_import_price(interval.start_time)

            daily = days.get(day_key)
            if daily is None:
                daily = days[day_key] = DailyResult(date=day_key)

            total_consumption += interval.consumption_kwh
            total_injection += interval.injection_kwh
            daily.consumption_kwh += interval.consumption_kwh
            daily.injection_kwh += interval.injection_kwh

            # =========================
            # 1️⃣ ZONDER BATTERIJ
            # =========================
            cost_without = self.costs.cost_without_battery(interval, rate)
            total_cost_without += cost_without
            daily.cost_without_battery += cost_without

            # Binnen één interval eerst laden, dan ontladen: een benadering
            # van het schuiven van energie binnen het kwartier. Niet opsplitsen
            # in twee opeenvolgende gebeurtenissen.
            cost_with = 0.0

            # =========================
            # 2️⃣ INJECTIE → BATTERIJ
            # =========================
            if interval.injection_kwh > 0:
                headroom = usable - self.battery_level
                stored = min(interval.injection_kwh, headroom)
                # verlies wordt bij het laden verrekend
                self.battery_level += stored * efficiency
                # geboekt vóór verlies: dit is wat niet meer geïnjecteerd wordt
                daily.battery_charged_kwh += stored

                cost_with -= self.costs.export_credit(interval.injection_kwh - stored)

            # =========================
            # 3️⃣ BATTERIJ → HUIS
            # =========================
            if interval.consumption_kwh > 0:
                discharged = min(interval.consumption_kwh, self.battery_level)
                self.battery_level -= discharged
                daily.battery_discharged_kwh += discharged
                total_discharged += discharged

                from_grid = interval.consumption_kwh - discharged
                cost_with += self.costs.grid_cost(from_grid, rate)
                daily.grid_purchased_kwh += from_grid

            total_cost_with += cost_with
            daily.cost_with_battery += cost_with

            self.level_profile.append(self.battery_level)

        daily_results = sorted(days.values(), key=lambda d: d.date)
        total_grid = sum(d.grid_purchased_kwh for d in daily_results)

        roi = ROIEngine.compute(
            ROIConfig(
                total_consumption_kwh=total_consumption,
                total_injection_kwh=total_injection,
                total_grid_purchased_kwh=total_grid,
                total_battery_discharged_kwh=total_discharged,
                cost_without_battery=total_cost_without,
                cost_with_battery=total_cost_with,
                days_observed=len(days),
                purchase_price=self.config.purchase_price,
                lifespan_years=self.config.lifespan_years,
            )
        )

        logger.debug(
            "Simulated %d intervals over %d days: cost %.2f -> %.2f EUR, payback %s",
            len(self.intervals),
            len(days),
            total_cost_without,
            total_cost_with,
            "never" if roi.payback_years is None else f"{roi.payback_years:.1f}y",
        )

        return SimulationResult(
            total_consumption_kwh=total_consumption,
            total_injection_kwh=total_injection,
            cost_without_battery=total_cost_without,
            cost_with_battery=total_cost_with,
            annual_savings=roi.annual_savings,
            payback_years=roi.payback_years,
            self_consumption_before=roi.self_consumption_before,
            self_consumption_after=roi.self_consumption_after,
            grid_reduction_percent=roi.grid_reduction_percent,
            daily_results=daily_results,
            lifetime_savings=roi.lifetime_savings,
            roi_percent=roi.roi_percent,
        )


def simulate_battery(
    intervals: Iterable[EnergyInterval],
    battery_config: BatteryConfig,
    schedule: RateSchedule,
) -> SimulationResult:
    """Verse simulator per aanroep; er is geen gedeelde batterijstand."""
    return BatterySimulator(intervals, battery_config, schedule).run()
