# battery_engine_tou/engine.py

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .battery_simulator import BatterySimulator
from .fluvius_parser import parse_fluvius_csv
from .tariff_model import DEFAULT_RATE_SCHEDULE
from .types import BatteryConfig, EnergyInterval, RateSchedule

logger = logging.getLogger(__name__)


@dataclass
class ComputeInput:
    """Structuur die 1-op-1 lijkt op de FastAPI request body."""

    battery: BatteryConfig
    intervals: Optional[List[EnergyInterval]] = None
    csv_text: Optional[str] = None       # Fluvius export, als er geen intervals zijn
    schedule: Optional[RateSchedule] = None


class BatteryEngine:
    """
    Publieke interface van de engine.
    Wordt aangeroepen door FastAPI in main.py (endpoint /simulate).
    """

    @staticmethod
    def compute(input_data: ComputeInput) -> Dict[str, Any]:
        """
        Bouwt een verse simulator, voert de run uit en geeft API-ready output terug.
        """

        # ------------------------------------------------------
        # 1) INTERVALLEN
        # ------------------------------------------------------
        intervals = input_data.intervals
        if not intervals and input_data.csv_text:
            intervals = parse_fluvius_csv(input_data.csv_text)

        if not intervals:
            return {"error": "NO_INTERVALS"}

        # ------------------------------------------------------
        # 2) TARIEFSCHEMA
        # ------------------------------------------------------
        schedule = input_data.schedule or DEFAULT_RATE_SCHEDULE

        # ------------------------------------------------------
        # 3) SIMULATIE (één instantie per request)
        # ------------------------------------------------------
        simulator = BatterySimulator(intervals, input_data.battery, schedule)
        warnings = simulator.tariff.validate()
        result = simulator.run()

        logger.info(
            "Battery %.1f kWh: %d intervals, annual savings %.2f EUR",
            input_data.battery.capacity_kwh,
            len(intervals),
            result.annual_savings,
        )

        out = result.to_dict()
        out["schedule_warnings"] = warnings
        return out
