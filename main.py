# ============================================================
# Thuisbatterij Engine: Backend API
# parse_csv + simulate + default_schedule
# ============================================================

import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from battery_engine_tou.engine import BatteryEngine, ComputeInput
from battery_engine_tou.fluvius_parser import parse_fluvius_csv
from battery_engine_tou.settings import get_settings
from battery_engine_tou.tariff_model import DEFAULT_RATE_SCHEDULE
from battery_engine_tou.types import (
    BatteryConfig,
    EnergyInterval,
    RateSchedule,
    TariffTierDefinition,
)


# ============================================================
# FASTAPI INIT
# ============================================================

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("battery_engine_tou.api")

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


# ============================================================
# REQUESTMODELLEN
# ============================================================

class IntervalModel(BaseModel):
    start_time: datetime
    end_time: datetime
    consumption_kwh: float = Field(default=0.0, ge=0)
    injection_kwh: float = Field(default=0.0, ge=0)


class TierModel(BaseModel):
    id: str
    name: str
    rate: float
    color: str = ""


class ScheduleModel(BaseModel):
    tiers: List[TierModel]
    weekday_schedule: Dict[int, str]
    weekend_schedule: Dict[int, str]
    injection_rate: float


class BatteryModelRequest(BaseModel):
    capacity_kwh: float
    usable_capacity_percent: float = 100.0
    round_trip_efficiency_percent: float = 90.0
    purchase_price: float
    lifespan_years: int = 15


class ParseCSVRequest(BaseModel):
    csv_text: str


class SimulateRequest(BaseModel):
    battery: BatteryModelRequest

    # PROFIEL: ofwel intervallen, ofwel een Fluvius export
    intervals: Optional[List[IntervalModel]] = None
    csv_text: Optional[str] = None

    # TARIEF: standaardschema als het ontbreekt
    schedule: Optional[ScheduleModel] = None


def _to_schedule(model: ScheduleModel) -> RateSchedule:
    return RateSchedule(
        tiers=[
            TariffTierDefinition(id=t.id, name=t.name, rate=t.rate, color=t.color)
            for t in model.tiers
        ],
        weekday_schedule=dict(model.weekday_schedule),
        weekend_schedule=dict(model.weekend_schedule),
        injection_rate=model.injection_rate,
    )


def _to_intervals(models: List[IntervalModel]) -> List[EnergyInterval]:
    return [
        EnergyInterval(
            start_time=m.start_time,
            end_time=m.end_time,
            consumption_kwh=m.consumption_kwh,
            injection_kwh=m.injection_kwh,
        )
        for m in models
    ]


# ============================================================
# CSV PARSER
# ============================================================

@app.post("/parse_csv")
def parse_csv(req: ParseCSVRequest):
    intervals = parse_fluvius_csv(req.csv_text)

    if not intervals:
        return {"intervals": [], "error": "NO_INTERVALS"}

    return {"intervals": [iv.to_dict() for iv in intervals]}


# ============================================================
# SIMULATE ENDPOINT
# ============================================================

@app.post("/simulate")
def simulate(req: SimulateRequest):

    battery = BatteryConfig(
        capacity_kwh=req.battery.capacity_kwh,
        usable_capacity_percent=req.battery.usable_capacity_percent,
        round_trip_efficiency_percent=req.battery.round_trip_efficiency_percent,
        purchase_price=req.battery.purchase_price,
        lifespan_years=req.battery.lifespan_years,
    )

    engine_input = ComputeInput(
        battery=battery,
        intervals=_to_intervals(req.intervals) if req.intervals else None,
        csv_text=req.csv_text,
        schedule=_to_schedule(req.schedule) if req.schedule else None,
    )

    result = BatteryEngine.compute(engine_input)
    if "error" in result:
        logger.info("Simulate request rejected: %s", result["error"])
    return result


@app.get("/default_schedule")
def default_schedule():
    return DEFAULT_RATE_SCHEDULE.to_dict()
