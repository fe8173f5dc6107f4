import logging
from dataclasses import asdict
from typing import Any, Dict, List, Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse, Response
from pydantic import BaseModel, Field

from tracksched.config import SchedulerSettings
from tracksched.core.models import Train, RailwayConfig, Schedule, Disruption, RescheduleResult
from tracksched.core.traversal import prepare_trains
from tracksched.core.solver import schedule_trains
from tracksched.sim.disruption import apply_disruption, reschedule_with_disruption
from tracksched.sim.scenario import load_scenario, gantt_json
from tracksched.sim.simulator import summarize_schedule, utilization_percent

settings = SchedulerSettings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Track Allocation Scheduler API")


@app.get("/")
async def root() -> RedirectResponse:
    # Redirect base URL to interactive docs to avoid 404 confusion
    return RedirectResponse(url="/docs")


@app.get("/favicon.ico")
async def favicon() -> Response:
    return Response(status_code=204)


class TrainIn(BaseModel):
    id: str
    scheduled_arrival: float = Field(ge=0)
    speed: float
    priority: Literal["high", "medium", "low"]
    length: float = 0.0


class RailwayConfigIn(BaseModel):
    section_length: float
    time_horizon: float
    tracks: int
    max_trains_per_track: int = 10
    safety_headway: float = 0


class DisruptionIn(BaseModel):
    kind: Literal["delay", "block_track"]
    train_id: str | None = None
    delay_minutes: float = 0
    track_id: int | None = None


class ScenarioIn(BaseModel):
    trains: List[TrainIn]
    config: RailwayConfigIn | None = None


class WhatIfIn(ScenarioIn):
    disruption: DisruptionIn


def _build_config(cfg: RailwayConfigIn | None) -> RailwayConfig:
    if cfg is None:
        return settings.railway_config()
    try:
        return RailwayConfig(**cfg.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _build_trains(trains: List[TrainIn]) -> List[Train]:
    return [Train(**t.model_dump()) for t in trains]


def _schedule_out(schedule: Schedule, trains: List[Train], config: RailwayConfig) -> Dict[str, Any]:
    return {
        "assignments": [asdict(a) for a in schedule.assignments],
        "total_delay": schedule.total_delay,
        "weighted_delay": schedule.weighted_delay,
        "finished": schedule.finished,
        "utilization": schedule.utilization,
        "utilization_percent": utilization_percent(schedule, config),
        "kpis": summarize_schedule(schedule, trains, config),
        "gantt": gantt_json(schedule, trains),
    }


def _reschedule_out(result: RescheduleResult, trains: List[Train], config: RailwayConfig, disruption: Disruption) -> Dict[str, Any]:
    before_trains = prepare_trains(trains, config)
    after_trains = prepare_trains(apply_disruption(trains, disruption), result.after_config)
    return {
        "before": _schedule_out(result.before, before_trains, config),
        "after": _schedule_out(result.after, after_trains, result.after_config),
        "after_config": asdict(result.after_config),
        "comparison": asdict(result.comparison),
    }


@app.get("/demo")
async def demo() -> Dict[str, Any]:
    trains, config, disruption = load_scenario()
    result = reschedule_with_disruption(trains, config, disruption)
    return {
        "config": asdict(config),
        "disruption": asdict(disruption),
        **_reschedule_out(result, trains, config, disruption),
    }


@app.post("/schedule")
async def schedule(body: ScenarioIn, solver: Literal["greedy", "optimized"] = "greedy") -> Dict[str, Any]:
    config = _build_config(body.config)
    trains = prepare_trains(_build_trains(body.trains), config)
    result = schedule_trains(trains, config, solver=solver)
    logger.info("Scheduled %d of %d trains with %s solver", len(result.assignments), len(trains), solver)
    return {"solver": solver, **_schedule_out(result, trains, config)}


@app.post("/whatif")
async def whatif(body: WhatIfIn) -> Dict[str, Any]:
    config = _build_config(body.config)
    trains = _build_trains(body.trains)
    try:
        disruption = Disruption(**body.disruption.model_dump())
        result = reschedule_with_disruption(trains, config, disruption)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _reschedule_out(result, trains, config, disruption)


@app.post("/kpis")
async def kpis(body: ScenarioIn, solver: Literal["greedy", "optimized"] = "greedy") -> Dict[str, Any]:
    # Compute KPIs for provided scenario without returning the full schedule
    config = _build_config(body.config)
    trains = prepare_trains(_build_trains(body.trains), config)
    result = schedule_trains(trains, config, solver=solver)
    return {"kpis": summarize_schedule(result, trains, config)}
