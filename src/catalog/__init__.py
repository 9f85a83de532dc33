"""
Network Catalog Module

Read-only access to the line catalog, the schedule catalog, the train roster
and the district list, plus the generators used to seed them.

Key Components:
- service.py: Database queries and snapshot loading for the route engine
- generators.py: Timetable and train roster generation from the line catalog
- router.py: FastAPI endpoints for lines, schedules, trains and districts
- schemas.py: Pydantic models for catalog entities and the network snapshot
"""

from .router import router
from .service import CatalogService
from .generators import generate_schedule, generate_schedules, generate_trains, name_train
from .schemas import (
    ScheduleStop, LineData, ScheduleData, TrainData, DistrictData, NetworkSnapshot
)

__all__ = [
    "router",
    "CatalogService",
    "generate_schedule",
    "generate_schedules",
    "generate_trains",
    "name_train",
    "ScheduleStop",
    "LineData",
    "ScheduleData",
    "TrainData",
    "DistrictData",
    "NetworkSnapshot"
]
