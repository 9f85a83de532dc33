"""
Route Finding Module

This module finds every route between two stations of the rail network and
resolves each one into concrete, time-ordered journeys. It includes:

- Breadth-first discovery of all simple station paths
- Transfer detection and direction-aware line segments
- Schedule resolution with connection times across transfers
- Successive departure chains for the same path
- Grouping of schedule chains into itineraries by station path

Key Components:
- service.py: Network graph, route engine and high-level route service
- fare_service.py: Flat fare table attached to every itinerary
- validation.py: Request validation and feasibility warnings
- router.py: FastAPI endpoints for route finding
- schemas.py: Pydantic models for itineraries and engine work items
"""

from .router import router
from .service import RouteService, RouteCalculator, NetworkGraph, find_routes
from .fare_service import FareCalculationService
from .validation import RouteValidator
from .schemas import (
    RouteRequest, Itinerary, LineSegment, Prices, RouteSchedule, ScheduleSegment,
    RouteValidationError, RawPath, Segment
)

__all__ = [
    "router",
    "RouteService",
    "RouteCalculator",
    "NetworkGraph",
    "find_routes",
    "FareCalculationService",
    "RouteValidator",
    "RouteRequest",
    "Itinerary",
    "LineSegment",
    "Prices",
    "RouteSchedule",
    "ScheduleSegment",
    "RouteValidationError",
    "RawPath",
    "Segment"
]
