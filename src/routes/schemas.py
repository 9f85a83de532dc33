from pydantic import BaseModel
from typing import List, Optional, Tuple
from src.catalog.schemas import ScheduleStop

class RouteRequest(BaseModel):
    """Request schema for route finding"""
    start: str
    end: str

class Prices(BaseModel):
    """Flat fare table attached to an itinerary"""
    economy: float
    first_class: float

class LineSegment(BaseModel):
    """A line leg of an itinerary, labelled with its directional code"""
    name: str
    train_name: Optional[str] = None
    segment: List[str]

class ScheduleSegment(BaseModel):
    """The run assigned to one line leg, trimmed to the leg's stops"""
    line: str
    schedule_id: int
    stops: List[ScheduleStop]

class RouteSchedule(BaseModel):
    """One time-consistent assignment of runs to every leg of a route"""
    id: int
    segments: List[ScheduleSegment]

class Itinerary(BaseModel):
    """All schedule chains found for one station path"""
    route: List[str]
    lines: List[LineSegment]
    transfer: List[str]
    stations_count: int
    prices: Prices
    schedules: List[RouteSchedule] = []

class RouteValidationError(BaseModel):
    """Route validation error details"""
    error_code: str
    error_message: str
    field: Optional[str] = None

class RawPath(BaseModel):
    """A breadth-first search work item; extended by copy"""
    stations: Tuple[str, ...]
    lines: Tuple[str, ...] = ()

    class Config:
        frozen = True

    def extend(self, station: str, line_code: str) -> "RawPath":
        return RawPath(
            stations=self.stations + (station,),
            lines=self.lines + (line_code,)
        )

    @property
    def last_station(self) -> str:
        return self.stations[-1]

class Segment(BaseModel):
    """Stations of a raw path served by one line in one direction.

    ``direction_code`` is this segment's own direction and selects its runs;
    ``label_code`` is the direction of the line's earliest segment in the path.
    """
    line_code: str
    direction_code: str
    label_code: str
    stations: Tuple[str, ...]

    class Config:
        frozen = True
