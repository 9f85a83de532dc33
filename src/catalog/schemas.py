from pydantic import BaseModel
from typing import List, Optional, Literal

class ScheduleStop(BaseModel):
    """A stop of a scheduled run; times are "HH:MM:SS" strings"""
    station: str
    arrival: str
    departure: Optional[str] = None

    class Config:
        frozen = True

class LineData(BaseModel):
    id: Optional[int] = None
    code: str
    name: Optional[str] = None
    stations: List[str]
    length: Optional[int] = None

    class Config:
        from_attributes = True
        frozen = True

class ScheduleData(BaseModel):
    id: int
    line_code: str
    stops: List[ScheduleStop]

    class Config:
        from_attributes = True
        frozen = True

class TrainData(BaseModel):
    name: str
    line: str
    status: Literal["at station", "in transit", "stopped"] = "stopped"
    current_station: Optional[str] = None

    class Config:
        from_attributes = True
        frozen = True

class DistrictData(BaseModel):
    code: str
    name: str

    class Config:
        from_attributes = True
        frozen = True

class NetworkSnapshot(BaseModel):
    """Read-only view of the catalogs used for a single routing request"""
    lines: List[LineData] = []
    schedules: List[ScheduleData] = []
    trains: List[TrainData] = []

    class Config:
        frozen = True
