from typing import Iterable, List, Optional
from datetime import datetime, timedelta
from src.config import settings
from src.catalog.schemas import LineData, ScheduleData, ScheduleStop, TrainData

REVERSE_SUFFIX = "-REV"
TIME_FORMAT = "%H:%M:%S"

def generate_schedule(
    schedule_id: int,
    line: LineData,
    starting_time: str,
    reverse: bool = False,
    hop_minutes: Optional[int] = None,
    hop_seconds: Optional[int] = None
) -> ScheduleData:
    """Build one run over a line.

    Each stop departs ``hop_minutes`` after its arrival, and the next stop is
    reached ``hop_seconds`` after that departure. Times wrap past midnight.
    """
    if hop_minutes is None:
        hop_minutes = settings.SCHEDULE_HOP_MINUTES
    if hop_seconds is None:
        hop_seconds = settings.SCHEDULE_HOP_SECONDS

    stations = list(line.stations)
    line_code = line.code
    if reverse:
        stations.reverse()
        line_code += REVERSE_SUFFIX

    dwell = timedelta(minutes=hop_minutes)
    travel = timedelta(seconds=hop_seconds)

    stops = []
    current_time = datetime.strptime(starting_time, TIME_FORMAT)
    for station in stations:
        departure = current_time + dwell
        stops.append(ScheduleStop(
            station=station,
            arrival=current_time.strftime(TIME_FORMAT),
            departure=departure.strftime(TIME_FORMAT)
        ))
        current_time = departure + travel

    return ScheduleData(id=schedule_id, line_code=line_code, stops=stops)

def generate_schedules(
    lines: Iterable[LineData],
    starting_times: Optional[List[str]] = None
) -> List[ScheduleData]:
    """Forward then reverse run for every line and starting time, ids from 0"""
    if starting_times is None:
        starting_times = settings.SCHEDULE_STARTING_TIMES

    schedules = []
    next_id = 0
    for line in lines:
        for starting_time in starting_times:
            schedules.append(generate_schedule(next_id, line, starting_time, reverse=False))
            next_id += 1
            schedules.append(generate_schedule(next_id, line, starting_time, reverse=True))
            next_id += 1
    return schedules

def name_train(line_code: str) -> str:
    """Code name from the line identifier, e.g. WARP-RED-REV -> RED-02"""
    identifier = line_code[5:8]
    return identifier + ("-02" if line_code.endswith(REVERSE_SUFFIX) else "-01")

def generate_trains(lines: Iterable[LineData]) -> List[TrainData]:
    """One train per line direction"""
    trains = []
    for line in lines:
        for line_code in (line.code, line.code + REVERSE_SUFFIX):
            trains.append(TrainData(
                name=name_train(line_code),
                line=line_code,
                status="stopped",
                current_station=None
            ))
    return trains
