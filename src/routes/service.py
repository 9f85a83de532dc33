import logging
from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple
from sqlalchemy.orm import Session
from src.config import settings
from src.catalog.generators import REVERSE_SUFFIX
from src.catalog.schemas import LineData, NetworkSnapshot, ScheduleData, ScheduleStop
from src.catalog.service import CatalogService
from src.routes.fare_service import FareCalculationService
from src.routes.schemas import (
    Itinerary, LineSegment, RawPath, RouteRequest, RouteSchedule, ScheduleSegment, Segment
)

logger = logging.getLogger(__name__)

START_OF_DAY = "00:00:00"

class NetworkGraph:
    """Graph representation of the line catalog for route discovery"""

    def __init__(self, lines: List[LineData]):
        self.lines: Dict[str, LineData] = {}
        self.positions: Dict[str, Dict[str, int]] = {}
        self.station_line_map: Dict[str, List[str]] = {}
        for line in lines:
            self.add_line(line)

    def add_line(self, line: LineData):
        """Register a line and record it against every station it serves"""
        self.lines[line.code] = line
        positions = {}
        for index, station in enumerate(line.stations):
            positions.setdefault(station, index)
            line_codes = self.station_line_map.setdefault(station, [])
            if line.code not in line_codes:
                line_codes.append(line.code)
        self.positions[line.code] = positions

    def has_station(self, station: str) -> bool:
        return station in self.station_line_map

    def get_neighbors(self, station: str) -> List[Tuple[str, str]]:
        """(line code, station) pairs one stop back and one stop forward on each line"""
        neighbors = []
        for line_code in self.station_line_map.get(station, []):
            stations = self.lines[line_code].stations
            index = self.positions[line_code][station]
            if index > 0:
                neighbors.append((line_code, stations[index - 1]))
            if index < len(stations) - 1:
                neighbors.append((line_code, stations[index + 1]))
        return neighbors

    def direction_code(self, line_code: str, first_station: str, last_station: str) -> str:
        """Line code tagged with the direction of travel from first to last station"""
        positions = self.positions.get(line_code, {})
        start_index = positions.get(first_station, -1)
        end_index = positions.get(last_station, -1)
        if end_index > start_index:
            return line_code
        return f"{line_code}{REVERSE_SUFFIX}"


class RouteCalculator:
    """Route discovery and schedule resolution over one network snapshot"""

    def __init__(
        self,
        snapshot: NetworkSnapshot,
        visit_policy: Optional[str] = None,
        max_chains: Optional[int] = None,
        fare_service: Optional[FareCalculationService] = None
    ):
        self.snapshot = snapshot
        self.graph = NetworkGraph(snapshot.lines)
        self.visit_policy = visit_policy or settings.VISIT_POLICY
        self.max_chains = settings.MAX_SCHEDULE_CHAINS if max_chains is None else max_chains
        self.fare_service = fare_service or FareCalculationService()

        if self.visit_policy not in ("station", "edge"):
            raise ValueError(f"Unknown visit policy: {self.visit_policy}")

        # Catalog order is preserved within each line code
        self.schedules_by_line: Dict[str, List[ScheduleData]] = {}
        for schedule in snapshot.schedules:
            self.schedules_by_line.setdefault(schedule.line_code, []).append(schedule)

        self.train_names: Dict[str, str] = {}
        for train in snapshot.trains:
            self.train_names.setdefault(train.line, train.name)

    def discover_paths(self, start: str, end: str) -> Iterator[RawPath]:
        """Breadth-first search yielding every completed path in hop order.

        Completed paths are not expanded further. With the "station" policy a
        station is expanded at most once; with the "edge" policy once per
        station it is entered from.
        """
        queue = deque([RawPath(stations=(start,))])
        visited = set()

        while queue:
            current = queue.popleft()
            current_station = current.last_station

            if current_station == end:
                yield current
                continue

            if self.visit_policy == "station":
                visit_key = current_station
            else:
                visit_key = current.stations[-2:]

            if visit_key in visited:
                continue
            visited.add(visit_key)

            for line_code, next_station in self.graph.get_neighbors(current_station):
                if next_station not in current.stations:
                    queue.append(current.extend(next_station, line_code))

    def find_transfers(self, path: RawPath) -> List[str]:
        """Internal stations where the arriving and departing line codes differ"""
        return [
            path.stations[i]
            for i in range(1, len(path.stations) - 1)
            if path.lines[i - 1] != path.lines[i]
        ]

    def build_segments(self, path: RawPath) -> List[Segment]:
        """Split a path at transfer stations into direction-tagged segments.

        A transfer station ends one segment and starts the next. Each segment
        looks up runs in its own direction. When a line appears in more than
        one segment, every one of them is labelled with the direction of its
        earliest segment.
        """
        if len(path.stations) < 2:
            return []

        bounds = []
        start = 0
        for i in range(1, len(path.stations) - 1):
            if path.lines[i - 1] != path.lines[i]:
                bounds.append((start, i))
                start = i
        bounds.append((start, len(path.stations) - 1))

        labels: Dict[str, str] = {}
        segments = []
        for first, last in bounds:
            line_code = path.lines[first]
            stations = path.stations[first:last + 1]
            direction_code = self.graph.direction_code(line_code, stations[0], stations[-1])
            labels.setdefault(line_code, direction_code)
            segments.append(Segment(
                line_code=line_code,
                direction_code=direction_code,
                label_code=labels[line_code],
                stations=stations
            ))
        return segments

    @staticmethod
    def _stop_index(stops: List[ScheduleStop], station: str) -> Optional[int]:
        for index, stop in enumerate(stops):
            if stop.station == station:
                return index
        return None

    def find_next_schedule(
        self,
        line_code: str,
        start_time: str,
        start_station: str,
        end_station: str,
        min_schedule_id: Optional[int] = None
    ) -> Optional[ScheduleData]:
        """First run in catalog order reaching start_station no earlier than start_time.

        Runs that do not stop at both stations, or stop at them in the wrong
        order, are skipped.
        """
        for schedule in self.schedules_by_line.get(line_code, []):
            if min_schedule_id is not None and schedule.id < min_schedule_id:
                continue

            start_index = self._stop_index(schedule.stops, start_station)
            end_index = self._stop_index(schedule.stops, end_station)
            if start_index is None or end_index is None or end_index <= start_index:
                continue

            if schedule.stops[start_index].arrival >= start_time:
                return schedule
        return None

    @staticmethod
    def _trim_stops(schedule: ScheduleData, stations: Tuple[str, ...]) -> List[ScheduleStop]:
        """Stops of the run within the segment; no departure from the alighting stop"""
        stops = [stop for stop in schedule.stops if stop.station in stations]
        if stops:
            last = stops[-1]
            stops[-1] = ScheduleStop(station=last.station, arrival=last.arrival)
        return stops

    def resolve_chain(
        self,
        segments: List[Segment],
        min_schedule_id: int = 0
    ) -> Optional[List[ScheduleSegment]]:
        """Assign one connecting run to every segment, or None if any segment fails"""
        if not segments:
            return None

        current_time = START_OF_DAY
        resolved = []
        for index, segment in enumerate(segments):
            schedule = self.find_next_schedule(
                segment.direction_code,
                current_time,
                segment.stations[0],
                segment.stations[-1],
                min_schedule_id if index == 0 else None
            )
            if schedule is None:
                logger.debug(
                    "No run on %s from %s after %s",
                    segment.direction_code, segment.stations[0], current_time
                )
                return None

            end_stop = schedule.stops[self._stop_index(schedule.stops, segment.stations[-1])]
            current_time = end_stop.arrival

            resolved.append(ScheduleSegment(
                line=segment.direction_code,
                schedule_id=schedule.id,
                stops=self._trim_stops(schedule, segment.stations)
            ))
        return resolved

    def enumerate_chains(self, segments: List[Segment]) -> Iterator[List[ScheduleSegment]]:
        """Successive departure chains, each starting after the previous first run"""
        schedule_id = 0
        for _ in range(self.max_chains):
            chain = self.resolve_chain(segments, schedule_id)
            if chain is None:
                return
            yield chain
            schedule_id = chain[0].schedule_id + 1
        if self.resolve_chain(segments, schedule_id) is None:
            return
        logger.warning(
            "Stopped after %d schedule chains for %s",
            self.max_chains, "-".join(s.direction_code for s in segments)
        )

    def _build_itinerary(self, path: RawPath, segments: List[Segment]) -> Itinerary:
        return Itinerary(
            route=list(path.stations),
            lines=[
                LineSegment(
                    name=segment.label_code,
                    train_name=self.train_names.get(segment.label_code),
                    segment=list(segment.stations)
                )
                for segment in segments
            ],
            transfer=self.find_transfers(path),
            stations_count=len(path.stations),
            prices=self.fare_service.calculate_prices(path),
            schedules=[]
        )

    def calculate_routes(self, start: str, end: str) -> List[Itinerary]:
        """Find every itinerary between two stations, grouped by station path"""
        itineraries: Dict[Tuple[str, ...], Itinerary] = {}
        total_schedules = 0

        for path in self.discover_paths(start, end):
            segments = self.build_segments(path)
            for chain in self.enumerate_chains(segments):
                itinerary = itineraries.get(path.stations)
                if itinerary is None:
                    itinerary = self._build_itinerary(path, segments)
                    itineraries[path.stations] = itinerary
                itinerary.schedules.append(RouteSchedule(
                    id=len(itinerary.schedules) + 1,
                    segments=chain
                ))
                total_schedules += 1

        logger.info(
            "Found %d unique routes with %d total schedules",
            len(itineraries), total_schedules
        )
        return list(itineraries.values())


def find_routes(snapshot: NetworkSnapshot, start: str, end: str) -> List[Itinerary]:
    """Itineraries from start to end over the given snapshot"""
    return RouteCalculator(snapshot).calculate_routes(start, end)


class RouteService:
    """High-level route finding service"""

    def __init__(self, db: Session):
        self.db = db
        self.calculator = RouteCalculator(CatalogService.load_snapshot(db))

    def find_routes(self, request: RouteRequest) -> List[Itinerary]:
        return self.calculator.calculate_routes(request.start, request.end)
