"""
Pytest configuration and shared fixtures
"""

import os
import pytest

# Use an in-memory database; must be set before src.config is imported
os.environ["DATABASE_URL"] = "sqlite://"

from src.catalog.generators import generate_schedule
from src.catalog.schemas import LineData, NetworkSnapshot, TrainData


@pytest.fixture
def make_line():
    """Factory for catalog lines"""
    def _make_line(code, stations, line_id=None):
        return LineData(
            id=line_id,
            code=code,
            name=f"{code} line",
            stations=list(stations),
            length=len(stations)
        )
    return _make_line


@pytest.fixture
def make_run():
    """Factory for runs with evenly spaced arrivals (10 minutes per hop)"""
    def _make_run(schedule_id, line, starting_time, reverse=False):
        return generate_schedule(
            schedule_id, line, starting_time, reverse=reverse, hop_minutes=10, hop_seconds=0
        )
    return _make_run


@pytest.fixture
def single_line_snapshot(make_line, make_run):
    """A-B-C-D-E on one line, one run leaving A at 08:00"""
    line = make_line("WARP-RED", ["A", "B", "C", "D", "E"])
    return NetworkSnapshot(
        lines=[line],
        schedules=[make_run(0, line, "08:00:00")],
        trains=[
            TrainData(name="RED-01", line="WARP-RED"),
            TrainData(name="RED-02", line="WARP-RED-REV"),
        ]
    )


@pytest.fixture
def transfer_snapshot(make_line, make_run):
    """WARP-ONE A-B-C and WARP-TWO C-D-E sharing station C"""
    one = make_line("WARP-ONE", ["A", "B", "C"])
    two = make_line("WARP-TWO", ["C", "D", "E"])
    return NetworkSnapshot(
        lines=[one, two],
        schedules=[
            make_run(0, one, "08:00:00"),   # reaches C at 08:20
            make_run(1, two, "08:00:00"),   # leaves C too early for run 0
            make_run(2, two, "09:00:00"),
            make_run(3, one, "11:00:00"),   # reaches C at 11:20
            make_run(4, two, "12:00:00"),
        ],
        trains=[TrainData(name="ONE-01", line="WARP-ONE")]
    )


@pytest.fixture
def diamond_lines(make_line):
    """WARP-AAA A-B-D-E and WARP-BBB A-C-D; D reachable two ways"""
    return [
        make_line("WARP-AAA", ["A", "B", "D", "E"]),
        make_line("WARP-BBB", ["A", "C", "D"]),
    ]
