#!/usr/bin/env python3

import sys
import os
import string

# Add src to path
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from sqlalchemy.orm import sessionmaker
from src.database import engine, Base
from src.models import District, TrainLine, Schedule, Train
from src.catalog.schemas import LineData
from src.catalog.generators import generate_schedules, generate_trains

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DISTRICT_CODES = list(string.ascii_uppercase[:25])  # A..Y

LINES = [
    {"code": "WARP-RED", "name": "Red Line", "stations": ["A", "B", "C", "D", "E", "F", "G"]},
    {"code": "WARP-BLU", "name": "Blue Line", "stations": ["H", "I", "D", "J", "K"]},
    {"code": "WARP-GRN", "name": "Green Line", "stations": ["L", "M", "C", "N", "O", "P"]},
    {"code": "WARP-YLW", "name": "Yellow Line", "stations": ["Q", "R", "J", "S", "T", "U"]},
    {"code": "WARP-PRP", "name": "Purple Line", "stations": ["V", "W", "K", "X", "Y"]},
]

def create_seed_data():
    db = SessionLocal()

    try:
        print("🚀 Creating seed data for the Warp rail network...")
        Base.metadata.create_all(bind=engine)

        # Clear existing data
        print("Clearing existing data...")
        db.query(Train).delete()
        db.query(Schedule).delete()
        db.query(TrainLine).delete()
        db.query(District).delete()

        # 1. Create Districts
        print("Creating districts...")
        districts = [District(code=code, name=f"District {code}") for code in DISTRICT_CODES]
        db.add_all(districts)
        db.flush()

        # 2. Create Lines
        print("Creating train lines...")
        lines = []
        for index, line in enumerate(LINES, start=1):
            lines.append(LineData(
                id=index,
                code=line["code"],
                name=line["name"],
                stations=line["stations"],
                length=len(line["stations"])
            ))
        db.add_all([TrainLine(**line.model_dump()) for line in lines])
        db.flush()

        # 3. Create Schedules
        print("Creating schedules...")
        schedules = generate_schedules(lines)
        db.add_all([
            Schedule(id=s.id, line_code=s.line_code, stops=[stop.model_dump() for stop in s.stops])
            for s in schedules
        ])
        db.flush()

        # 4. Create Trains
        print("Creating trains...")
        trains = generate_trains(lines)
        db.add_all([Train(**train.model_dump()) for train in trains])

        # Commit all changes
        db.commit()
        print("✅ Successfully created seed data for the Warp rail network!")
        print(f"Created:")
        print(f"  - {len(districts)} districts")
        print(f"  - {len(lines)} train lines")
        print(f"  - {len(schedules)} schedules")
        print(f"  - {len(trains)} trains")

    except Exception as e:
        print(f"❌ Error creating seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
