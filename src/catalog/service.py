import logging
from sqlalchemy.orm import Session
from typing import List, Optional
from src.models import District, TrainLine, Schedule, Train
from src.catalog.schemas import (
    LineData, ScheduleData, TrainData, NetworkSnapshot
)
from src.exceptions import (
    LineNotFoundException, TrainNotFoundException, DistrictNotFoundException
)

logger = logging.getLogger(__name__)

class CatalogService:
    @staticmethod
    def get_lines(db: Session) -> List[TrainLine]:
        """Get all lines in catalog order"""
        return db.query(TrainLine).order_by(TrainLine.id).all()

    @staticmethod
    def get_line_by_code(db: Session, code: str) -> TrainLine:
        """Get a line by its code"""
        line = db.query(TrainLine).filter(TrainLine.code == code).first()
        if not line:
            raise LineNotFoundException(f"Line with code {code} not found")
        return line

    @staticmethod
    def get_schedules(db: Session, line_code: Optional[str] = None) -> List[Schedule]:
        """Get scheduled runs, optionally only those of one directional line code"""
        query = db.query(Schedule)
        if line_code:
            query = query.filter(Schedule.line_code == line_code)
        return query.order_by(Schedule.id).all()

    @staticmethod
    def get_trains(
        db: Session,
        line: Optional[str] = None,
        status: Optional[str] = None
    ) -> List[Train]:
        """Get trains filtered by line code or status"""
        query = db.query(Train)
        if line:
            query = query.filter(Train.line == line)
        if status:
            query = query.filter(Train.status == status)
        return query.order_by(Train.id).all()

    @staticmethod
    def get_train_by_name(db: Session, name: str) -> Train:
        train = db.query(Train).filter(Train.name == name).first()
        if not train:
            raise TrainNotFoundException(f"Train {name} not found")
        return train

    @staticmethod
    def get_districts(db: Session) -> List[District]:
        return db.query(District).order_by(District.code).all()

    @staticmethod
    def get_district_by_code(db: Session, code: str) -> District:
        district = db.query(District).filter(District.code == code).first()
        if not district:
            raise DistrictNotFoundException(f"District with code {code} not found")
        return district

    @staticmethod
    def load_snapshot(db: Session) -> NetworkSnapshot:
        """Read lines, schedules and trains once into an immutable snapshot"""
        snapshot = NetworkSnapshot(
            lines=[LineData.model_validate(line) for line in CatalogService.get_lines(db)],
            schedules=[ScheduleData.model_validate(s) for s in CatalogService.get_schedules(db)],
            trains=[TrainData.model_validate(t) for t in CatalogService.get_trains(db)]
        )
        logger.debug(
            "Loaded snapshot: %d lines, %d schedules, %d trains",
            len(snapshot.lines), len(snapshot.schedules), len(snapshot.trains)
        )
        return snapshot
