from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from src.database import get_db
from src.catalog.schemas import LineData, ScheduleData, TrainData, DistrictData
from src.catalog.service import CatalogService
from src.exceptions import RailNetworkException

router = APIRouter()

def _not_found(exc: RailNetworkException) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"code": exc.code, "message": exc.message}
    )

@router.get("/lines", response_model=List[LineData], tags=["Lines"])
def get_lines(db: Session = Depends(get_db)):
    """Get every line with its ordered stations"""
    return CatalogService.get_lines(db)

@router.get("/lines/{code}", response_model=LineData, tags=["Lines"])
def get_line(code: str, db: Session = Depends(get_db)):
    """Get a line by code"""
    try:
        return CatalogService.get_line_by_code(db, code.upper())
    except RailNetworkException as e:
        raise _not_found(e)

@router.get("/schedules", response_model=List[ScheduleData], tags=["Schedules"])
def get_schedules(db: Session = Depends(get_db)):
    """Get all scheduled runs"""
    return CatalogService.get_schedules(db)

@router.get("/schedules/{line_code}", response_model=List[ScheduleData], tags=["Schedules"])
def get_line_schedules(line_code: str, db: Session = Depends(get_db)):
    """Get the scheduled runs of one directional line code (e.g. WARP-RED-REV)"""
    return CatalogService.get_schedules(db, line_code=line_code.upper())

@router.get("/trains", response_model=List[TrainData], tags=["Trains"])
def get_trains(
    line: Optional[str] = Query(None, description="Filter by directional line code"),
    train_status: Optional[str] = Query(None, alias="status", description="Filter by train status"),
    db: Session = Depends(get_db)
):
    """Get the train roster"""
    return CatalogService.get_trains(
        db,
        line=line.upper() if line else None,
        status=train_status
    )

@router.get("/trains/{name}", response_model=TrainData, tags=["Trains"])
def get_train(name: str, db: Session = Depends(get_db)):
    """Get a train by its code name"""
    try:
        return CatalogService.get_train_by_name(db, name.upper())
    except RailNetworkException as e:
        raise _not_found(e)

@router.get("/districts", response_model=List[DistrictData], tags=["Districts"])
def get_districts(db: Session = Depends(get_db)):
    """Get all districts (stations)"""
    return CatalogService.get_districts(db)

@router.get("/districts/{code}", response_model=DistrictData, tags=["Districts"])
def get_district(code: str, db: Session = Depends(get_db)):
    """Get a district by code"""
    try:
        return CatalogService.get_district_by_code(db, code.upper())
    except RailNetworkException as e:
        raise _not_found(e)
