import logging
import time
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List

from src.database import get_db
from src.routes.schemas import RouteRequest, Itinerary
from src.routes.service import RouteService
from src.routes.validation import RouteValidator

logger = logging.getLogger(__name__)

router = APIRouter()

def _find_routes(request: RouteRequest, db: Session) -> List[Itinerary]:
    start_time = time.time()

    request = RouteRequest(
        start=request.start.strip().upper(),
        end=request.end.strip().upper()
    )

    route_service = RouteService(db)

    # Validate request
    validator = RouteValidator(route_service.calculator.graph)
    validation_errors = validator.validate_route_request(request)

    if validation_errors:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Route request validation failed",
                "errors": [
                    {
                        "code": error.error_code,
                        "message": error.error_message,
                        "field": error.field
                    }
                    for error in validation_errors
                ]
            }
        )

    # Unknown or identical stations still return an empty list
    for warning in validator.validate_route_feasibility(request):
        logger.info("Route %s -> %s: %s", request.start, request.end, warning)

    itineraries = route_service.find_routes(request)

    calculation_time = int((time.time() - start_time) * 1000)
    logger.info(
        "Route %s -> %s: %d itineraries in %d ms",
        request.start, request.end, len(itineraries), calculation_time
    )
    return itineraries

@router.get(
    "/find-routes",
    response_model=List[Itinerary],
    response_model_exclude_none=True
)
def find_routes(
    start: str = Query(..., description="Origin station code"),
    end: str = Query(..., description="Destination station code"),
    db: Session = Depends(get_db)
):
    """Find every route between two stations with its schedule options"""
    return _find_routes(RouteRequest(start=start, end=end), db)

@router.post(
    "/plan",
    response_model=List[Itinerary],
    response_model_exclude_none=True
)
def plan_route(
    request: RouteRequest,
    db: Session = Depends(get_db)
):
    """Same as find-routes, with the stations in the request body"""
    return _find_routes(request, db)
