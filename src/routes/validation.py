import re
from typing import List
from src.routes.schemas import RouteRequest, RouteValidationError
from src.routes.service import NetworkGraph

STATION_CODE_PATTERN = re.compile(r"^[A-Z0-9][A-Z0-9_-]{0,15}$")

class RouteValidator:
    """Service for validating route finding requests"""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def validate_route_request(self, request: RouteRequest) -> List[RouteValidationError]:
        """Reject blank or malformed station codes"""
        errors = []

        for field, code in (("start", request.start), ("end", request.end)):
            if not code:
                errors.append(RouteValidationError(
                    error_code="MISSING_STATION",
                    error_message=f"Missing {field} station",
                    field=field
                ))
            elif not STATION_CODE_PATTERN.match(code):
                errors.append(RouteValidationError(
                    error_code="INVALID_STATION_CODE",
                    error_message=f"Station code '{code}' is not valid",
                    field=field
                ))

        return errors

    def validate_route_feasibility(self, request: RouteRequest) -> List[str]:
        """Warnings for requests that can only produce an empty result"""
        warnings = []

        if request.start == request.end:
            warnings.append("Origin and destination are the same station")

        if not self.graph.has_station(request.start):
            warnings.append(f"Station {request.start} is not served by any line")

        if not self.graph.has_station(request.end):
            warnings.append(f"Station {request.end} is not served by any line")

        return warnings
