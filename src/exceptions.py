# Catalog lookup exceptions


class RailNetworkException(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class LineNotFoundException(RailNetworkException):
    def __init__(self, message: str = "Line not found"):
        super().__init__(message, code="LINE_NOT_FOUND")


class TrainNotFoundException(RailNetworkException):
    def __init__(self, message: str = "Train not found"):
        super().__init__(message, code="TRAIN_NOT_FOUND")


class DistrictNotFoundException(RailNetworkException):
    def __init__(self, message: str = "District not found"):
        super().__init__(message, code="DISTRICT_NOT_FOUND")
