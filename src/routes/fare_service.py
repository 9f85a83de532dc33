from typing import Optional
from src.config import settings
from src.routes.schemas import Prices, RawPath

class FareCalculationService:
    """Flat fare policy.

    Every route costs the same regardless of distance, segment count or
    transfers; economy and first class differ only by the configured amounts.
    """

    def __init__(
        self,
        economy_fare: Optional[float] = None,
        first_class_fare: Optional[float] = None
    ):
        self.economy_fare = settings.ECONOMY_FARE if economy_fare is None else economy_fare
        self.first_class_fare = settings.FIRST_CLASS_FARE if first_class_fare is None else first_class_fare

    def calculate_prices(self, path: RawPath) -> Prices:
        """Fare table for a discovered path"""
        return Prices(economy=self.economy_fare, first_class=self.first_class_fare)
