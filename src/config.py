from pydantic_settings import BaseSettings
from typing import List, Literal, Optional

class Settings(BaseSettings):
    # Database
    DATABASE_URL: Optional[str] = None
    PGHOST: Optional[str] = None
    PGDATABASE: Optional[str] = None
    PGUSER: Optional[str] = None
    PGPASSWORD: Optional[str] = None
    PGSSLMODE: str = "require"

    # Application
    PROJECT_NAME: str = "Warp Rail Network"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Fares (flat, independent of distance)
    ECONOMY_FARE: float = 120
    FIRST_CLASS_FARE: float = 400

    # Route engine
    MAX_SCHEDULE_CHAINS: int = 100
    VISIT_POLICY: Literal["station", "edge"] = "station"

    # Schedule generation
    SCHEDULE_STARTING_TIMES: List[str] = [
        "08:00:00", "11:00:00", "14:00:00", "17:00:00", "20:00:00", "23:00:00"
    ]
    SCHEDULE_HOP_MINUTES: int = 10
    SCHEDULE_HOP_SECONDS: int = 10

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.PGUSER}:{self.PGPASSWORD}@{self.PGHOST}/{self.PGDATABASE}?sslmode={self.PGSSLMODE}"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
