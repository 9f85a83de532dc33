from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from src.database import Base

# ================================
# Districts (station alphabet)
# ================================
class District(Base):
    __tablename__ = "districts"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(8), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

# ================================
# Lines
# ================================
class TrainLine(Base):
    __tablename__ = "train_lines"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    stations = Column(JSON, nullable=False)  # ordered list of district codes
    length = Column(Integer)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

# ================================
# Scheduled runs
# ================================
class Schedule(Base):
    __tablename__ = "schedules"

    # Ids are assigned by the generator and double as the departure ordering key
    id = Column(Integer, primary_key=True, autoincrement=False)
    line_code = Column(String(60), nullable=False, index=True)  # "<code>" or "<code>-REV"
    stops = Column(JSON, nullable=False)  # [{"station", "arrival", "departure"}]
    created_at = Column(DateTime(timezone=True), server_default=func.now())

# ================================
# Train roster
# ================================
class Train(Base):
    __tablename__ = "trains"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False, index=True)
    line = Column(String(60), nullable=False, index=True)
    status = Column(String(20), default="stopped", index=True)  # at station, in transit, stopped
    current_station = Column(String(8))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
