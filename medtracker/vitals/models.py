"""
Vital Model - Stores a single vital signs reading.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, func
from ..database import Base
from ..core.clock import utc_now

class Vital(Base):
    """
    Vital Model - Stores a vital signs reading

    Every measurement is optional but a reading always carries at least one.

    Fields:
    - id: Primary key for the reading
    - blood_pressure: Systolic/diastolic as text, e.g. "120/80"
    - heart_rate: Beats per minute
    - temperature: Body temperature
    - blood_sugar: Blood glucose level
    - recorded_date: When the reading was recorded (naive UTC)
    - created_at: When the row was created
    """
    __tablename__ = "vitals"

    id = Column(Integer, primary_key=True, index=True)
    blood_pressure = Column(String(20), nullable=True)
    heart_rate = Column(Integer, nullable=True)
    temperature = Column(Float, nullable=True)
    blood_sugar = Column(Float, nullable=True)
    recorded_date = Column(DateTime, nullable=False, default=utc_now, index=True)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        """String representation of the Vital model"""
        return (
            f"<Vital(id={self.id}, bp='{self.blood_pressure}', hr={self.heart_rate}, "
            f"temp={self.temperature}, sugar={self.blood_sugar}, recorded='{self.recorded_date}')>"
        )
