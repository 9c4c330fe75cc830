"""
Appointment Model - Stores a scheduled visit with a doctor.

Appointments stand alone; the doctor is kept as free text.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from ..database import Base

class Appointment(Base):
    """
    Appointment Model - Stores appointment information

    Fields:
    - id: Primary key for appointment
    - doctor: Name of the doctor
    - type: Kind of appointment (e.g. "Checkup", "Dental")
    - date_time: Date and time of the appointment (naive UTC)
    - location: Where the appointment takes place
    - created_at: When the appointment was created
    """
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    doctor = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False, index=True)
    date_time = Column(DateTime, nullable=False, index=True)
    location = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        """String representation of the Appointment model"""
        return f"<Appointment(id={self.id}, doctor='{self.doctor}', type='{self.type}', date='{self.date_time}')>"
