"""
Medication Model - Stores a medication and its daily dose schedule.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Time, func
from ..database import Base

class Medication(Base):
    """
    Medication Model - Stores medication information

    Fields:
    - id: Primary key for medication
    - name: Medication name
    - dosage: Dose to take (free text, e.g. "500mg")
    - frequency: How often it is taken (free text, e.g. "Twice daily")
    - time: Time of day the dose is scheduled
    - taken: Whether the current dose has been taken
    - created_at: When the medication was added
    """
    __tablename__ = "medications"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    dosage = Column(String(100), nullable=False)
    frequency = Column(String(100), nullable=False)
    time = Column(Time, nullable=False)
    taken = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        """String representation of the Medication model"""
        return f"<Medication(id={self.id}, name='{self.name}', time='{self.time}', taken={self.taken})>"

    def mark_taken(self, taken: bool) -> None:
        """
        Flip the taken flag for the current dose cycle

        Args:
            taken: New taken state
        """
        self.taken = taken
