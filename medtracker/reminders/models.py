"""
Reminder Model - Stores a timed reminder and whether it has been notified.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, func
from ..database import Base

class Reminder(Base):
    """
    Reminder Model - Stores reminder information

    Fields:
    - id: Primary key for reminder
    - title: Short description shown in the alert
    - date_time: When the reminder is due (naive UTC)
    - notes: Optional free text
    - notified: Set once an alert for this reminder has been acknowledged
    - created_at: When the reminder was created
    """
    __tablename__ = "reminders"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    date_time = Column(DateTime, nullable=False, index=True)
    notes = Column(Text, nullable=True)
    notified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        """String representation of the Reminder model"""
        return f"<Reminder(id={self.id}, title='{self.title}', date_time='{self.date_time}', notified={self.notified})>"

    def mark_notified(self) -> None:
        """Record that an alert for this reminder has gone out"""
        self.notified = True
