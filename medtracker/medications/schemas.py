"""
Medication Schemas - Pydantic models for medication validation and serialization.
"""
from datetime import datetime, time as dt_time
from typing import Optional
from pydantic import BaseModel, Field

class MedicationBase(BaseModel):
    """
    Fields shared by medication create and update payloads

    Fields:
    - name: Medication name
    - dosage: Dose to take
    - frequency: How often it is taken
    - time: Time of day (HH:MM or HH:MM:SS)
    """
    name: str = Field(..., min_length=1, max_length=255, description="Medication name")
    dosage: str = Field(..., min_length=1, max_length=100, description="Dose to take, e.g. 500mg")
    frequency: str = Field(..., min_length=1, max_length=100, description="How often it is taken")
    time: dt_time = Field(..., description="Scheduled time of day")

class MedicationCreate(MedicationBase):
    """Medication Create Schema - Used when adding a medication"""

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "name": "Metformin",
                "dosage": "500mg",
                "frequency": "Twice daily",
                "time": "08:00"
            }
        }

class MedicationUpdate(MedicationBase):
    """Medication Update Schema - Replaces every editable field of a medication"""

class MedicationTakenUpdate(BaseModel):
    """Payload for marking a medication dose as taken or pending"""
    taken: bool = Field(..., description="Whether the current dose has been taken")

class MedicationResponse(MedicationBase):
    """Medication Response Schema - Used when returning medication data"""
    id: int
    taken: bool = False
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class MedicationStats(BaseModel):
    """
    Medication Statistics Schema

    Fields:
    - total: Number of medications
    - taken: Number of medications whose dose is marked taken
    - pending: Number of medications still to take
    """
    total: int
    taken: int
    pending: int
