"""
Vital Schemas - Pydantic models for vital signs validation and serialization.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, validator, model_validator

class VitalBase(BaseModel):
    """
    Vital signs measurements; at least one must be present

    Fields:
    - blood_pressure: Systolic/diastolic as text, e.g. "120/80"
    - heart_rate: Beats per minute
    - temperature: Body temperature
    - blood_sugar: Blood glucose level
    """
    blood_pressure: Optional[str] = Field(None, max_length=20, description="Blood pressure, e.g. 120/80")
    heart_rate: Optional[int] = Field(None, gt=0, description="Heart rate in beats per minute")
    temperature: Optional[float] = Field(None, gt=0, description="Body temperature")
    blood_sugar: Optional[float] = Field(None, gt=0, description="Blood glucose level")

    @validator("blood_pressure")
    def blank_blood_pressure_is_missing(cls, v):
        """Treat an empty blood pressure string as not measured"""
        if v is not None and not v.strip():
            return None
        return v

class VitalCreate(VitalBase):
    """Vital Create Schema - Used when recording vital signs"""

    @model_validator(mode="after")
    def require_one_measurement(self):
        """Reject readings with no measurement at all"""
        if all(
            value is None
            for value in (self.blood_pressure, self.heart_rate, self.temperature, self.blood_sugar)
        ):
            raise ValueError("At least one vital sign is required")
        return self

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "blood_pressure": "120/80",
                "heart_rate": 72,
                "temperature": 36.8,
                "blood_sugar": 95
            }
        }

class VitalUpdate(VitalCreate):
    """Vital Update Schema - Replaces all four measurements"""

class VitalResponse(VitalBase):
    """Vital Response Schema - Used when returning a vital signs reading"""
    id: int
    recorded_date: datetime
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class VitalStats(BaseModel):
    """
    Vital Statistics Schema

    Averages, minimums and maximums ignore readings where the measurement is
    missing and are null when no reading has it.
    """
    total_records: int
    avg_heart_rate: Optional[float] = None
    min_heart_rate: Optional[int] = None
    max_heart_rate: Optional[int] = None
    avg_temperature: Optional[float] = None
    min_temperature: Optional[float] = None
    max_temperature: Optional[float] = None
    avg_blood_sugar: Optional[float] = None
    min_blood_sugar: Optional[float] = None
    max_blood_sugar: Optional[float] = None
