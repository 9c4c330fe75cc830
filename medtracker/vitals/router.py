"""
Vital Router - API endpoints for vital signs readings.
"""
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.schemas import CreatedResponse, MessageResponse
from .schemas import VitalCreate, VitalUpdate, VitalResponse, VitalStats
from .service import (
    get_vitals,
    get_vital,
    get_vitals_in_range,
    get_latest_vital,
    create_vital,
    update_vital,
    delete_vital,
    get_vital_stats
)

router = APIRouter(prefix="/api/vitals", tags=["Vitals"])

@router.get("", response_model=List[VitalResponse])
async def list_vitals(db: Session = Depends(get_db)):
    """Get all vital signs readings, most recent first"""
    return get_vitals(db)

@router.get("/range/dates", response_model=List[VitalResponse])
async def list_vitals_in_range(
    start_date: date = Query(..., description="First day of the range (YYYY-MM-DD)"),
    end_date: date = Query(..., description="Last day of the range (YYYY-MM-DD)"),
    db: Session = Depends(get_db)
):
    """
    Get the readings recorded within a date range

    Both dates are required and inclusive.
    """
    return get_vitals_in_range(db, start_date, end_date)

@router.get("/latest/record", response_model=VitalResponse)
async def read_latest_vital(db: Session = Depends(get_db)):
    """Get the most recent reading"""
    return get_latest_vital(db)

@router.get("/stats/summary", response_model=VitalStats)
async def vital_stats(db: Session = Depends(get_db)):
    """
    Get vital signs statistics

    Returns the number of readings plus average, minimum and maximum heart
    rate, temperature and blood sugar.
    """
    return get_vital_stats(db)

@router.get("/{vital_id}", response_model=VitalResponse)
async def read_vital(vital_id: int, db: Session = Depends(get_db)):
    """Get a single reading by ID"""
    return get_vital(db, vital_id)

@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_vital(vital_data: VitalCreate, db: Session = Depends(get_db)):
    """
    Record vital signs

    At least one of blood_pressure, heart_rate, temperature or blood_sugar is required.
    """
    vital = create_vital(db, vital_data)
    return CreatedResponse(message="Vital signs recorded successfully", id=vital.id)

@router.put("/{vital_id}", response_model=MessageResponse)
async def edit_vital(vital_id: int, vital_data: VitalUpdate, db: Session = Depends(get_db)):
    """Replace the measurements of a reading"""
    update_vital(db, vital_id, vital_data)
    return MessageResponse(message="Vital signs updated successfully")

@router.delete("/{vital_id}", response_model=MessageResponse)
async def remove_vital(vital_id: int, db: Session = Depends(get_db)):
    """Delete a reading"""
    delete_vital(db, vital_id)
    return MessageResponse(message="Vital record deleted successfully")
