"""
Medication Router - API endpoints for medication management.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.schemas import CreatedResponse, MessageResponse
from .schemas import (
    MedicationCreate,
    MedicationUpdate,
    MedicationTakenUpdate,
    MedicationResponse,
    MedicationStats
)
from .service import (
    get_medications,
    get_medication,
    create_medication,
    update_medication,
    set_medication_taken,
    delete_medication,
    get_medication_stats
)

router = APIRouter(prefix="/api/medications", tags=["Medications"])

@router.get("", response_model=List[MedicationResponse])
async def list_medications(db: Session = Depends(get_db)):
    """
    Get all medications

    Medications are ordered by their scheduled time of day.
    """
    return get_medications(db)

@router.get("/stats/count", response_model=MedicationStats)
async def medication_stats(db: Session = Depends(get_db)):
    """
    Get medication statistics

    Returns the total number of medications and how many are taken or pending.
    """
    return get_medication_stats(db)

@router.get("/{medication_id}", response_model=MedicationResponse)
async def read_medication(medication_id: int, db: Session = Depends(get_db)):
    """Get a single medication by ID"""
    return get_medication(db, medication_id)

@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_medication(medication_data: MedicationCreate, db: Session = Depends(get_db)):
    """
    Add a new medication

    Name, dosage, frequency and time are all required.
    """
    medication = create_medication(db, medication_data)
    return CreatedResponse(message="Medication added successfully", id=medication.id)

@router.put("/{medication_id}/taken", response_model=MessageResponse)
async def mark_medication_taken(
    medication_id: int,
    taken_data: MedicationTakenUpdate,
    db: Session = Depends(get_db)
):
    """
    Mark a medication dose as taken or pending

    Only the taken flag is changed.
    """
    set_medication_taken(db, medication_id, taken_data.taken)
    return MessageResponse(message="Medication updated successfully")

@router.put("/{medication_id}", response_model=MessageResponse)
async def edit_medication(
    medication_id: int,
    medication_data: MedicationUpdate,
    db: Session = Depends(get_db)
):
    """Replace the details of a medication"""
    update_medication(db, medication_id, medication_data)
    return MessageResponse(message="Medication updated successfully")

@router.delete("/{medication_id}", response_model=MessageResponse)
async def remove_medication(medication_id: int, db: Session = Depends(get_db)):
    """Delete a medication"""
    delete_medication(db, medication_id)
    return MessageResponse(message="Medication deleted successfully")
