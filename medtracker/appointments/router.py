"""
Appointment Router - API endpoints for appointment management.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.schemas import CreatedResponse, MessageResponse
from .schemas import AppointmentCreate, AppointmentUpdate, AppointmentResponse, AppointmentStats
from .service import (
    get_appointments,
    get_appointment,
    get_upcoming_appointments,
    get_past_appointments,
    get_appointments_by_type,
    get_appointments_by_doctor,
    create_appointment,
    update_appointment,
    delete_appointment,
    get_appointment_stats
)

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])

@router.get("", response_model=List[AppointmentResponse])
async def list_appointments(db: Session = Depends(get_db)):
    """Get all appointments ordered by date and time"""
    return get_appointments(db)

@router.get("/upcoming/list", response_model=List[AppointmentResponse])
async def list_upcoming_appointments(db: Session = Depends(get_db)):
    """Get the appointments that have not happened yet"""
    return get_upcoming_appointments(db)

@router.get("/past/list", response_model=List[AppointmentResponse])
async def list_past_appointments(db: Session = Depends(get_db)):
    """Get the appointments that already happened, most recent first"""
    return get_past_appointments(db)

@router.get("/type/{appointment_type}", response_model=List[AppointmentResponse])
async def list_appointments_by_type(appointment_type: str, db: Session = Depends(get_db)):
    """Get the appointments of a given type"""
    return get_appointments_by_type(db, appointment_type)

@router.get("/doctor/{doctor}", response_model=List[AppointmentResponse])
async def list_appointments_by_doctor(doctor: str, db: Session = Depends(get_db)):
    """
    Search appointments by doctor

    Matches any doctor whose name contains the given text.
    """
    return get_appointments_by_doctor(db, doctor)

@router.get("/stats/count", response_model=AppointmentStats)
async def appointment_stats(db: Session = Depends(get_db)):
    """
    Get appointment statistics

    Returns total, upcoming and past counts plus distinct types and doctors.
    """
    return get_appointment_stats(db)

@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def read_appointment(appointment_id: int, db: Session = Depends(get_db)):
    """Get a single appointment by ID"""
    return get_appointment(db, appointment_id)

@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_appointment(appointment_data: AppointmentCreate, db: Session = Depends(get_db)):
    """
    Schedule a new appointment

    Doctor, type and date_time are required; location is optional.
    """
    appointment = create_appointment(db, appointment_data)
    return CreatedResponse(message="Appointment scheduled successfully", id=appointment.id)

@router.put("/{appointment_id}", response_model=MessageResponse)
async def edit_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdate,
    db: Session = Depends(get_db)
):
    """Replace the details of an appointment"""
    update_appointment(db, appointment_id, appointment_data)
    return MessageResponse(message="Appointment updated successfully")

@router.delete("/{appointment_id}", response_model=MessageResponse)
async def remove_appointment(appointment_id: int, db: Session = Depends(get_db)):
    """Delete an appointment"""
    delete_appointment(db, appointment_id)
    return MessageResponse(message="Appointment deleted successfully")
