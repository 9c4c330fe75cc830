"""
Appointment Service - Persistence logic for appointments.

This module provides appointment CRUD operations plus the upcoming/past,
type and doctor views and the statistics query.
"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func, case
import logging

from ..core.clock import utc_now
from ..exceptions import RecordNotFoundException, StorageFailureException
from .models import Appointment
from .schemas import AppointmentCreate, AppointmentUpdate, AppointmentStats

# Set up logging
logger = logging.getLogger(__name__)

def _soonest_first(query):
    return query.order_by(Appointment.date_time.asc(), Appointment.id.asc())

def get_appointments(db: Session) -> List[Appointment]:
    """
    Get all appointments ordered by date and time.

    Args:
        db: Database session

    Returns:
        List[Appointment]: Appointments, soonest first
    """
    return _soonest_first(db.query(Appointment)).all()

def get_appointment(db: Session, appointment_id: int) -> Appointment:
    """
    Get an appointment by ID.

    Args:
        db: Database session
        appointment_id: ID of the appointment

    Returns:
        Appointment: Appointment record

    Raises:
        RecordNotFoundException: If appointment not found
    """
    appointment = db.query(Appointment).filter(Appointment.id == appointment_id).first()
    if not appointment:
        raise RecordNotFoundException("Appointment not found")
    return appointment

def get_upcoming_appointments(db: Session, now: Optional[datetime] = None) -> List[Appointment]:
    """
    Get appointments at or after the current time, soonest first.

    Together with get_past_appointments this splits the collection in two
    at the same instant.

    Args:
        db: Database session
        now: Reference instant, defaults to the store's clock
    """
    now = now or utc_now()
    return _soonest_first(db.query(Appointment).filter(Appointment.date_time >= now)).all()

def get_past_appointments(db: Session, now: Optional[datetime] = None) -> List[Appointment]:
    """
    Get appointments before the current time, most recent first.

    Args:
        db: Database session
        now: Reference instant, defaults to the store's clock
    """
    now = now or utc_now()
    return (
        db.query(Appointment)
        .filter(Appointment.date_time < now)
        .order_by(Appointment.date_time.desc(), Appointment.id.desc())
        .all()
    )

def get_appointments_by_type(db: Session, appointment_type: str) -> List[Appointment]:
    """Get appointments of exactly the given type"""
    return _soonest_first(db.query(Appointment).filter(Appointment.type == appointment_type)).all()

def get_appointments_by_doctor(db: Session, doctor: str) -> List[Appointment]:
    """Get appointments whose doctor name contains the search text, ignoring case"""
    return _soonest_first(db.query(Appointment).filter(Appointment.doctor.ilike(f"%{doctor}%"))).all()

def create_appointment(db: Session, appointment_data: AppointmentCreate) -> Appointment:
    """
    Schedule a new appointment.

    Args:
        db: Database session
        appointment_data: Validated appointment fields

    Returns:
        Appointment: Created appointment with its assigned ID

    Raises:
        StorageFailureException: If the insert fails
    """
    appointment = Appointment(**appointment_data.model_dump())
    db.add(appointment)

    try:
        db.commit()
        db.refresh(appointment)
        logger.info(f"Appointment {appointment.id} scheduled with {appointment.doctor} at {appointment.date_time}")
        return appointment
    except Exception as e:
        db.rollback()
        logger.error(f"Error scheduling appointment: {str(e)}")
        raise StorageFailureException("Failed to add appointment")

def update_appointment(
    db: Session,
    appointment_id: int,
    appointment_data: AppointmentUpdate
) -> Appointment:
    """
    Replace every field of an appointment.

    Raises:
        RecordNotFoundException: If appointment not found
        StorageFailureException: If the update fails
    """
    appointment = get_appointment(db, appointment_id)

    for field, value in appointment_data.model_dump().items():
        setattr(appointment, field, value)

    try:
        db.commit()
        db.refresh(appointment)
        logger.info(f"Appointment {appointment_id} updated")
        return appointment
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating appointment {appointment_id}: {str(e)}")
        raise StorageFailureException("Failed to update appointment")

def delete_appointment(db: Session, appointment_id: int) -> None:
    """
    Delete an appointment.

    Raises:
        RecordNotFoundException: If appointment not found
        StorageFailureException: If the delete fails
    """
    appointment = get_appointment(db, appointment_id)

    try:
        db.delete(appointment)
        db.commit()
        logger.info(f"Appointment {appointment_id} deleted")
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting appointment {appointment_id}: {str(e)}")
        raise StorageFailureException("Failed to delete appointment")

def get_appointment_stats(db: Session, now: Optional[datetime] = None) -> AppointmentStats:
    """
    Count appointments by time and the distinct types and doctors.

    Args:
        db: Database session
        now: Reference instant, defaults to the store's clock
    """
    now = now or utc_now()

    total, upcoming, past, types, doctors = db.query(
        func.count(Appointment.id),
        func.coalesce(func.sum(case((Appointment.date_time >= now, 1), else_=0)), 0),
        func.coalesce(func.sum(case((Appointment.date_time < now, 1), else_=0)), 0),
        func.count(func.distinct(Appointment.type)),
        func.count(func.distinct(Appointment.doctor))
    ).one()

    return AppointmentStats(total=total, upcoming=upcoming, past=past, types=types, doctors=doctors)
