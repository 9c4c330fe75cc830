"""
Medication Service - Persistence logic for medications.

This module provides the CRUD operations, the taken-flag update and the
statistics query for the medications collection.
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import func, case
import logging

from ..exceptions import RecordNotFoundException, StorageFailureException
from .models import Medication
from .schemas import MedicationCreate, MedicationUpdate, MedicationStats

# Set up logging
logger = logging.getLogger(__name__)

def get_medications(db: Session) -> List[Medication]:
    """
    Get all medications ordered by their scheduled time of day.

    Args:
        db: Database session

    Returns:
        List[Medication]: Medications, earliest dose first
    """
    return db.query(Medication).order_by(Medication.time.asc(), Medication.id.asc()).all()

def get_medication(db: Session, medication_id: int) -> Medication:
    """
    Get a medication by ID.

    Args:
        db: Database session
        medication_id: ID of the medication

    Returns:
        Medication: Medication record

    Raises:
        RecordNotFoundException: If medication not found
    """
    medication = db.query(Medication).filter(Medication.id == medication_id).first()
    if not medication:
        raise RecordNotFoundException("Medication not found")
    return medication

def create_medication(db: Session, medication_data: MedicationCreate) -> Medication:
    """
    Add a new medication. The dose starts out not taken.

    Args:
        db: Database session
        medication_data: Validated medication fields

    Returns:
        Medication: Created medication with its assigned ID

    Raises:
        StorageFailureException: If the insert fails
    """
    medication = Medication(**medication_data.model_dump(), taken=False)
    db.add(medication)

    try:
        db.commit()
        db.refresh(medication)
        logger.info(f"Medication {medication.id} added: {medication.name}")
        return medication
    except Exception as e:
        db.rollback()
        logger.error(f"Error adding medication: {str(e)}")
        raise StorageFailureException("Failed to add medication")

def update_medication(db: Session, medication_id: int, medication_data: MedicationUpdate) -> Medication:
    """
    Replace the editable fields of a medication.

    Args:
        db: Database session
        medication_id: ID of the medication
        medication_data: New values for name, dosage, frequency and time

    Returns:
        Medication: Updated medication

    Raises:
        RecordNotFoundException: If medication not found
        StorageFailureException: If the update fails
    """
    medication = get_medication(db, medication_id)

    for field, value in medication_data.model_dump().items():
        setattr(medication, field, value)

    try:
        db.commit()
        db.refresh(medication)
        logger.info(f"Medication {medication_id} updated")
        return medication
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating medication {medication_id}: {str(e)}")
        raise StorageFailureException("Failed to update medication")

def set_medication_taken(db: Session, medication_id: int, taken: bool) -> Medication:
    """
    Set only the taken flag of a medication.

    Raises:
        RecordNotFoundException: If medication not found
        StorageFailureException: If the update fails
    """
    medication = get_medication(db, medication_id)
    medication.mark_taken(taken)

    try:
        db.commit()
        db.refresh(medication)
        logger.info(f"Medication {medication_id} marked {'taken' if taken else 'pending'}")
        return medication
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating medication {medication_id}: {str(e)}")
        raise StorageFailureException("Failed to update medication")

def delete_medication(db: Session, medication_id: int) -> None:
    """
    Delete a medication.

    Args:
        db: Database session
        medication_id: ID of the medication

    Raises:
        RecordNotFoundException: If medication not found
        StorageFailureException: If the delete fails
    """
    medication = get_medication(db, medication_id)

    try:
        db.delete(medication)
        db.commit()
        logger.info(f"Medication {medication_id} deleted")
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting medication {medication_id}: {str(e)}")
        raise StorageFailureException("Failed to delete medication")

def get_medication_stats(db: Session) -> MedicationStats:
    """
    Count medications by taken state.

    Args:
        db: Database session

    Returns:
        MedicationStats: total, taken and pending counts
    """
    total, taken = db.query(
        func.count(Medication.id),
        func.coalesce(func.sum(case((Medication.taken.is_(True), 1), else_=0)), 0)
    ).one()

    return MedicationStats(total=total, taken=taken, pending=total - taken)
