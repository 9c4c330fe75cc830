"""
Vital Service - Persistence logic for vital signs readings.
"""
from datetime import date, datetime, time, timedelta
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import func, or_
import logging

from ..core.clock import utc_now
from ..exceptions import RecordNotFoundException, RecordValidationException, StorageFailureException
from .models import Vital
from .schemas import VitalCreate, VitalUpdate, VitalStats

# Set up logging
logger = logging.getLogger(__name__)

def _newest_first(query):
    return query.order_by(Vital.recorded_date.desc(), Vital.id.desc())

def get_vitals(db: Session) -> List[Vital]:
    """
    Get all vital signs readings, most recent first.

    Args:
        db: Database session

    Returns:
        List[Vital]: Readings ordered by recorded date, descending
    """
    return _newest_first(db.query(Vital)).all()

def get_vital(db: Session, vital_id: int) -> Vital:
    """
    Get a vital signs reading by ID.

    Raises:
        RecordNotFoundException: If the reading does not exist
    """
    vital = db.query(Vital).filter(Vital.id == vital_id).first()
    if not vital:
        raise RecordNotFoundException("Vital record not found")
    return vital

def get_vitals_in_range(db: Session, start_date: date, end_date: date) -> List[Vital]:
    """
    Get the readings recorded between two calendar dates, both inclusive.

    Args:
        db: Database session
        start_date: First day of the range
        end_date: Last day of the range

    Returns:
        List[Vital]: Readings in range, most recent first

    Raises:
        RecordValidationException: If the range ends before it starts
    """
    if end_date < start_date:
        raise RecordValidationException("end_date must not be before start_date")

    start = datetime.combine(start_date, time.min)
    end = datetime.combine(end_date, time.min) + timedelta(days=1)
    return _newest_first(
        db.query(Vital).filter(Vital.recorded_date >= start, Vital.recorded_date < end)
    ).all()

def get_latest_vital(db: Session) -> Vital:
    """
    Get the most recently recorded reading.

    Raises:
        RecordNotFoundException: If no reading has been recorded yet
    """
    vital = _newest_first(db.query(Vital)).first()
    if not vital:
        raise RecordNotFoundException("No vital records found")
    return vital

def create_vital(db: Session, vital_data: VitalCreate) -> Vital:
    """
    Record a new vital signs reading, stamped with the store's clock.

    Raises:
        StorageFailureException: If the insert fails
    """
    vital = Vital(**vital_data.model_dump(), recorded_date=utc_now())
    db.add(vital)

    try:
        db.commit()
        db.refresh(vital)
        logger.info(f"Vital record {vital.id} recorded")
        return vital
    except Exception as e:
        db.rollback()
        logger.error(f"Error recording vital signs: {str(e)}")
        raise StorageFailureException("Failed to add vital signs")

def update_vital(db: Session, vital_id: int, vital_data: VitalUpdate) -> Vital:
    """
    Replace all four measurements of a reading. The recorded date is kept.

    Raises:
        RecordNotFoundException: If the reading does not exist
        StorageFailureException: If the update fails
    """
    vital = get_vital(db, vital_id)

    for field, value in vital_data.model_dump().items():
        setattr(vital, field, value)

    try:
        db.commit()
        db.refresh(vital)
        logger.info(f"Vital record {vital_id} updated")
        return vital
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating vital record {vital_id}: {str(e)}")
        raise StorageFailureException("Failed to update vital signs")

def delete_vital(db: Session, vital_id: int) -> None:
    """
    Delete a reading.

    Raises:
        RecordNotFoundException: If the reading does not exist
        StorageFailureException: If the delete fails
    """
    vital = get_vital(db, vital_id)

    try:
        db.delete(vital)
        db.commit()
        logger.info(f"Vital record {vital_id} deleted")
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting vital record {vital_id}: {str(e)}")
        raise StorageFailureException("Failed to delete vital record")

def get_vital_stats(db: Session) -> VitalStats:
    """
    Summarize numeric measurements across all readings.

    SQL aggregates skip nulls, so each average, minimum and maximum only
    covers readings where that measurement was taken.
    """
    row = db.query(
        func.count(Vital.id),
        func.avg(Vital.heart_rate),
        func.min(Vital.heart_rate),
        func.max(Vital.heart_rate),
        func.avg(Vital.temperature),
        func.min(Vital.temperature),
        func.max(Vital.temperature),
        func.avg(Vital.blood_sugar),
        func.min(Vital.blood_sugar),
        func.max(Vital.blood_sugar)
    ).filter(
        or_(
            Vital.heart_rate.isnot(None),
            Vital.temperature.isnot(None),
            Vital.blood_sugar.isnot(None)
        )
    ).one()

    return VitalStats(
        total_records=row[0],
        avg_heart_rate=row[1],
        min_heart_rate=row[2],
        max_heart_rate=row[3],
        avg_temperature=row[4],
        min_temperature=row[5],
        max_temperature=row[6],
        avg_blood_sugar=row[7],
        min_blood_sugar=row[8],
        max_blood_sugar=row[9]
    )
