import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from app.directory.models.campus import Campus

logger = logging.getLogger(__name__)

def get_all_campuses(db: Session, include_students: bool = True) -> List[Campus]:
    query = db.query(Campus)
    if include_students:
        query = query.options(selectinload(Campus.students))
    return query.order_by(Campus.id).all()

def get_campus(db: Session, campus_id: int, include_students: bool = True) -> Optional[Campus]:
    query = db.query(Campus).filter(Campus.id == campus_id)
    if include_students:
        query = query.options(selectinload(Campus.students))
    return query.first()

def create_campus(db: Session, campus_data: dict) -> Campus:
    """Insert a campus; NOT NULL violations come back as IntegrityError."""
    try:
        db_campus = Campus(**campus_data)
        db.add(db_campus)
        db.commit()
        db.refresh(db_campus)
        return db_campus
    except Exception:
        db.rollback()
        raise

def update_campus(db: Session, campus_id: int, update_data: dict) -> List[int]:
    """Returns [affected_rows], 0 when the campus does not exist."""
    # Пустое тело всё равно обновляет updated_at
    values = update_data or {Campus.updated_at: func.now()}
    try:
        count = (
            db.query(Campus)
            .filter(Campus.id == campus_id)
            .update(values, synchronize_session=False)
        )
        db.commit()
        return [count]
    except Exception:
        db.rollback()
        raise

def delete_campus(db: Session, campus_id: int) -> int:
    # campus_id студентов обнуляется внешним ключом (ON DELETE SET NULL)
    try:
        count = (
            db.query(Campus)
            .filter(Campus.id == campus_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        if count:
            logger.info(f"Campus {campus_id} deleted")
        return count
    except Exception:
        db.rollback()
        raise
