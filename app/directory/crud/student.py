from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from app.directory.models.student import Student

def get_all_students(db: Session, include_campus: bool = True) -> List[Student]:
    query = db.query(Student)
    if include_campus:
        query = query.options(selectinload(Student.campus))
    return query.order_by(Student.id).all()

def get_student(db: Session, student_id: int, include_campus: bool = True) -> Optional[Student]:
    query = db.query(Student).filter(Student.id == student_id)
    if include_campus:
        query = query.options(selectinload(Student.campus))
    return query.first()

def create_student(db: Session, student_data: dict) -> Student:
    try:
        db_student = Student(**student_data)
        db.add(db_student)
        db.commit()
        db.refresh(db_student)
        return db_student
    except Exception:
        db.rollback()
        raise

def update_student(db: Session, student_id: int, update_data: dict) -> List[int]:
    values = update_data or {Student.updated_at: func.now()}
    try:
        count = (
            db.query(Student)
            .filter(Student.id == student_id)
            .update(values, synchronize_session=False)
        )
        db.commit()
        return [count]
    except Exception:
        db.rollback()
        raise

def delete_student(db: Session, student_id: int) -> int:
    try:
        count = (
            db.query(Student)
            .filter(Student.id == student_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return count
    except Exception:
        db.rollback()
        raise
