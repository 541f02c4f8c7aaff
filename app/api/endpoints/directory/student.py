from fastapi import Depends
from sqlalchemy.orm import Session
from app.api.endpoints.base import LoggedRouter
from app.database.database import get_db
from app.directory.schemas.student import StudentCreate, StudentUpdate, StudentResponse
from app.directory.schemas.student_detail import StudentDetail
from app.directory.crud.student import get_all_students, get_student, create_student, update_student, delete_student

router = LoggedRouter(prefix="/students", tags=["Students"])

@router.get("")
@router.get("/", include_in_schema=False)
def read_students(include: bool = True, db: Session = Depends(get_db)):
    """List all students. With include=true every student carries its campus."""
    schema = StudentDetail if include else StudentResponse
    return [schema.model_validate(student) for student in get_all_students(db, include_campus=include)]

@router.get("/{student_id}")
def read_student(student_id: int, include: bool = True, db: Session = Depends(get_db)):
    student = get_student(db, student_id, include_campus=include)
    if student is None:
        return None
    schema = StudentDetail if include else StudentResponse
    return schema.model_validate(student)

@router.post("")
@router.post("/", include_in_schema=False)
def create_student_endpoint(student: StudentCreate, db: Session = Depends(get_db)):
    created = create_student(db, student.model_dump(exclude_unset=True))
    return StudentResponse.model_validate(created)

@router.put("/{student_id}")
def update_student_endpoint(student_id: int, student: StudentUpdate, db: Session = Depends(get_db)):
    return update_student(db, student_id, student.model_dump(exclude_unset=True))

@router.delete("/{student_id}")
def delete_student_endpoint(student_id: int, db: Session = Depends(get_db)):
    return delete_student(db, student_id)
