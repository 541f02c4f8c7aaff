from fastapi import Depends
from sqlalchemy.orm import Session
from app.api.endpoints.base import LoggedRouter
from app.database.database import get_db
from app.directory.schemas.campus import CampusCreate, CampusUpdate, CampusResponse, CampusDetail
from app.directory.crud.campus import get_all_campuses, get_campus, create_campus, update_campus, delete_campus

router = LoggedRouter(prefix="/campuses", tags=["Campuses"])

@router.get("")
@router.get("/", include_in_schema=False)
def read_campuses(include: bool = True, db: Session = Depends(get_db)):
    """List all campuses. With include=true every campus carries its students."""
    schema = CampusDetail if include else CampusResponse
    return [schema.model_validate(campus) for campus in get_all_campuses(db, include_students=include)]

@router.get("/{campus_id}")
def read_campus(campus_id: int, include: bool = True, db: Session = Depends(get_db)):
    """Get one campus by ID, or null if it does not exist."""
    campus = get_campus(db, campus_id, include_students=include)
    if campus is None:
        return None
    schema = CampusDetail if include else CampusResponse
    return schema.model_validate(campus)

@router.post("")
@router.post("/", include_in_schema=False)
def create_campus_endpoint(campus: CampusCreate, db: Session = Depends(get_db)):
    created = create_campus(db, campus.model_dump(exclude_unset=True))
    return CampusResponse.model_validate(created)

@router.put("/{campus_id}")
def update_campus_endpoint(campus_id: int, campus: CampusUpdate, db: Session = Depends(get_db)):
    """Returns [affected_rows]."""
    return update_campus(db, campus_id, campus.model_dump(exclude_unset=True))

@router.delete("/{campus_id}")
def delete_campus_endpoint(campus_id: int, db: Session = Depends(get_db)):
    """Returns the number of deleted rows. Students of the campus become unassigned."""
    return delete_campus(db, campus_id)
