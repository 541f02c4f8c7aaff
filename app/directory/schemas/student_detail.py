from typing import Optional

from app.directory.schemas.campus import CampusResponse
from app.directory.schemas.student import StudentResponse


class StudentDetail(StudentResponse):
    campus: Optional[CampusResponse] = None
