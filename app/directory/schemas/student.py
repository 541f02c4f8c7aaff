from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class StudentBase(BaseModel):
    firstname: Optional[str] = Field(None, max_length=255, description="Имя студента")
    lastname: Optional[str] = Field(None, max_length=255, description="Фамилия студента")
    email: Optional[str] = Field(None, max_length=255, description="Email студента")
    image_url: Optional[str] = Field(None, description="URL фотографии студента")
    gpa: Optional[float] = Field(None, description="Средний балл")
    campus_id: Optional[int] = Field(None, description="ID кампуса (может отсутствовать)")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    pass


class StudentResponse(StudentBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
