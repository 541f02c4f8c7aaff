from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.directory.schemas.student import StudentResponse


class CampusBase(BaseModel):
    name: Optional[str] = Field(None, max_length=255, description="Название кампуса")
    address: Optional[str] = Field(None, max_length=255, description="Адрес кампуса")
    description: Optional[str] = Field(None, description="Описание кампуса")
    image_url: Optional[str] = Field(None, description="URL изображения кампуса")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# name и address обязательны на уровне БД, ошибка придёт из хранилища
class CampusCreate(CampusBase):
    pass


class CampusUpdate(CampusBase):
    pass


class CampusResponse(CampusBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CampusDetail(CampusResponse):
    students: List[StudentResponse] = []
