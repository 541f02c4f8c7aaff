from sqlalchemy import Column, Integer, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from app.database.database import Base

DEFAULT_CAMPUS_IMAGE_URL = (
    "https://img.freepik.com/free-vector/hand-draw-city-skyline-sketch_1035-19581.jpg?w=2000"
)

class Campus(Base):
    __tablename__ = "campuses"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(2048), nullable=True, default=DEFAULT_CAMPUS_IMAGE_URL)
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    # Студенты остаются при удалении кампуса, campus_id обнуляется в БД
    students = relationship("Student", back_populates="campus", passive_deletes=True)
