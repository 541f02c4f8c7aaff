from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from app.database.database import Base

DEFAULT_STUDENT_IMAGE_URL = "https://via.placeholder.com/480x480.png?text=Student"

class Student(Base):
    __tablename__ = "students"
    id = Column(Integer, primary_key=True, index=True)
    firstname = Column(String(255), nullable=False)
    lastname = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    image_url = Column(String(2048), nullable=True, default=DEFAULT_STUDENT_IMAGE_URL)
    gpa = Column(Float, nullable=True)
    campus_id = Column(Integer, ForeignKey("campuses.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    campus = relationship("Campus", back_populates="students")
