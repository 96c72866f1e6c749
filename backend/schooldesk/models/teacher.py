"""
SQLAlchemy model for teachers.
Courses and schedules are not cascaded: a teacher who still owns courses
cannot be deleted (see teacher_service.delete_teacher).
"""

import uuid
from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from schooldesk.database import Base


class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(String(255), nullable=True)
    subject = Column(String(100), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    courses = relationship("Course", back_populates="teacher")
    schedules = relationship("Schedule", back_populates="teacher")
    user = relationship("User", back_populates="teacher", uselist=False)
