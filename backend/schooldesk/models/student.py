"""
SQLAlchemy model for the students table.
Enrollments, attendances and grades belong to the student and are deleted with it.
"""

import uuid
from sqlalchemy import Column, Date, DateTime, Integer, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from schooldesk.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(String(255), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    grade_level = Column(Integer, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    enrollments = relationship(
        "Enrollment", back_populates="student", cascade="all, delete-orphan", passive_deletes=True
    )
    attendances = relationship(
        "Attendance", back_populates="student", cascade="all, delete-orphan", passive_deletes=True
    )
    grades = relationship(
        "Grade", back_populates="student", cascade="all, delete-orphan", passive_deletes=True
    )
