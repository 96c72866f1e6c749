"""
SQLAlchemy model for courses.
"""

import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from schooldesk.database import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    credits = Column(Integer, nullable=False, default=1)
    teacher_id = Column(UUID(as_uuid=True), ForeignKey("teachers.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    teacher = relationship("Teacher", back_populates="courses")
    enrollments = relationship(
        "Enrollment", back_populates="course", cascade="all, delete-orphan", passive_deletes=True
    )
    schedules = relationship(
        "Schedule", back_populates="course", cascade="all, delete-orphan", passive_deletes=True
    )
    grades = relationship(
        "Grade", back_populates="course", cascade="all, delete-orphan", passive_deletes=True
    )

    @property
    def enrollment_count(self) -> int:
        return len(self.enrollments)
