"""
Question bank models: certification programs and their questions.
"""
from sqlalchemy import Boolean, Column, Integer, String, DateTime, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from certprep.db.base import Base


class Certification(Base):
    """A named exam program that partitions questions, sessions and progress."""

    __tablename__ = "certifications"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(20), unique=True, index=True, nullable=False)  # e.g. CAPM, PSM1
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    total_questions = Column(Integer, default=0)  # nominal exam length
    exam_duration = Column(Integer, nullable=True)  # minutes
    passing_score = Column(Integer, nullable=True)  # percentage
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    questions = relationship("Question", back_populates="certification_program")


class Question(Base):
    """Multiple-choice question. ``correct_answer`` is one letter or a comma-separated list."""

    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True)
    external_id = Column(String(64), unique=True, index=True, nullable=False)  # e.g. Q001
    text = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # {"A": "...", "B": "..."}
    correct_answer = Column(String(64), nullable=False)  # "B" or "A,C"
    explanation = Column(Text, nullable=False)
    topic = Column(String(100), index=True, nullable=False)
    difficulty = Column(String(10), nullable=False)  # easy, medium, hard
    media_url = Column(String, nullable=True)
    certification = Column(
        String(20), ForeignKey("certifications.code"), index=True, nullable=False
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    certification_program = relationship("Certification", back_populates="questions")
