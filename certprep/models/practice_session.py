"""
Models for tracking practice sessions and the answers recorded in them.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from certprep.db.base import Base


class PracticeSession(Base):
    """Practice session model - one timed attempt at a batch of questions."""

    __tablename__ = "practice_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    certification = Column(String(20), ForeignKey("certifications.code"), index=True, nullable=False)

    # Session type: practice, quiz, exam, topic
    session_type = Column(String(20), nullable=False)
    topic = Column(String(100), nullable=True)  # only set for topic sessions

    total_questions = Column(Integer, nullable=False)  # fixed at start
    correct_answers = Column(Integer, nullable=False, default=0)
    score = Column(Integer, nullable=False, default=0)  # percentage (0-100)

    started_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)
    duration_seconds = Column(Integer, nullable=True)

    # Relationships
    user = relationship("User", back_populates="practice_sessions")
    answers = relationship(
        "SessionAnswer",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="SessionAnswer.id",
    )

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None


class SessionAnswer(Base):
    """One graded answer to one question within a session."""

    __tablename__ = "session_answers"
    __table_args__ = (
        UniqueConstraint("session_id", "question_id", name="uq_session_answers_session_question"),
    )

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("practice_sessions.id", ondelete="CASCADE"), nullable=False)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False)

    user_answer = Column(String(64), nullable=False)  # e.g. "A" or "A,C"
    is_correct = Column(Boolean, nullable=False)  # graded once, never recomputed

    answered_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    session = relationship("PracticeSession", back_populates="answers")
    question = relationship("Question")
