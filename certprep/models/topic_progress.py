"""
Per-topic accuracy counters, one row per (user, topic, certification).
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from certprep.db.base import Base


class TopicProgress(Base):
    """Running accuracy accumulator for one topic."""

    __tablename__ = "topic_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "topic", "certification", name="uq_topic_progress_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    certification = Column(String(20), ForeignKey("certifications.code"), nullable=False)
    topic = Column(String(100), nullable=False)
    total_attempts = Column(Integer, nullable=False, default=0)
    correct_attempts = Column(Integer, nullable=False, default=0)
    accuracy = Column(Integer, nullable=False, default=0)  # percentage (0-100)
    last_practiced_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="topic_progress")
