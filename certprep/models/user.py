"""
User model for authentication and authorization.
"""
from sqlalchemy import Boolean, Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from certprep.db.base import Base

ROLE_STUDENT = "student"
ROLE_ADMIN = "admin"


class User(Base):
    """A learner, or an admin who maintains the question bank."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, unique=True, index=True, nullable=True)
    full_name = Column(String, nullable=True)
    # None for accounts created by seeding that have not set a password
    hashed_password = Column(String, nullable=True)
    role = Column(String(20), default=ROLE_STUDENT, nullable=False)
    is_active = Column(Boolean, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_login = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    practice_sessions = relationship(
        "PracticeSession", back_populates="user", cascade="all, delete-orphan"
    )
    topic_progress = relationship(
        "TopicProgress", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
