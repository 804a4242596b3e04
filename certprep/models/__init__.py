"""Models module - Import all models here for Alembic."""
from certprep.db.base import Base
from certprep.models.user import User
from certprep.models.question import Certification, Question
from certprep.models.practice_session import PracticeSession, SessionAnswer
from certprep.models.topic_progress import TopicProgress

__all__ = ["Base", "User", "Certification", "Question", "PracticeSession", "SessionAnswer", "TopicProgress"]
