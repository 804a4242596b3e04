"""Schemas module - Import all schemas."""
from certprep.schemas.user import User, UserCreate, Token
from certprep.schemas.certification import Certification, CertificationCreate, CertificationUpdate
from certprep.schemas.question import (
    Question,
    QuestionPublic,
    QuestionBase,
    QuestionCreate,
    QuestionUpdate,
    QuestionImport,
    QuestionExport,
    ImportResult,
)
from certprep.schemas.session import (
    SessionStart,
    SessionStarted,
    AnswerSubmit,
    AnswerFeedback,
    SessionComplete,
    SessionScore,
    SessionSummary,
    SessionDetail,
)
from certprep.schemas.progress import TopicProgress, ProgressStats
from certprep.schemas.common import Message, ErrorDetail

__all__ = [
    "User",
    "UserCreate",
    "Token",
    "Certification",
    "CertificationCreate",
    "CertificationUpdate",
    "Question",
    "QuestionPublic",
    "QuestionBase",
    "QuestionCreate",
    "QuestionUpdate",
    "QuestionImport",
    "QuestionExport",
    "ImportResult",
    "SessionStart",
    "SessionStarted",
    "AnswerSubmit",
    "AnswerFeedback",
    "SessionComplete",
    "SessionScore",
    "SessionSummary",
    "SessionDetail",
    "TopicProgress",
    "ProgressStats",
    "Message",
    "ErrorDetail",
]
