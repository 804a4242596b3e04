"""
Pydantic schemas for practice sessions.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from certprep.services.grading import ANSWER_PATTERN

SessionType = Literal["practice", "quiz", "exam", "topic"]


class SessionStart(BaseModel):
    """Schema for starting a practice session."""
    certification: Optional[str] = None
    session_type: SessionType
    topic: Optional[str] = None
    total_questions: int = Field(..., ge=1, description="Number of questions planned for the session")

    @field_validator('topic', mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        """Convert empty string or null-like values to None."""
        if v in ('', 'null', 'undefined', None):
            return None
        return v


class SessionStarted(BaseModel):
    session_id: int


class AnswerSubmit(BaseModel):
    """Schema for submitting an answer."""
    question_id: int = Field(..., description="ID of the question being answered")
    user_answer: str = Field(
        ...,
        pattern=ANSWER_PATTERN,
        description="Selected letters, comma-separated without spaces",
        examples=["B", "A,C"],
    )


class AnswerFeedback(BaseModel):
    """Immediate grading result for one answer."""
    is_correct: bool
    correct_answer: str
    explanation: str


class SessionComplete(BaseModel):
    duration_seconds: int = Field(..., ge=0)


class SessionScore(BaseModel):
    """Final result of a completed session."""
    correct_answers: int
    total_questions: int
    score: int


class SessionSummary(BaseModel):
    """Session row as listed in the history."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    certification: str
    session_type: str
    topic: Optional[str] = None
    total_questions: int
    correct_answers: int
    score: int
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    duration_seconds: Optional[int] = None


class SessionAnswer(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question_id: int
    user_answer: str
    is_correct: bool
    answered_at: Optional[datetime] = None


class SessionDetail(SessionSummary):
    """Session together with its recorded answers."""
    answers: List[SessionAnswer] = []
