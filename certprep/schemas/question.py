"""
Pydantic schemas for questions and question bank import/export.
"""
from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from certprep.services.grading import answer_letters

Difficulty = Literal["easy", "medium", "hard"]

DEFAULT_EXPLANATION = "See course materials for detailed explanation"


def _sorted_options(options: Dict[str, str]) -> Dict[str, str]:
    return {key: options[key] for key in sorted(options)}


class QuestionPublic(BaseModel):
    """Question as shown while practicing: no correct answer or explanation."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    external_id: str
    text: str
    options: Dict[str, str]
    topic: str
    difficulty: str
    media_url: Optional[str] = None
    certification: str
    select_count: int = 1

    @field_validator("options")
    @classmethod
    def order_options(cls, v):
        return _sorted_options(v)

    @classmethod
    def from_question(cls, question) -> "QuestionPublic":
        result = cls.model_validate(question)
        result.select_count = len(answer_letters(question.correct_answer))
        return result


class Question(QuestionPublic):
    """Full question row, including the answer key."""
    correct_answer: str
    explanation: str
    created_at: Optional[datetime] = None


class QuestionBase(BaseModel):
    """Import/export format of one question."""
    text: str = Field(..., min_length=1)
    options: Dict[str, str]
    correct_answer: str
    explanation: Optional[str] = None
    topic: str = Field(..., min_length=1, max_length=100)
    difficulty: Difficulty = "medium"
    media_url: Optional[str] = None

    @field_validator("options")
    @classmethod
    def order_options(cls, v):
        return _sorted_options(v)


class QuestionCreate(QuestionBase):
    """Schema for creating a single question."""
    certification: Optional[str] = None
    external_id: Optional[str] = Field(default=None, max_length=64)


class QuestionUpdate(BaseModel):
    """Partial update; the merged question is re-validated."""
    text: Optional[str] = None
    options: Optional[Dict[str, str]] = None
    correct_answer: Optional[str] = None
    explanation: Optional[str] = None
    topic: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    media_url: Optional[str] = None


class QuestionImport(BaseModel):
    certification: Optional[str] = None
    questions: List[QuestionBase] = Field(..., min_length=1)


class ImportResult(BaseModel):
    success: bool
    imported: int
    message: str


class QuestionExport(BaseModel):
    success: bool
    certification: str
    questions: List[QuestionBase]
    total_count: int
    exported_at: datetime
