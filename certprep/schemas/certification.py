"""
Pydantic schemas for certification programs.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CertificationBase(BaseModel):
    """Base certification schema."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    total_questions: int = Field(default=0, ge=0)
    exam_duration: Optional[int] = Field(default=None, ge=1)
    passing_score: Optional[int] = Field(default=None, ge=0, le=100)
    is_active: bool = True


class CertificationCreate(CertificationBase):
    """Schema for certification creation."""

    code: str = Field(..., min_length=1, max_length=20, pattern=r"^[A-Za-z0-9_-]+$")


class CertificationUpdate(BaseModel):
    """Schema for certification update."""

    name: Optional[str] = None
    description: Optional[str] = None
    total_questions: Optional[int] = Field(default=None, ge=0)
    exam_duration: Optional[int] = Field(default=None, ge=1)
    passing_score: Optional[int] = Field(default=None, ge=0, le=100)
    is_active: Optional[bool] = None


class Certification(CertificationBase):
    """Schema for certification response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    created_at: Optional[datetime] = None
