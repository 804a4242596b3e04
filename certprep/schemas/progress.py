"""
Pydantic schemas for topic progress and statistics.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class TopicProgress(BaseModel):
    """Accuracy counters for one topic."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    certification: str
    topic: str
    total_attempts: int
    correct_attempts: int
    accuracy: int
    last_practiced_at: Optional[datetime] = None


class ProgressStats(BaseModel):
    """Totals across sessions with the per-topic breakdown."""

    certification: str
    total_sessions: int = 0
    total_questions: int = 0
    total_correct: int = 0
    avg_score: float = 0.0
    topic_progress: List[TopicProgress] = []
