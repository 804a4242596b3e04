"""
API endpoints for learning progress and statistics.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from certprep.core.config import settings
from certprep.core.dependencies import get_certification_code, get_current_active_user
from certprep.db.base import get_db
from certprep.models.user import User
from certprep.schemas.progress import ProgressStats, TopicProgress
from certprep.services import stats_service

router = APIRouter()


@router.get("/stats", response_model=ProgressStats)
def get_stats(
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get overall statistics with the per-topic breakdown.
    """
    return stats_service.get_stats(db, current_user.id, certification)  # type: ignore


@router.get("/topics", response_model=List[TopicProgress])
def get_topic_progress(
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get accuracy per topic, most recently practiced first.
    """
    return stats_service.get_topic_progress(db, current_user.id, certification)  # type: ignore


@router.get("/weak-topics", response_model=List[TopicProgress])
def get_weak_topics(
    threshold: int = Query(default=settings.WEAK_TOPIC_THRESHOLD, ge=0, le=100),
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get topics with accuracy below the threshold, worst first.
    """
    return stats_service.get_weak_topics(db, current_user.id, threshold, certification)  # type: ignore
