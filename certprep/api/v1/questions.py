"""
API endpoints for drawing practice questions from the bank.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from certprep.core.config import settings
from certprep.core.dependencies import get_certification_code, get_current_active_user
from certprep.db.base import get_db
from certprep.models.user import User
from certprep.schemas.question import QuestionPublic
from certprep.services import question_store

router = APIRouter()


@router.get("/random", response_model=List[QuestionPublic])
def get_random_questions(
    count: int = Query(..., ge=1, le=settings.MAX_QUESTION_BATCH),
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get a random batch of questions, without answers.
    """
    questions = question_store.get_random_questions(db, count, certification)
    return [QuestionPublic.from_question(q) for q in questions]


@router.get("/by-topic", response_model=List[QuestionPublic])
def get_questions_by_topic(
    topic: str = Query(..., min_length=1),
    count: int = Query(..., ge=1, le=settings.MAX_QUESTION_BATCH),
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get a random batch of questions from one topic, without answers.
    """
    questions = question_store.get_questions_by_topic(db, topic, count, certification)
    return [QuestionPublic.from_question(q) for q in questions]


@router.get("/topics", response_model=List[str])
def get_topics(
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get all topics of a certification.
    """
    return question_store.list_topics(db, certification)


@router.get("/{question_id}", response_model=QuestionPublic)
def get_question(
    question_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get a single question, without its answer.
    """
    return QuestionPublic.from_question(question_store.get_question_or_404(db, question_id))
