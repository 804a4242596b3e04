"""
API endpoints for practice sessions - starting, answering, completing and reviewing.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from certprep.core.config import settings
from certprep.core.dependencies import get_certification_code, get_current_active_user
from certprep.db.base import get_db
from certprep.models.user import User
from certprep.schemas.common import error_responses
from certprep.schemas.session import (
    AnswerFeedback,
    AnswerSubmit,
    SessionComplete,
    SessionDetail,
    SessionScore,
    SessionStart,
    SessionStarted,
    SessionSummary,
)
from certprep.services import session_service

router = APIRouter()


@router.post(
    "/start",
    response_model=SessionStarted,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(404, 422),
)
def start_session(
    session_data: SessionStart,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Start a new practice session.

    `topic` is required when `session_type` is `topic`.
    """
    certification = (session_data.certification or settings.DEFAULT_CERTIFICATION).upper()
    practice_session = session_service.start_session(
        db,
        user_id=current_user.id,  # type: ignore
        certification=certification,
        session_type=session_data.session_type,
        total_questions=session_data.total_questions,
        topic=session_data.topic,
    )
    return SessionStarted(session_id=practice_session.id)  # type: ignore


@router.post("/{session_id}/submit", response_model=AnswerFeedback, responses=error_responses(403, 404, 409, 422))
def submit_answer(
    session_id: int,
    answer_data: AnswerSubmit,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Submit an answer for a question.

    Returns immediate feedback: whether the answer was correct, the correct
    letters and the explanation. Multi-select answers are graded as sets, so
    `"C,A"` matches a correct answer of `"A,C"`.
    """
    practice_session = session_service.get_owned_session(db, session_id, current_user.id)  # type: ignore
    return session_service.submit_answer(
        db, practice_session, answer_data.question_id, answer_data.user_answer
    )


@router.post("/{session_id}/complete", response_model=SessionScore, responses=error_responses(403, 404, 409))
def complete_session(
    session_id: int,
    completion: SessionComplete,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Complete a session and get the final score.
    """
    practice_session = session_service.get_owned_session(db, session_id, current_user.id)  # type: ignore
    return session_service.complete_session(db, practice_session, completion.duration_seconds)


@router.get("/history", response_model=List[SessionSummary])
def get_history(
    limit: int = Query(default=settings.HISTORY_LIMIT, ge=1, le=100),
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get the user's session history, newest first.
    """
    return session_service.get_history(db, current_user.id, certification, limit)  # type: ignore


@router.get("/{session_id}", response_model=SessionDetail, responses=error_responses(403, 404))
def get_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Any:
    """
    Get a session with its recorded answers. Only the owner may read it.
    """
    return session_service.get_owned_session(db, session_id, current_user.id)  # type: ignore
