"""
Practice session lifecycle: start, answer, complete.

A session is created with zeroed counters. Each submitted answer is graded
once, stored, and counted towards the user's topic progress in the same
transaction. Completion recounts the stored answers, writes the score and
makes the session terminal.

Scoring policy (``settings.SCORE_BASIS``):

- ``answered``: score over the answers actually submitted, so finishing
  early scores only what was answered. This is the default.
- ``planned``: score over the session's planned ``total_questions``, so
  unanswered questions count as wrong.
"""
import logging
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from certprep.core.config import settings
from certprep.core.exceptions import (
    AccessDeniedError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
    storage_errors,
)
from certprep.models.practice_session import PracticeSession, SessionAnswer
from certprep.schemas.session import AnswerFeedback, SessionScore
from certprep.services import progress_service, question_store
from certprep.services.grading import answer_letters, parse_answer, percentage

logger = logging.getLogger(__name__)

SESSION_TYPES = ("practice", "quiz", "exam", "topic")
SCORE_BASES = ("answered", "planned")


def start_session(
    db: Session,
    user_id: int,
    certification: str,
    session_type: str,
    total_questions: int,
    topic: Optional[str] = None,
) -> PracticeSession:
    """
    Create a session with correct_answers=0, score=0 and no completion time.

    Raises:
        InvalidInputError: Unknown session type, topic session without a topic,
            or a non-positive question count
        NotFoundError: Unknown certification
    """
    if session_type not in SESSION_TYPES:
        raise InvalidInputError(f"Unknown session type {session_type!r}")
    if session_type == "topic" and not topic:
        raise InvalidInputError("A topic session requires a topic")
    if total_questions < 1:
        raise InvalidInputError("total_questions must be at least 1")

    question_store.get_certification_or_404(db, certification)

    practice_session = PracticeSession(
        user_id=user_id,
        certification=certification,
        session_type=session_type,
        topic=topic,
        total_questions=total_questions,
        correct_answers=0,
        score=0,
    )
    with storage_errors("starting session", db):
        db.add(practice_session)
        db.commit()
        db.refresh(practice_session)

    logger.info(
        f"User {user_id} started {session_type} session {practice_session.id} "
        f"({certification}, {total_questions} questions)"
    )
    return practice_session


def get_session(db: Session, session_id: int) -> PracticeSession:
    with storage_errors("loading session", db):
        practice_session = db.query(PracticeSession).filter(PracticeSession.id == session_id).first()
    if practice_session is None:
        raise NotFoundError(f"Session {session_id} not found")
    return practice_session


def get_owned_session(db: Session, session_id: int, user_id: int) -> PracticeSession:
    """
    Load a session the caller owns.

    Raises:
        NotFoundError: No such session
        AccessDeniedError: The session belongs to someone else
    """
    practice_session = get_session(db, session_id)
    if practice_session.user_id != user_id:
        raise AccessDeniedError("You do not have access to this session")
    return practice_session


def submit_answer(db: Session, practice_session: PracticeSession, question_id: int, user_answer: str) -> AnswerFeedback:
    """
    Grade and record one answer, then count it towards topic progress.

    Correctness is set equality of letters, so "C,A" and "A,C,C" both match
    a correct answer of "A,C". The question is not checked against the
    session's original batch; any existing question is accepted.

    Raises:
        InvalidInputError: Malformed answer string
        NotFoundError: Unknown question
        ConflictError: Session already completed, or question already answered in it
    """
    submitted = parse_answer(user_answer)
    if practice_session.is_completed:
        raise ConflictError(f"Session {practice_session.id} is already completed")

    question = question_store.get_question_or_404(db, question_id)
    correct = submitted == answer_letters(question.correct_answer)

    with storage_errors("recording answer", db):
        try:
            db.add(
                SessionAnswer(
                    session_id=practice_session.id,
                    question_id=question.id,
                    user_answer=user_answer,
                    is_correct=correct,
                )
            )
            db.flush()
        except IntegrityError:
            db.rollback()
            logger.warning(f"Duplicate answer for question {question_id} in session {practice_session.id}")
            raise ConflictError(f"Question {question_id} was already answered in this session")

        # re-read under the write lock; a concurrent completion may have committed since loading
        completed_at = (
            db.query(PracticeSession.completed_at)
            .filter(PracticeSession.id == practice_session.id)
            .with_for_update()
            .scalar()
        )
        if completed_at is not None:
            db.rollback()
            raise ConflictError(f"Session {practice_session.id} is already completed")

        progress_service.record_outcome(
            db,
            user_id=practice_session.user_id,
            topic=question.topic,
            certification=practice_session.certification,
            is_correct=correct,
        )
        db.commit()

    return AnswerFeedback(
        is_correct=correct,
        correct_answer=question.correct_answer,
        explanation=question.explanation,
    )


def complete_session(
    db: Session,
    practice_session: PracticeSession,
    duration_seconds: int,
    score_basis: Optional[str] = None,
) -> SessionScore:
    """
    Recount the stored answers and finalize the session.

    Under the ``answered`` basis a session with no answers scores 0.

    Raises:
        ConflictError: Session already completed
        InvalidInputError: Unknown score basis or negative duration
    """
    basis = score_basis or settings.SCORE_BASIS
    if basis not in SCORE_BASES:
        raise InvalidInputError(f"Unknown score basis {basis!r}")
    if duration_seconds < 0:
        raise InvalidInputError("duration_seconds must not be negative")
    if practice_session.is_completed:
        raise ConflictError(f"Session {practice_session.id} is already completed")

    with storage_errors("completing session", db):
        # only one completion can claim the row
        claimed = db.execute(
            update(PracticeSession)
            .where(PracticeSession.id == practice_session.id, PracticeSession.completed_at.is_(None))
            .values(completed_at=func.now(), duration_seconds=duration_seconds)
            .execution_options(synchronize_session=False)
        ).rowcount
        if not claimed:
            db.rollback()
            raise ConflictError(f"Session {practice_session.id} is already completed")

        answers = db.query(SessionAnswer).filter(SessionAnswer.session_id == practice_session.id).all()
        correct_count = sum(1 for a in answers if a.is_correct)
        scored_over = len(answers) if basis == "answered" else practice_session.total_questions
        score = percentage(correct_count, scored_over)

        practice_session.correct_answers = correct_count
        practice_session.score = score
        db.commit()
        db.refresh(practice_session)

    logger.info(
        f"Session {practice_session.id} completed: {correct_count}/{scored_over} correct, score {score}"
    )
    return SessionScore(correct_answers=correct_count, total_questions=scored_over, score=score)


def get_history(db: Session, user_id: int, certification: str, limit: int) -> List[PracticeSession]:
    """The user's sessions for one certification, newest first."""
    with storage_errors("loading session history", db):
        return (
            db.query(PracticeSession)
            .filter(PracticeSession.user_id == user_id, PracticeSession.certification == certification)
            .order_by(PracticeSession.started_at.desc(), PracticeSession.id.desc())
            .limit(limit)
            .all()
        )
