"""
Read access to the question bank, scoped by certification program.
"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from certprep.core.exceptions import NotFoundError, storage_errors
from certprep.models.question import Certification, Question


def get_question(db: Session, question_id: int) -> Optional[Question]:
    """Return the question with this id, or None."""
    with storage_errors("loading question", db):
        return db.query(Question).filter(Question.id == question_id).first()


def get_question_or_404(db: Session, question_id: int) -> Question:
    question = get_question(db, question_id)
    if question is None:
        raise NotFoundError(f"Question {question_id} not found")
    return question


def get_random_questions(db: Session, count: int, certification: str) -> List[Question]:
    """Random sample of up to ``count`` questions from one certification."""
    with storage_errors("sampling questions", db):
        return (
            db.query(Question)
            .filter(Question.certification == certification)
            .order_by(func.random())
            .limit(count)
            .all()
        )


def get_questions_by_topic(db: Session, topic: str, count: int, certification: str) -> List[Question]:
    """Random sample of up to ``count`` questions from one topic."""
    with storage_errors("sampling questions by topic", db):
        return (
            db.query(Question)
            .filter(Question.certification == certification, Question.topic == topic)
            .order_by(func.random())
            .limit(count)
            .all()
        )


def list_topics(db: Session, certification: str) -> List[str]:
    """Distinct topic labels of a certification, sorted."""
    with storage_errors("listing topics", db):
        rows = (
            db.query(Question.topic)
            .filter(Question.certification == certification)
            .distinct()
            .order_by(Question.topic)
            .all()
        )
    return [row[0] for row in rows]


def list_questions(db: Session, certification: str) -> List[Question]:
    """All questions of a certification ordered by topic, then difficulty."""
    with storage_errors("listing questions", db):
        return (
            db.query(Question)
            .filter(Question.certification == certification)
            .order_by(Question.topic, Question.difficulty, Question.id)
            .all()
        )


def get_certification_or_404(db: Session, code: str) -> Certification:
    with storage_errors("loading certification", db):
        certification = db.query(Certification).filter(Certification.code == code).first()
    if certification is None:
        raise NotFoundError(f"Certification {code} not found")
    return certification
