"""
Question bank administration: import, export, single edits and certification programs.
"""
import logging
import secrets
import time
from datetime import datetime, timezone
from typing import Iterable, List

from sqlalchemy.orm import Session

from certprep.core.exceptions import ConflictError, InvalidInputError, storage_errors
from certprep.models.question import Certification, Question
from certprep.schemas.certification import CertificationCreate, CertificationUpdate
from certprep.schemas.question import (
    DEFAULT_EXPLANATION,
    QuestionBase,
    QuestionCreate,
    QuestionExport,
    QuestionUpdate,
)
from certprep.services import question_store
from certprep.services.grading import validate_question_options

logger = logging.getLogger(__name__)


def _generate_external_id(index: int) -> str:
    return f"Q{int(time.time() * 1000)}_{secrets.token_hex(4)}_{index}"


def _build_question(data: QuestionBase, certification: str, external_id: str) -> Question:
    return Question(
        external_id=external_id,
        text=data.text,
        options=dict(data.options),
        correct_answer=validate_question_options(data.options, data.correct_answer),
        explanation=data.explanation or DEFAULT_EXPLANATION,
        topic=data.topic,
        difficulty=data.difficulty,
        media_url=data.media_url,
        certification=certification,
    )


def import_questions(db: Session, questions: Iterable[QuestionBase], certification: str) -> int:
    """
    Validate every question, then insert the whole batch in one transaction.

    Returns:
        Number of questions imported

    Raises:
        InvalidInputError: Any question breaks the options/answer invariant; nothing is written
        NotFoundError: Unknown certification
    """
    question_store.get_certification_or_404(db, certification)
    rows = []
    for index, data in enumerate(questions):
        try:
            rows.append(_build_question(data, certification, _generate_external_id(index)))
        except InvalidInputError as e:
            raise InvalidInputError(f"Question {index + 1}: {e.message}") from e

    with storage_errors("importing questions", db):
        db.add_all(rows)
        db.commit()

    logger.info(f"Imported {len(rows)} questions into {certification}")
    return len(rows)


def seed_questions(db: Session, records: List[dict], certification: str) -> int:
    """
    Load bank records that carry their own ``question_id``, skipping ids already stored.

    Used by the bootstrap script; records use the bank file's snake_case keys.
    """
    with storage_errors("seeding questions", db):
        existing = {row[0] for row in db.query(Question.external_id).all()}

    rows = []
    for index, record in enumerate(records):
        external_id = record.get("question_id") or _generate_external_id(index)
        if external_id in existing:
            continue
        data = QuestionBase(
            text=record["text"],
            options=record["options"],
            correct_answer=record["correct_answer"],
            explanation=record.get("explanation"),
            topic=record["topic"],
            difficulty=record.get("difficulty", "medium"),
            media_url=record.get("media_url"),
        )
        rows.append(_build_question(data, record.get("certification", certification), external_id))
        existing.add(external_id)

    with storage_errors("seeding questions", db):
        db.add_all(rows)
        db.commit()
    return len(rows)


def export_questions(db: Session, certification: str) -> QuestionExport:
    """All questions of a certification in the import format."""
    question_store.get_certification_or_404(db, certification)
    questions = question_store.list_questions(db, certification)
    exported = [
        QuestionBase(
            text=q.text,
            options=q.options,
            correct_answer=q.correct_answer,
            explanation=q.explanation,
            topic=q.topic,
            difficulty=q.difficulty,
            media_url=q.media_url,
        )
        for q in questions
    ]
    logger.info(f"Exported {len(exported)} questions from {certification}")
    return QuestionExport(
        success=True,
        certification=certification,
        questions=exported,
        total_count=len(exported),
        exported_at=datetime.now(timezone.utc),
    )


def create_question(db: Session, data: QuestionCreate, certification: str) -> Question:
    question_store.get_certification_or_404(db, certification)
    external_id = data.external_id or _generate_external_id(0)

    with storage_errors("checking question id", db):
        taken = db.query(Question.id).filter(Question.external_id == external_id).first()
    if taken:
        raise ConflictError(f"Question id {external_id} already exists")

    question = _build_question(data, certification, external_id)
    with storage_errors("creating question", db):
        db.add(question)
        db.commit()
        db.refresh(question)

    logger.info(f"Created question {question.id} ({external_id}) in {certification}")
    return question


def update_question(db: Session, question_id: int, data: QuestionUpdate) -> Question:
    """Apply a partial update; options and correct answer are checked on the merged result."""
    question = question_store.get_question_or_404(db, question_id)
    changes = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field == "media_url"
    }

    options = changes.get("options", question.options)
    correct_answer = changes.get("correct_answer", question.correct_answer)
    changes["correct_answer"] = validate_question_options(options, correct_answer)
    if "options" in changes:
        changes["options"] = {key: options[key] for key in sorted(options)}
    if changes.get("explanation") == "":
        changes["explanation"] = DEFAULT_EXPLANATION

    with storage_errors("updating question", db):
        for field, value in changes.items():
            setattr(question, field, value)
        db.commit()
        db.refresh(question)

    logger.info(f"Updated question {question.id}: {sorted(changes)}")
    return question


def list_certifications(db: Session, include_inactive: bool = False) -> List[Certification]:
    with storage_errors("listing certifications", db):
        query = db.query(Certification)
        if not include_inactive:
            query = query.filter(Certification.is_active.is_(True))
        return query.order_by(Certification.code).all()


def add_certification(db: Session, data: CertificationCreate) -> Certification:
    code = data.code.upper()
    with storage_errors("checking certification", db):
        existing = db.query(Certification).filter(Certification.code == code).first()
    if existing:
        raise ConflictError(f"Certification {code} already exists")

    certification = Certification(**data.model_dump(exclude={"code"}), code=code)
    with storage_errors("adding certification", db):
        db.add(certification)
        db.commit()
        db.refresh(certification)

    logger.info(f"Added certification {code}")
    return certification


def update_certification(db: Session, code: str, data: CertificationUpdate) -> Certification:
    certification = question_store.get_certification_or_404(db, code)
    with storage_errors("updating certification", db):
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(certification, field, value)
        db.commit()
        db.refresh(certification)
    return certification


def delete_certification(db: Session, code: str) -> None:
    """
    Raises:
        NotFoundError: Unknown code
        ConflictError: Questions still belong to the certification
    """
    certification = question_store.get_certification_or_404(db, code)
    with storage_errors("deleting certification", db):
        question_count = db.query(Question).filter(Question.certification == code).count()
    if question_count:
        raise ConflictError(
            f"Certification {code} still has {question_count} questions; remove them first"
        )

    with storage_errors("deleting certification", db):
        db.delete(certification)
        db.commit()
    logger.info(f"Deleted certification {code}")
