"""
Admin endpoints for the question bank and certification programs.
"""
from typing import Any, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from certprep.core.config import settings
from certprep.core.dependencies import get_certification_code, require_admin
from certprep.db.base import get_db
from certprep.models.user import User
from certprep.schemas.certification import Certification, CertificationCreate, CertificationUpdate
from certprep.schemas.common import Message, error_responses
from certprep.schemas.question import (
    ImportResult,
    Question,
    QuestionCreate,
    QuestionExport,
    QuestionImport,
    QuestionUpdate,
)
from certprep.services import question_bank, question_store

router = APIRouter()


# ============= Question Bank =============

@router.post("/questions/import", response_model=ImportResult, responses=error_responses(404, 422))
def import_questions(
    payload: QuestionImport,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """
    Import a batch of questions into a certification.

    The batch is validated up front and written in one transaction.
    """
    certification = (payload.certification or settings.DEFAULT_CERTIFICATION).upper()
    imported = question_bank.import_questions(db, payload.questions, certification)
    return ImportResult(
        success=True,
        imported=imported,
        message=f"Successfully imported {imported} questions",
    )


@router.get("/questions/export", response_model=QuestionExport)
def export_questions(
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """
    Export all questions of a certification in the import format.
    """
    return question_bank.export_questions(db, certification)


@router.get("/questions", response_model=List[Question])
def list_questions(
    certification: str = Depends(get_certification_code),
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """
    Get all questions of a certification with their answers, for editing.
    """
    return [Question.from_question(q) for q in question_store.list_questions(db, certification)]


@router.post("/questions", response_model=Question, status_code=status.HTTP_201_CREATED)
def create_question(
    question_in: QuestionCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """
    Add a single question.
    """
    certification = (question_in.certification or settings.DEFAULT_CERTIFICATION).upper()
    return Question.from_question(question_bank.create_question(db, question_in, certification))


@router.patch("/questions/{question_id}", response_model=Question, responses=error_responses(404, 422))
def update_question(
    question_id: int,
    question_in: QuestionUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """
    Edit a question. Options and correct answer are re-validated together.
    """
    return Question.from_question(question_bank.update_question(db, question_id, question_in))


# ============= Certifications =============

@router.get("/certifications", response_model=List[Certification])
def list_all_certifications(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """
    Get every certification, including inactive ones.
    """
    return question_bank.list_certifications(db, include_inactive=True)


@router.post("/certifications", response_model=Certification, status_code=status.HTTP_201_CREATED)
def add_certification(
    certification_in: CertificationCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return question_bank.add_certification(db, certification_in)


@router.patch("/certifications/{code}", response_model=Certification)
def update_certification(
    code: str,
    certification_in: CertificationUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    return question_bank.update_certification(db, code.upper(), certification_in)


@router.delete("/certifications/{code}", response_model=Message, responses=error_responses(404, 409))
def delete_certification(
    code: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
) -> Any:
    """
    Delete a certification that no longer has questions.
    """
    question_bank.delete_certification(db, code.upper())
    return Message(message=f"Certification {code.upper()} deleted")
