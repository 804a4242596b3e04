"""
API endpoints for listing certification programs.
"""
from typing import Any, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from certprep.db.base import get_db
from certprep.schemas.certification import Certification
from certprep.services import question_bank

router = APIRouter()


@router.get("", response_model=List[Certification])
def list_certifications(db: Session = Depends(get_db)) -> Any:
    """
    Get all active certification programs.
    """
    return question_bank.list_certifications(db)
