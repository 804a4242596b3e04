"""
Database initialization and seeding.
"""
import json
import logging
from pathlib import Path

from sqlalchemy.orm import Session

from certprep.core.config import settings
from certprep.core.security import get_password_hash
from certprep.models.question import Certification
from certprep.models.user import ROLE_ADMIN, User
from certprep.services import question_bank

logger = logging.getLogger(__name__)

DEFAULT_CERTIFICATIONS = [
    {
        "code": "CAPM",
        "name": "Certified Associate in Project Management",
        "description": "Entry-level project management certification by PMI",
        "total_questions": 46,
        "exam_duration": 180,
        "passing_score": 70,
    },
    {
        "code": "PSM1",
        "name": "Professional Scrum Master I",
        "description": "Scrum Master certification by Scrum.org",
        "total_questions": 0,
        "exam_duration": 60,
        "passing_score": 85,
    },
    {
        "code": "PMP",
        "name": "Project Management Professional",
        "description": "Advanced project management certification by PMI",
        "total_questions": 0,
        "exam_duration": 230,
        "passing_score": 61,
    },
]


def seed_certifications(db: Session) -> int:
    """Insert the default certification programs that are missing."""
    existing = {row[0] for row in db.query(Certification.code).all()}
    added = 0
    for data in DEFAULT_CERTIFICATIONS:
        if data["code"] in existing:
            continue
        db.add(Certification(**data, is_active=True))
        added += 1
    db.commit()
    return added


def seed_question_bank(db: Session, path: str) -> int:
    """Load a JSON list of question records from ``path``."""
    with open(Path(path), "r", encoding="utf-8") as f:
        records = json.load(f)
    return question_bank.seed_questions(db, records, settings.DEFAULT_CERTIFICATION)


def init_db(db: Session) -> None:
    """
    Initialize database with default data.

    Args:
        db: Database session
    """
    added = seed_certifications(db)
    if added:
        logger.info(f"Seeded {added} certifications")

    admin = db.query(User).filter(User.email == settings.ADMIN_EMAIL).first()
    if not admin:
        admin = User(
            email=settings.ADMIN_EMAIL,
            username="admin",
            full_name="System Administrator",
            hashed_password=get_password_hash(settings.ADMIN_PASSWORD),
            role=ROLE_ADMIN,
            is_active=True,
        )
        db.add(admin)
        db.commit()
        logger.info("Admin user created successfully")

    if settings.QUESTION_BANK_PATH:
        seeded = seed_question_bank(db, settings.QUESTION_BANK_PATH)
        logger.info(f"Seeded {seeded} questions from {settings.QUESTION_BANK_PATH}")
