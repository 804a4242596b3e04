"""
Bootstrap a practice database: tables, certification programs, the admin
account and optionally a question bank file.

    python init_db.py
    python init_db.py --bank data/capm_questions.json
    python init_db.py --no-create-tables   # schema managed by `alembic upgrade head`
"""
import argparse
import logging

from certprep.db.base import engine, SessionLocal
from certprep.db.init_db import init_db, seed_question_bank
from certprep.models import Base

logger = logging.getLogger("init_db")


def init(bank_path: str | None = None, create_tables: bool = True) -> None:
    if create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info(f"Tables ready on {engine.url.render_as_string(hide_password=True)}")

    db = SessionLocal()
    try:
        init_db(db)
        if bank_path:
            seeded = seed_question_bank(db, bank_path)
            logger.info(f"Seeded {seeded} questions from {bank_path}")
    finally:
        db.close()

    logger.info("Database initialization complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s:\t%(name)s\t%(message)s')

    parser = argparse.ArgumentParser(description="Create tables and seed the practice database")
    parser.add_argument("--bank", help="JSON file of question records to load")
    parser.add_argument(
        "--no-create-tables",
        dest="create_tables",
        action="store_false",
        help="skip create_all when migrations own the schema",
    )
    args = parser.parse_args()
    init(args.bank, args.create_tables)
