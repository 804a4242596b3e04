"""
Topic progress accumulator.

Every graded answer bumps the counters of its (user, topic, certification)
row. The bump is a single UPDATE whose SET clause reads the old column
values, so concurrent submissions for the same key cannot lose increments.
The caller owns the transaction: nothing here commits.
"""
import logging

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from certprep.models.topic_progress import TopicProgress
from certprep.services.grading import percentage

logger = logging.getLogger(__name__)


def _increment_statement(user_id: int, topic: str, certification: str, is_correct: bool):
    correct_step = 1 if is_correct else 0
    new_total = TopicProgress.total_attempts + 1
    new_correct = TopicProgress.correct_attempts + correct_step
    return (
        update(TopicProgress)
        .where(
            TopicProgress.user_id == user_id,
            TopicProgress.topic == topic,
            TopicProgress.certification == certification,
        )
        .values(
            total_attempts=new_total,
            correct_attempts=new_correct,
            # half-up rounding in integer arithmetic, same as grading.percentage
            accuracy=(200 * new_correct + new_total) // (2 * new_total),
            last_practiced_at=func.now(),
        )
        .execution_options(synchronize_session=False)
    )


def record_outcome(db: Session, user_id: int, topic: str, certification: str, is_correct: bool) -> None:
    """
    Count one graded answer towards the topic's accuracy.

    The first outcome for a key inserts the row inside a SAVEPOINT. If a
    concurrent request inserted it first, the unique constraint fires and the
    outcome is applied as an increment instead.
    """
    statement = _increment_statement(user_id, topic, certification, is_correct)
    result = db.execute(statement)
    if result.rowcount:
        return

    try:
        with db.begin_nested():
            db.add(
                TopicProgress(
                    user_id=user_id,
                    topic=topic,
                    certification=certification,
                    total_attempts=1,
                    correct_attempts=1 if is_correct else 0,
                    accuracy=percentage(1 if is_correct else 0, 1),
                )
            )
    except IntegrityError:
        logger.info(f"Topic progress row for user {user_id} / {topic!r} created concurrently, incrementing")
        db.execute(statement)
