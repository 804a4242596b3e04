"""
Summary statistics over a user's sessions and topic progress.
"""
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from certprep.core.exceptions import storage_errors
from certprep.models.practice_session import PracticeSession
from certprep.models.topic_progress import TopicProgress
from certprep.schemas.progress import ProgressStats, TopicProgress as TopicProgressSchema


def get_topic_progress(db: Session, user_id: int, certification: str) -> List[TopicProgress]:
    """All topic rows for the user, most recently practiced first."""
    with storage_errors("loading topic progress", db):
        return (
            db.query(TopicProgress)
            .filter(TopicProgress.user_id == user_id, TopicProgress.certification == certification)
            .order_by(TopicProgress.last_practiced_at.desc(), TopicProgress.id.desc())
            .all()
        )


def get_stats(db: Session, user_id: int, certification: str) -> ProgressStats:
    """
    Totals across every session of the user for one certification, plus the
    per-topic breakdown. All numbers are 0 when there are no sessions.
    """
    with storage_errors("computing statistics", db):
        total_sessions, total_questions, total_correct, avg_score = (
            db.query(
                func.count(PracticeSession.id),
                func.coalesce(func.sum(PracticeSession.total_questions), 0),
                func.coalesce(func.sum(PracticeSession.correct_answers), 0),
                func.coalesce(func.avg(PracticeSession.score), 0),
            )
            .filter(PracticeSession.user_id == user_id, PracticeSession.certification == certification)
            .one()
        )

    topics = get_topic_progress(db, user_id, certification)
    return ProgressStats(
        certification=certification,
        total_sessions=int(total_sessions or 0),
        total_questions=int(total_questions or 0),
        total_correct=int(total_correct or 0),
        avg_score=float(avg_score or 0),
        topic_progress=[TopicProgressSchema.model_validate(t) for t in topics],
    )


def get_weak_topics(db: Session, user_id: int, threshold: int, certification: str) -> List[TopicProgress]:
    """Topics with accuracy strictly below ``threshold``, worst first."""
    with storage_errors("loading weak topics", db):
        return (
            db.query(TopicProgress)
            .filter(
                TopicProgress.user_id == user_id,
                TopicProgress.certification == certification,
                TopicProgress.accuracy < threshold,
            )
            .order_by(TopicProgress.accuracy.asc(), TopicProgress.topic.asc())
            .all()
        )
