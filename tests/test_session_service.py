"""Tests for the session lifecycle: start, submit, complete."""
import pytest
from sqlalchemy.orm import Session

from certprep.core.exceptions import (
    AccessDeniedError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
)
from certprep.models import PracticeSession, SessionAnswer, TopicProgress
from certprep.services import session_service


def _progress(db, user, topic, certification="CAPM"):
    db.expire_all()
    return (
        db.query(TopicProgress)
        .filter_by(user_id=user.id, topic=topic, certification=certification)
        .one_or_none()
    )


class TestStartSession:

    def test_new_session_is_zeroed(self, db, student, certifications):
        session = session_service.start_session(db, student.id, "CAPM", "practice", 10)

        assert session.id is not None
        assert session.correct_answers == 0
        assert session.score == 0
        assert session.completed_at is None
        assert session.started_at is not None
        assert session.total_questions == 10

    def test_topic_session_requires_topic(self, db, student, certifications):
        with pytest.raises(InvalidInputError):
            session_service.start_session(db, student.id, "CAPM", "topic", 5)

    def test_topic_session_with_topic(self, db, student, certifications):
        session = session_service.start_session(db, student.id, "CAPM", "topic", 5, topic="Risk")
        assert session.topic == "Risk"

    def test_unknown_session_type(self, db, student, certifications):
        with pytest.raises(InvalidInputError):
            session_service.start_session(db, student.id, "CAPM", "marathon", 5)

    def test_unknown_certification(self, db, student, certifications):
        with pytest.raises(NotFoundError):
            session_service.start_session(db, student.id, "NOPE", "practice", 5)

    def test_zero_questions_rejected(self, db, student, certifications):
        with pytest.raises(InvalidInputError):
            session_service.start_session(db, student.id, "CAPM", "quiz", 0)


class TestSubmitAnswer:

    @pytest.fixture
    def session(self, db, student, questions):
        return session_service.start_session(db, student.id, "CAPM", "practice", 4)

    def test_correct_answer_feedback(self, db, session, questions):
        feedback = session_service.submit_answer(db, session, questions["risk_single"].id, "B")

        assert feedback.is_correct is True
        assert feedback.correct_answer == "B"
        assert feedback.explanation == "Because B"

    def test_incorrect_answer_reveals_key(self, db, session, questions):
        feedback = session_service.submit_answer(db, session, questions["risk_single"].id, "A")

        assert feedback.is_correct is False
        assert feedback.correct_answer == "B"

    @pytest.mark.parametrize("answer, expected", [
        ("A,C", True),
        ("C,A", True),
        ("A,C,C", True),
        ("A", False),
        ("A,B,C", False),
    ])
    def test_multi_select_uses_set_equality(self, db, session, questions, answer, expected):
        feedback = session_service.submit_answer(db, session, questions["risk_multi"].id, answer)
        assert feedback.is_correct is expected

    def test_answer_row_persisted_as_submitted(self, db, session, questions):
        session_service.submit_answer(db, session, questions["risk_multi"].id, "C,A")

        row = db.query(SessionAnswer).filter_by(session_id=session.id).one()
        assert row.user_answer == "C,A"
        assert row.is_correct is True

    def test_unknown_question(self, db, session, questions):
        with pytest.raises(NotFoundError):
            session_service.submit_answer(db, session, 9999, "A")

    def test_malformed_answer_writes_nothing(self, db, session, questions):
        with pytest.raises(InvalidInputError):
            session_service.submit_answer(db, session, questions["risk_single"].id, "b")

        assert db.query(SessionAnswer).count() == 0
        assert db.query(TopicProgress).count() == 0

    def test_duplicate_submission_rejected(self, db, student, session, questions):
        question_id = questions["risk_single"].id
        session_service.submit_answer(db, session, question_id, "B")

        with pytest.raises(ConflictError):
            session_service.submit_answer(db, session, question_id, "A")

        assert db.query(SessionAnswer).filter_by(session_id=session.id).count() == 1
        progress = _progress(db, student, "Risk")
        assert progress.total_attempts == 1
        assert progress.correct_attempts == 1

    def test_question_outside_session_topic_accepted(self, db, student, questions):
        session = session_service.start_session(db, student.id, "CAPM", "topic", 1, topic="Risk")

        feedback = session_service.submit_answer(db, session, questions["scope"].id, "A")

        assert feedback.is_correct is True
        assert _progress(db, student, "Scope").total_attempts == 1

    def test_progress_recorded_under_session_certification(self, db, student, questions):
        session = session_service.start_session(db, student.id, "PSM1", "practice", 1)

        session_service.submit_answer(db, session, questions["scrum"].id, "C")

        assert _progress(db, student, "Events", certification="PSM1").correct_attempts == 1
        assert _progress(db, student, "Events", certification="CAPM") is None

    def test_completed_session_rejects_answers(self, db, session, questions):
        session_service.complete_session(db, session, 60)

        with pytest.raises(ConflictError):
            session_service.submit_answer(db, session, questions["risk_single"].id, "B")


class TestCompleteSession:

    def test_zero_answers_scores_zero(self, db, student, certifications):
        session = session_service.start_session(db, student.id, "CAPM", "exam", 46)

        result = session_service.complete_session(db, session, 30)

        assert result.score == 0
        assert result.correct_answers == 0
        assert result.total_questions == 0
        assert session.completed_at is not None
        assert session.duration_seconds == 30

    def test_topic_session_scenario(self, db, student, questions):
        session = session_service.start_session(db, student.id, "CAPM", "topic", 3, topic="Risk")
        session_service.submit_answer(db, session, questions["risk_single"].id, "B")
        session_service.submit_answer(db, session, questions["risk_multi"].id, "C,A")
        session_service.submit_answer(db, session, questions["risk_other"].id, "A")

        result = session_service.complete_session(db, session, 120)

        assert result.model_dump() == {"correct_answers": 2, "total_questions": 3, "score": 67}
        assert session.correct_answers == 2
        assert session.score == 67
        progress = _progress(db, student, "Risk")
        assert progress.total_attempts == 3
        assert progress.correct_attempts == 2
        assert progress.accuracy == 67

    def test_answered_basis_scores_only_submitted(self, db, student, questions):
        session = session_service.start_session(db, student.id, "CAPM", "quiz", 10)
        session_service.submit_answer(db, session, questions["risk_single"].id, "B")
        session_service.submit_answer(db, session, questions["scope"].id, "B")

        result = session_service.complete_session(db, session, 45, score_basis="answered")

        assert result.total_questions == 2
        assert result.score == 50
        assert session.total_questions == 10

    def test_planned_basis_counts_unanswered_as_wrong(self, db, student, questions):
        session = session_service.start_session(db, student.id, "CAPM", "quiz", 10)
        session_service.submit_answer(db, session, questions["risk_single"].id, "B")
        session_service.submit_answer(db, session, questions["scope"].id, "B")

        result = session_service.complete_session(db, session, 45, score_basis="planned")

        assert result.total_questions == 10
        assert result.correct_answers == 1
        assert result.score == 10

    def test_default_basis_is_answered(self, db, student, questions):
        session = session_service.start_session(db, student.id, "CAPM", "quiz", 4)
        session_service.submit_answer(db, session, questions["risk_single"].id, "B")

        assert session_service.complete_session(db, session, 5).score == 100

    def test_second_completion_rejected(self, db, student, certifications):
        session = session_service.start_session(db, student.id, "CAPM", "practice", 1)
        session_service.complete_session(db, session, 10)

        with pytest.raises(ConflictError):
            session_service.complete_session(db, session, 20)
        assert session.duration_seconds == 10

    def test_unknown_score_basis(self, db, student, certifications):
        session = session_service.start_session(db, student.id, "CAPM", "practice", 1)
        with pytest.raises(InvalidInputError):
            session_service.complete_session(db, session, 10, score_basis="weighted")


class TestOwnership:

    def test_owner_can_load(self, db, student, certifications):
        session = session_service.start_session(db, student.id, "CAPM", "practice", 1)
        assert session_service.get_owned_session(db, session.id, student.id).id == session.id

    def test_other_user_denied(self, db, student, other_student, certifications):
        session = session_service.start_session(db, student.id, "CAPM", "practice", 1)
        with pytest.raises(AccessDeniedError):
            session_service.get_owned_session(db, session.id, other_student.id)

    def test_missing_session(self, db, student, certifications):
        with pytest.raises(NotFoundError):
            session_service.get_owned_session(db, 4242, student.id)


class TestHistory:

    def test_newest_first_and_limited(self, db, student, certifications):
        ids = [session_service.start_session(db, student.id, "CAPM", "practice", 1).id for _ in range(3)]

        history = session_service.get_history(db, student.id, "CAPM", limit=2)

        assert [s.id for s in history] == [ids[2], ids[1]]

    def test_scoped_by_certification(self, db, student, certifications):
        session_service.start_session(db, student.id, "PSM1", "practice", 1)

        assert session_service.get_history(db, student.id, "CAPM", limit=10) == []


class TestConcurrentCompletion:
    """A second request holding a copy of the session loaded before completion."""

    @pytest.fixture
    def stale_db(self, db):
        other = Session(bind=db.get_bind())
        yield other
        other.close()

    def _stale_copy(self, stale_db, session):
        copy = stale_db.get(PracticeSession, session.id)
        assert copy.completed_at is None
        return copy

    def test_second_completion_from_stale_copy_rejected(self, db, stale_db, student, questions):
        session = session_service.start_session(db, student.id, "CAPM", "practice", 2)
        stale = self._stale_copy(stale_db, session)

        session_service.complete_session(db, session, 10)

        with pytest.raises(ConflictError):
            session_service.complete_session(stale_db, stale, 99)
        db.expire_all()
        assert session.duration_seconds == 10

    def test_answer_after_completion_from_stale_copy_rejected(self, db, stale_db, student, questions):
        session = session_service.start_session(db, student.id, "CAPM", "practice", 2)
        stale = self._stale_copy(stale_db, session)

        session_service.complete_session(db, session, 10)

        with pytest.raises(ConflictError):
            session_service.submit_answer(stale_db, stale, questions["risk_single"].id, "B")
        db.expire_all()
        assert db.query(SessionAnswer).count() == 0
        assert db.query(TopicProgress).count() == 0
