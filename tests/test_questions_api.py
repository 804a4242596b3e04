"""Tests for the practice question endpoints."""

API = "/api/v1"


class TestRandomQuestions:

    def test_answers_are_hidden(self, client, student_headers, questions):
        r = client.get(f"{API}/questions/random", params={"count": 10}, headers=student_headers)

        assert r.status_code == 200
        body = r.json()
        assert len(body) == 4
        for question in body:
            assert "correct_answer" not in question
            assert "explanation" not in question
            assert question["certification"] == "CAPM"

    def test_select_count_for_multi_select(self, client, student_headers, questions):
        r = client.get(f"{API}/questions/random", params={"count": 10}, headers=student_headers)

        counts = {q["external_id"]: q["select_count"] for q in r.json()}
        assert counts == {"Q001": 1, "Q002": 2, "Q003": 1, "Q004": 1}

    def test_count_limits_batch(self, client, student_headers, questions):
        r = client.get(f"{API}/questions/random", params={"count": 2}, headers=student_headers)
        assert len(r.json()) == 2

    def test_other_certification(self, client, student_headers, questions):
        r = client.get(
            f"{API}/questions/random",
            params={"count": 5, "certification": "psm1"},
            headers=student_headers,
        )
        assert [q["external_id"] for q in r.json()] == ["S001"]

    def test_count_must_be_positive(self, client, student_headers, questions):
        r = client.get(f"{API}/questions/random", params={"count": 0}, headers=student_headers)
        assert r.status_code == 422

    def test_requires_authentication(self, client, questions):
        assert client.get(f"{API}/questions/random", params={"count": 1}).status_code == 401


class TestTopics:

    def test_topics_sorted_and_distinct(self, client, student_headers, questions):
        r = client.get(f"{API}/questions/topics", headers=student_headers)
        assert r.json() == ["Risk", "Scope"]

    def test_by_topic(self, client, student_headers, questions):
        r = client.get(
            f"{API}/questions/by-topic",
            params={"topic": "Risk", "count": 10},
            headers=student_headers,
        )

        assert sorted(q["external_id"] for q in r.json()) == ["Q001", "Q002", "Q003"]
        assert all(q["topic"] == "Risk" for q in r.json())

    def test_unknown_topic_is_empty(self, client, student_headers, questions):
        r = client.get(
            f"{API}/questions/by-topic",
            params={"topic": "Procurement", "count": 5},
            headers=student_headers,
        )
        assert r.status_code == 200
        assert r.json() == []


class TestSingleQuestion:

    def test_options_in_letter_order(self, client, student_headers, questions):
        r = client.get(f"{API}/questions/{questions['risk_multi'].id}", headers=student_headers)

        assert r.status_code == 200
        assert list(r.json()["options"]) == ["A", "B", "C", "D"]
        assert "correct_answer" not in r.json()

    def test_missing_question(self, client, student_headers, questions):
        assert client.get(f"{API}/questions/9999", headers=student_headers).status_code == 404


class TestCertifications:

    def test_lists_active_only(self, client, db, certifications):
        certifications[1].is_active = False
        db.commit()

        r = client.get(f"{API}/certifications")

        assert r.status_code == 200
        assert [c["code"] for c in r.json()] == ["CAPM"]
        assert r.json()[0]["passing_score"] == 70
