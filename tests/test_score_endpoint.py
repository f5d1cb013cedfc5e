from __future__ import annotations

from fastapi.testclient import TestClient

from api.app import app
from radar_core.catalog import catalog_for_level

client = TestClient(app)


def test_root_and_health():
    assert client.get("/").json()["status"] == "ok"
    body = client.get("/health").json()
    assert "L2" in body["levels"]


def test_catalog_is_filtered_by_level():
    resp = client.get("/catalog", params={"level": "L1"})
    assert resp.status_code == 200
    levels = {q["level"] for q in resp.json()["questions"]}
    assert levels <= {"Common", "L1"}
    assert resp.json()["dilemmas"]


def test_unknown_level_is_rejected():
    assert client.get("/catalog", params={"level": "L9"}).status_code == 422
    assert client.post("/score", json={"level": "L9", "answers": {}}).status_code == 422


def test_score_with_bundled_catalog():
    questions, dilemmas = catalog_for_level("L2")
    answers: dict[str, int | None] = {str(q.id): 4 for q in questions}
    answers.update({d.id: 5 for d in dilemmas})
    answers[str(questions[0].id)] = None

    resp = client.post("/score", json={"level": "L2", "answers": answers})
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert 0 <= result["total"] <= 100
    assert result["level"] == "L2"
    assert set(result["roles"]) == {"Leader", "Manager", "Strategist", "Intrapreneur"}
    assert result["omission_analysis"]["count"] == 1
    assert "consistency_index" in resp.json()["insights"]


def test_out_of_range_answer_is_rejected():
    resp = client.post("/score", json={"level": "L1", "answers": {"1": 7}})
    assert resp.status_code == 422
    assert "1..5" in resp.json()["detail"]


def test_inline_catalog_is_scored():
    payload = {
        "level": "Common",
        "answers": {"1": 5, "2": 1, "X1": 3},
        "questions": [
            {"id": 1, "text": "a", "block": "B", "level": "Common", "axis": "People", "category": "C", "role": "Leader"},
            {"id": 2, "text": "b", "block": "B", "level": "Common", "axis": "Results", "category": "C", "role": "Manager"},
        ],
        "dilemmas": [
            {
                "id": "X1",
                "title": "t",
                "scenario": "s",
                "block": "B",
                "axis": "Both",
                "category": "C",
                "role": "Leader",
                "horizon": 1,
                "options": [{"text": "lo", "value": 1}, {"text": "mid", "value": 3}, {"text": "hi", "value": 5}],
            }
        ],
    }
    resp = client.post("/score", json=payload)
    assert resp.status_code == 200
    result = resp.json()["result"]
    # People: (5 + 3) / 2, Results: (1 + 3) / 2
    assert result["matrix"]["x"] == 4.0
    assert result["matrix"]["y"] == 2.0
    assert result["matrix"]["quadrant_name"] == "Demanding"


def test_malformed_inline_catalog_is_client_error():
    payload = {"level": "Common", "answers": {}, "questions": [{"id": 1}], "dilemmas": []}
    assert client.post("/score", json=payload).status_code == 422


def _question(qid: int, **overrides):
    q = {"id": qid, "text": "q", "block": "B", "level": "Common", "axis": "People", "category": "C", "role": "Leader"}
    q.update(overrides)
    return q


def _dilemma(did, **overrides):
    d = {
        "id": did,
        "title": "t",
        "scenario": "s",
        "block": "B",
        "axis": "People",
        "category": "D",
        "role": "Leader",
        "options": [{"text": "lo", "value": 1}, {"text": "mid", "value": 3}, {"text": "hi", "value": 5}],
    }
    d.update(overrides)
    return d


def test_questions_only_payload_scores_the_inline_items():
    payload = {"level": "Common", "answers": {"900": 5}, "questions": [_question(900)]}
    resp = client.post("/score", json=payload)
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["total"] == 100
    assert result["categories"] == {"C": 5.0}
    assert result["roles"]["Leader"]["score"] == 5.0


def test_dilemmas_only_payload_scores_the_inline_items():
    payload = {"level": "Common", "answers": {"X1": 1}, "dilemmas": [_dilemma("X1")]}
    resp = client.post("/score", json=payload)
    assert resp.status_code == 200
    assert resp.json()["result"]["categories"] == {"D": 1.0}


def test_numeric_looking_dilemma_id_keeps_its_answer():
    payload = {"level": "Common", "answers": {"7": 5, "8": 1}, "questions": [_question(8, role="Manager")], "dilemmas": [_dilemma("7")]}
    resp = client.post("/score", json=payload)
    assert resp.status_code == 200
    roles = resp.json()["result"]["roles"]
    assert roles["Leader"]["score"] == 5.0
    assert roles["Manager"]["score"] == 1.0
