import uuid

from fastapi.testclient import TestClient

import config
from main import app

client = TestClient(app)


def _session():
    return {"x-session-id": uuid.uuid4().hex}


def _new(headers, concept="magnitude"):
    r = client.post("/problems", json={"concept": concept}, headers=headers)
    assert r.status_code == 200
    return r.json()


def test_new_problem_hides_answer():
    h = _session()
    body = _new(h)
    assert body["concept"] == "magnitude"
    assert set(body["vectors"]) == {"v"}
    assert "answer" not in body and "canonical_answer" not in body
    assert body["prompt"].startswith("Find the length of v")


def test_new_problem_unknown_concept():
    r = client.post("/problems", json={"concept": "curl"}, headers=_session())
    assert r.status_code == 404


def test_current_problem():
    h = _session()
    assert client.get("/problems/current", headers=h).status_code == 404
    created = _new(h, "projection")
    r = client.get("/problems/current", headers=h)
    assert r.status_code == 200
    assert r.json()["id"] == created["id"]


def test_check_without_problem():
    r = client.post("/problems/check", json={"problem_id": "x", "answer": "1"}, headers=_session())
    assert r.status_code == 404


def test_wrong_then_right_answer():
    h = _session()
    p = _new(h, "dot")

    r = client.post("/problems/check", json={"problem_id": p["id"], "answer": "not a number"}, headers=h)
    assert r.status_code == 200
    wrong = r.json()
    assert wrong["ok"] is True and wrong["correct"] is False
    assert wrong["next_problem"] is None and wrong["coin_reward"] == 0
    canonical = wrong["canonical_answer"]

    r = client.post("/problems/check", json={"problem_id": p["id"], "answer": canonical}, headers=h)
    right = r.json()
    assert right["correct"] is True
    assert 20 <= right["coin_reward"] <= 50
    assert right["next_problem"]["concept"] == "dot"
    assert right["next_problem"]["id"] != p["id"]

    prog = client.get("/progress", headers=h).json()
    assert prog["total"] == 2 and prog["correct"] == 1 and prog["streak"] == 1
    assert prog["xp"] == 25
    assert prog["coins"] == right["coin_reward"]

    # the answered problem has been replaced
    r = client.post("/problems/check", json={"problem_id": p["id"], "answer": canonical}, headers=h)
    assert r.status_code == 409


def test_zero_bypass_off_by_default():
    h = _session()
    p = _new(h, "unit")
    r = client.post("/problems/check", json={"problem_id": p["id"], "answer": "0"}, headers=h)
    assert r.json()["correct"] is False


def test_zero_bypass_with_debug_flag(monkeypatch):
    monkeypatch.setattr(config, "DEBUG_ZERO_BYPASS", True)
    h = _session()
    p = _new(h, "unit")
    r = client.post("/problems/check", json={"problem_id": p["id"], "answer": "0"}, headers=h)
    assert r.json()["correct"] is True


def test_overlong_answer_is_marked_incorrect():
    h = _session()
    p = _new(h)
    r = client.post("/problems/check", json={"problem_id": p["id"], "answer": "1" * 101}, headers=h)
    assert r.status_code == 200
    body = r.json()
    assert body["correct"] is False and body["next_problem"] is None
    assert client.get("/progress", headers=h).json()["total"] == 1


def test_sessions_are_isolated():
    a, b = _session(), _session()
    _new(a)
    assert client.get("/problems/current", headers=b).status_code == 404


def test_invalid_session_header():
    r = client.get("/problems/current", headers={"x-session-id": "x" * 65})
    assert r.status_code == 400
