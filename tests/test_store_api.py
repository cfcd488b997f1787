import uuid

from fastapi.testclient import TestClient

from db import SessionLocal
from main import app
from state_store import SqlStateStore

client = TestClient(app)


def _session_with(**values):
    sid = uuid.uuid4().hex
    with SessionLocal() as db:
        store = SqlStateStore(db, sid)
        for k, v in values.items():
            store.set(k, v)
        db.commit()
    return {"x-session-id": sid}


def test_store_listing():
    r = client.get("/store", headers=_session_with())
    assert r.status_code == 200
    body = r.json()
    assert body["coins"] == 0
    items = {i["name"]: i for i in body["items"]}
    assert len(items) == 6
    assert items["XP Boost"]["price"] == 150 and items["XP Boost"]["level"] == 0
    assert items["Premium Support"]["affordable"] is False


def test_purchase_denied_without_coins():
    h = _session_with(coins=100)
    r = client.post("/store/purchase", json={"item": "XP Boost"}, headers=h)
    body = r.json()
    assert r.status_code == 200
    assert body["ok"] is False and body["error"] == "insufficient coins"
    assert body["coins"] == 100
    assert client.get("/progress", headers=h).json()["boosts"]["xp_boost"]["level"] == 0


def test_purchase_boost():
    h = _session_with(coins=500)
    r = client.post("/store/purchase", json={"item": "XP Boost"}, headers=h)
    assert r.json() == {"ok": True, "item": "XP Boost", "coins": 350, "error": None}

    prog = client.get("/progress", headers=h).json()
    assert prog["coins"] == 350
    assert prog["boosts"]["xp_boost"]["level"] == 1
    assert abs(prog["boosts"]["xp_boost"]["multiplier"] - 1.05) < 1e-9

    items = {i["name"]: i for i in client.get("/store", headers=h).json()["items"]}
    assert items["XP Boost"]["price"] == 165


def test_purchase_item_once():
    h = _session_with(coins=500)
    r = client.post("/store/purchase", json={"item": "Custom Themes"}, headers=h)
    assert r.json()["ok"] is True and r.json()["coins"] == 300

    r = client.post("/store/purchase", json={"item": "Custom Themes"}, headers=h)
    assert r.json()["ok"] is False and r.json()["error"] == "already owned"
    assert r.json()["coins"] == 300
    assert client.get("/progress", headers=h).json()["owned_items"] == ["Custom Themes"]


def test_purchase_unknown_item():
    r = client.post("/store/purchase", json={"item": "Time Machine"}, headers=_session_with())
    assert r.status_code == 404
