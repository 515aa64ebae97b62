from __future__ import annotations

from fastapi.testclient import TestClient

from names_engine.app import app

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


# ── Catalog ──────────────────────────────────────────────────────────────


def test_list_names_returns_full_catalog():
    resp = client.get("/names")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 47
    assert body[0]["label"] == "Ar-Rahman"
    assert set(body[0]) == {"display_form", "label", "meaning", "usage", "citation"}


def test_list_names_filters_by_query():
    resp = client.get("/names", params={"q": "forgiver"})
    assert resp.status_code == 200
    assert [n["label"] for n in resp.json()] == ["Al-Ghaffar", "Al-Ghafoor"]


def test_list_names_unknown_query_is_empty():
    resp = client.get("/names", params={"q": "nonexistent12345"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_name_detail():
    resp = client.get("/names/Ar-Razzaq")
    assert resp.status_code == 200
    assert resp.json()["meaning"] == "The Provider"


def test_name_detail_unknown_label():
    resp = client.get("/names/Al-Unknown")
    assert resp.status_code == 404


# ── Suggestions ──────────────────────────────────────────────────────────


def test_relevant_default_pair():
    resp = client.post("/names/relevant", json={"text": ""})
    assert resp.status_code == 200
    body = resp.json()
    assert body["is_default"] is True
    assert [n["label"] for n in body["names"]] == ["Ar-Rahman", "Ar-Rahim"]


def test_relevant_literal_match():
    resp = client.post("/names/relevant", json={"text": "Bless me, al-wadud"})
    body = resp.json()
    assert body["is_default"] is False
    assert [n["label"] for n in body["names"]] == ["Al-Wadud"]


def test_suggest():
    resp = client.post("/names/suggest", json={"text": "I seek Your forgiveness and mercy"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"]["label"] == "Ar-Rahim"
    assert body["score"] == 60
    assert body["is_default"] is False


def test_suggest_blank_text_is_default():
    resp = client.post("/names/suggest", json={"text": "   "})
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"]["label"] == "Ar-Rahman"
    assert body["is_default"] is True


def test_suggest_requires_text_field():
    resp = client.post("/names/suggest", json={})
    assert resp.status_code == 422


def test_suggest_batch_keeps_input_order():
    resp = client.post(
        "/names/suggest/batch",
        json={"texts": ["answer my prayer", "", "please heal my pain"]},
    )
    assert resp.status_code == 200
    labels = [s["name"]["label"] for s in resp.json()["suggestions"]]
    assert labels == ["Al-Mujeeb", "Ar-Rahman", "As-Salam"]


def test_suggest_batch_rejects_oversized_batch():
    resp = client.post("/names/suggest/batch", json={"texts": ["x"] * 101})
    assert resp.status_code == 422
