from datetime import date, timedelta

from conftest import session_payload


def test_stats_empty(test_client):
    r = test_client.get("/stats")
    assert r.status_code == 200
    data = r.json()
    assert data["sessions"] == {"total": 0, "pending": 0, "approved": 0, "rejected": 0, "upcoming": 0}
    # admin + user créés au démarrage
    assert data["users"]["total"] == 2


def test_upcoming_follows_status(test_client):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    created = test_client.post("/sessions", json=session_payload(requestedDate=tomorrow)).json()

    test_client.patch(f"/sessions/{created['id']}", json={"status": "approved"})
    stats = test_client.get("/stats").json()["sessions"]
    assert stats["approved"] == 1
    assert stats["upcoming"] == 1

    test_client.patch(f"/sessions/{created['id']}", json={"status": "rejected"})
    stats = test_client.get("/stats").json()["sessions"]
    assert stats["upcoming"] == 0
    assert stats["rejected"] == 1


def test_stats_by_user(test_client):
    test_client.post("/sessions", json=session_payload(userId="alice"))
    test_client.post("/sessions", json=session_payload(userId="alice"))
    other = test_client.post("/sessions", json=session_payload(userId="bob")).json()
    test_client.patch(f"/sessions/{other['id']}", json={"status": "approved"})

    stats = test_client.get("/stats", params={"userId": "alice"}).json()["sessions"]
    assert stats["total"] == 2
    assert stats["pending"] == 2
    assert stats["approved"] == 0

    stats = test_client.get("/stats").json()["sessions"]
    assert stats["total"] == 3
    assert stats["pending"] + stats["approved"] + stats["rejected"] == stats["total"]
