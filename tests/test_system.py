def test_health_before_first_use(test_client):
    r = test_client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["dataDir"] is True
    assert data["stores"] == {"sessions": "missing", "users": "missing"}


def test_health_after_stores_created(test_client):
    test_client.get("/users")  # crée users.json (comptes par défaut)
    test_client.get("/sessions")
    data = test_client.get("/health").json()
    assert data["stores"] == {"sessions": "ok", "users": "ok"}
    assert data["uploadsDir"] is True


def test_health_reports_unreadable_store(test_client, data_path):
    (data_path / "users.json").write_text("{broken", encoding="utf-8")
    r = test_client.get("/health")
    assert r.status_code == 503
    data = r.json()
    assert data["status"] == "degraded"
    assert data["stores"]["users"] == "unreadable"
    assert data["stores"]["sessions"] == "missing"


def test_version_reports_env(test_client):
    r = test_client.get("/version")
    assert r.status_code == 200
    assert r.json()["env"] == "test"
    assert r.json()["name"] == "Schedule Handler API (tests)"


def test_root_redirects_to_docs(test_client):
    r = test_client.get("/", follow_redirects=False)
    assert r.status_code in (301, 302, 307, 308)
    assert "/docs" in r.headers.get("location", "")
