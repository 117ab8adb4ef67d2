def test_login_default_admin(test_client):
    r = test_client.post("/auth", json={"email": "admin@example.com", "password": "admin123"})
    assert r.status_code == 200, r.text
    user = r.json()
    assert user["role"] == "admin"
    assert "password" not in user


def test_login_wrong_password(test_client):
    r = test_client.post("/auth", json={"email": "admin@example.com", "password": "nope"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid credentials"


def test_login_unknown_email(test_client):
    r = test_client.post("/auth", json={"email": "ghost@example.com", "password": "admin123"})
    assert r.status_code == 401
