def _new_user(test_client, **overrides):
    body = {"name": "Jeanne", "email": "jeanne@example.com", "password": "secret"}
    body.update(overrides)
    return test_client.post("/users", json=body)


def test_list_default_users(test_client):
    r = test_client.get("/users")
    assert r.status_code == 200
    users = r.json()
    assert {u["email"] for u in users} == {"admin@example.com", "user@example.com"}
    assert all("password" not in u for u in users)


def test_create_user(test_client):
    r = _new_user(test_client)
    assert r.status_code == 201, r.text
    user = r.json()
    assert user["role"] == "user"
    assert "password" not in user

    # Le nouveau compte peut se connecter
    r = test_client.post("/auth", json={"email": "jeanne@example.com", "password": "secret"})
    assert r.status_code == 200


def test_create_user_unknown_role_defaults_to_user(test_client):
    r = _new_user(test_client, role="superuser")
    assert r.status_code == 201
    assert r.json()["role"] == "user"


def test_create_user_missing_fields(test_client):
    r = test_client.post("/users", json={"name": "Jeanne"})
    assert r.status_code == 400


def test_create_user_duplicate_email(test_client):
    r = _new_user(test_client, email="admin@example.com")
    assert r.status_code == 409
    assert r.json()["detail"] == "Email already exists"
    assert len(test_client.get("/users").json()) == 2


def test_get_user(test_client):
    created = _new_user(test_client).json()
    r = test_client.get(f"/users/{created['id']}")
    assert r.status_code == 200
    assert r.json()["email"] == "jeanne@example.com"
    assert test_client.get("/users/nope").status_code == 404


def test_update_user(test_client):
    created = _new_user(test_client).json()
    r = test_client.patch(f"/users/{created['id']}", json={"name": "Jeanne D."})
    assert r.status_code == 200, r.text
    assert r.json()["name"] == "Jeanne D."
    assert r.json()["email"] == "jeanne@example.com"
    assert r.json()["createdAt"] == created["createdAt"]


def test_update_user_email_conflict(test_client):
    created = _new_user(test_client).json()
    r = test_client.patch(f"/users/{created['id']}", json={"email": "user@example.com"})
    assert r.status_code == 409

    # Reprendre son propre email n'est pas un conflit
    r = test_client.patch(f"/users/{created['id']}", json={"email": "jeanne@example.com"})
    assert r.status_code == 200


def test_update_unknown_user(test_client):
    r = test_client.patch("/users/nope", json={"name": "X"})
    assert r.status_code == 404


def test_change_role(test_client):
    created = _new_user(test_client).json()
    r = test_client.put(f"/users/{created['id']}", json={"role": "admin"})
    assert r.status_code == 200
    assert r.json()["role"] == "admin"


def test_change_role_invalid(test_client):
    created = _new_user(test_client).json()
    r = test_client.put(f"/users/{created['id']}", json={"role": "owner"})
    assert r.status_code == 400
    assert test_client.get(f"/users/{created['id']}").json()["role"] == "user"


def test_change_role_unknown_user(test_client):
    r = test_client.put("/users/nope", json={"role": "admin"})
    assert r.status_code == 404


def test_delete_user(test_client):
    created = _new_user(test_client).json()
    r = test_client.delete(f"/users/{created['id']}")
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert test_client.delete(f"/users/{created['id']}").status_code == 404
    assert len(test_client.get("/users").json()) == 2
