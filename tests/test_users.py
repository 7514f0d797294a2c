from cpms.models.user import User


def _register(client, email="new@example.com", password="hunter22"):
    return client.post("/users", json={"email": email, "password": password})


def test_create_user_success(client, db):
    resp = _register(client)
    assert resp.status_code == 201
    data = resp.json()
    assert data["email"] == "new@example.com"
    assert resp.headers["location"] == f"/users/{data['id']}"
    assert "password" not in data
    assert "salt" not in data

    stored = db.query(User).filter(User.id == data["id"]).first()
    assert stored.password != "hunter22"
    assert len(stored.salt) == 5


def test_create_user_duplicate_email_conflict(client, db):
    first = _register(client, password="first-pass")
    assert first.status_code == 201
    original = db.query(User).filter(User.id == first.json()["id"]).first()
    original_hash, original_salt = original.password, original.salt

    second = _register(client, password="second-pass")
    assert second.status_code == 409
    assert second.json() == {"message": "Email already in use."}

    db.expire_all()
    users = db.query(User).all()
    assert len(users) == 1
    assert users[0].password == original_hash
    assert users[0].salt == original_salt

    login = client.post("/users/login", json={"email": "new@example.com", "password": "first-pass"})
    assert login.status_code == 200


def test_create_user_short_password(client):
    resp = _register(client, password="12345")
    assert resp.status_code == 400
    body = resp.json()
    assert body["message"]
    assert any(err["field"] == "password" for err in body["errors"])


def test_create_user_invalid_email(client):
    resp = _register(client, email="not-an-email")
    assert resp.status_code == 400


def test_create_user_missing_fields(client):
    resp = client.post("/users", json={})
    assert resp.status_code == 400
    fields = {err["field"] for err in resp.json()["errors"]}
    assert {"email", "password"} <= fields


def test_list_users_hides_secrets(client, seed_user):
    _register(client)
    resp = client.get("/users")
    assert resp.status_code == 200
    data = resp.json()
    assert [u["email"] for u in data] == ["owner@example.com", "new@example.com"]
    for user in data:
        assert set(user) == {"id", "email", "createdAt"}


def test_get_user(client, seed_user):
    resp = client.get(f"/users/{seed_user.id}")
    assert resp.status_code == 200
    assert resp.json()["email"] == "owner@example.com"


def test_get_user_not_found(client):
    resp = client.get("/users/999")
    assert resp.status_code == 404
    assert resp.content == b""


def test_delete_user(client, seed_user):
    resp = client.delete(f"/users/{seed_user.id}")
    assert resp.status_code == 204
    assert client.get(f"/users/{seed_user.id}").status_code == 404


def test_delete_user_not_found(client):
    assert client.delete("/users/999").status_code == 404


def test_duplicate_email_caught_by_unique_constraint(client, db, monkeypatch):
    from cpms.services import user_service

    monkeypatch.setattr(user_service, "email_exists", lambda db, email: False)

    first = _register(client, password="first-pass")
    assert first.status_code == 201

    second = _register(client, password="second-pass")
    assert second.status_code == 409
    assert second.json() == {"message": "Email already in use."}

    db.expire_all()
    assert db.query(User).count() == 1
    login = client.post("/users/login", json={"email": "new@example.com", "password": "first-pass"})
    assert login.status_code == 200
