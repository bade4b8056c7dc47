from crud import users as crud_users


def test_register_and_login_returns_token(client):
    response = client.post("/users/register", json={
        "username": "budi",
        "email": "budi@example.com",
        "password": "correct-horse",
    })
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "success"
    assert "hashed_password" not in body["data"]

    response = client.post("/users/login", json={"email": "budi@example.com", "password": "correct-horse"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["username"] == "budi"
    assert data["token_type"] == "bearer"
    assert data["token"]


def test_register_rejects_duplicate_email(client, user_headers):
    response = client.post("/users/register", json={
        "username": "someone-else",
        "email": "customer@example.com",
        "password": "secret-password",
    })
    assert response.status_code == 400
    assert response.json()["data"]["error"] == "Email has been used"


def test_register_validates_payload(client):
    response = client.post("/users/register", json={
        "username": "x",
        "email": "not-an-email",
        "password": "short",
    })
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "error"
    assert body["data"]["error"] == "Validation failed"
    fields = {d["field"] for d in body["data"]["details"]}
    assert {"email", "password"} <= fields


def test_login_with_wrong_password(client, user_headers):
    response = client.post("/users/login", json={"email": "customer@example.com", "password": "wrong-password"})
    assert response.status_code == 401
    assert response.json()["code"] == 401


def test_protected_route_requires_token(client):
    response = client.get("/accounts/list")
    assert response.status_code == 401
    assert response.json()["status"] == "error"


def test_garbage_token_is_rejected(client):
    response = client.get("/accounts/list", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_user_list_is_admin_only(client, admin_headers, user_headers):
    assert client.get("/users/list", headers=user_headers).status_code == 403
    response = client.get("/users/list", headers=admin_headers)
    assert response.status_code == 200
    assert {u["username"] for u in response.json()["data"]} == {"admin", "customer"}


def test_admin_can_delete_user(client, admin_headers, user_login):
    _, user_id = user_login
    response = client.delete(f"/users/delete/{user_id}", headers=admin_headers)
    assert response.status_code == 200
    assert client.get(f"/users/{user_id}", headers=admin_headers).status_code == 404


def test_self_registration_cannot_claim_admin(client, admin_headers):
    response = client.post("/users/register", json={
        "username": "mallory",
        "email": "mallory@example.com",
        "password": "secret-password",
        "role": "admin",
    })
    assert response.status_code == 201
    assert response.json()["data"]["role"] == "user"

    token = client.post("/users/login", json={
        "email": "mallory@example.com", "password": "secret-password",
    }).json()["data"]["token"]
    headers = {"Authorization": f"Bearer {token}"}
    assert client.delete("/journals/delete-all-journals", headers=headers).status_code == 403
    assert client.post("/accounts", headers=headers, json={"name": "Cash", "account_type": 1}).status_code == 403


def test_admin_grants_role(client, admin_headers, user_login):
    headers, user_id = user_login
    assert client.put(f"/users/{user_id}/role", headers=headers, json={"role": "admin"}).status_code == 403

    response = client.put(f"/users/{user_id}/role", headers=admin_headers, json={"role": "admin"})
    assert response.status_code == 200
    assert response.json()["data"]["role"] == "admin"

    # the role is read from the database on every request
    assert client.get("/users/list", headers=headers).status_code == 200


def test_role_must_be_known(client, admin_headers, user_login):
    _, user_id = user_login
    response = client.put(f"/users/{user_id}/role", headers=admin_headers, json={"role": "superuser"})
    assert response.status_code == 400


def test_ensure_admin_is_idempotent(db):
    first = crud_users.ensure_admin(db, "root", "root@example.com", "secret-password")
    second = crud_users.ensure_admin(db, "root", "root@example.com", "another-password")
    assert first.id == second.id
    assert second.role == "admin"
