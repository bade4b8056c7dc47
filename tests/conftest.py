import os
import tempfile

# Configure the app for an in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "ledger-backoffice-test-logs"))
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")
os.environ.pop("ADMIN_EMAIL", None)
os.environ["APP_TIMEZONE"] = "Asia/Jakarta"

import pytest
from fastapi.testclient import TestClient

from crud import users as crud_users
from database import Base, SessionLocal, engine
import main


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    return TestClient(main.app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


PASSWORD = "secret-password"


def _login(client, email, password=PASSWORD):
    response = client.post("/users/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    body = response.json()["data"]
    return {"Authorization": f"Bearer {body['token']}"}, body["id"]


def _register_and_login(client, username):
    email = f"{username}@example.com"
    response = client.post("/users/register", json={
        "username": username,
        "email": email,
        "password": PASSWORD,
    })
    assert response.status_code == 201, response.text
    return _login(client, email)


@pytest.fixture
def admin_headers(client, db):
    crud_users.ensure_admin(db, "admin", "admin@example.com", PASSWORD)
    headers, _ = _login(client, "admin@example.com")
    return headers


@pytest.fixture
def user_login(client):
    return _register_and_login(client, "customer")


@pytest.fixture
def user_headers(user_login):
    return user_login[0]


@pytest.fixture
def make_account(client, admin_headers):
    def _make(name, account_type, account_code=None):
        response = client.post("/accounts", headers=admin_headers, json={
            "name": name,
            "account_code": account_code,
            "account_type": account_type,
        })
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make


@pytest.fixture
def make_journal(client, admin_headers):
    def _make(journal_date, lines, name="Journal entry"):
        response = client.post("/journals", headers=admin_headers, json={
            "name": name,
            "journal_date": journal_date,
            "detail": [
                {"account": account_id, "debit": debit, "credit": credit}
                for account_id, debit, credit in lines
            ],
        })
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make


@pytest.fixture
def make_product(client, admin_headers):
    def _make(price=1000, stock=10, title="Coffee beans"):
        response = client.post("/categories", headers=admin_headers, json={"name": "Groceries", "image": "groceries.png"})
        assert response.status_code == 201, response.text
        category_id = response.json()["data"]["id"]
        response = client.post("/products", headers=admin_headers, json={
            "title": title,
            "description": "Freshly roasted",
            "images": ["beans.png"],
            "category": category_id,
            "stock": stock,
            "price": price,
        })
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make
