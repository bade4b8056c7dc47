from crud import transaction as crud_transaction
from exceptions import InsufficientStockError
from models.product import Product
from models.users import User
from schemas.transaction import TransactionCreate

import pytest


def _order(client, headers, product_id, quantity, **extra):
    payload = {"product": product_id, "quantity": quantity, "transaction_type": "online"}
    payload.update(extra)
    return client.post("/transactions/create", headers=headers, json=payload)


def _stock(client, headers, product_id):
    return client.get(f"/products/{product_id}", headers=headers).json()["data"]["stock"]


def test_create_computes_totals_and_takes_stock(client, user_headers, make_product):
    product = make_product(price=1000, stock=10)
    response = _order(client, user_headers, product["id"], 2)

    assert response.status_code == 201
    data = response.json()["data"]
    assert float(data["subtotal"]) == 2000
    assert float(data["ppn"]) == 220
    assert float(data["grandtotal"]) == 2220
    assert data["status"] == "unpaid"
    assert data["user"]["username"] == "customer"
    assert _stock(client, user_headers, product["id"]) == 8


def test_insufficient_stock_leaves_stock_untouched(client, user_headers, make_product):
    product = make_product(price=1000, stock=5)
    response = _order(client, user_headers, product["id"], 6)

    assert response.status_code == 400
    body = response.json()
    assert body["data"]["details"] == {"available": 5, "requested": 6}
    assert _stock(client, user_headers, product["id"]) == 5
    assert client.get("/transactions/list", headers=user_headers).json()["data"] == []


def test_unknown_product(client, user_headers):
    assert _order(client, user_headers, 404, 1).status_code == 404


def test_quantity_must_be_positive(client, user_headers, make_product):
    product = make_product()
    assert _order(client, user_headers, product["id"], 0).status_code == 400


def test_second_order_for_last_unit_is_rejected(db, client, user_login, make_product):
    """Stock limit across two sequential orders.

    SQLite ignores FOR UPDATE, so the row lock under real concurrency is covered by
    test_transactions_postgres.py only.
    """
    _, user_id = user_login
    product = make_product(price=1000, stock=1)
    user = db.get(User, user_id)
    order = TransactionCreate(product=product["id"], quantity=1, transaction_type="offline")

    crud_transaction.create_transaction(db, order, user)
    with pytest.raises(InsufficientStockError):
        crud_transaction.create_transaction(db, order, user)

    db.expire_all()
    assert db.get(Product, product["id"]).stock == 0


def test_list_shows_rupiah_amounts(client, user_headers, make_product):
    product = make_product(price=1000, stock=10)
    _order(client, user_headers, product["id"], 2)

    [item] = client.get("/transactions/list", headers=user_headers).json()["data"]
    assert item["grandtotal_formatted"] == "Rp 2.220,00"
    assert item["ppn_formatted"] == "Rp 220,00"


def test_transactions_by_user(client, user_login, admin_headers, make_product):
    headers, user_id = user_login
    product = make_product()
    _order(client, headers, product["id"], 1)
    _order(client, admin_headers, product["id"], 1)

    response = client.get(f"/transactions/user/{user_id}", headers=headers)
    assert [t["user_id"] for t in response.json()["data"]] == [user_id]


def test_update_status_and_quantity(client, user_headers, make_product):
    product = make_product(price=1000, stock=10)
    transaction = _order(client, user_headers, product["id"], 2).json()["data"]

    response = client.put(f"/transactions/update/{transaction['id']}", headers=user_headers, json={
        "status": "paid", "quantity": 3,
    })
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "paid"
    assert float(data["grandtotal"]) == 3330
    # stock is only taken on create
    assert _stock(client, user_headers, product["id"]) == 8


def test_update_rejects_unknown_status(client, user_headers, make_product):
    product = make_product()
    transaction = _order(client, user_headers, product["id"], 1).json()["data"]
    response = client.put(f"/transactions/update/{transaction['id']}", headers=user_headers, json={"status": "lost"})
    assert response.status_code == 400


def test_delete_transaction(client, user_headers, make_product):
    product = make_product()
    transaction = _order(client, user_headers, product["id"], 1).json()["data"]
    assert client.delete(f"/transactions/delete/{transaction['id']}", headers=user_headers).status_code == 200
    assert client.get(f"/transactions/{transaction['id']}", headers=user_headers).status_code == 404


def test_product_with_orders_cannot_be_deleted(client, admin_headers, user_headers, make_product):
    product = make_product()
    _order(client, user_headers, product["id"], 1)
    assert client.delete(f"/products/{product['id']}", headers=admin_headers).status_code == 400


def test_regular_user_cannot_order_for_someone_else(client, admin_headers, user_headers, make_product):
    product = make_product(stock=5)
    users = client.get("/users/list", headers=admin_headers).json()["data"]
    admin_id = next(u["id"] for u in users if u["username"] == "admin")

    response = _order(client, user_headers, product["id"], 1, user=admin_id)
    assert response.status_code == 403
    assert _stock(client, user_headers, product["id"]) == 5


def test_admin_can_order_on_behalf_of_a_user(client, admin_headers, user_login, make_product):
    _, user_id = user_login
    product = make_product(stock=5)
    response = _order(client, admin_headers, product["id"], 1, user=user_id)
    assert response.status_code == 201
    assert response.json()["data"]["user_id"] == user_id


def test_regular_user_cannot_reassign_an_order(client, admin_headers, user_login, make_product):
    headers, user_id = user_login
    product = make_product()
    transaction = _order(client, headers, product["id"], 1).json()["data"]
    admin_id = next(u["id"] for u in client.get("/users/list", headers=admin_headers).json()["data"]
                    if u["username"] == "admin")

    response = client.put(f"/transactions/update/{transaction['id']}", headers=headers, json={"user": admin_id})
    assert response.status_code == 403
    assert client.get(f"/transactions/{transaction['id']}", headers=headers).json()["data"]["user_id"] == user_id
