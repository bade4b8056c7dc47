def test_create_product_with_category(client, user_headers, make_product):
    product = make_product(price=1500, stock=3)
    assert product["category"]["name"] == "Groceries"
    assert product["images"] == ["beans.png"]

    response = client.get(f"/products/{product['id']}", headers=user_headers)
    assert response.status_code == 200
    assert float(response.json()["data"]["price"]) == 1500


def test_product_title_length_is_validated(client, admin_headers):
    response = client.post("/products", headers=admin_headers, json={
        "title": "Tea", "category": 1, "stock": 1, "price": 10,
    })
    assert response.status_code == 400


def test_product_requires_existing_category(client, admin_headers):
    response = client.post("/products", headers=admin_headers, json={
        "title": "Green tea", "category": 42, "stock": 1, "price": 10,
    })
    assert response.status_code == 404


def test_only_admin_manages_products(client, user_headers, make_product):
    product = make_product()
    response = client.put(f"/products/{product['id']}", headers=user_headers, json={"stock": 100})
    assert response.status_code == 403


def test_update_product(client, admin_headers, make_product):
    product = make_product(stock=3)
    response = client.put(f"/products/{product['id']}", headers=admin_headers, json={"stock": 7})
    assert response.status_code == 200
    assert response.json()["data"]["stock"] == 7
    assert response.json()["data"]["title"] == product["title"]


def test_comment_on_product(client, user_headers, make_product):
    product = make_product()
    response = client.post("/comments", headers=user_headers, json={
        "product_id": product["id"], "message": "Great aroma",
    })
    assert response.status_code == 201
    assert response.json()["data"]["name"] == "customer"

    comments = client.get(f"/products/{product['id']}", headers=user_headers).json()["data"]["comments"]
    assert [c["message"] for c in comments] == ["Great aroma"]


def test_category_in_use_cannot_be_deleted(client, admin_headers, make_product):
    product = make_product()
    response = client.delete(f"/categories/{product['category_id']}", headers=admin_headers)
    assert response.status_code == 400


def test_delete_product_then_category(client, admin_headers, make_product):
    product = make_product()
    assert client.delete(f"/products/{product['id']}", headers=admin_headers).status_code == 200
    assert client.delete(f"/categories/{product['category_id']}", headers=admin_headers).status_code == 200
    assert client.get("/categories/list", headers=admin_headers).json()["data"] == []
