from datetime import datetime
from storefront.models.cart import CartLine
from storefront.services import checkout_service

USER = 11


def checkout(client, user_id=USER, name="Ada Lovelace", email="ada@example.com"):
    return client.post("/api/cart/checkout", json={"userId": user_id, "name": name, "email": email})


def fill_cart(client):
    client.post("/api/cart", json={"userId": USER, "productId": 1, "qty": 2})
    client.post("/api/cart", json={"userId": USER, "productId": 3, "qty": 1})


def test_checkout_empty_cart_fails(catalog, db_session):
    response = checkout(catalog)

    assert response.status_code == 400
    assert response.json()["message"] == "Cannot checkout with an empty cart."
    assert db_session.query(CartLine).count() == 0


def test_checkout_issues_receipt_and_clears_cart(catalog):
    fill_cart(catalog)
    cart_view = catalog.get("/api/cart", params={"userId": USER}).json()

    response = checkout(catalog)

    assert response.status_code == 200
    receipt = response.json()["receipt"]
    assert receipt["orderId"].startswith("ORD")
    assert datetime.fromisoformat(receipt["timestamp"])
    assert receipt["customer"] == {"name": "Ada Lovelace", "email": "ada@example.com", "userId": USER}
    assert receipt["totalPaid"] == cart_view["grandTotal"] == 42.54
    assert receipt["items"] == cart_view["items"]

    assert catalog.get("/api/cart", params={"userId": USER}).json()["items"] == []


def test_checkout_twice_second_fails(catalog):
    fill_cart(catalog)

    assert checkout(catalog).status_code == 200
    assert checkout(catalog).status_code == 400


def test_checkout_leaves_other_carts(catalog):
    fill_cart(catalog)
    catalog.post("/api/cart", json={"userId": 99, "productId": 2, "qty": 1})

    checkout(catalog)

    assert len(catalog.get("/api/cart", params={"userId": 99}).json()["items"]) == 1


def test_order_ids_differ(catalog):
    fill_cart(catalog)
    first = checkout(catalog).json()["receipt"]["orderId"]
    fill_cart(catalog)
    second = checkout(catalog).json()["receipt"]["orderId"]

    assert first != second


def test_checkout_missing_fields(catalog):
    fill_cart(catalog)

    assert catalog.post("/api/cart/checkout", json={"userId": USER, "email": "a@example.com"}).status_code == 400
    assert catalog.post("/api/cart/checkout", json={"userId": USER, "name": "Ada"}).status_code == 400
    assert catalog.post("/api/cart/checkout", json={"name": "Ada", "email": "a@example.com"}).status_code == 400
    assert checkout(catalog, name="").status_code == 400
    assert checkout(catalog, email="nope").status_code == 400

    assert len(catalog.get("/api/cart", params={"userId": USER}).json()["items"]) == 2


def test_concurrent_checkout_conflicts_and_rolls_back(catalog, monkeypatch):
    fill_cart(catalog)
    load_catalog = checkout_service.load_catalog

    def lines_taken_by_other_checkout(db, cart_lines):
        db.query(CartLine).filter(CartLine.user_id == USER).delete(synchronize_session=False)
        return load_catalog(db, cart_lines)

    monkeypatch.setattr(checkout_service, "load_catalog", lines_taken_by_other_checkout)

    response = checkout(catalog)

    assert response.status_code == 409
    # Rolled back: nothing was paid for, the cart is intact
    assert len(catalog.get("/api/cart", params={"userId": USER}).json()["items"]) == 2


def test_checkout_body_has_message_and_receipt(catalog):
    fill_cart(catalog)

    body = checkout(catalog).json()

    assert set(body) == {"message", "receipt"}
    assert body["message"] == "Checkout successful!"
    assert set(body["receipt"]) == {"orderId", "timestamp", "customer", "totalPaid", "items"}
