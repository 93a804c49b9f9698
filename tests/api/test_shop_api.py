"""Route-level tests for catalog, cart, checkout and orders via TestClient."""

from app.data.models import OrderModel


def _add(client, user_id, product_id):
    response = client.post(f"/cart?user_id={user_id}", json={"productId": product_id})
    assert response.status_code == 200
    return response.json()


class TestCatalogEndpoints:

    def test_index_and_products_paginate(self, client, make_product):
        for title in ("A", "B", "C"):
            make_product(title=title)

        for path in ("/", "/products"):
            body = client.get(path, params={"page": 2}).json()
            assert [p["title"] for p in body["products"]] == ["C"]
            assert body["total_products"] == 3
            assert body["last_page"] == 2
            assert body["has_next_page"] is False
            assert body["has_previous_page"] is True

    def test_invalid_page_falls_back(self, client, make_product):
        make_product(title="A")
        body = client.get("/products", params={"page": "nope"}).json()
        assert body["current_page"] == 1

    def test_product_detail(self, client, make_product):
        product = make_product(title="Lamp", price="12.50")
        body = client.get(f"/products/{product.id}").json()
        assert body["title"] == "Lamp"
        assert body["price"] == "12.50"

    def test_missing_product_is_404(self, client):
        response = client.get("/products/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Product 999 not found"


class TestCartEndpoints:

    def test_add_and_remove(self, client, user, make_product):
        product = make_product(title="Widget")

        _add(client, user.id, product.id)
        body = _add(client, user.id, product.id)
        assert [(i["product"]["title"], i["quantity"]) for i in body["items"]] == [("Widget", 2)]
        assert body["total"] == "20.00"

        response = client.post(f"/cart-delete-item?user_id={user.id}", json={"productId": product.id})
        assert response.status_code == 200
        assert response.json()["items"] == []

        assert client.get("/cart", params={"user_id": user.id}).json()["items"] == []

    def test_unknown_user(self, client):
        assert client.get("/cart", params={"user_id": 77}).status_code == 404

    def test_missing_user_id(self, client):
        assert client.get("/cart").status_code == 422

    def test_unknown_product(self, client, user):
        response = client.post(f"/cart?user_id={user.id}", json={"productId": 5})
        assert response.status_code == 404


class TestCheckoutEndpoints:

    def test_checkout_opens_session(self, client, user, make_product, gateway):
        product = make_product(title="X", price="10.00")
        _add(client, user.id, product.id)

        body = client.get("/checkout", params={"user_id": user.id}).json()

        assert body["session_id"] == "cs_test_1"
        assert body["total"] == "10.00"
        assert gateway.requests[0].success_url == "http://testserver/checkout/success?user_id=1"

    def test_cancel_opens_new_session(self, client, user, gateway):
        body = client.get("/checkout/cancel", params={"user_id": user.id}).json()
        assert body["session_id"] == "cs_test_1"

    def test_processor_down(self, client, user, gateway):
        gateway.should_succeed = False
        response = client.get("/checkout", params={"user_id": user.id})
        assert response.status_code == 502
        assert response.json()["detail"] == "Payment processor unavailable"

    def test_success_callback_and_place_order_share_semantics(self, client, db, user, make_product, notifier):
        x = make_product(title="X", price="10.00")
        y = make_product(title="Y", price="5.00")

        _add(client, user.id, x.id)
        _add(client, user.id, x.id)
        _add(client, user.id, y.id)
        from_callback = client.get("/checkout/success", params={"user_id": user.id})
        assert from_callback.status_code == 200
        assert from_callback.json()["total"] == "25.00"

        _add(client, user.id, y.id)
        placed = client.post(f"/create-order?user_id={user.id}")
        assert placed.status_code == 201
        assert placed.json()["total"] == "5.00"

        assert client.get("/cart", params={"user_id": user.id}).json()["items"] == []
        assert db.query(OrderModel).count() == 2
        assert len(notifier.sent) == 2


class TestOrderEndpoints:

    def _place(self, client, user, make_product):
        x = make_product(title="X", price="10.00")
        y = make_product(title="Y", price="5.00")
        _add(client, user.id, x.id)
        _add(client, user.id, x.id)
        _add(client, user.id, y.id)
        return client.post(f"/create-order?user_id={user.id}").json()

    def test_order_history(self, client, user, make_product):
        order = self._place(client, user, make_product)

        body = client.get("/orders", params={"user_id": user.id}).json()

        assert [o["id"] for o in body] == [order["id"]]
        assert [(i["title"], i["quantity"]) for i in body[0]["items"]] == [("X", 2), ("Y", 1)]

    def test_invoice_headers_and_body(self, client, user, make_product, settings):
        order = self._place(client, user, make_product)

        response = client.get(f"/orders/{order['id']}/invoice", params={"user_id": user.id})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == f'inline; filename="invoice-{order["id"]}.pdf"'
        assert b"Total Price 25.00" in response.content
        with open(f"{settings.invoice_dir}/invoice-{order['id']}.pdf", "rb") as fh:
            assert fh.read() == response.content

    def test_invoice_of_someone_else(self, client, user, other_user, make_product):
        order = self._place(client, user, make_product)
        response = client.get(f"/orders/{order['id']}/invoice", params={"user_id": other_user.id})
        assert response.status_code == 403

    def test_invoice_of_missing_order(self, client, user):
        response = client.get("/orders/999/invoice", params={"user_id": user.id})
        assert response.status_code == 404


class TestHugePageNumber:

    def test_listing_far_past_last_page_is_empty(self, client, make_product):
        make_product(title="A")
        response = client.get("/products", params={"page": "99999999999999999999"})
        assert response.status_code == 200
        assert response.json()["products"] == []
