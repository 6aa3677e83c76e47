from unittest.mock import patch
from uuid import uuid4

from app.core.errors import PaymentFailedError
from app.models.order import PaymentStatus


def _restaurant(client, name="Canteen Delight"):
    parks = client.get("/api/v1/tech-parks").json()["data"]
    manyata = next(p for p in parks if p["name"] == "Manyata Tech Park")
    restaurants = client.get(f"/api/v1/tech-parks/{manyata['id']}/restaurants").json()["data"]
    return next(r for r in restaurants if r["name"] == name)


def _menu_items(client, restaurant_id):
    menu = client.get(f"/api/v1/menu/restaurant/{restaurant_id}").json()["data"]
    return {item["name"]: item for section in menu for item in section["items"]}


def _employee(client):
    response = client.post("/api/v1/auth/user/login", json={
        "username": "priya.n", "password": "secret", "tech_park": "Manyata Tech Park",
        "company": "Infosys", "designation": "Analyst", "employee_name": "Priya N", "mobile": "9000000001",
    })
    assert response.status_code == 200
    return response.json()["data"]["user"]


def _place_order(client, order_type="delivery"):
    restaurant = _restaurant(client)
    items = _menu_items(client, restaurant["id"])
    user = _employee(client)
    body = {
        "order": {
            "user_id": user["id"],
            "restaurant_id": restaurant["id"],
            "order_type": order_type,
            "subtotal": 170, "delivery_charge": 25, "gst": 10, "total": 205,
            "payment_method": "upi", "payment_status": "completed",
        },
        "items": [
            {"menu_item_id": items["Paneer Butter Masala"]["id"], "quantity": 1, "price": 120, "total": 120},
            {"menu_item_id": items["Roti"]["id"], "quantity": 2, "price": 15, "total": 30},
        ],
    }
    response = client.post("/api/v1/orders", json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCatalogRoutes:
    def test_browse_catalog(self, client):
        restaurant = _restaurant(client)
        assert restaurant["preparation_time"] == "10-15 min"

        menu = client.get(f"/api/v1/menu/restaurant/{restaurant['id']}").json()["data"]
        assert [section["name"] for section in menu] == ["Main Course", "Breads", "Dal & Rice"]

    def test_unknown_restaurant(self, client):
        response = client.get(f"/api/v1/restaurants/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "not_found"


class TestPricingRoutes:
    def test_quote(self, client):
        restaurant = _restaurant(client, "North Spice Dhaba")
        items = _menu_items(client, restaurant["id"])
        body = {
            "restaurant_id": restaurant["id"],
            "order_type": "dine-in",
            "items": [
                {"menu_item_id": items["Chole Bhature"]["id"], "quantity": 1},
                {"menu_item_id": items["Butter Naan"]["id"], "quantity": 1},
                {"menu_item_id": items["Butter Naan"]["id"], "quantity": 1},
            ],
        }
        response = client.post("/api/v1/pricing/quote", json=body)

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["items"]) == 2
        assert data["pricing"] == {"subtotal": 160, "delivery_charge": 0, "gst": 8, "total": 168}

    def test_quote_rejects_unoffered_order_type(self, client):
        restaurant = _restaurant(client, "South Express")
        items = _menu_items(client, restaurant["id"])
        body = {
            "restaurant_id": restaurant["id"],
            "order_type": "delivery",
            "items": [{"menu_item_id": items["Masala Dosa"]["id"], "quantity": 1}],
        }
        response = client.post("/api/v1/pricing/quote", json=body)
        assert response.status_code == 400

    def test_quote_rejects_empty_cart(self, client):
        restaurant = _restaurant(client)
        response = client.post("/api/v1/pricing/quote", json={
            "restaurant_id": restaurant["id"], "order_type": "takeaway", "items": []})
        assert response.status_code == 400

    def test_quote_quantity(self, client):
        restaurant = _restaurant(client)
        roti = _menu_items(client, restaurant["id"])["Roti"]

        response = client.post("/api/v1/pricing/quote", json={
            "restaurant_id": restaurant["id"], "order_type": "takeaway",
            "items": [{"menu_item_id": roti["id"], "quantity": 40}]})
        data = response.json()["data"]
        assert [(line["quantity"], line["total"]) for line in data["items"]] == [(40, 600)]
        assert data["pricing"]["total"] == 630

        response = client.post("/api/v1/pricing/quote", json={
            "restaurant_id": restaurant["id"], "order_type": "takeaway",
            "items": [{"menu_item_id": roti["id"], "quantity": 2000000}]})
        assert response.status_code == 422


class TestOrderRoutes:
    def test_create_order_success(self, client):
        order = _place_order(client)

        assert order["status"] == "placed"
        assert order["total"] == 205
        assert {i["name"] for i in order["items"]} == {"Paneer Butter Masala", "Roti"}

        response = client.get(f"/api/v1/orders/{order['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["order_number"] == order["order_number"]

    def test_create_order_empty_items(self, client):
        restaurant = _restaurant(client)
        user = _employee(client)
        body = {
            "order": {"user_id": user["id"], "restaurant_id": restaurant["id"], "order_type": "takeaway",
                      "subtotal": 0, "gst": 0, "total": 0},
            "items": [],
        }
        response = client.post("/api/v1/orders", json=body)
        assert response.status_code == 400

    def test_create_order_validation_error(self, client):
        response = client.post("/api/v1/orders", json={"order": {"order_type": "drone"}, "items": []})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"

    def test_get_unknown_order(self, client):
        response = client.get(f"/api/v1/orders/{uuid4()}")
        assert response.status_code == 404

    def test_status_update_requires_authentication(self, client):
        order = _place_order(client)
        response = client.patch(f"/api/v1/orders/{order['id']}/status", json={"status": "cancelled"})
        assert response.status_code == 401

    def test_manager_drives_order(self, client, manager_headers):
        order = _place_order(client)
        headers = manager_headers()

        response = client.post(f"/api/v1/orders/{order['id']}/advance", json={}, headers=headers)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "estimate_required"

        response = client.patch(f"/api/v1/orders/{order['id']}/status",
                                json={"status": "preparing"}, headers=headers)
        assert response.status_code == 409

        response = client.patch(f"/api/v1/orders/{order['id']}/status",
                                json={"status": "confirmed", "estimated_time": "15-20 min"}, headers=headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "confirmed"
        assert data["next_status"] == "preparing"

        response = client.post(f"/api/v1/orders/{order['id']}/advance", headers=headers)
        assert response.json()["data"]["status"] == "preparing"

        board = client.get(f"/api/v1/orders/restaurant/{order['restaurant_id']}?status=preparing", headers=headers)
        assert [o["id"] for o in board.json()["data"]] == [order["id"]]

        notifications = client.get(f"/api/v1/notifications/user/{order['user_id']}").json()["data"]
        assert [n["status"] for n in notifications] == ["preparing", "confirmed"]

        read = client.post(f"/api/v1/notifications/{notifications[0]['id']}/read")
        assert read.json()["data"]["is_read"] is True
        unread = client.get(f"/api/v1/notifications/user/{order['user_id']}?unread_only=true").json()["data"]
        assert len(unread) == 1

    def test_other_manager_cannot_touch_order(self, client, manager_headers):
        order = _place_order(client)
        headers = manager_headers("northspice")

        response = client.post(f"/api/v1/orders/{order['id']}/cancel", headers=headers)
        assert response.status_code == 403

        response = client.get(f"/api/v1/orders/restaurant/{order['restaurant_id']}", headers=headers)
        assert response.status_code == 403

        assert client.get(f"/api/v1/orders/{order['id']}").json()["data"]["status"] == "placed"

    def test_cancelled_order_is_final(self, client, manager_headers):
        order = _place_order(client)
        headers = manager_headers()

        response = client.post(f"/api/v1/orders/{order['id']}/cancel", headers=headers)
        assert response.json()["data"]["status"] == "cancelled"

        response = client.post(f"/api/v1/orders/{order['id']}/advance", json={"estimated_time": "15-20 min"}, headers=headers)
        assert response.status_code == 409

    def test_tracking_simulation_does_not_touch_order(self, client):
        order = _place_order(client)

        response = client.get(f"/api/v1/orders/{order['id']}/tracking?elapsed=65")
        data = response.json()["data"]
        assert data["status"] == "placed"
        assert data["display_status"] == "preparing"
        assert [s["done"] for s in data["steps"]] == [True, True, True, False, False, False]

        assert client.get(f"/api/v1/orders/{order['id']}").json()["data"]["status"] == "placed"

    def test_order_history_and_reorder(self, client):
        order = _place_order(client)

        response = client.post(f"/api/v1/orders/{order['id']}/reorder", json={"user_id": order["user_id"]})
        assert response.status_code == 201
        assert response.json()["data"]["payment_status"] == "pending"

        history = client.get(f"/api/v1/orders/user/{order['user_id']}").json()["data"]
        assert len(history) == 2


class TestCheckoutRoutes:
    def _body(self, client, payment_method="upi", order_type="delivery"):
        restaurant = _restaurant(client)
        items = _menu_items(client, restaurant["id"])
        user = _employee(client)
        return {
            "user_id": user["id"],
            "restaurant_id": restaurant["id"],
            "order_type": order_type,
            "payment_method": payment_method,
            "delivery_address": "Block A, Office 204",
            "subtotal": 120, "delivery_charge": 25, "gst": 7, "total": 152,
            "items": [{"menu_item_id": items["Paneer Butter Masala"]["id"], "quantity": 1, "price": 120, "total": 120}],
        }

    def test_checkout_success(self, client):
        with patch("app.services.order_service.process_payment", return_value=PaymentStatus.COMPLETED):
            response = client.post("/api/v1/orders/checkout", json=self._body(client))

        assert response.status_code == 201
        assert response.json()["data"]["payment_status"] == "completed"

    def test_checkout_payment_failure_is_retryable(self, client):
        body = self._body(client)
        with patch("app.services.order_service.process_payment", side_effect=PaymentFailedError()):
            response = client.post("/api/v1/orders/checkout", json=body)

        assert response.status_code == 402
        assert response.json()["error"]["retryable"] is True
        assert client.get(f"/api/v1/orders/user/{body['user_id']}").json()["data"] == []

    def test_cash_on_delivery_only_for_delivery(self, client):
        response = client.post("/api/v1/orders/checkout", json=self._body(client, "cod", "takeaway"))
        assert response.status_code == 400


class TestMenuRoutes:
    def test_manager_manages_own_menu(self, client, manager_headers):
        restaurant = _restaurant(client)
        headers = manager_headers()

        response = client.post("/api/v1/menu/items", headers=headers, json={
            "restaurant_id": restaurant["id"], "name": "Veg Pulao", "price": 90})
        assert response.status_code == 201
        item = response.json()["data"]

        response = client.put(f"/api/v1/menu/items/{item['id']}", headers=headers, json={"price": 95})
        assert response.json()["data"]["price"] == 95
        assert response.json()["data"]["name"] == "Veg Pulao"

        response = client.patch(f"/api/v1/menu/items/{item['id']}/availability", headers=headers,
                                json={"is_available": False})
        assert response.json()["data"]["is_available"] is False

        response = client.delete(f"/api/v1/menu/items/{item['id']}", headers=headers)
        assert response.status_code == 200
        assert "Veg Pulao" not in _menu_items(client, restaurant["id"])

    def test_cross_restaurant_menu_edits_rejected(self, client, manager_headers):
        restaurant = _restaurant(client)
        item = _menu_items(client, restaurant["id"])["Roti"]
        headers = manager_headers("northspice")

        assert client.put(f"/api/v1/menu/items/{item['id']}", headers=headers, json={"price": 1}).status_code == 403
        assert client.delete(f"/api/v1/menu/items/{item['id']}", headers=headers).status_code == 403
        assert client.post("/api/v1/menu/items", headers=headers, json={
            "restaurant_id": restaurant["id"], "name": "Free Lunch", "price": 0}).status_code == 403

        assert client.post("/api/v1/menu/items", json={
            "restaurant_id": restaurant["id"], "name": "Free Lunch", "price": 0}).status_code == 401

    def test_negative_price_rejected(self, client, manager_headers):
        restaurant = _restaurant(client)
        response = client.post("/api/v1/menu/items", headers=manager_headers(), json={
            "restaurant_id": restaurant["id"], "name": "Refund Special", "price": -5})
        assert response.status_code == 422

    def test_null_for_required_field_rejected(self, client, manager_headers):
        restaurant = _restaurant(client)
        item = _menu_items(client, restaurant["id"])["Roti"]
        headers = manager_headers()

        for field in ("price", "name", "is_available"):
            response = client.put(f"/api/v1/menu/items/{item['id']}", headers=headers, json={field: None})
            assert response.status_code == 422
            assert response.json()["error"]["details"][0]["loc"] == ["body", field]

        response = client.put(f"/api/v1/menu/items/{item['id']}", headers=headers, json={"description": None})
        assert response.status_code == 200
        assert _menu_items(client, restaurant["id"])["Roti"]["price"] == 15


class TestAuthRoutes:
    def test_manager_login(self, client):
        response = client.post("/api/v1/auth/manager/login",
                               json={"username": "canteendelight", "password": "password123"})
        data = response.json()["data"]
        assert data["restaurant"]["name"] == "Canteen Delight"

        me = client.get("/api/v1/manager/me/restaurant", headers={"Authorization": f"Bearer {data['token']}"})
        assert me.json()["data"]["name"] == "Canteen Delight"

    def test_bad_credentials(self, client):
        response = client.post("/api/v1/auth/manager/login",
                               json={"username": "canteendelight", "password": "wrong"})
        assert response.status_code == 401

    def test_garbage_token(self, client):
        response = client.get("/api/v1/manager/me/restaurant", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_employee_login_is_idempotent(self, client):
        assert _employee(client)["id"] == _employee(client)["id"]
