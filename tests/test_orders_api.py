ORDERS_URL = "/api/v1/orders"
CHECKOUT_URL = "/api/v1/cart/checkout"


def place_order(client, headers, lines):
    response = client.post(
        CHECKOUT_URL,
        json={"items": [{"product_id": p, "quantity": q} for p, q in lines]},
        headers=headers,
    )
    assert response.status_code == 200
    return response.json()["order_id"]


def test_list_orders(client, user, products, auth_headers):
    headers = auth_headers(user)
    first = place_order(client, headers, [(products[0].id, 1)])
    second = place_order(client, headers, [(products[1].id, 2)])

    response = client.get(ORDERS_URL, headers=headers)

    assert response.status_code == 200
    assert {o["id"] for o in response.json()} == {first, second}
    assert all(o["status"] == "pending" for o in response.json())


def test_order_detail(client, user, products, auth_headers):
    headers = auth_headers(user)
    order_id = place_order(client, headers, [(products[0].id, 2), (products[1].id, 1)])

    response = client.get(f"{ORDERS_URL}/{order_id}", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 39.97
    assert [(i["product_id"], i["quantity"], i["price"]) for i in body["items"]] == [
        (products[0].id, 2, 9.99),
        (products[1].id, 1, 19.99),
    ]
    assert body["items"][0]["line_total"] == 19.98


def test_cannot_see_other_users_order(client, user, make_user, products, auth_headers):
    order_id = place_order(client, auth_headers(user), [(products[0].id, 1)])
    other = make_user(email="other@example.com")

    response = client.get(f"{ORDERS_URL}/{order_id}", headers=auth_headers(other))

    assert response.status_code == 404
    assert client.get(ORDERS_URL, headers=auth_headers(other)).json() == []


def test_orders_require_token(client):
    assert client.get(ORDERS_URL).status_code == 401
