import logging
import time

import pytest

from juice_bar_api.app.core.events import JUICE_ADDED, ORDER_CREATED
from juice_bar_api.app.gql.schema import schema


def run(client, query, variables=None):
    response = client.post("/graphql", json={"query": query, "variables": variables or {}})
    assert response.status_code == 200
    return response.json()


def test_juices_query(client):
    body = run(client, "{ juices { id name price inStock imageUrl } }")

    juices = body["data"]["juices"]
    assert len(juices) == 5
    assert juices[3] == {
        "id": "4",
        "name": "Carrot Boost",
        "price": 4.49,
        "inStock": False,
        "imageUrl": "./images/look.jpg",
    }


def test_juice_by_id(client):
    body = run(client, 'query { found: juice(id: "3") { name } missing: juice(id: "99") { name } }')

    assert body["data"] == {"found": {"name": "Berry Blast"}, "missing": None}
    assert "errors" not in body


def test_juices_by_category(client):
    body = run(client, '{ juicesByCategory(category: "Fruit") { name } }')
    assert [j["name"] for j in body["data"]["juicesByCategory"]] == ["Orange Juice", "Pineapple Paradise"]


def test_search_juices(client):
    body = run(client, '{ searchJuices(query: "berry") { name } }')
    names = [j["name"] for j in body["data"]["searchJuices"]]
    assert "Berry Blast" in names
    assert "Orange Juice" not in names


def test_orders_resolve_juices(client):
    body = run(client, "{ orders { id customerName status createdAt juices { name } } }")

    first, second = body["data"]["orders"]
    assert first["customerName"] == "Pavan"
    assert first["status"] == "completed"
    assert first["createdAt"].startswith("2024-01-15")
    assert [j["name"] for j in first["juices"]] == ["Orange Juice", "Green Detox"]
    assert [j["name"] for j in second["juices"]] == ["Berry Blast"]


def test_order_by_id(client):
    body = run(client, '{ order(id: "2") { customerName total } missing: order(id: "9") { id } }')
    assert body["data"]["order"] == {"customerName": "Sunny", "total": 6.99}
    assert body["data"]["missing"] is None


def test_create_juice_mutation(client):
    body = run(
        client,
        """
        mutation Create($input: JuiceInput!) {
          createJuice(input: $input) { id name description category inStock imageUrl price }
        }
        """,
        {"input": {"name": "Watermelon Cooler", "price": 5.5}},
    )

    created = body["data"]["createJuice"]
    assert created == {
        "id": "6",
        "name": "Watermelon Cooler",
        "description": "",
        "category": "Fruit",
        "inStock": True,
        "imageUrl": "./images/first.jpg",
        "price": 5.5,
    }
    assert client.get("/api/juices/6").json()["name"] == "Watermelon Cooler"


def test_update_juice_mutation_keeps_omitted_fields(client):
    body = run(client, 'mutation { updateJuice(id: "1", input: {price: 3.25}) { name price category } }')
    assert body["data"]["updateJuice"] == {"name": "Orange Juice", "price": 3.25, "category": "Fruit"}


def test_update_missing_juice_is_an_error(client, caplog):
    with caplog.at_level(logging.ERROR, logger="juice_bar_api.app.gql.schema"):
        body = run(client, 'mutation { updateJuice(id: "99", input: {name: "Ghost"}) { id } }')

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Juice not found"
    assert "Juice not found" in caplog.text


def test_delete_juice_mutation(client):
    body = run(client, 'mutation { deleteJuice(id: "5") }')
    assert body["data"] == {"deleteJuice": True}

    again = run(client, 'mutation { deleteJuice(id: "5") }')
    assert again["errors"][0]["message"] == "Juice not found"


def test_create_order_mutation(client):
    body = run(
        client,
        """
        mutation {
          createOrder(input: {customerName: "Test", items: ["1", "3", "42"]}) {
            id total status items juices { id }
          }
        }
        """,
    )

    order = body["data"]["createOrder"]
    assert order["id"] == "3"
    assert order["total"] == pytest.approx(11.98)
    assert order["status"] == "pending"
    assert order["items"] == ["1", "3", "42"]
    assert [j["id"] for j in order["juices"]] == ["1", "3"]


def test_update_order_status_mutation(client):
    body = run(client, 'mutation { updateOrderStatus(id: "2", status: "shipped") { status } }')
    assert body["data"]["updateOrderStatus"] == {"status": "shipped"}
    assert client.get("/api/orders/2").json()["status"] == "shipped"

    missing = run(client, 'mutation { updateOrderStatus(id: "9", status: "shipped") { status } }')
    assert missing["errors"][0]["message"] == "Order not found"


def test_invalid_input_is_reported(client):
    body = run(client, 'mutation { createJuice(input: {name: "", price: 1}) { id } }')
    assert body["data"] is None
    assert "Name must not be blank" in body["errors"][0]["message"]


def test_schema_declares_subscriptions():
    sdl = schema.as_str()
    assert "juiceAdded: Juice!" in sdl
    assert "orderCreated: Order!" in sdl
    assert "updateJuice(id: ID!, input: JuiceUpdateInput!): Juice!" in sdl


def wait_until(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not condition():
        if time.monotonic() > deadline:
            raise AssertionError("condition not met within %.1fs" % timeout)
        time.sleep(0.01)


def test_juice_added_streams_over_graphql_transport_ws(client, broker):
    with client.websocket_connect("/graphql", subprotocols=["graphql-transport-ws"]) as ws:
        ws.send_json({"type": "connection_init"})
        assert ws.receive_json()["type"] == "connection_ack"
        ws.send_json(
            {
                "id": "1",
                "type": "subscribe",
                "payload": {"query": "subscription { juiceAdded { id name price inStock } }"},
            }
        )
        wait_until(lambda: broker.subscriber_count(JUICE_ADDED) == 1)

        client.post("/api/juices", json={"name": "Sub", "price": 2.5})

        message = ws.receive_json()
        assert message["type"] == "next"
        assert message["id"] == "1"
        assert message["payload"]["data"] == {
            "juiceAdded": {"id": "6", "name": "Sub", "price": 2.5, "inStock": True}
        }
        ws.send_json({"id": "1", "type": "complete"})

    wait_until(lambda: broker.subscriber_count(JUICE_ADDED) == 0)


def test_subscription_released_when_client_disconnects(client, broker):
    with client.websocket_connect("/graphql", subprotocols=["graphql-transport-ws"]) as ws:
        ws.send_json({"type": "connection_init"})
        assert ws.receive_json()["type"] == "connection_ack"
        ws.send_json({"id": "1", "type": "subscribe", "payload": {"query": "subscription { juiceAdded { id } }"}})
        wait_until(lambda: broker.subscriber_count(JUICE_ADDED) == 1)

    wait_until(lambda: broker.subscriber_count(JUICE_ADDED) == 0)
    assert broker.publish(JUICE_ADDED, object()) == 0


def test_order_created_streams_over_graphql_ws(client, broker):
    with client.websocket_connect("/graphql", subprotocols=["graphql-ws"]) as ws:
        ws.send_json({"type": "connection_init"})
        assert ws.receive_json()["type"] == "connection_ack"
        ws.send_json(
            {
                "id": "7",
                "type": "start",
                "payload": {"query": "subscription { orderCreated { customerName total juices { name } } }"},
            }
        )
        wait_until(lambda: broker.subscriber_count(ORDER_CREATED) == 1)

        run(client, 'mutation { createOrder(input: {customerName: "Eve", items: ["3", "99"]}) { id } }')

        message = ws.receive_json()
        assert message["type"] == "data"
        assert message["id"] == "7"
        order = message["payload"]["data"]["orderCreated"]
        assert order["customerName"] == "Eve"
        assert order["total"] == pytest.approx(6.99)
        assert order["juices"] == [{"name": "Berry Blast"}]
        ws.send_json({"id": "7", "type": "stop"})

    wait_until(lambda: broker.subscriber_count(ORDER_CREATED) == 0)
