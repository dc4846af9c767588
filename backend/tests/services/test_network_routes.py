"""Network Routes — HTTP contract for connections, network value and analytics."""

from uuid import uuid4


async def test_create_connection_returns_201(client, users):
    res = await client.post(
        f"/api/v1/users/{users.alice}/connections",
        json={"connected_user_id": str(users.bob)},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["user_id"] == str(users.alice)
    assert body["connected_user_id"] == str(users.bob)
    assert body["value"] == 3.14


async def test_duplicate_connection_returns_409(client, users):
    url = f"/api/v1/users/{users.alice}/connections"
    await client.post(url, json={"connected_user_id": str(users.bob)})

    res = await client.post(
        f"/api/v1/users/{users.bob}/connections",
        json={"connected_user_id": str(users.alice)},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CONNECTION_EXISTS"
    assert res.json()["error"]["message"] == "Connection already exists"


async def test_self_connection_returns_400(client, users):
    res = await client.post(
        f"/api/v1/users/{users.alice}/connections",
        json={"connected_user_id": str(users.alice)},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_unknown_user_returns_404(client, users):
    res = await client.post(
        f"/api/v1/users/{users.alice}/connections",
        json={"connected_user_id": str(uuid4())},
    )
    assert res.status_code == 404


async def test_malformed_body_returns_400(client, users):
    res = await client.post(
        f"/api/v1/users/{users.alice}/connections",
        json={"connected_user_id": "not-a-uuid"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.connected_user_id"


async def test_delete_connection_returns_204(client, users):
    await client.post(
        f"/api/v1/users/{users.alice}/connections",
        json={"connected_user_id": str(users.bob)},
    )

    res = await client.delete(
        f"/api/v1/users/{users.bob}/connections/{users.alice}",
    )
    assert res.status_code == 204

    listing = await client.get(f"/api/v1/users/{users.alice}/connections")
    assert listing.json()["total"] == 0


async def test_delete_missing_connection_returns_404(client, users):
    res = await client.delete(
        f"/api/v1/users/{users.alice}/connections/{users.bob}",
    )
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "CONNECTION_NOT_FOUND"


async def test_list_connections_paginated(client, users):
    for other in (users.bob, users.carol):
        await client.post(
            f"/api/v1/users/{users.alice}/connections",
            json={"connected_user_id": str(other)},
        )

    res = await client.get(
        f"/api/v1/users/{users.alice}/connections", params={"page": 1, "limit": 1},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 2
    assert body["total_pages"] == 2
    assert len(body["items"]) == 1


async def test_list_connections_limit_capped(client, users):
    res = await client.get(
        f"/api/v1/users/{users.alice}/connections", params={"limit": 101},
    )
    assert res.status_code == 400


async def test_network_value(client, users):
    await client.post(
        f"/api/v1/users/{users.alice}/connections",
        json={"connected_user_id": str(users.bob)},
    )
    res = await client.get(f"/api/v1/users/{users.alice}/network/value")
    assert res.status_code == 200
    assert res.json() == {"user_id": str(users.alice), "network_value": 3.14}


async def test_network_analytics(client, users):
    await client.post(
        f"/api/v1/users/{users.alice}/connections",
        json={"connected_user_id": str(users.bob)},
    )
    res = await client.get(f"/api/v1/users/{users.alice}/network/analytics")
    assert res.status_code == 200
    body = res.json()
    assert body["network_size"] == 1
    assert body["network_value"] == 3.14
    assert body["growth_rate"] == 0.0
    assert len(body["connections"]) == 1
