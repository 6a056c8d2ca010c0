"""Signup and login.

Invariants:
    - Any signup failure is 400 with the same message
    - Unknown user and wrong password produce identical 401 responses
    - The password never appears in a response
"""

import pytest


@pytest.fixture
def user_payload():
    return {"userName": "asha", "password": "s3cret", "name": "Asha Verma"}


async def _sign_up(client, payload):
    res = await client.post("/signUp", json=payload)
    assert res.status_code == 201, res.text
    return res.json()


async def test_sign_up_returns_created_user(client, user_payload):
    res = await client.post("/signUp", json=user_payload)

    assert res.status_code == 201
    body = res.json()
    assert body["userName"] == "asha"
    assert body["name"] == "Asha Verma"
    assert "_id" in body
    assert "password" not in body


async def test_sign_up_stores_password_as_given(client, user_payload, fake_db):
    await _sign_up(client, user_payload)

    assert fake_db["users"].documents[0]["password"] == "s3cret"


async def test_sign_up_duplicate_user_name(client, user_payload):
    await _sign_up(client, user_payload)

    res = await client.post("/signUp", json=dict(user_payload, name="Someone Else"))

    assert res.status_code == 400
    assert res.json() == {"error": "Failed to create user"}


@pytest.mark.parametrize("field", ["userName", "password", "name"])
async def test_sign_up_missing_field(client, user_payload, field):
    del user_payload[field]

    res = await client.post("/signUp", json=user_payload)

    assert res.status_code == 400
    assert res.json() == {"error": "Failed to create user"}


async def test_sign_up_empty_field(client, user_payload):
    res = await client.post("/signUp", json=dict(user_payload, password=""))

    assert res.status_code == 400
    assert res.json() == {"error": "Failed to create user"}


async def test_sign_up_store_failure(failing_client, user_payload):
    res = await failing_client.post("/signUp", json=user_payload)

    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}


async def test_login_success(client, user_payload):
    created = await _sign_up(client, user_payload)

    res = await client.post("/login", json={"userName": "asha", "password": "s3cret"})

    assert res.status_code == 200
    assert res.json() == {
        "message": "Login successful",
        "userId": created["_id"],
        "name": "Asha Verma",
    }


async def test_login_failures_are_indistinguishable(client, user_payload):
    await _sign_up(client, user_payload)

    wrong_password = await client.post("/login", json={"userName": "asha", "password": "nope"})
    unknown_user = await client.post("/login", json={"userName": "ghost", "password": "s3cret"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {"error": "Invalid username or password"}


async def test_login_is_case_sensitive(client, user_payload):
    await _sign_up(client, user_payload)

    res = await client.post("/login", json={"userName": "asha", "password": "S3CRET"})

    assert res.status_code == 401


async def test_login_rejects_query_operators(client, user_payload):
    await _sign_up(client, user_payload)

    res = await client.post(
        "/login", json={"userName": {"$ne": ""}, "password": {"$ne": ""}},
    )

    assert res.status_code == 401


async def test_login_without_body(client):
    res = await client.post("/login")

    assert res.status_code == 401
    assert res.json() == {"error": "Invalid username or password"}


async def test_login_from_form_body(client, user_payload):
    await _sign_up(client, user_payload)

    res = await client.post("/login", data={"userName": "asha", "password": "s3cret"})

    assert res.status_code == 200


async def test_login_store_failure(failing_client):
    res = await failing_client.post("/login", json={"userName": "asha", "password": "s3cret"})

    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}
