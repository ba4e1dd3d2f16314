"""Auth routes — signup/login scenarios and token lifetimes.

Invariants:
    - Second signup with the same email answers 400 EMAIL_TAKEN
    - Login with a wrong password answers 400; correct password yields a token
      that verifies to the signed-up user
    - Login tokens expire after one hour; signup tokens are unbounded by default
"""

import jwt

from storefront.config import Settings, get_settings
from storefront.infrastructure.token_service import TokenService


async def test_signup_returns_token(client):
    res = await client.post("/signup", json={
        "username": "alice", "email": "a@x.com", "password": "pw1",
    })
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    data = jwt.decode(body["token"], "test-secret", algorithms=["HS256"])
    assert "exp" not in data
    assert "id" in data["user"]


async def test_signup_duplicate_email(client, signup_token):
    res = await client.post("/signup", json={
        "username": "bob", "email": "a@x.com", "password": "pw2",
    })
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["errors"] == "Existing User With Same Email Id"
    assert body["error"]["code"] == "EMAIL_TAKEN"


async def test_signup_rejects_malformed_email(client):
    res = await client.post("/signup", json={
        "username": "alice", "email": "not-an-email", "password": "pw1",
    })
    assert res.status_code == 400
    assert res.json()["success"] is False


async def test_login_wrong_password(client, signup_token):
    res = await client.post("/login", json={"email": "a@x.com", "password": "wrong"})
    assert res.status_code == 400
    body = res.json()
    assert body["success"] is False
    assert body["errors"] == "Invalid Password"


async def test_login_unknown_email(client, signup_token):
    res = await client.post("/login", json={"email": "z@x.com", "password": "pw1"})
    assert res.status_code == 400
    assert res.json()["errors"] == "Invalid Email Id Please Register"


async def test_login_token_verifies_to_signed_up_user(client, signup_token):
    res = await client.post("/login", json={"email": "a@x.com", "password": "pw1"})

    assert res.status_code == 200
    login_token = res.json()["token"]
    tokens = TokenService("test-secret")
    assert tokens.verify(login_token) == tokens.verify(signup_token)

    data = jwt.decode(login_token, "test-secret", algorithms=["HS256"])
    assert data["exp"] - data["iat"] == 3600


async def test_uniform_login_errors_setting(app, client, signup_token):
    app.dependency_overrides[get_settings] = lambda: Settings(
        jwt_secret="test-secret", bcrypt_rounds=4, auth_uniform_login_errors=True,
    )

    wrong = await client.post("/login", json={"email": "a@x.com", "password": "wrong"})
    unknown = await client.post("/login", json={"email": "z@x.com", "password": "pw1"})

    assert wrong.status_code == unknown.status_code == 400
    assert wrong.json()["errors"] == unknown.json()["errors"]
    assert wrong.json()["error"]["code"] == "INVALID_CREDENTIALS"
