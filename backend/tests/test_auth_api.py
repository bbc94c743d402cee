"""
Hauge API — /auth Endpoint Tests
=================================

What we test:
    ✅ Register returns a token that unlocks the new account
    ✅ Duplicate registration is a conflict
    ✅ Login with right and wrong credentials
"""

import pytest

STRONG_PASSWORD = "Str0ng!pw"


async def _register(client, username="alice", email="a@b.com", password=STRONG_PASSWORD):
    return await client.post(
        "/auth/register",
        json={"username": username, "email": email, "password": password},
    )


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_then_patch_own_account(self, test_client):
        response = await _register(test_client)

        assert response.status_code == 201
        body = response.json()
        user_id = body["user"]["id"]
        assert body["user"] == {"id": user_id, "username": "alice", "email": "a@b.com"}

        patched = await test_client.patch(
            f"/users/{user_id}",
            json={"username": "alicia"},
            headers={"Authorization": f"Bearer {body['token']}"},
        )
        assert patched.status_code == 200
        assert patched.json()["username"] == "alicia"

    @pytest.mark.asyncio
    async def test_register_duplicate(self, test_client):
        await _register(test_client)

        response = await _register(test_client, username="other")

        assert response.status_code == 409
        assert response.json() == {"error": "Email or username already in use"}

    @pytest.mark.asyncio
    async def test_register_weak_password(self, test_client):
        response = await _register(test_client, password="password")

        assert response.status_code == 400
        assert response.json()["details"] == [
            "Password must be at least 8 characters long and include uppercase, "
            "lowercase, number, and a special character"
        ]


class TestLogin:

    @pytest.mark.asyncio
    async def test_login(self, test_client, token_codec):
        registered = (await _register(test_client)).json()

        response = await test_client.post(
            "/auth/login", json={"email": "a@b.com", "password": STRONG_PASSWORD}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["user"] == registered["user"]
        assert token_codec.verify(body["token"]) == registered["user"]["id"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email, password", [
        ("a@b.com", "Wr0ng!pw"),
        ("nobody@b.com", STRONG_PASSWORD),
    ])
    async def test_bad_credentials(self, test_client, email, password):
        await _register(test_client)

        response = await test_client.post(
            "/auth/login", json={"email": email, "password": password}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid email or password"}

    @pytest.mark.asyncio
    async def test_user_without_password_cannot_login(self, test_client):
        await test_client.post("/users", json={"username": "alice", "email": "a@b.com"})

        response = await test_client.post(
            "/auth/login", json={"email": "a@b.com", "password": STRONG_PASSWORD}
        )

        assert response.status_code == 401
