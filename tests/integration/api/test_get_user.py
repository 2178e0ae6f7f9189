from uuid import uuid4

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_get_user(client: AsyncClient, seeded_directory):
    dave = seeded_directory["dave@example.com"]

    response = await client.get(f"/users/{dave.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "dave@example.com"
    assert sorted(m["role"] for m in data["memberships"]) == ["MEMBER", "VIEWER"]
    assert [team["name"] for team in data["teams"]] == ["Alpha", "Beta"]
    assert "createdAt" in data
    assert "updatedAt" in data


@pytest.mark.asyncio
async def test_get_user_without_memberships(client: AsyncClient, seeded_directory):
    frank = seeded_directory["frank@example.com"]

    response = await client.get(f"/users/{frank.id}")

    assert response.status_code == 200
    assert response.json()["memberships"] == []


@pytest.mark.asyncio
async def test_get_unknown_user(client: AsyncClient, seeded_directory):
    response = await client.get(f"/users/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_user_malformed_id(client: AsyncClient):
    response = await client.get("/users/not-a-uuid")

    assert response.status_code == 422
