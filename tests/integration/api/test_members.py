import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_members(client: AsyncClient, seeded_directory):
    response = await client.get("/users/members?limit=5")

    assert response.status_code == 200
    data = response.json()
    assert len(data["data"]) == 5
    assert data["pagination"] == {"total": 6, "page": 1, "limit": 5, "pages": 2}
    assert "frank@example.com" not in [m["email"] for m in data["data"]]


@pytest.mark.asyncio
async def test_list_members_last_page(client: AsyncClient, seeded_directory):
    response = await client.get("/users/members?page=2&limit=5")

    assert len(response.json()["data"]) == 1
