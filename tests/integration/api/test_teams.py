import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_teams_ordered_by_name(client: AsyncClient, seeded_directory):
    response = await client.get("/users/teams")

    assert response.status_code == 200
    teams = response.json()
    assert [team["name"] for team in teams] == ["Alpha", "Beta", "Gamma"]
    assert all(set(team) == {"id", "name"} for team in teams)


@pytest.mark.asyncio
async def test_no_teams(client: AsyncClient):
    response = await client.get("/users/teams")

    assert response.status_code == 200
    assert response.json() == []
