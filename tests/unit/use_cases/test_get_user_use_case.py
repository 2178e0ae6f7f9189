from uuid import uuid4

import pytest

from src.app.use_cases.users import GetUserUseCase


@pytest.mark.asyncio
async def test_get_user(mock_uow, make_user):
    user = make_user("Dave", roles=["VIEWER"], guest_roles=["MEMBER"], teams=["Alpha"])
    user.id = uuid4()
    mock_uow.users.get_by_id.return_value = user

    result = await GetUserUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    detail = result.value
    assert detail.id == str(user.id)
    assert [(m.role, m.is_guest) for m in detail.memberships] == [
        ("VIEWER", False),
        ("MEMBER", True),
    ]
    assert [team.name for team in detail.teams] == ["Alpha"]


@pytest.mark.asyncio
async def test_user_not_found(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await GetUserUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
