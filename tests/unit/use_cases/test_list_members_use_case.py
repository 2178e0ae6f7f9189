import pytest

from src.app.use_cases.users import ListMembersUseCase


@pytest.mark.asyncio
async def test_list_members_uses_offset(mock_uow, make_user):
    mock_uow.users.get_members_paginated.return_value = ([make_user("Alice", roles=["OWNER"])], 11)

    result = await ListMembersUseCase(mock_uow).execute(page=2, limit=10)

    assert result.is_ok()
    assert result.value.pagination.pages == 2
    mock_uow.users.get_members_paginated.assert_called_once_with(offset=10, limit=10)
