"""Unit tests for LogoutUseCase."""

import pytest

from signin.application.usecase.auth import LogoutUseCase
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_logout(unit_env):
    use_case = await unit_env.get(LogoutUseCase)

    response = await use_case.execute()

    assert response.message == "Logged out successfully"
