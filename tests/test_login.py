from unittest.mock import AsyncMock, MagicMock

import pytest

from create_strapi_app.cloud import api, login
from create_strapi_app.cloud.api import CloudApiError, CloudResponse
from create_strapi_app.cloud.logger import create_logger
from create_strapi_app.cloud.tokens import TokenService


@pytest.fixture
def user_info(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    mock = AsyncMock(return_value=CloudResponse(status=200, data={"email": "dev@example.com"}))
    service = MagicMock()
    service.user_info = mock
    monkeypatch.setattr(api, "cloud_api_factory", lambda settings, token=None: service)
    return mock


@pytest.fixture
def ctx(settings) -> login.CliContext:
    return login.CliContext(logger=create_logger(), settings=settings)


@pytest.mark.asyncio
async def test_stored_valid_token_is_reused(ctx, settings, user_info, prompt_answers) -> None:
    TokenService(settings).save_token("stored")

    assert await login.login_action(ctx) is True
    user_info.assert_awaited_once()


@pytest.mark.asyncio
async def test_pasted_token_is_verified_and_saved(ctx, settings, user_info, prompt_answers) -> None:
    prompt_answers.append("  fresh  ")

    assert await login.login_action(ctx) is True
    assert TokenService(settings).retrieve_token() == "fresh"


@pytest.mark.asyncio
async def test_rejected_stored_token_is_replaced(ctx, settings, user_info, prompt_answers) -> None:
    TokenService(settings).save_token("stale")
    user_info.side_effect = [CloudApiError(CloudResponse(status=401, data="expired")), user_info.return_value]
    prompt_answers.append("fresh")

    assert await login.login_action(ctx) is True
    assert TokenService(settings).retrieve_token() == "fresh"


@pytest.mark.asyncio
async def test_empty_input_cancels_login(ctx, settings, user_info, prompt_answers) -> None:
    prompt_answers.append("")

    assert await login.login_action(ctx) is False
    user_info.assert_not_awaited()


@pytest.mark.asyncio
async def test_rejected_token_is_not_saved(ctx, settings, user_info, prompt_answers, capsys) -> None:
    user_info.side_effect = CloudApiError(CloudResponse(status=401, data="bad token"))
    prompt_answers.append("wrong")

    assert await login.login_action(ctx) is False
    assert TokenService(settings).retrieve_token() is None
    assert "problem with your login information" in capsys.readouterr().err
