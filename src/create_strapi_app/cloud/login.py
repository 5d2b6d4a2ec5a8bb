from dataclasses import dataclass

import click

from create_strapi_app.cloud import api, tokens
from create_strapi_app.cloud.logger import CloudLogger
from create_strapi_app.core.settings import Settings
from create_strapi_app.utils.prompts import style


@dataclass
class CliContext:
    logger: CloudLogger
    settings: Settings


async def _verify(ctx: CliContext, token: str) -> bool:
    try:
        await api.cloud_api_factory(ctx.settings, token).user_info()
    except api.CloudApiError as e:
        ctx.logger.debug(e)
        return False
    return True


async def login_action(ctx: CliContext) -> bool:
    """
    Вход в Strapi Cloud.
    Если сохранённый токен ещё принимается API — используем его,
    иначе просим вставить новый токен и сохраняем его после проверки.
    """
    token_service = tokens.token_service_factory(ctx)
    stored = token_service.retrieve_token()
    if stored:
        if await _verify(ctx, stored):
            ctx.logger.log("You are already logged into your account.")
            return True
        ctx.logger.debug("Stored token was rejected, asking for a new one")
        token_service.erase_token()

    ctx.logger.log(f"Create an access token at {click.style(ctx.settings.cloud_token_url, fg='blue', underline=True)}")
    # блокирующий ввод внутри корутины, других задач в цикле нет
    token: str = click.prompt(
        text=style(text="? Paste your Strapi Cloud token", fg="white", bold=True),
        hide_input=True,
        default="",
        show_default=False,
        type=str
    )
    token = token.strip()
    if not token:
        ctx.logger.warn("Login cancelled.")
        return False

    if not await _verify(ctx, token):
        ctx.logger.error("There seems to be a problem with your login information. Please try logging in again.")
        return False

    token_service.save_token(token)
    ctx.logger.success("Log in successful.")
    return True
