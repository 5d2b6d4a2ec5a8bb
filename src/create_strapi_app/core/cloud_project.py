from pathlib import Path

from create_strapi_app.cloud import api, local, login, tokens
from create_strapi_app.cloud.logger import create_logger
from create_strapi_app.core.settings import Settings
from create_strapi_app.utils.prompts import select
from create_strapi_app.utils.styles import parse_to_style

DEFAULT_ERROR_MESSAGE = (
    "An error occurred while trying to interact with Strapi Cloud. "
    "Use strapi deploy command once the project is generated."
)
FORBIDDEN_MESSAGE = "We are sorry, but we are not able to create a Strapi Cloud project for you at the moment."

LOGIN_CHOICES = [
    ("Login/Sign up", True),
    ("Skip", False),
]

DEFAULT_PROJECT_VALUES = {
    "nodeVersion": "20",
    "region": "NYC",
    "plan": "trial",
}


async def handle_cloud_project(project_name: str, settings: Settings, debug: bool = False):
    logger = create_logger(silent=False, debug=debug, timestamp=False)
    cloud_api = api.cloud_api_factory(settings)

    try:
        config = (await cloud_api.config()).data
        logger.log(parse_to_style(config["projectCreation"]["introText"]))
    except Exception as e:
        logger.debug(e)
        logger.error(DEFAULT_ERROR_MESSAGE)
        return

    # вопросы блокируют цикл событий: параллельных задач в этом потоке нет
    if not select(text="Please log in or sign up.", choices=LOGIN_CHOICES):
        return

    ctx = login.CliContext(logger=logger, settings=settings)
    spinner = logger.spinner("Creating project on Strapi Cloud")
    try:
        token_service = tokens.token_service_factory(ctx)
        if not await login.login_action(ctx):
            return

        logger.debug("Retrieving token")
        token = token_service.retrieve_token()
        cloud_api = api.cloud_api_factory(settings, token)

        logger.debug("Retrieving config")
        config = (await cloud_api.config()).data
        logger.debug("config", config)
        defaults = (config.get("projectCreation") or {}).get("defaults") or {}
        logger.debug("default project values", defaults)

        spinner.start()
        project = (await cloud_api.create_project({
            **DEFAULT_PROJECT_VALUES,
            **defaults,
            "name": project_name
        })).data
        spinner.succeed("Project created on Strapi Cloud")

        project_path = Path(project_name).resolve()
        logger.debug(project, project_path)
        local.save({"project": project}, directory_path=project_path)
    except Exception as e:
        logger.debug(e)
        if isinstance(e, api.CloudApiError) and e.response.status == 403:
            data = e.response.data
            message = data if isinstance(data, str) and data else FORBIDDEN_MESSAGE
            if spinner.is_spinning:
                spinner.fail(message)
            else:
                logger.warn(message)
            return

        if spinner.is_spinning:
            spinner.fail(DEFAULT_ERROR_MESSAGE)
        else:
            logger.error(DEFAULT_ERROR_MESSAGE)
