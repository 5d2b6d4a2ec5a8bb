import asyncio
import sys
from pathlib import Path
from typing import Optional

import click

from create_strapi_app.core.cloud_project import handle_cloud_project
from create_strapi_app.core.generator import ProjectGenerator
from create_strapi_app.core.project_options import ProjectOptions
from create_strapi_app.core.prompt_user import prompt_user
from create_strapi_app.core.settings import Settings
from create_strapi_app.schemas.option_specs import DATABASE_OPTIONS, program_flags


def _fail(message: str):
    click.secho(message, fg="red", err=True)
    sys.exit(1)


def generate_app(
        project_name: Optional[str],
        options: ProjectOptions,
        generator: ProjectGenerator,
        settings: Settings
):
    if not project_name:
        _fail("Please specify the <directory> of your project when using --quickstart")

    if not options.skip_cloud:
        generator.check_requirements()
        asyncio.run(handle_cloud_project(project_name, settings, debug=options.debug))

    generator.generate_new_app(project_name, options.to_generator_options())
    if sys.platform == "win32":
        sys.exit(0)


def init_project(
        project_name: Optional[str],
        options: ProjectOptions,
        generator: ProjectGenerator,
        settings: Settings
):
    """
    Проверяет опции, при необходимости опрашивает пользователя
    и передаёт итоговые опции генератору.
    """
    if project_name:
        generator.check_install_path(Path(project_name).resolve())

    if options.template and options.template in program_flags():
        _fail(f"{options.template} is not a valid template")

    has_database_options = options.has_database_options
    if options.quickstart and has_database_options:
        _fail(
            "The quickstart option is incompatible with the following options: "
            f"{', '.join(DATABASE_OPTIONS)}"
        )

    if has_database_options:
        options = options.model_copy(update={"quickstart": False})

    if options.quickstart:
        return generate_app(project_name, options.model_copy(update={"directory": project_name}), generator, settings)

    answers = prompt_user(project_name, options, has_database_options)
    directory = answers.directory or project_name
    generator.check_install_path(Path(directory).resolve())

    options = options.model_copy(update={
        "directory": directory,
        "quickstart": bool(answers.quick or options.quickstart),
    })
    return generate_app(directory, options, generator, settings)
