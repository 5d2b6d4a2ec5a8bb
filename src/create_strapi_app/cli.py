from typing import Callable, Optional

import click

from create_strapi_app.core import generator as generators
from create_strapi_app.core.init_project import init_project
from create_strapi_app.core.project_options import ProjectOptions
from create_strapi_app.core.settings import Settings
from create_strapi_app.schemas.option_specs import HELP_FLAGS, OPTION_SPECS, VERSION_FLAGS


def _option_decorator(spec) -> Callable:
    if spec.inverted:
        return click.option(*spec.flags, f"no_{spec.name}", is_flag=True, default=False, help=spec.help)
    if spec.takes_value:
        return click.option(*spec.flags, spec.name, metavar=spec.metavar, default=None, help=spec.help)
    return click.option(*spec.flags, spec.name, is_flag=True, default=False, help=spec.help)


def project_options(func: Callable) -> Callable:
    """Навешивает на команду все опции из OPTION_SPECS."""
    for spec in reversed(OPTION_SPECS):
        func = _option_decorator(spec)(func)
    return func


@click.command(name="create-strapi-app", context_settings={"help_option_names": list(HELP_FLAGS)})
@click.version_option(None, *VERSION_FLAGS, package_name="create-strapi-app")
@click.argument("directory", required=False)
@project_options
def cli(directory: Optional[str], **flags):
    """create a new application"""
    for spec in OPTION_SPECS:
        if spec.inverted:
            flags[spec.name] = not flags.pop(f"no_{spec.name}")
    options = ProjectOptions(directory=directory, **flags)
    settings = Settings.from_env()
    init_project(directory, options, generators.generator_factory(settings), settings)


def main():
    cli()


if __name__ == "__main__":
    main()
