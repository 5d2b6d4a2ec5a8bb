from typing import Optional

from pydantic import BaseModel

from create_strapi_app.core.project_options import ProjectOptions
from create_strapi_app.utils.prompts import ask, select

DEFAULT_DIRECTORY = "my-strapi-project"

INSTALLATION_TYPES = [
    ("Quickstart (recommended)", True),
    ("Custom (manual settings)", False),
]


class PromptAnswers(BaseModel):
    directory: Optional[str] = None
    quick: Optional[bool] = None


def prompt_user(
        project_name: Optional[str],
        options: ProjectOptions,
        has_database_options: bool
) -> PromptAnswers:
    answers = PromptAnswers()
    if not project_name:
        answers.directory = ask(
            text="What would you like to name your project?",
            default=DEFAULT_DIRECTORY
        )
    if not options.quickstart and not has_database_options:
        answers.quick = select(
            text="Choose your installation type",
            choices=INSTALLATION_TYPES
        )
    return answers
