import json
import shlex
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

import click

from create_strapi_app.core.settings import Settings


class ProjectGenerator(ABC):
    """Внешний генератор проекта: проверки перед запуском и сама генерация."""

    @staticmethod
    def check_install_path(path: Union[str, Path]):
        root = Path(path)
        if not root.exists():
            return
        if not root.is_dir():
            click.secho(f"⛔️ {root} is not a directory. Make sure to create a Strapi application in an empty directory.", fg="red", err=True)
            sys.exit(1)
        if any(root.iterdir()):
            click.secho(
                message=f"⛔️ You can only create a Strapi app in an empty directory.\n"
                        f"Make sure {click.style(str(root), fg='green')} is empty.",
                fg="red",
                err=True
            )
            sys.exit(1)

    @abstractmethod
    def check_requirements(self):
        raise NotImplementedError

    @abstractmethod
    def generate_new_app(self, project_name: str, options: Dict[str, Any]):
        raise NotImplementedError


class CommandGenerator(ProjectGenerator):
    def __init__(self, command: Union[str, List[str]]):
        self.command = shlex.split(command) if isinstance(command, str) else list(command)

    def check_requirements(self):
        if shutil.which(self.command[0]) is None:
            click.secho(
                message=f"⛔️ Project generator `{self.command[0]}` was not found in PATH.",
                fg="red",
                err=True
            )
            sys.exit(1)

    def generate_new_app(self, project_name: str, options: Dict[str, Any]):
        cmd = [*self.command, project_name, "--options", json.dumps(options)]
        subprocess.run(cmd, check=True)


def generator_factory(settings: Settings) -> ProjectGenerator:
    return CommandGenerator(settings.generator_command)
