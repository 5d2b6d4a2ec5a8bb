from pathlib import Path
from typing import Any, Dict, List, Tuple

import click
import pytest

from create_strapi_app.core.generator import ProjectGenerator
from create_strapi_app.core.settings import Settings


class FakeGenerator(ProjectGenerator):
    def __init__(self):
        self.install_paths: List[Path] = []
        self.requirements_checked = 0
        self.generated: List[Tuple[str, Dict[str, Any]]] = []

    def check_install_path(self, path):
        self.install_paths.append(Path(path))

    def check_requirements(self):
        self.requirements_checked += 1

    def generate_new_app(self, project_name, options):
        self.generated.append((project_name, options))


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        cloud_api_url="http://cloud.test",
        cloud_token_url="http://cloud.test/tokens",
        config_dir=tmp_path / "config",
    )


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def prompt_answers(monkeypatch: pytest.MonkeyPatch) -> List[Any]:
    """Ответы для click.prompt; пустой список означает, что вопросов быть не должно."""
    answers: List[Any] = []

    def fake_prompt(text: str = "", **kwargs: Any) -> Any:
        if not answers:
            raise AssertionError(f"prompted unexpectedly: {click.unstyle(text)}")
        return answers.pop(0)

    monkeypatch.setattr(click, "prompt", fake_prompt)
    return answers
