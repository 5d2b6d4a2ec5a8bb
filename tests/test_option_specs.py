import pytest
from pydantic import ValidationError

from create_strapi_app.core.project_options import ProjectOptions
from create_strapi_app.core.settings import DEFAULT_CLOUD_API_URL, Settings
from create_strapi_app.schemas.option_specs import DATABASE_OPTIONS, OPTION_SPECS, program_flags


def test_program_flags_lists_every_declared_flag() -> None:
    flags = program_flags()

    for expected in ("--no-run", "--use-npm", "--quickstart", "--skip-cloud", "--template", "--ts", "--typescript"):
        assert expected in flags
    assert {"-V", "--version", "-h", "--help"} <= set(flags)
    assert len(OPTION_SPECS) == 16


def test_dbforce_is_not_a_database_connection_option() -> None:
    assert "dbforce" not in DATABASE_OPTIONS
    assert len(DATABASE_OPTIONS) == 8


def test_database_flags_keep_declaration_order() -> None:
    options = ProjectOptions(dbport="5432", dbclient="postgres", dbforce=True)

    assert options.database_flags() == ["dbclient", "dbport"]
    assert options.has_database_options is True
    assert ProjectOptions(dbforce=True).has_database_options is False


def test_generator_options_use_camel_case_keys() -> None:
    payload = ProjectOptions(directory="myapp", skip_cloud=True, use_npm=True).to_generator_options()

    assert payload["directory"] == "myapp"
    assert payload["skipCloud"] is True
    assert payload["useNpm"] is True
    assert payload["run"] is True


def test_options_are_immutable() -> None:
    options = ProjectOptions(quickstart=True)

    with pytest.raises(ValidationError):
        options.quickstart = False
    assert options.model_copy(update={"quickstart": False}).quickstart is False


def test_settings_from_env(tmp_path) -> None:
    settings = Settings.from_env({
        "STRAPI_CONFIG_DIR": str(tmp_path),
        "STRAPI_GENERATOR_COMMAND": "npx strapi-generate",
        "STRAPI_CLOUD_API_URL": "",
    })

    assert settings.config_dir == tmp_path
    assert settings.generator_command == "npx strapi-generate"
    assert settings.cloud_api_url == DEFAULT_CLOUD_API_URL
