import os
from pathlib import Path
from typing import Mapping, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CLOUD_API_URL = "https://cloud-cli-api.strapi.io"
DEFAULT_CLOUD_TOKEN_URL = "https://cloud.strapi.io/profile/tokens"
DEFAULT_GENERATOR_COMMAND = "strapi-generate-new"


class Settings(BaseModel):
    cloud_api_url: str = Field(alias="STRAPI_CLOUD_API_URL", default=DEFAULT_CLOUD_API_URL)
    cloud_token_url: str = Field(alias="STRAPI_CLOUD_TOKEN_URL", default=DEFAULT_CLOUD_TOKEN_URL)
    config_dir: Path = Field(
        alias="STRAPI_CONFIG_DIR",
        default_factory=lambda: Path(user_config_dir("strapi"))
    )
    generator_command: str = Field(alias="STRAPI_GENERATOR_COMMAND", default=DEFAULT_GENERATOR_COMMAND)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Собирает настройки из переменных окружения STRAPI_*."""
        environ = os.environ if environ is None else environ
        data = {
            field.alias: environ[field.alias]
            for field in cls.model_fields.values()
            if field.alias and environ.get(field.alias)
        }
        return cls.model_validate(data)
