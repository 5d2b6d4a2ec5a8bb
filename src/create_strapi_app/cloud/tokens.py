from pathlib import Path
from typing import Optional

from create_strapi_app.core.settings import Settings
from create_strapi_app.utils.toml_builder import read_toml, update_toml

CONFIG_FILENAME = "config.toml"


class TokenService:
    def __init__(self, settings: Settings):
        self.config_path: Path = Path(settings.config_dir) / CONFIG_FILENAME

    def retrieve_token(self) -> Optional[str]:
        token = read_toml(self.config_path).get("token")
        return token or None

    def save_token(self, token: str):
        update_toml(self.config_path, {"token": token})

    def erase_token(self):
        update_toml(self.config_path, remove=("token",))


def token_service_factory(ctx) -> TokenService:
    return TokenService(ctx.settings)
