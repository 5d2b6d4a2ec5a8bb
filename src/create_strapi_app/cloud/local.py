from pathlib import Path
from typing import Any, Mapping, Union

from create_strapi_app.utils.toml_builder import write_toml

LOCAL_SAVE_FILENAME = ".strapi-cloud.toml"


def save(data: Mapping[str, Any], directory_path: Union[str, Path]):
    """Записывает описание облачного проекта в каталог приложения."""
    write_toml(Path(directory_path) / LOCAL_SAVE_FILENAME, data)
