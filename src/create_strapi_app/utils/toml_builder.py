from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Union

import toml


def write_toml(filename: Union[str, Path], data: Mapping[str, Any]):
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(toml.dumps(data), encoding="utf-8")


def read_toml(filename: Union[str, Path]) -> Dict[str, Any]:
    """Содержимое toml-файла или пустой словарь, если файла нет."""
    path = Path(filename)
    if not path.is_file():
        return {}
    return toml.loads(path.read_text(encoding="utf-8"))


def update_toml(
        filename: Union[str, Path],
        changes: Mapping[str, Any] = None,
        remove: Iterable[str] = ()
):
    """Обновляет ключи верхнего уровня и удаляет перечисленные в remove."""
    data = read_toml(filename)
    data.update(changes or {})
    for key in remove:
        data.pop(key, None)
    write_toml(filename, data)
