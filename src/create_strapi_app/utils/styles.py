import re
from typing import Any, Dict

import click

# Разметка вида {green}текст{/green} из introText облачного API
SUPPORTED_STYLES: Dict[str, Dict[str, Any]] = {
    "magentaBright": {"fg": "bright_magenta"},
    "blueBright": {"fg": "bright_blue"},
    "yellowBright": {"fg": "bright_yellow"},
    "green": {"fg": "green"},
    "red": {"fg": "red"},
    "bold": {"bold": True},
    "italic": {"italic": True},
}


def parse_to_style(template: str) -> str:
    """Заменяет теги поддерживаемых стилей на click.style, остальное не трогает."""
    result = template
    for name, style in SUPPORTED_STYLES.items():
        pattern = re.compile(r"\{%s\}(.*?)\{/%s\}" % (name, name))
        result = pattern.sub(lambda m, s=style: click.style(m.group(1).strip(), **s), result)
    return result
