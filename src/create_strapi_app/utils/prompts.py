from typing import Any, Optional, Sequence, Tuple

import click


def style(text: str, fg: Optional[str] = None, bold: bool = False, italic: bool = False) -> str:
    return click.style(text=text, fg=fg, bold=bold, italic=italic)


def ask(text: str, default: Optional[str] = None) -> str:
    return click.prompt(
        text=style(text=f"? {text}", fg="white", bold=True),
        default=default,
        type=str
    )


def select(text: str, choices: Sequence[Tuple[str, Any]], default: int = 1) -> Any:
    """Выводит нумерованный список и возвращает значение выбранного пункта."""
    click.echo(style(f"? {text}", fg="white", bold=True))

    # выводим список вариантов
    for i, (name, _) in enumerate(choices, start=1):
        click.echo(style(text=f"  {i}. {name}", fg="cyan", italic=True))

    while True:
        choice: int = click.prompt(
            text=style("Enter the option number", fg="green", bold=True),
            type=int,
            default=default,
            show_default=True
        )
        if 1 <= choice <= len(choices):
            return choices[choice - 1][1]
        click.secho("❌ Invalid choice! Enter a number from the list.", fg="red")
