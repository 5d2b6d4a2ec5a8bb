import logging
from typing import Any, Optional

import click
from rich.console import Console
from rich.status import Status

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LEVEL_STYLES = {
    logging.DEBUG: {"fg": "cyan"},
    SUCCESS: {"fg": "green"},
    logging.WARNING: {"fg": "yellow"},
    logging.ERROR: {"fg": "red", "bold": True},
}


class ClickHandler(logging.Handler):
    """Выводит записи лога через click с цветом по уровню."""

    def emit(self, record: logging.LogRecord):
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        style = LEVEL_STYLES.get(record.levelno, {})
        click.secho(message, err=record.levelno >= logging.WARNING, **style)


class Spinner:
    def __init__(self, text: str, console: Optional[Console] = None):
        self.text = text
        self._status = Status(text, console=console or Console(stderr=True))
        self._spinning = False

    @property
    def is_spinning(self) -> bool:
        return self._spinning

    def start(self):
        self._status.start()
        self._spinning = True

    def _stop(self):
        if self._spinning:
            self._status.stop()
            self._spinning = False

    def succeed(self, text: Optional[str] = None):
        self._stop()
        click.secho(f"✔ {text or self.text}", fg="green")

    def fail(self, text: Optional[str] = None):
        self._stop()
        click.secho(f"✖ {text or self.text}", fg="red", err=True)


class CloudLogger:
    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def log(self, *args: Any):
        self._logger.info(" ".join(str(a) for a in args))

    def debug(self, *args: Any):
        self._logger.debug(" ".join(str(a) for a in args))

    def success(self, *args: Any):
        self._logger.log(SUCCESS, " ".join(str(a) for a in args))

    def warn(self, *args: Any):
        self._logger.warning(" ".join(str(a) for a in args))

    def error(self, *args: Any):
        self._logger.error(" ".join(str(a) for a in args))

    @staticmethod
    def spinner(text: str) -> Spinner:
        return Spinner(text)


def create_logger(silent: bool = False, debug: bool = False, timestamp: bool = False) -> CloudLogger:
    logger = logging.getLogger("create_strapi_app.cloud")
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = ClickHandler()
    fmt = "[%(asctime)s] %(message)s" if timestamp else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
    logger.addHandler(handler)

    if silent:
        logger.setLevel(logging.CRITICAL + 1)
    elif debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    return CloudLogger(logger)
