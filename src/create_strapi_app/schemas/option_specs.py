from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class OptionSpec:
    name: str                  # имя поля в ProjectOptions
    flags: Tuple[str, ...]     # флаги командной строки
    help: str
    metavar: Optional[str] = None   # опция принимает значение
    inverted: bool = False          # флаг выключает значение (--no-run)

    @property
    def takes_value(self) -> bool:
        return self.metavar is not None


OPTION_SPECS: Tuple[OptionSpec, ...] = (
    OptionSpec("run", ("--no-run",), "Do not start the application after it is created", inverted=True),
    OptionSpec("use_npm", ("--use-npm",), "Force usage of npm instead of yarn to create the project"),
    OptionSpec("debug", ("--debug",), "Display database connection error"),
    OptionSpec("quickstart", ("--quickstart",), "Quickstart app creation"),
    OptionSpec("skip_cloud", ("--skip-cloud",), "Skip cloud login and project creation"),
    OptionSpec("dbclient", ("--dbclient",), "Database client", metavar="DBCLIENT"),
    OptionSpec("dbhost", ("--dbhost",), "Database host", metavar="DBHOST"),
    OptionSpec("dbport", ("--dbport",), "Database port", metavar="DBPORT"),
    OptionSpec("dbname", ("--dbname",), "Database name", metavar="DBNAME"),
    OptionSpec("dbusername", ("--dbusername",), "Database username", metavar="DBUSERNAME"),
    OptionSpec("dbpassword", ("--dbpassword",), "Database password", metavar="DBPASSWORD"),
    OptionSpec("dbssl", ("--dbssl",), "Database SSL", metavar="DBSSL"),
    OptionSpec("dbfile", ("--dbfile",), "Database file path for sqlite", metavar="DBFILE"),
    OptionSpec("dbforce", ("--dbforce",), "Overwrite database content if any"),
    OptionSpec("template", ("--template",), "Specify a Strapi template", metavar="TEMPLATEURL"),
    OptionSpec("typescript", ("--ts", "--typescript"), "Use TypeScript to generate the project"),
)

DATABASE_OPTIONS: Tuple[str, ...] = (
    "dbclient",
    "dbhost",
    "dbport",
    "dbname",
    "dbusername",
    "dbpassword",
    "dbssl",
    "dbfile",
)

VERSION_FLAGS = ("-V", "--version")
HELP_FLAGS = ("-h", "--help")


def program_flags() -> List[str]:
    """Все флаги команды: опции из OPTION_SPECS плюс --version и --help."""
    flags: List[str] = []
    for spec in OPTION_SPECS:
        flags.extend(spec.flags)
    flags.extend(VERSION_FLAGS)
    flags.extend(HELP_FLAGS)
    return flags
