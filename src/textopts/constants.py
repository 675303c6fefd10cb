from enum import Enum

TRUE_VALUE: str = "true"
FALSE_VALUE: str = "false"

# Boolean options spelled with this prefix (in any case) are stored as false
NEGATION_PREFIX: str = "no"

ENV_PREFIX: str = "TEXTOPTS_"


class OutputFormat(str, Enum):
    """Enum for CLI output formats."""

    TEXT = "text"
    JSON = "json"


class ExitCode(int, Enum):
    """Process exit codes returned by the CLI."""

    OK = 0
    MISSING_OPTION = 1
    USAGE_ERROR = 2
