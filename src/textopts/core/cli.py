"""
Command-line front end.

Joins its positional arguments (or reads standard input) into one option
string, parses it and prints the resulting store.
"""

import argparse
import json
import sys
from collections.abc import Sequence
from typing import TextIO

from textopts.constants import ExitCode, OutputFormat
from textopts.core.common.exceptions import (
    ConfigurationError,
    ParsingError,
    TextOptionsError,
)
from textopts.core.common.logging_utils import (
    configure_logging_with_environment_tagging,
    get_logger,
    parse_log_level,
)
from textopts.core.common.structlog_config import configure_structlog
from textopts.core.config.app_config import AppConfig, LogLevel, load_config
from textopts.core.repositories.option_store import OptionStore
from textopts.core.services.collection_expander import CollectionExpander
from textopts.core.services.option_formatter import format_options
from textopts.core.services.option_tokenizer import OptionTokenizer

logger = get_logger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textopts",
        description="Parse a space-delimited name=value option string",
    )
    parser.add_argument(
        "options",
        nargs="*",
        metavar="ARG",
        help="Option string fragments, joined with spaces (default: read stdin)",
    )
    parser.add_argument(
        "--get",
        dest="get_names",
        action="append",
        default=[],
        metavar="NAME",
        help="Print only the value of NAME (repeatable)",
    )
    parser.add_argument(
        "--remove",
        dest="remove_names",
        action="append",
        default=[],
        metavar="NAME",
        help="Remove NAME before printing (repeatable)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (default: from configuration)",
    )
    parser.add_argument(
        "--expand",
        dest="expand_collections",
        action="store_true",
        default=None,
        help="With --format json, parse collection values into nested objects",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="PATH",
        help="YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        default=None,
        help="Override the configured log level",
    )
    return parser


def parse_cli_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_cli_parser().parse_args(argv)


def apply_cli_args(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command-line overrides to it."""
    config = load_config(args.config_file)

    updates: dict[str, dict[str, object]] = {"logging": {}, "output": {}}
    if args.log_level is not None:
        updates["logging"]["level"] = args.log_level
    if args.output_format is not None:
        updates["output"]["format"] = args.output_format
    if args.expand_collections is not None:
        updates["output"]["expand_collections"] = args.expand_collections

    data = config.model_dump(mode="json")
    for section, values in updates.items():
        data[section].update(values)
    return AppConfig.from_dict(data)


def _configure_logging(config: AppConfig) -> None:
    try:
        configure_logging_with_environment_tagging(
            level=parse_log_level(config.logging.level.value),
            log_file=config.logging.log_file,
        )
    except OSError as exc:
        raise ConfigurationError(
            f"Could not open log file: {exc}",
            details={"path": config.logging.log_file},
        ) from exc
    configure_structlog(config.logging.format)


def _read_option_string(args: argparse.Namespace, stdin: TextIO) -> str:
    if args.options:
        return " ".join(args.options)
    try:
        return stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ParsingError(
            f"Could not read options from standard input: {exc}"
        ) from exc


def render_store(store: OptionStore, config: AppConfig) -> str:
    if config.output.format == OutputFormat.JSON:
        payload: object
        if config.output.expand_collections:
            payload = CollectionExpander().expand_tree(store)
        else:
            payload = store.to_dict()
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return format_options(store)


def run(
    args: argparse.Namespace,
    config: AppConfig,
    stdin: TextIO,
    stdout: TextIO,
) -> ExitCode:
    raw = _read_option_string(args, stdin)
    store = OptionTokenizer().parse(raw)
    logger.info("Options parsed", count=len(store))

    for name in args.remove_names:
        store.remove(name)

    if args.get_names:
        exit_code = ExitCode.OK
        for name in args.get_names:
            value = store.get(name)
            if value is None:
                logger.warning("Option not found", name=name)
                exit_code = ExitCode.MISSING_OPTION
                continue
            print(value, file=stdout)
        return exit_code

    print(render_store(store, config), file=stdout)
    return ExitCode.OK


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Entry point for the ``textopts`` console script."""
    args = parse_cli_args(argv)
    try:
        config = apply_cli_args(args)
        _configure_logging(config)
        return int(run(args, config, stdin or sys.stdin, stdout or sys.stdout))
    except TextOptionsError as exc:
        print(f"textopts: error: {exc.message}", file=sys.stderr)
        return int(ExitCode.USAGE_ERROR)


if __name__ == "__main__":
    sys.exit(main())
