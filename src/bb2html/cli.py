#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for bb2html.

Reads BBCode from a file or standard input and writes the HTML to standard
output or a file.

Examples
--------
Basic conversion of pre-escaped text:
    $ bb2html post.bbcode

Escape raw user text first:
    $ bb2html post.txt --escape --out post.html

Read from stdin:
    $ echo "[b]bold[/b]" | bb2html -

Use environment variables for defaults:
    $ export BB2HTML_ESCAPE=true
    $ export BB2HTML_TRIM_BREAKS=first
    $ bb2html post.txt
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import fields
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

from bb2html.api import parse, to_html
from bb2html.constants import DEFAULT_LINK_TARGET, DEFAULT_TRIM_BREAKS, ENV_VAR_PREFIX
from bb2html.exceptions import InputError, ValidationError
from bb2html.options import BBCodeHtmlOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

_TRUE_VALUES = ("true", "1", "yes", "on")

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

# Flag help shared with the option definitions
_OPTION_HELP = {f.name: f.metadata["help"] for f in fields(BBCodeHtmlOptions)}


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with BB2HTML_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'escape', 'trim_breaks')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    Command-line arguments still take precedence over environment variables.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify

    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue

        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
            # The variable names the destination, so BB2HTML_MARKDOWN_LISTS=false disables lists
            action.default = env_value.lower() in _TRUE_VALUES
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logging.warning(
                    f"Invalid choice for {ENV_VAR_PREFIX}{action.dest.upper()}: {env_value}. "
                    f"Choices: {list(action.choices)}"
                )
        else:
            action.default = env_value


def _get_version() -> str:
    """Get the version of the bb2html package."""
    try:
        return version("bb2html")
    except PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bb2html",
        description="Convert BBCode markup to HTML.",
        epilog=f"Options can also be set through {ENV_VAR_PREFIX}* environment variables.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input file, or '-' for stdin (default)")
    parser.add_argument("--out", "-o", type=str, help="Write HTML to this file instead of stdout")
    parser.add_argument(
        "--escape",
        action="store_true",
        help="HTML-escape the input before converting (use for raw user text)",
    )
    parser.add_argument(
        "--no-markdown-lists",
        dest="markdown_lists",
        action="store_false",
        help="Do not turn '* ' prefixed lines into list items",
    )
    parser.add_argument(
        "--link-target",
        type=str,
        default=DEFAULT_LINK_TARGET,
        help=f"{_OPTION_HELP['link_target']} (default: {DEFAULT_LINK_TARGET})",
    )
    parser.add_argument(
        "--no-link-target",
        action="store_true",
        help="Do not add a target attribute to links",
    )
    parser.add_argument(
        "--trim-breaks",
        choices=["first", "all", "none"],
        default=DEFAULT_TRIM_BREAKS,
        help=f"{_OPTION_HELP['trim_breaks']} (default: {DEFAULT_TRIM_BREAKS})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"bb2html {_get_version()}")

    apply_env_vars_to_parser(parser)
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Configure root logging from command-line arguments.

    Messages go to stderr and, with ``--log-file``, also to that file.
    ``--trace`` adds timestamps and logger names.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    formatter = logging.Formatter(TRACE_LOG_FORMAT if parsed_args.trace else LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if parsed_args.log_file:
        try:
            handlers.append(logging.FileHandler(parsed_args.log_file, encoding="utf-8"))
        except OSError as e:
            print(f"Warning: Could not open log file {parsed_args.log_file}: {e}", file=sys.stderr)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


def build_options(parsed_args: argparse.Namespace) -> BBCodeHtmlOptions:
    """Build conversion options from parsed arguments.

    Raises
    ------
    ValidationError
        If an option value is invalid

    """
    return BBCodeHtmlOptions(
        markdown_lists=parsed_args.markdown_lists,
        link_target=None if parsed_args.no_link_target else parsed_args.link_target,
        trim_breaks=parsed_args.trim_breaks,
    )


def read_input(source: str) -> str:
    """Read input text from a path or from stdin when ``source`` is '-'.

    Raises
    ------
    InputError
        If the file cannot be read or decoded

    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read input file {source}: {e}", input_path=source, original_error=e) from e


def write_output(html: str, out: Optional[str]) -> None:
    """Write ``html`` to the ``out`` path, or to stdout when it is None."""
    if out is None:
        sys.stdout.write(html)
        if html and not html.endswith("\n"):
            sys.stdout.write("\n")
        return

    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(html, encoding="utf-8")
    logger.info(f"Wrote HTML to {out_path}")


def main(args: list[str] | None = None) -> int:
    """Execute the command-line entry point.

    Parameters
    ----------
    args : list of str or None
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        text = read_input(parsed_args.input)
    except InputError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FILE_ERROR

    convert = to_html if parsed_args.escape else parse
    try:
        html = convert(text, options=options)
    except Exception as e:
        logger.exception(f"Unexpected error during conversion: {e}")
        return EXIT_ERROR

    try:
        write_output(html, parsed_args.out)
    except OSError as e:
        print(f"Error: Could not write output: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS
