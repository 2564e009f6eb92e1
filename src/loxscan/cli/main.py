# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the loxscan command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from loxscan.config import ConfigError, ScannerConfig, find_config, load_config
from loxscan.scanner import ScanError, Token, render_token, scan

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the loxscan CLI."""
    parser = argparse.ArgumentParser(
        prog="loxscan",
        description="loxscan - lexical scanner for the Lox scripting language",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # run subcommand
    run_parser = subparsers.add_parser(
        "run",
        help="Scan a source file and print its tokens",
        description="Scan a Lox source file and print every token and lexical error.",
    )
    run_parser.add_argument("file", help="Path to the Lox source file")
    _add_common_arguments(run_parser)

    # prompt subcommand
    prompt_parser = subparsers.add_parser(
        "prompt",
        help="Scan lines typed interactively",
        description="Read lines from standard input and print the tokens of each line.",
    )
    _add_common_arguments(prompt_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_KIND_WIDTH = 14


def _add_common_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration file (default: ./.loxscan.yaml if present)",
    )
    subparser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "run":
        return _cmd_run(args, config)
    if args.command == "prompt":
        return _cmd_prompt(config)
    return 0


def _resolve_config(args: argparse.Namespace) -> ScannerConfig:
    """Load the configuration named on the command line or found in the working directory."""
    path = Path(args.config) if args.config else find_config(Path.cwd())
    config = load_config(path) if path is not None else ScannerConfig()
    if args.no_color:
        config = config.model_copy(update={"color": False})
    return config


def _cmd_run(args: argparse.Namespace, config: ScannerConfig) -> int:
    """Handle the run subcommand."""
    path = Path(args.file)
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1

    tokens, errors = scan(source)
    _print_tokens(tokens, config)
    _print_errors(errors, config)

    if errors and config.fail_on_error:
        return 1
    return 0


def _cmd_prompt(config: ScannerConfig) -> int:
    """Handle the prompt subcommand. Each line is scanned on its own."""
    while True:
        try:
            line = input(config.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        tokens, errors = scan(line)
        _print_tokens(tokens, config)
        _print_errors(errors, config)


def _print_tokens(tokens: list[Token], config: ScannerConfig) -> None:
    for token in tokens:
        print(_format_token(token, config))


def _print_errors(errors: list[ScanError], config: ScannerConfig) -> None:
    for error in errors:
        message = f"Error: {error}"
        print(chalk.red(message) if config.color else message, file=sys.stderr)


def _format_token(token: Token, config: ScannerConfig) -> str:
    """Format one token as an aligned listing row."""
    kind = token.kind.name.ljust(_KIND_WIDTH)
    if config.color:
        kind = chalk.blue(kind)
    row = f"{kind} {render_token(token)}".rstrip()
    if config.show_lines:
        row = f"{token.line:>4} {row}"
    return row
