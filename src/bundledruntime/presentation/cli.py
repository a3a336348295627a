"""Command line entry point: bundledruntime.

Thin front end over RuntimePipeline. Flags override values read from
--config; logging goes through rich's handler on stderr.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from bundledruntime import __version__
from bundledruntime.application.reporters import ConsoleReporter, JSONReporter
from bundledruntime.application.services.pipeline import RuntimePipeline
from bundledruntime.domain.exceptions import BundledRuntimeError, SubprocessFailureError
from bundledruntime.domain.model.configuration import RuntimeConfig
from bundledruntime.infrastructure.config_loader import load_config

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("bundledruntime")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bundledruntime",
        description="Build a minimized Java runtime image for a packaged application.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="TOML configuration file")
    parser.add_argument("--app-root", type=Path, help="Directory with app.jar and lib/")
    parser.add_argument("--destination", type=Path, help="Runtime image directory")
    parser.add_argument(
        "--module",
        dest="modules",
        action="append",
        metavar="NAME",
        help="Module to include (repeatable); replaces configured modules",
    )
    parser.add_argument(
        "--jlink-options",
        metavar="OPTIONS",
        help='jlink options as one shell-quoted string, e.g. "--strip-debug --compress 2"',
    )
    detection = parser.add_mutually_exclusive_group()
    detection.add_argument(
        "--auto-detect",
        dest="auto_detect",
        action="store_true",
        default=None,
        help="Detect modules with jdeps (default)",
    )
    detection.add_argument(
        "--no-auto-detect",
        dest="auto_detect",
        action="store_false",
        help="Use only the configured modules",
    )
    parser.add_argument(
        "--spring-boot",
        action="store_true",
        default=None,
        help="Treat the application as Spring Boot",
    )
    parser.add_argument("--java-version", type=int, help="JDK major version (default 17)")
    parser.add_argument("--java-home", type=Path, help="JDK installation to use")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def configure_logging(verbose: bool, console: Console) -> None:
    """Route package logs through rich. Library code never does this."""
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def resolve_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> RuntimeConfig:
    """Merge --config file and flags into one RuntimeConfig."""
    overrides = {
        "app_root": args.app_root,
        "destination_dir": args.destination,
        "modules": tuple(args.modules) if args.modules else None,
        "jlink_options": (
            tuple(shlex.split(args.jlink_options)) if args.jlink_options is not None else None
        ),
        "auto_detect_modules": args.auto_detect,
        "spring_boot_project": args.spring_boot,
        "java_version": args.java_version,
        "java_home": args.java_home,
    }

    if args.config is not None:
        return load_config(args.config, **overrides)

    if args.app_root is None or args.destination is None:
        parser.error("--app-root and --destination are required without --config")

    try:
        return RuntimeConfig(args.app_root, args.destination).with_overrides(**overrides)
    except (TypeError, ValueError) as exc:
        parser.error(str(exc))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        0 on success, 1 on pipeline failure (argparse exits with 2)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    err_console = Console(stderr=True)
    configure_logging(args.verbose, err_console)

    try:
        config = resolve_config(args, parser)
        result = RuntimePipeline().run(config)
    except SubprocessFailureError as exc:
        err_console.print(
            f"[bold red]{exc.tool} failed[/bold red] (exit={exc.exit_code})", soft_wrap=True
        )
        err_console.print(exc.stdout, markup=False, highlight=False, soft_wrap=True)
        err_console.print(exc.stderr, markup=False, highlight=False, soft_wrap=True)
        return 1
    except BundledRuntimeError as exc:
        err_console.print(f"[bold red]error:[/bold red] {exc}", highlight=False, soft_wrap=True)
        return 1

    if args.json:
        JSONReporter(sys.stdout).report(result)
    else:
        sys.stdout.write(ConsoleReporter().report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
