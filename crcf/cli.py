"""Command-line interface for crcf.

Two mutually exclusive modes:

* component mode: ``crcf [options] name [name ...]`` creates one folder per
  name under the working directory;
* index mode: ``crcf --createindex directory`` writes a barrel ``index.js``
  re-exporting every component folder of *directory*.

Exit codes: 0 success, 1 unexpected error, 2 usage error, 3 something
already exists, 4 I/O failure.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time

from pydantic import ValidationError
from rich.markup import escape

from crcf import __version__
from crcf.config import ComponentConfig, Config
from crcf.errors import IndexExistsError, ScaffoldError, UsageError
from crcf.scaffolder import ComponentGenerator, ComponentResult, IndexGenerator
from crcf.scaffolder.names import under_root
from crcf.utils import (
    console,
    create_progress,
    format_duration,
    print_error,
    print_file_tree,
    print_success,
    print_warning,
)
from crcf.version_check import PACKAGE_NAME, UpdateChecker

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_USAGE = UsageError.exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crcf",
        description="Create React component folders with index, test and style files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  crcf Button\n"
            "  crcf Button Card forms/Input --typescript --notest\n"
            "  crcf --createindex src/components\n"
        ),
    )
    parser.add_argument("names", nargs="*", help="Component names (or a folder with --createindex)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--typescript", action="store_true", help="Creates Typescript component and files")
    parser.add_argument("--nocss", action="store_true", help="No css file")
    parser.add_argument("--notest", action="store_true", help="No test file")
    parser.add_argument("--reactnative", action="store_true", help="Creates React Native components")
    parser.add_argument(
        "--createindex",
        action="store_true",
        help="Creates index.js file for multiple component imports",
    )
    parser.add_argument("-l", "--less", action="store_true", help="Adds .less file to component")
    parser.add_argument("-s", "--sass", action="store_true", help="Adds .sass file to component")
    parser.add_argument("-p", "--proptypes", action="store_true", help="Adds prop-types to component")
    parser.add_argument(
        "-u", "--uppercase",
        action="store_true",
        help="Component files start on uppercase letter",
    )
    parser.add_argument(
        "--no-update-check",
        dest="update_check",
        action="store_false",
        default=None,
        help="Do not check the package index for a newer crcf",
    )
    return parser


def component_config_from_args(args: argparse.Namespace, config: Config) -> ComponentConfig:
    return ComponentConfig.from_flags(
        typescript=args.typescript,
        native=args.reactnative,
        no_test=args.notest,
        no_style=args.nocss,
        less=args.less,
        sass=args.sass,
        with_prop_types=args.proptypes,
        uppercase_files=args.uppercase,
        default_style=config.default_style_extension,
    )


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------


async def create_components(
    names: list[str],
    component_config: ComponentConfig,
    config: Config,
) -> int:
    """Create every named component and report the outcome.

    Returns the exit code: 0 when every component was created, otherwise the
    highest exit code among the failures.
    """
    if not names:
        print_warning("You didn't supply component name as an argument.")
        console.print('Please try "crcf componentName"')
        return EXIT_USAGE

    started = time.perf_counter()
    generator = ComponentGenerator(component_config)
    with create_progress() as progress:
        progress.add_task("Creating components files...", total=None)
        results = await generator.generate_batch(names, config.working_dir)

    created = [r for r in results if r.ok]
    failed = [r for r in results if not r.ok]

    if created:
        console.print("[cyan]Created new React components at:[/cyan]")
        for result in created:
            print_file_tree(result.path, result.files)
        console.print()

    for result in failed:
        _report_failure(result)

    console.print(f"Finished in {format_duration(time.perf_counter() - started)}")
    if failed:
        return max(r.error.exit_code for r in failed)

    print_success("Success!")
    if config.update_check:
        await report_update(config)
    return EXIT_OK


async def create_index(names: list[str], config: Config) -> int:
    """Write the aggregate ``index.js`` for the single folder in *names*."""
    if len(names) != 1:
        print_error("You must provide a single components folder string")
        return EXIT_USAGE

    started = time.perf_counter()
    folder = under_root(config.working_dir, names[0])
    try:
        index_path = await IndexGenerator().generate(folder)
    except IndexExistsError as exc:
        print_warning(escape(str(exc)))
        return exc.exit_code
    except ScaffoldError as exc:
        print_error(escape(str(exc)))
        return exc.exit_code

    console.print("[cyan]Created index.js file at:[/cyan]")
    console.print(str(index_path), highlight=False, markup=False)
    console.print()
    console.print(f"Finished in {format_duration(time.perf_counter() - started)}")
    print_success("Success!")
    return EXIT_OK


async def report_update(config: Config) -> None:
    """Print an upgrade hint when the package index has a newer release."""
    checker = UpdateChecker(
        index_url=config.package_index_url,
        timeout=config.update_check_timeout,
    )
    info = await checker.check()
    if info is not None and info.update_available:
        print_warning(
            f"A new version of {PACKAGE_NAME} is available: {info.current} -> {info.latest}"
        )
        console.print(f"Run: pip install --upgrade {PACKAGE_NAME}")


def _report_failure(result: ComponentResult) -> None:
    error = result.error
    if isinstance(error, UsageError):
        print_warning(escape(str(error)))
    else:
        print_error(escape(str(error)))


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, run the selected mode and return the exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
        if args.update_check is not None:
            config = config.model_copy(update={"update_check": args.update_check})
        component_config = component_config_from_args(args, config)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        return EXIT_USAGE

    try:
        if args.createindex:
            return asyncio.run(create_index(args.names, config))
        return asyncio.run(create_components(args.names, component_config, config))
    except Exception as exc:
        print_error(f"Error: {escape(str(exc))}")
        return EXIT_UNEXPECTED


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``crcf`` and ``python -m crcf``."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
