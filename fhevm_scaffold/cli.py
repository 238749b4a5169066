"""Command-line entry points.

``fhevm-create-example <example-key> <output-path>`` and
``fhevm-create-category <category-key> <output-path>`` generate a project;
``python -m fhevm_scaffold example|category ...`` dispatches to the same code.
This is the only module that decides exit statuses.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError
from rich.markup import escape

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.registry import DEFAULT_REGISTRY, Registry
from fhevm_scaffold.scaffolder import (
    MemoryFileSystem,
    ScaffoldError,
    ScaffoldGenerator,
    ScaffoldMode,
    ScaffoldResult,
)
from fhevm_scaffold.scaffolder.verify import print_verification, verify_project
from fhevm_scaffold.utils import console, print_error, print_summary_table

PROGRAMS = {
    ScaffoldMode.EXAMPLE: "fhevm-create-example",
    ScaffoldMode.CATEGORY: "fhevm-create-category",
}


class UsageError(ScaffoldError):
    """Raised when a required command-line argument is missing."""


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser(mode: ScaffoldMode) -> argparse.ArgumentParser:
    """Return the argument parser for *mode*."""
    noun = "example" if mode == ScaffoldMode.EXAMPLE else "category"
    prog = PROGRAMS[mode]
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"Generate a standalone FHEVM Hardhat project from one {noun}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {prog} {_sample_key(mode)} ./output/my-project\n"
            f"  {prog} {_sample_key(mode)} ./output/my-project --no-git\n"
            f"  {prog} {_sample_key(mode)} ./output/my-project --dry-run\n"
        ),
    )
    # Positionals are optional here so a missing one produces the key listing
    # instead of argparse's bare error.
    parser.add_argument("key", nargs="?", help=f"{noun.capitalize()} key from the registry")
    parser.add_argument("output", nargs="?", help="Destination directory")
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Skip 'git init' in the generated project",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Plan the project in memory and list the files without writing",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the generated layout after a successful run",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON ScaffoldConfig to use instead of FHEVM_* environment variables",
    )
    return parser


def _sample_key(mode: ScaffoldMode) -> str:
    return "fhe-counter" if mode == ScaffoldMode.EXAMPLE else "basic"


def _require(args: argparse.Namespace, mode: ScaffoldMode) -> None:
    noun = "example" if mode == ScaffoldMode.EXAMPLE else "category"
    if not args.key:
        raise UsageError(f"Missing {noun} key")
    if not args.output:
        raise UsageError("Missing output path")


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def print_usage(mode: ScaffoldMode, registry: Registry = DEFAULT_REGISTRY) -> None:
    """Print the usage line followed by every valid key for *mode*."""
    placeholder = "<example-key>" if mode == ScaffoldMode.EXAMPLE else "<category-key>"
    console.print(
        escape(f"Usage: {PROGRAMS[mode]} {placeholder} <output-path> [--no-git] [--dry-run] [--verify]")
    )
    console.print()
    print_key_listing(mode, registry)


def print_key_listing(mode: ScaffoldMode, registry: Registry = DEFAULT_REGISTRY) -> None:
    """List example keys with title and difficulty, or categories with size."""
    if mode == ScaffoldMode.EXAMPLE:
        console.print("[bold]Available examples:[/bold]")
        for key, example in registry.examples.items():
            suffix = f" ({example.difficulty.value})" if example.difficulty else ""
            console.print(f"  {key:<30} {escape(example.title)}{suffix}")
    else:
        console.print("[bold]Available categories:[/bold]")
        for key, category in registry.categories.items():
            count = len(category.member_keys)
            console.print(f"  {key:<15} {escape(category.title)} ({count} examples)")
    console.print()


def _print_next_steps(result: ScaffoldResult, registry: Registry) -> None:
    print_summary_table(
        {
            "Destination": result.destination,
            "Examples": str(len(result.examples)),
            "Files written": str(len(result.files_written)),
            "Git": "initialized" if result.git_initialized else "skipped",
        },
        title="Generated Project",
    )
    if result.mode == ScaffoldMode.CATEGORY:
        console.print("[bold]Included examples:[/bold]")
        for key in result.examples:
            example = registry.lookup_example(key)
            description = example.description if example else ""
            console.print(f"  - {key}: {escape(description)}")
        console.print()

    console.print("[bold]Next steps:[/bold]")
    console.print(f"  cd {escape(result.destination)}")
    for command in ("npm install", "npm run compile", "npm run test", "npm run deploy:testnet"):
        console.print(f"  {command}")
    console.print()


def _print_dry_run(fs: MemoryFileSystem, root: Path) -> None:
    console.print(f"[bold]Dry run:[/bold] nothing was written to {escape(str(root))}")
    for rel in fs.relative_files(root):
        console.print(f"  {escape(rel)}")
    console.print()


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def load_config(path: Optional[str]) -> ScaffoldConfig:
    """Load *path* as JSON, or build the configuration from FHEVM_* variables."""
    if path:
        return ScaffoldConfig.load(Path(path))
    return ScaffoldConfig.from_env()


def run(
    mode: ScaffoldMode,
    argv: Optional[Sequence[str]] = None,
    registry: Registry = DEFAULT_REGISTRY,
) -> int:
    """Parse *argv*, run the generator and return the process exit status."""
    args = build_parser(mode).parse_args(argv)
    try:
        _require(args, mode)
    except UsageError as exc:
        print_error(f"Error: {exc}")
        print_usage(mode, registry)
        return 1

    try:
        config = load_config(args.config)
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Error: cannot load configuration: {escape(str(exc))}")
        return 1

    root = Path(args.output)
    memory_fs = MemoryFileSystem() if args.dry_run else None
    generator = ScaffoldGenerator(
        registry=registry,
        config=config,
        fs=memory_fs,
        init_git=not (args.no_git or args.dry_run),
    )

    if mode == ScaffoldMode.CATEGORY:
        result = generator.generate_category(args.key, root)
    else:
        result = generator.generate_example(args.key, root)

    if not result.success:
        if result.error_kind == "unknown_key":
            # A missing category member is an unknown example, not an unknown category.
            listing = mode if result.unknown_key == result.selector else ScaffoldMode.EXAMPLE
            print_key_listing(listing, registry)
        return 1

    if memory_fs is not None:
        _print_dry_run(memory_fs, root)
    else:
        _print_next_steps(result, registry)

    if args.verify:
        plan = (
            generator.plan_category(args.key)
            if mode == ScaffoldMode.CATEGORY
            else generator.plan_example(args.key)
        )
        exists = memory_fs.exists if memory_fs is not None else None
        if not print_verification(verify_project(root, plan, exists=exists)):
            return 1
    return 0


def main_example() -> None:
    """Console script ``fhevm-create-example``."""
    sys.exit(run(ScaffoldMode.EXAMPLE))


def main_category() -> None:
    """Console script ``fhevm-create-category``."""
    sys.exit(run(ScaffoldMode.CATEGORY))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for ``python -m fhevm_scaffold example|category ...``."""
    argv = list(sys.argv[1:] if argv is None else argv)
    modes = {mode.value: mode for mode in ScaffoldMode}
    if not argv or argv[0] not in modes:
        console.print(escape("Usage: python -m fhevm_scaffold {example|category} <key> <output-path> [options]"))
        sys.exit(1)
    sys.exit(run(modes[argv[0]], argv[1:]))
