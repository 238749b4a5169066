"""Main scaffolding orchestrator.

Takes an example or category key and a destination path, and generates a
complete Hardhat project for it. Stages run strictly in order:

    resolve -> create_directories -> write_config -> generate_contracts
    -> generate_tests -> generate_docs -> generate_deploy_script
    -> init_git (best effort) -> report

The orchestrator never exits the process. Every run returns a
``ScaffoldResult``; the CLI decides what to print and which exit status to use.
"""

from __future__ import annotations

import traceback
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel, Field

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.registry import DEFAULT_REGISTRY, Registry
from fhevm_scaffold.utils import (
    console,
    print_banner,
    print_error,
    print_item,
    print_step,
    print_success,
    print_warning,
    run_command,
)

from .contract_gen import ContractGenerator
from .deploy_gen import DeployGenerator
from .docs_gen import DocsGenerator, utc_now
from .filesystem import FileSystem, FilesystemError, LocalFileSystem, TrackingFileSystem
from .plan import ProjectPlan, ScaffoldMode, UnknownKeyError, plan_category, plan_example
from .project_gen import ProjectSynthesizer
from .templates import TemplateRenderer
from .test_gen import TestGenerator


CommandRunner = Callable[..., tuple[int, str, str]]

STAGES: tuple[str, ...] = (
    "resolve",
    "create_directories",
    "write_config",
    "generate_contracts",
    "generate_tests",
    "generate_docs",
    "generate_deploy_script",
    "init_git",
    "report",
)


class VersionControlWarning(UserWarning):
    """Git initialisation failed; the generated project is still complete."""


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """Outcome of one scaffold run."""

    success: bool = False
    mode: ScaffoldMode
    selector: str
    destination: str
    stages_completed: list[str] = Field(default_factory=list)
    failed_stage: Optional[str] = None
    error_kind: Optional[str] = Field(
        default=None, description="'unknown_key' or 'filesystem' when the run failed"
    )
    error: Optional[str] = None
    unknown_key: Optional[str] = Field(
        default=None, description="The key that was not found; a member key in category mode"
    )
    valid_keys: list[str] = Field(default_factory=list)
    files_written: list[str] = Field(
        default_factory=list, description="Paths relative to destination, write order"
    )
    examples: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    git_initialized: bool = False


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldGenerator:
    """Generates example and category projects from the registry.

    Every side effect goes through an injected collaborator: ``fs`` for
    directories and files, ``runner`` for the git process and ``clock`` for
    the README timestamp. The defaults touch the real disk and the real git.
    """

    def __init__(
        self,
        registry: Registry = DEFAULT_REGISTRY,
        config: ScaffoldConfig | None = None,
        fs: FileSystem | None = None,
        runner: CommandRunner = run_command,
        clock: Callable[[], datetime] = utc_now,
        init_git: bool = True,
        quiet: bool = False,
    ) -> None:
        self.registry = registry
        self.config = config or ScaffoldConfig()
        self.fs: FileSystem = fs if fs is not None else LocalFileSystem()
        self.runner = runner
        self.init_git = init_git
        self.quiet = quiet

        self.renderer = TemplateRenderer()
        self.project_gen = ProjectSynthesizer(self.renderer, self.config)
        self.contract_gen = ContractGenerator(self.renderer, self.config)
        self.test_gen = TestGenerator(self.renderer)
        self.docs_gen = DocsGenerator(self.renderer, self.config, clock=clock)
        self.deploy_gen = DeployGenerator(self.renderer)

    # -- Public API --------------------------------------------------------

    def plan_example(self, key: str) -> ProjectPlan:
        return plan_example(self.registry, key)

    def plan_category(self, key: str) -> ProjectPlan:
        return plan_category(self.registry, key)

    def generate_example(self, key: str, destination: str | Path) -> ScaffoldResult:
        """Generate a single-example project for *key* at *destination*."""
        return self._run(ScaffoldMode.EXAMPLE, key, Path(destination))

    def generate_category(self, key: str, destination: str | Path) -> ScaffoldResult:
        """Generate a project with every example of category *key*."""
        return self._run(ScaffoldMode.CATEGORY, key, Path(destination))

    # -- Pipeline ----------------------------------------------------------

    def _run(self, mode: ScaffoldMode, key: str, root: Path) -> ScaffoldResult:
        result = ScaffoldResult(mode=mode, selector=key, destination=str(root))

        if not self.quiet:
            print_banner(
                "FHEVM Category Repository Generator"
                if mode == ScaffoldMode.CATEGORY
                else "FHEVM Example Repository Generator"
            )

        # Stage: resolve. Nothing has touched the filesystem yet.
        try:
            if mode == ScaffoldMode.CATEGORY:
                plan = self.plan_category(key)
            else:
                plan = self.plan_example(key)
        except UnknownKeyError as exc:
            result.failed_stage = "resolve"
            result.error_kind = "unknown_key"
            result.error = str(exc)
            result.unknown_key = exc.key
            result.valid_keys = exc.valid_keys
            if not self.quiet:
                print_error(str(exc))
            return result
        except Exception as exc:
            return self._fail(result, "resolve", exc)
        result.stages_completed.append("resolve")

        if not self.quiet:
            console.print(f"Creating {mode.value}: [bold]{plan.title}[/bold]")
            if plan.is_category:
                console.print(f"Examples: {len(plan.examples)}")
            console.print(f"Output directory: {root}\n")

        fs = TrackingFileSystem(self.fs, root)
        steps: list[tuple[str, str, Callable[[], list[Path]]]] = [
            (
                "create_directories",
                "Creating directory structure...",
                lambda: self.project_gen.create_directory_tree(fs, root, plan),
            ),
            (
                "write_config",
                "Setting up Hardhat template...",
                lambda: self.project_gen.write_project_config(fs, root, plan),
            ),
            (
                "generate_contracts",
                "Adding example contracts...",
                lambda: self._each(
                    plan, lambda e: self.contract_gen.generate(fs, root, plan, e)
                ),
            ),
            (
                "generate_tests",
                "Generating tests...",
                lambda: self._each(
                    plan, lambda e: self.test_gen.generate(fs, root, plan, e)
                ),
            ),
            (
                "generate_docs",
                "Generating documentation...",
                lambda: self.docs_gen.generate(fs, root, plan),
            ),
            (
                "generate_deploy_script",
                "Creating deployment script...",
                lambda: [self.deploy_gen.generate(fs, root, plan)],
            ),
        ]

        for number, (stage, description, action) in enumerate(steps, start=1):
            if not self.quiet:
                print_step(number, description)
            try:
                action()
            except Exception as exc:
                result.files_written = fs.written
                return self._fail(result, stage, exc)
            result.stages_completed.append(stage)
        result.files_written = fs.written

        # Stage: init_git. Best effort only.
        if self.init_git:
            if not self.quiet:
                print_step(len(steps) + 1, "Initializing git repository...")
            result.git_initialized = self._init_git(root, result)
        result.stages_completed.append("init_git")

        result.examples = plan.example_keys()
        result.success = True
        result.stages_completed.append("report")
        if not self.quiet:
            print_success(
                "Category repository created successfully!"
                if plan.is_category
                else "Example repository created successfully!"
            )
        return result

    def _each(self, plan: ProjectPlan, action: Callable) -> list[Path]:
        paths: list[Path] = []
        for example in plan.examples:
            paths.append(action(example))
            if not self.quiet:
                print_item(example.key)
        return paths

    def _init_git(self, root: Path, result: ScaffoldResult) -> bool:
        """Run ``git init`` and ``git add .``; failures become warnings."""
        try:
            self._git(root, "init")
            self._git(root, "add", ".")
        except VersionControlWarning as warning:
            message = f"Git initialization skipped: {warning}"
            result.warnings.append(message)
            if not self.quiet:
                print_warning(f"  {message}")
            return False
        if not self.quiet:
            print_item("Git repository initialized")
        return True

    def _git(self, root: Path, *args: str) -> None:
        cmd = ["git", *args]
        try:
            returncode, _, stderr = self.runner(
                cmd, cwd=root, timeout=self.config.git_timeout
            )
        except OSError as exc:
            raise VersionControlWarning(f"{' '.join(cmd)}: {exc}") from exc
        if returncode != 0:
            raise VersionControlWarning(
                f"{' '.join(cmd)} exited with {returncode}: {stderr}"
            )

    def _fail(self, result: ScaffoldResult, stage: str, exc: Exception) -> ScaffoldResult:
        """Record a fatal stage failure. Files already written stay on disk."""
        result.failed_stage = stage
        result.error_kind = "filesystem"
        if isinstance(exc, FilesystemError):
            result.error = str(exc)
        else:
            result.error = f"{type(exc).__name__}: {exc}"
        if not self.quiet:
            print_error(f"Stage '{stage}' failed: {result.error}")
            if not isinstance(exc, FilesystemError):
                console.print(f"[dim]{traceback.format_exc()}[/dim]")
        return result
