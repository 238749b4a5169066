"""Hardhat/chai test stub generation.

Generated suites deploy the contract in a ``beforeEach`` fixture and contain
two placeholder groups: a deployment sanity check and an empty functional
test to fill in.
"""

from __future__ import annotations

from pathlib import Path

from fhevm_scaffold.registry import ExampleDescriptor

from .filesystem import FileSystem
from .plan import ProjectPlan
from .templates import TemplateRenderer


class TestGenerator:
    """Generates one ``.test.ts`` suite per example."""

    __test__ = False  # not a pytest test class

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(self, example: ExampleDescriptor) -> str:
        return self.renderer.render(
            "test.ts.j2",
            {"example": example},
        )

    def generate(
        self, fs: FileSystem, root: Path, plan: ProjectPlan, example: ExampleDescriptor
    ) -> Path:
        out = root / plan.test_path(example)
        fs.write_text(out, self.render(example))
        return out
