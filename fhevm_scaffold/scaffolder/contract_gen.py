"""Solidity contract stub generation.

Each example gets an empty contract named after its derived identifier that
inherits the FHEVM network configuration. The body is an extension point; no
business logic is generated.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.registry import ExampleDescriptor

from .filesystem import FileSystem
from .plan import ProjectPlan
from .templates import TemplateRenderer


class ContractGenerator:
    """Generates one ``.sol`` stub per example."""

    def __init__(self, renderer: TemplateRenderer, config: ScaffoldConfig) -> None:
        self.renderer = renderer
        self.config = config

    def render(self, example: ExampleDescriptor) -> str:
        """Return the contract source for *example*."""
        return self.renderer.render("contract.sol.j2", self._context(example))

    def generate(
        self, fs: FileSystem, root: Path, plan: ProjectPlan, example: ExampleDescriptor
    ) -> Path:
        """Write the contract for *example* to its planned path under *root*."""
        out = root / plan.contract_path(example)
        fs.write_text(out, self.render(example))
        return out

    def _context(self, example: ExampleDescriptor) -> dict[str, Any]:
        return {
            "example": example,
            "license": self.config.license,
            "solidity_version": self.config.compiler.solidity_version,
        }
