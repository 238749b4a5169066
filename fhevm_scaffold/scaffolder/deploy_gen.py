"""Deployment script generation.

``scripts/deploy.ts`` holds one deployment block per example, in plan order,
followed by a single completion log line. In category mode the blocks are a
concatenation over every member, so the script deploys the whole category.
Each block is brace-scoped, so a repeated member reuses its local names
without redeclaring them.
"""

from __future__ import annotations

from pathlib import Path

from .filesystem import FileSystem
from .plan import DEPLOY_SCRIPT, ProjectPlan
from .templates import TemplateRenderer


class DeployGenerator:
    """Generates the project's single deployment script."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def render(self, plan: ProjectPlan) -> str:
        return self.renderer.render(
            "deploy.ts.j2",
            {"title": plan.title, "examples": plan.examples},
        )

    def generate(self, fs: FileSystem, root: Path, plan: ProjectPlan) -> Path:
        out = root / DEPLOY_SCRIPT
        fs.write_text(out, self.render(plan))
        return out
