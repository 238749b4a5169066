"""README and per-example documentation generation.

Writes ``README.md`` (a member list in category mode, generic sections in
example mode) and one ``docs/<key>.md`` overview per example. The README
carries a generation timestamp; everything else is deterministic.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from fhevm_scaffold.config import ScaffoldConfig
from fhevm_scaffold.registry import ExampleDescriptor

from .filesystem import FileSystem
from .plan import README_FILE, ProjectPlan
from .templates import TemplateRenderer


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocsGenerator:
    """Generates the README and the per-example overview pages."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        config: ScaffoldConfig,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.renderer = renderer
        self.config = config
        self.clock = clock

    def render_readme(self, plan: ProjectPlan) -> str:
        """Return the README body for *plan*."""
        context: dict[str, Any] = {
            "plan": plan,
            "license": self.config.license,
            "generated_at": self.clock().strftime("%Y-%m-%dT%H:%M:%SZ"),
            "tests_dir": plan.tests_dir,
        }
        if plan.is_category:
            return self.renderer.render("README.category.md.j2", context)

        example = plan.examples[0]
        context["contract_path"] = plan.contract_path(example)
        return self.renderer.render("README.example.md.j2", context)

    def render_example_doc(self, plan: ProjectPlan, example: ExampleDescriptor) -> str:
        """Return the ``docs/<key>.md`` overview for one example."""
        return self.renderer.render(
            "example_doc.md.j2",
            {
                "example": example,
                "contract_path": plan.contract_path(example),
                "test_path": plan.test_path(example),
            },
        )

    def generate(self, fs: FileSystem, root: Path, plan: ProjectPlan) -> list[Path]:
        """Write the README and every example overview.

        Returns:
            Written paths, README first.
        """
        written: list[Path] = []
        out = root / README_FILE
        fs.write_text(out, self.render_readme(plan))
        written.append(out)

        for example in plan.examples:
            out = root / plan.doc_path(example)
            fs.write_text(out, self.render_example_doc(plan, example))
            written.append(out)
        return written
