"""Project-wide configuration files for a generated Hardhat project.

Creates the directory skeleton and writes ``package.json``,
``hardhat.config.ts``, ``tsconfig.json``, ``.env.example`` and ``.gitignore``.
JSON artefacts are built as dicts and serialised; the TypeScript config and
the plain-text files come from Jinja2 templates.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from fhevm_scaffold.config import ScaffoldConfig

from .filesystem import FileSystem
from .plan import ProjectPlan
from .templates import TemplateRenderer


class ProjectSynthesizer:
    """Writes the directory tree and configuration files of a project."""

    def __init__(self, renderer: TemplateRenderer, config: ScaffoldConfig) -> None:
        self.renderer = renderer
        self.config = config

    # -- Directory structure -----------------------------------------------

    def create_directory_tree(
        self, fs: FileSystem, root: Path, plan: ProjectPlan
    ) -> list[Path]:
        """Create the destination and its source/test/script/doc directories.

        Existing directories are left as they are.
        """
        created = [root]
        fs.make_dirs(root)
        for rel in plan.directories():
            path = root / rel
            fs.make_dirs(path)
            created.append(path)
        return created

    # -- Config files ------------------------------------------------------

    def write_project_config(
        self, fs: FileSystem, root: Path, plan: ProjectPlan
    ) -> list[Path]:
        """Write every project-wide configuration file.

        Returns:
            Written paths in the order of ``CONFIG_FILES``.
        """
        context = self.build_context(plan)
        written: list[Path] = []

        out = root / "package.json"
        fs.write_text(out, _dump_json(self.build_manifest(plan)))
        written.append(out)

        written.append(
            self.renderer.render_to_file(
                fs, "hardhat.config.ts.j2", root / "hardhat.config.ts", context
            )
        )

        out = root / "tsconfig.json"
        fs.write_text(out, _dump_json(build_tsconfig()))
        written.append(out)

        written.append(
            self.renderer.render_to_file(fs, "env.example.j2", root / ".env.example", context)
        )
        written.append(
            self.renderer.render_to_file(fs, "gitignore.j2", root / ".gitignore", context)
        )
        return written

    # -- Content builders ----------------------------------------------------

    def build_context(self, plan: ProjectPlan) -> dict[str, Any]:
        """Template context shared by the configuration templates."""
        return {
            "plan": plan,
            "compiler": self.config.compiler,
            "networks": self.config.networks,
            "gas_report_env": self.config.gas_report_env,
            "etherscan_api_key_env": self.config.etherscan_api_key_env,
            "coinmarketcap_api_key_env": self.config.coinmarketcap_api_key_env,
            "env_placeholders": self.env_placeholders(),
        }

    def build_manifest(self, plan: ProjectPlan) -> dict[str, Any]:
        """Return the ``package.json`` document for *plan*."""
        deploy = "hardhat run scripts/deploy.ts --network"
        return {
            "name": plan.package_name,
            "version": self.config.version,
            "description": plan.description,
            "main": "index.js",
            "scripts": {
                "compile": "hardhat compile",
                "test": "hardhat test",
                "test:coverage": "hardhat coverage",
                "lint": "eslint contracts/ test/",
                "format": "prettier --write .",
                "type-check": "tsc --noEmit",
                "deploy:testnet": f"{deploy} {self.config.testnet}",
                "deploy:mainnet": f"{deploy} {self.config.mainnet}",
                "gas-report": f"{self.config.gas_report_env}=true hardhat test",
            },
            "keywords": list(plan.keywords),
            "author": self.config.author,
            "license": self.config.license,
            "dependencies": self.config.dependencies.runtime(),
            "devDependencies": dict(self.config.dependencies.dev_dependencies),
        }

    def env_placeholders(self) -> list[tuple[str, str]]:
        """``(name, placeholder)`` for every env var the build config reads."""
        placeholders: dict[str, str] = {}
        for network in self.config.networks:
            placeholders[network.rpc_url_env] = network.placeholder_url
        for network in self.config.networks:
            placeholders.setdefault(network.accounts_env, "0xYOUR_PRIVATE_KEY")
        placeholders.setdefault(self.config.etherscan_api_key_env, "YOUR_ETHERSCAN_KEY")
        placeholders.setdefault(self.config.gas_report_env, "false")
        placeholders.setdefault(self.config.coinmarketcap_api_key_env, "YOUR_COINMARKETCAP_KEY")
        return [(name, placeholders[name]) for name in self.config.env_var_names()]


def build_tsconfig() -> dict[str, Any]:
    """Return the ``tsconfig.json`` document shared by both modes."""
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "commonjs",
            "lib": ["ES2020"],
            "outDir": "./dist",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "resolveJsonModule": True,
        },
        "include": ["scripts", "test", "hardhat.config.ts"],
        "exclude": ["node_modules", "dist"],
    }


def _dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
