"""FHEVM scaffold configuration.

Centralised, typed configuration for generated projects. All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class NetworkConfig(BaseModel):
    """A named deployment network in the generated ``hardhat.config.ts``.

    The RPC URL and the signer key are never written into the project; the
    generated config reads them from the environment variables named here.
    """

    name: str = Field(..., description="Hardhat network name, e.g. 'sepolia'")
    rpc_url_env: str = Field(..., description="Env var holding the RPC URL")
    accounts_env: str = Field(default="PRIVATE_KEY", description="Env var holding the deployer key")
    placeholder_url: str = Field(
        default="https://rpc.example.org/YOUR_KEY",
        description="Value written to .env.example for the RPC URL",
    )


class CompilerConfig(BaseModel):
    """Solidity compiler settings."""

    solidity_version: str = Field(default="0.8.24")
    optimizer_enabled: bool = Field(default=True)
    optimizer_runs: int = Field(default=1000, ge=1)


def _default_dev_dependencies() -> dict[str, str]:
    return {
        "@nomicfoundation/hardhat-chai-matchers": "^2.0.0",
        "@nomicfoundation/hardhat-ethers": "^3.0.0",
        "@types/node": "^18.0.0",
        "@typescript-eslint/eslint-plugin": "^6.0.0",
        "@typescript-eslint/parser": "^6.0.0",
        "chai": "^4.3.0",
        "eslint": "^8.0.0",
        "hardhat": "^2.17.0",
        "hardhat-deploy": "^0.11.0",
        "hardhat-gas-reporter": "^1.0.0",
        "prettier": "^3.0.0",
        "ts-node": "^10.9.0",
        "typescript": "^5.0.0",
    }


class DependencyConfig(BaseModel):
    """Version ranges declared in the generated ``package.json``."""

    fhevm_solidity: str = Field(default="^0.9.1", description="@fhevm/solidity range")
    ethers: str = Field(default="^6.0.0", description="ethers range")
    dev_dependencies: dict[str, str] = Field(default_factory=_default_dev_dependencies)

    def runtime(self) -> dict[str, str]:
        """Return the ``dependencies`` block of the manifest."""
        return {
            "@fhevm/solidity": self.fhevm_solidity,
            "ethers": self.ethers,
        }


def _default_networks() -> list[NetworkConfig]:
    return [
        NetworkConfig(
            name="sepolia",
            rpc_url_env="SEPOLIA_RPC_URL",
            placeholder_url="https://eth-sepolia.g.alchemy.com/v2/YOUR_ALCHEMY_KEY",
        ),
        NetworkConfig(
            name="mainnet",
            rpc_url_env="MAINNET_RPC_URL",
            placeholder_url="https://eth-mainnet.g.alchemy.com/v2/YOUR_ALCHEMY_KEY",
        ),
    ]


class ScaffoldConfig(BaseModel):
    """Global scaffold configuration.

    Holds every tuneable value that ends up in a generated project: compiler
    settings, dependency ranges, deployment networks and the names of the
    environment variables the generated build config reads. Instances are
    typically created once by the CLI and passed to ``ScaffoldGenerator``.
    """

    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    dependencies: DependencyConfig = Field(default_factory=DependencyConfig)
    networks: list[NetworkConfig] = Field(default_factory=_default_networks)

    testnet: str = Field(default="sepolia", description="Network used by deploy:testnet")
    mainnet: str = Field(default="mainnet", description="Network used by deploy:mainnet")

    gas_report_env: str = Field(default="REPORT_GAS")
    etherscan_api_key_env: str = Field(default="ETHERSCAN_API_KEY")
    coinmarketcap_api_key_env: str = Field(default="COINMARKETCAP_API_KEY")

    author: str = Field(default="Generated by FHEVM Example Generator")
    license: str = Field(default="MIT")
    version: str = Field(default="1.0.0", description="Version of the generated package")

    git_timeout: int = Field(default=30, ge=1, description="Seconds before git init is abandoned")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def env_var_names(self) -> list[str]:
        """Every environment variable referenced by ``hardhat.config.ts``.

        Order is stable: network URLs first, then signer keys, then the
        verification and gas-reporting variables. Duplicates are dropped.
        """
        names: list[str] = []
        for network in self.networks:
            names.append(network.rpc_url_env)
        for network in self.networks:
            names.append(network.accounts_env)
        names.extend([
            self.etherscan_api_key_env,
            self.gas_report_env,
            self.coinmarketcap_api_key_env,
        ])
        return list(dict.fromkeys(names))

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            FHEVM_SOLIDITY_VERSION, FHEVM_OPTIMIZER_RUNS,
            FHEVM_LIBRARY_VERSION, FHEVM_ETHERS_VERSION,
            FHEVM_AUTHOR, FHEVM_GIT_TIMEOUT.
        """
        compiler_kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_SOLIDITY_VERSION"):
            compiler_kwargs["solidity_version"] = os.environ["FHEVM_SOLIDITY_VERSION"]
        if os.environ.get("FHEVM_OPTIMIZER_RUNS"):
            compiler_kwargs["optimizer_runs"] = int(os.environ["FHEVM_OPTIMIZER_RUNS"])

        dependency_kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_LIBRARY_VERSION"):
            dependency_kwargs["fhevm_solidity"] = os.environ["FHEVM_LIBRARY_VERSION"]
        if os.environ.get("FHEVM_ETHERS_VERSION"):
            dependency_kwargs["ethers"] = os.environ["FHEVM_ETHERS_VERSION"]

        kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_AUTHOR"):
            kwargs["author"] = os.environ["FHEVM_AUTHOR"]
        if os.environ.get("FHEVM_GIT_TIMEOUT"):
            kwargs["git_timeout"] = int(os.environ["FHEVM_GIT_TIMEOUT"])

        return cls(
            compiler=CompilerConfig(**compiler_kwargs),
            dependencies=DependencyConfig(**dependency_kwargs),
            **kwargs,
        )
