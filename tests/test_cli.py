"""Tests for the command-line entry points (fhevm_scaffold.cli).

Covers:
- Missing arguments: usage plus key listing, exit status 1, nothing written
- Unknown keys: key listing, exit status 1, nothing written
- Successful runs on disk with --no-git
- --dry-run writes nothing
- --verify after generation
- python -m dispatch
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from fhevm_scaffold import cli
from fhevm_scaffold.registry import DEFAULT_REGISTRY
from fhevm_scaffold.scaffolder import ScaffoldMode

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Usage errors
# ---------------------------------------------------------------------------


class TestMissingArguments:
    def test_example_without_arguments(self, tmp_path: Path, capsys):
        with patch.object(cli, "ScaffoldGenerator") as generator_cls:
            status = cli.run(ScaffoldMode.EXAMPLE, [])
        assert status == 1
        generator_cls.assert_not_called()

        out = capsys.readouterr().out
        assert "Usage: fhevm-create-example" in out
        for key, example in DEFAULT_REGISTRY.examples.items():
            assert key in out
            assert example.title in out
        assert "(beginner)" in out
        assert list(tmp_path.iterdir()) == []

    def test_category_missing_output(self, capsys):
        with patch.object(cli, "ScaffoldGenerator") as generator_cls:
            status = cli.run(ScaffoldMode.CATEGORY, ["basic"])
        assert status == 1
        generator_cls.assert_not_called()

        out = capsys.readouterr().out
        assert "Missing output path" in out
        for key in DEFAULT_REGISTRY.list_category_keys():
            assert key in out
        assert "(4 examples)" in out
        assert "(3 examples)" in out


class TestUnknownKey:
    def test_unknown_example(self, tmp_output: Path, capsys):
        status = cli.run(ScaffoldMode.EXAMPLE, ["not-real", str(tmp_output), "--no-git"])
        assert status == 1
        assert not tmp_output.exists()
        out = capsys.readouterr().out
        for key in DEFAULT_REGISTRY.list_example_keys():
            assert key in out

    def test_unknown_category(self, tmp_output: Path, capsys):
        status = cli.run(ScaffoldMode.CATEGORY, ["not-real", str(tmp_output), "--no-git"])
        assert status == 1
        assert not tmp_output.exists()
        assert "Category not found: not-real" in capsys.readouterr().out

    def test_missing_member_lists_examples(self, broken_registry, tmp_output: Path, capsys):
        status = cli.run(
            ScaffoldMode.CATEGORY,
            ["partial", str(tmp_output), "--no-git"],
            registry=broken_registry,
        )
        assert status == 1
        assert not tmp_output.exists()
        out = capsys.readouterr().out
        assert "Available examples:" in out
        assert "Available categories:" not in out
        assert "alpha" in out


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class TestConfigurationErrors:
    def test_missing_config_file(self, tmp_path: Path, tmp_output: Path, capsys):
        status = cli.run(
            ScaffoldMode.EXAMPLE,
            ["fhe-counter", str(tmp_output), "--no-git", "--config", str(tmp_path / "absent.json")],
        )
        assert status == 1
        assert not tmp_output.exists()
        assert "cannot load configuration" in capsys.readouterr().out

    def test_invalid_config_file(self, tmp_path: Path, tmp_output: Path, capsys):
        config_path = tmp_path / "config.json"
        config_path.write_text('{"git_timeout": "soon"}', encoding="utf-8")
        status = cli.run(
            ScaffoldMode.EXAMPLE,
            ["fhe-counter", str(tmp_output), "--no-git", "--config", str(config_path)],
        )
        assert status == 1
        assert not tmp_output.exists()
        assert "cannot load configuration" in capsys.readouterr().out

    @pytest.mark.parametrize("variable", ["FHEVM_OPTIMIZER_RUNS", "FHEVM_GIT_TIMEOUT"])
    def test_malformed_environment(self, monkeypatch, tmp_output: Path, capsys, variable):
        monkeypatch.setenv(variable, "lots")
        status = cli.run(ScaffoldMode.EXAMPLE, ["fhe-counter", str(tmp_output), "--no-git"])
        assert status == 1
        assert not tmp_output.exists()
        assert "cannot load configuration" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# Successful runs
# ---------------------------------------------------------------------------


class TestRun:
    def test_example_on_disk(self, tmp_output: Path, capsys):
        status = cli.run(ScaffoldMode.EXAMPLE, ["fhe-counter", str(tmp_output), "--no-git"])
        assert status == 0
        assert (tmp_output / "contracts" / "FheCounter.sol").is_file()
        assert not (tmp_output / ".git").exists()
        out = capsys.readouterr().out
        assert "npm install" in out

    def test_category_lists_included_examples(self, tmp_output: Path, capsys):
        status = cli.run(ScaffoldMode.CATEGORY, ["advanced", str(tmp_output), "--no-git"])
        assert status == 0
        out = capsys.readouterr().out
        for key in DEFAULT_REGISTRY.lookup_category("advanced").member_keys:
            assert key in out

    def test_dry_run_writes_nothing(self, tmp_output: Path, capsys):
        status = cli.run(ScaffoldMode.CATEGORY, ["basic", str(tmp_output), "--dry-run"])
        assert status == 0
        assert not tmp_output.exists()
        out = capsys.readouterr().out
        assert "Dry run" in out
        assert "scripts/deploy.ts" in out

    def test_verify(self, tmp_output: Path, capsys):
        status = cli.run(
            ScaffoldMode.EXAMPLE, ["blind-auction", str(tmp_output), "--no-git", "--verify"]
        )
        assert status == 0
        assert "entries present" in capsys.readouterr().out

    def test_config_file(self, tmp_path: Path, tmp_output: Path):
        from fhevm_scaffold.config import ScaffoldConfig

        config_path = ScaffoldConfig(author="From File").save(tmp_path / "config.json")
        status = cli.run(
            ScaffoldMode.EXAMPLE,
            ["fhe-counter", str(tmp_output), "--no-git", "--config", str(config_path)],
        )
        assert status == 0
        assert '"author": "From File"' in (tmp_output / "package.json").read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestMain:
    def test_dispatches_on_mode(self):
        with patch.object(cli, "run", return_value=0) as run:
            with pytest.raises(SystemExit) as exc_info:
                cli.main(["category", "basic", "out"])
        assert exc_info.value.code == 0
        run.assert_called_once_with(ScaffoldMode.CATEGORY, ["basic", "out"])

    def test_unknown_mode(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["bogus"])
        assert exc_info.value.code == 1
        assert "Usage: python -m fhevm_scaffold" in capsys.readouterr().out

    def test_main_example_exit_status(self):
        with patch.object(cli, "run", return_value=1):
            with pytest.raises(SystemExit) as exc_info:
                cli.main_example()
        assert exc_info.value.code == 1
