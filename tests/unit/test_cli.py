"""Tests for CLI entry point."""

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from nativepath.__main__ import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


def invoke(runner: CliRunner, *args: str) -> str:
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


def test_cli_help(runner: CliRunner) -> None:
    """Test CLI help lists the commands."""
    output = invoke(runner, "--help")
    assert "Platform-native path toolkit" in output
    for command in ("simplify", "split", "sanitize", "to-relative", "long-path", "filter", "rmtree"):
        assert command in output


def test_cli_version(runner: CliRunner) -> None:
    """Test CLI version command."""
    assert "version" in invoke(runner, "--version").lower()


def test_invalid_flavour(runner: CliRunner) -> None:
    """Test unknown flavours are rejected by click."""
    result = runner.invoke(cli, ["--flavour", "vms", "simplify", "x"])
    assert result.exit_code != 0
    assert "Invalid value" in result.output


def test_bad_config_file(runner: CliRunner, tmp_path: Path) -> None:
    """Test configuration errors become click errors."""
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("invalid: yaml: content: [")
    result = runner.invoke(cli, ["-c", str(config_path), "simplify", "x"])
    assert result.exit_code == 1
    assert "Invalid YAML" in result.output


def test_simplify(runner: CliRunner) -> None:
    """Test simplify in the windows flavour."""
    assert invoke(runner, "--flavour", "windows", "simplify", "C:/a/../b/./c").strip() == "C:\\b\\c"


def test_simplify_posix(runner: CliRunner) -> None:
    """Test simplify in the posix flavour."""
    assert invoke(runner, "--flavour", "posix", "simplify", "/a//b/../c/").strip() == "/a/c"


def test_split(runner: CliRunner) -> None:
    """Test split prints one line per part."""
    lines = invoke(runner, "--flavour", "windows", "split", "\\\\?\\C:\\dir\\f.tar.gz").splitlines()
    assert lines == [
        "prefix: \\\\?\\",
        "drive: C:",
        "directory: \\dir\\",
        "base: f.tar",
        "extension: .gz",
    ]


def test_sanitize(runner: CliRunner) -> None:
    """Test sanitize replaces reserved characters."""
    assert invoke(runner, "sanitize", "a:b*c").strip() == "a_b_c"


def test_relative_roundtrip(runner: CliRunner) -> None:
    """Test to-relative and to-absolute."""
    rel = invoke(runner, "--flavour", "windows", "to-relative", "C:\\Root\\x.txt", "C:\\Root\\").strip()
    assert rel == ".\\x.txt"
    back = invoke(runner, "--flavour", "windows", "to-absolute", rel, "C:\\Root\\").strip()
    assert back == "C:\\Root\\x.txt"


def test_long_path_uses_configured_limit(runner: CliRunner, tmp_path: Path) -> None:
    """Test long-path honours paths.max_path from the config file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("paths:\n  flavour: windows\n  max_path: 10\n")
    output = invoke(runner, "-c", str(config_path), "long-path", "C:\\abcdefghij")
    assert output.strip() == "\\\\?\\C:\\abcdefghij"


def test_filter(runner: CliRunner) -> None:
    """Test filter renders a picker entry."""
    output = invoke(
        runner,
        "filter",
        "--name",
        "Text",
        "--description",
        "Text files",
        "--ext",
        "txt",
        "--ext",
        ".md",
        "--show-extensions",
    )
    assert output.strip() == "Text files (*.txt,*.md)|*.txt;*.md|"


def test_filter_only(runner: CliRunner) -> None:
    """Test filter --only prints just the patterns."""
    output = invoke(runner, "filter", "--name", "Text", "--ext", "txt", "--ext", "md", "--only")
    assert output.strip() == "*.txt;*.md"


def test_temp_name_is_reproducible_with_seed(runner: CliRunner, tmp_path: Path) -> None:
    """Test temp-name with a configured directory and seed."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"temp:\n  directory: {tmp_path}\n  seed: 3\n")

    first = invoke(runner, "-c", str(config_path), "temp-name", "--prefix", "x", "--extension", "tmp")
    second = invoke(runner, "-c", str(config_path), "temp-name", "--prefix", "x", "--extension", "tmp")

    assert first == second
    name = first.strip()
    assert name.startswith(os.path.join(str(tmp_path.resolve()), "x_"))
    assert name.endswith(".tmp")
    assert not os.path.exists(name)


def test_rmtree(runner: CliRunner, tmp_path: Path) -> None:
    """Test rmtree deletes a directory tree."""
    victim = tmp_path / "victim"
    (victim / "sub").mkdir(parents=True)
    (victim / "sub" / "f.txt").write_text("x")

    output = invoke(runner, "rmtree", str(victim))
    assert "Deleted" in output
    assert not victim.exists()


def test_rmtree_relative_path_fails(runner: CliRunner) -> None:
    """Test rmtree refuses relative paths."""
    result = runner.invoke(cli, ["rmtree", "relative/dir"])
    assert result.exit_code == 1
    assert "Could not delete" in result.output


def test_verbose_logs_debug_to_stderr(runner: CliRunner, tmp_path: Path) -> None:
    """Test --verbose enables debug logging."""
    result = runner.invoke(cli, ["-v", "rmtree", str(tmp_path / "never")])
    assert result.exit_code == 0
    assert "Logging configured: level=DEBUG" in result.output
