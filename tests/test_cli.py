"""Unit tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog
from asyncclick.testing import CliRunner

from depcheck.cli.scan import cli


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo the logging configuration applied by the CLI group."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project(tmp_path):
    """A project directory with a five-argument AC_INIT."""
    root = tmp_path / "hello-2.12"
    root.mkdir()
    (root / "configure.ac").write_text(
        "AC_INIT([GNU Hello], [2.12], [bug-hello@gnu.org], [hello],\n"
        "        [https://www.gnu.org/software/hello/])\n"
    )
    return root


@pytest.mark.asyncio
async def test_scan_prints_evidence(project):
    """Test that scan lists each dependency with its evidence."""
    runner = CliRunner()

    result = await runner.invoke(cli, ["scan", str(project)])

    assert result.exit_code == 0
    assert "[*] Dependencies scanned: 1" in result.output
    assert "[+] hello-2.12/configure.ac" in result.output
    assert "Highest confidence: HIGHEST" in result.output
    assert "[PRODUCT] Package: GNU Hello (HIGHEST, configure.ac)" in result.output
    assert "[VERSION] Package Version: 2.12 (HIGHEST, configure.ac)" in result.output
    assert "[VENDOR] URL: https://www.gnu.org/software/hello/ (HIGH, configure.ac)" in result.output


@pytest.mark.asyncio
async def test_scan_json_output(project):
    """Test that --json prints machine-readable results."""
    runner = CliRunner()

    result = await runner.invoke(cli, ["scan", str(project), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["errors"] == {}
    assert len(data["dependencies"]) == 1
    dep = data["dependencies"][0]
    assert dep["display_name"] == "hello-2.12/configure.ac"
    assert dep["highest_confidence"] == "highest"
    assert [(e["name"], e["confidence"]) for e in dep["evidence"]] == [
        ("Package", "highest"),
        ("Package Version", "highest"),
        ("Bug report address", "high"),
        ("Tarname", "high"),
        ("URL", "high"),
    ]


@pytest.mark.asyncio
async def test_scan_no_ac_init(tmp_path):
    """Test that a configure.ac without AC_INIT is reported without evidence."""
    (tmp_path / "configure.ac").write_text("AC_PREREQ([2.69])\n")
    runner = CliRunner()

    result = await runner.invoke(cli, ["scan", str(tmp_path)])

    assert result.exit_code == 0
    assert "(no evidence)" in result.output


@pytest.mark.asyncio
async def test_scan_disable_autoconf(project):
    """Test that --disable-autoconf skips the analyzer."""
    runner = CliRunner()

    result = await runner.invoke(cli, ["scan", str(project), "--disable-autoconf"])

    assert result.exit_code == 0
    assert "[*] Dependencies scanned: 0" in result.output


@pytest.mark.asyncio
async def test_scan_read_failure_exits_nonzero(project):
    """Test that an unreadable file is reported and sets exit code 1."""
    runner = CliRunner()

    with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
        result = await runner.invoke(cli, ["scan", str(project)])

    assert result.exit_code == 1
    assert "[-] " in result.output
    assert "Problem occurred while reading dependency file." in result.output


@pytest.mark.asyncio
async def test_scan_missing_path():
    """Test that a nonexistent path is rejected."""
    runner = CliRunner()

    result = await runner.invoke(cli, ["scan", "/nonexistent/depcheck-path"])

    assert result.exit_code != 0


@pytest.mark.asyncio
async def test_scan_verbose_logs_events(project):
    """Test that --verbose emits info-level log events."""
    runner = CliRunner()

    result = await runner.invoke(cli, ["--verbose", "scan", str(project)])

    assert result.exit_code == 0
    assert "scan_complete" in result.output


@pytest.mark.asyncio
async def test_scan_rejects_negative_max_content_chars(project):
    """Test that a negative --max-content-chars is a usage error."""
    runner = CliRunner()

    result = await runner.invoke(cli, ["scan", str(project), "--max-content-chars", "-3"])

    assert result.exit_code == 2
    assert "Invalid value" in result.output
    assert "URL:" not in result.output


@pytest.mark.asyncio
async def test_scan_invalid_env_config(project, monkeypatch):
    """Test that a malformed environment setting is reported, not raised."""
    monkeypatch.setenv("DEPCHECK_MAX_CONTENT_CHARS", "lots")
    runner = CliRunner()

    result = await runner.invoke(cli, ["scan", str(project)])

    assert result.exit_code == 1
    assert "[-] Invalid configuration" in result.output
    assert "max_content_chars" in result.output
