"""Integration tests for CLI commands against real files."""

from __future__ import annotations

import codecs
from pathlib import Path

from typer.testing import CliRunner

from encoding_converter.cli import cli as cli_module

runner = CliRunner()


def _config(
    tmp_path: Path,
    target: Path,
    input_encodings: tuple[str, ...] = ("utf-8", "windows-1252"),
    **extra: str,
) -> Path:
    labels = ", ".join(f'"{label}"' for label in input_encodings)
    lines = [
        f"path = {str(target)!r}",
        'target_encoding = "utf-8"',
        'file_extension = "txt"',
        f"input_encodings = [{labels}]",
    ]
    lines.extend(f"{key} = {value}" for key, value in extra.items())
    config_path = tmp_path / "settings.toml"
    config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return config_path


def test_convert_directory_from_config(tmp_path: Path) -> None:
    """Convert a directory with a config file; one bad file is reported only."""
    root = tmp_path / "data"
    root.mkdir()
    good = root / "good.txt"
    good.write_bytes(codecs.BOM_UTF16_BE + "héllo".encode("utf-16-be"))
    bad = root / "bad.txt"
    bad.write_bytes(b"\x81\x8d\x8f\x90\x9d" * 4)

    result = runner.invoke(
        cli_module.app,
        ["convert", "--config", str(_config(tmp_path, root, ("utf-8",), detect="false"))],
    )

    assert result.exit_code == 0, result.output
    assert good.read_bytes() == "héllo".encode("utf-8")
    assert bad.read_bytes() == b"\x81\x8d\x8f\x90\x9d" * 4
    assert "1 succeeded, 1 failed" in result.output


def test_convert_single_file_dry_run_does_not_write(tmp_path: Path) -> None:
    """--dry-run reports the conversion but leaves the file alone."""
    target = tmp_path / "one.txt"
    original = codecs.BOM_UTF8 + b"abc"
    target.write_bytes(original)

    result = runner.invoke(
        cli_module.app,
        ["convert", "--config", str(_config(tmp_path, target)), "--dry-run"],
    )

    assert result.exit_code == 0, result.output
    assert "Would convert" in result.output
    assert target.read_bytes() == original


def test_convert_single_file_failure_is_fatal(tmp_path: Path) -> None:
    """A single unresolvable file makes the command fail."""
    target = tmp_path / "one.txt"
    target.write_bytes(b"\x81\x8d\x8f\x90\x9d" * 4)

    result = runner.invoke(
        cli_module.app,
        ["convert", "--config", str(_config(tmp_path, target, ("utf-8",), detect="false"))],
    )

    assert result.exit_code == 4
    assert target.read_bytes() == b"\x81\x8d\x8f\x90\x9d" * 4


def test_detect_command_prints_signature_candidates(isolated_cwd: Path) -> None:
    """detect lists the resolved encoding and never writes."""
    tmp_path = isolated_cwd
    target = tmp_path / "sig.txt"
    data = codecs.BOM_UTF16_LE + "hi".encode("utf-16-le")
    target.write_bytes(data)

    result = runner.invoke(cli_module.app, ["detect", "--path", str(target)])

    assert result.exit_code == 0, result.output
    assert "UTF-16LE" in result.output
    assert "source=bom" in result.output
    assert target.read_bytes() == data


def test_latin1_fallback_converts_windows_1252_gap_bytes(tmp_path: Path) -> None:
    """Bytes cp1252 leaves undefined convert to their C1 controls under latin1."""
    target = tmp_path / "one.txt"
    target.write_bytes(b"caf\xe9 \x81\x9d")

    result = runner.invoke(
        cli_module.app,
        [
            "convert",
            "--config",
            str(_config(tmp_path, target, ("utf-8", "latin1"), detect="false")),
        ],
    )

    assert result.exit_code == 0, result.output
    assert target.read_bytes() == "café \x81\x9d".encode("utf-8")


def test_detect_single_file_failure_is_fatal(isolated_cwd: Path) -> None:
    """detect exits with the failure's code when one requested file fails."""
    target = isolated_cwd / "bad.txt"
    target.write_bytes(b"\x81\x8d\x8f")

    result = runner.invoke(
        cli_module.app,
        ["detect", "--path", str(target), "--input-encoding", "utf-8", "--no-detect"],
    )

    assert result.exit_code == 4
    assert "no_encoding_resolved" in result.output


def test_detect_directory_failure_is_reported_only(isolated_cwd: Path) -> None:
    """In directory mode detect reports failures and still succeeds."""
    root = isolated_cwd / "data"
    root.mkdir()
    (root / "bad.txt").write_bytes(b"\x81\x8d\x8f")
    (root / "good.txt").write_bytes(b"plain")

    result = runner.invoke(
        cli_module.app,
        ["detect", "--path", str(root), "--input-encoding", "utf-8", "--no-detect"],
    )

    assert result.exit_code == 0, result.output
    assert "source=fallback" in result.output
    assert "no_encoding_resolved" in result.output


def test_detect_pause_waits_for_enter(isolated_cwd: Path) -> None:
    """detect honours --pause like convert."""
    target = isolated_cwd / "sig.txt"
    target.write_bytes(codecs.BOM_UTF8 + b"hi")

    result = runner.invoke(
        cli_module.app, ["detect", "--path", str(target), "--pause"], input="\n"
    )

    assert result.exit_code == 0, result.output
    assert "Press Enter to exit" in result.output
