#!/usr/bin/env python3
"""
encoding_converter.cli.cli

Typer-based CLI for rewriting text files in a target character encoding.

Settings come from a TOML file (``config.toml`` in the working directory
by default); any field can be overridden with a flag.

Examples
--------
Convert everything the configuration names:

    convert-encoding convert

Convert a tree of ``.txt`` files to UTF-8 without a configuration file:

    convert-encoding convert --path docs --file-extension txt \
        --target-encoding utf-8 --input-encoding windows-1252

Show what each file would be decoded as:

    convert-encoding detect --path docs
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer

from encoding_converter.errors import EncodingConverterError

if TYPE_CHECKING:
    from encoding_converter.schemas import RunConfig

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="convert-encoding",
    help="Convert text files to a target character encoding.",
    no_args_is_help=True,
)

CONFIG_HELP = "TOML configuration file. Defaults to ./config.toml when present."
PATH_HELP = "File or directory to process (overrides 'path')."
TARGET_HELP = "Target encoding label (overrides 'target_encoding')."
EXTENSION_HELP = "Only process files with this extension in directory mode."
INPUT_ENCODING_HELP = "Fallback source encoding label, tried in order (repeatable)."
CONFIDENCE_HELP = "Minimum detector confidence (0-1) for a detected encoding to be used."


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised during the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _load_run_config(config_path: Path | None, overrides: dict[str, Any]) -> RunConfig:
    """Load configuration, falling back to flags alone when no file exists."""
    from encoding_converter.config import DEFAULT_CONFIG_PATH, load_config

    if config_path is None:
        has_required_flags = overrides.get("path") and overrides.get("target_encoding")
        if not DEFAULT_CONFIG_PATH.exists() and has_required_flags:
            return load_config(None, overrides)
        config_path = DEFAULT_CONFIG_PATH
    return load_config(config_path, overrides)


def _wait_for_enter(pause: bool) -> None:
    if pause:
        typer.prompt("Press Enter to exit", default="", show_default=False)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    verbose : bool, default=False
        Whether to log pipeline decisions at DEBUG level.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    path: Path | None = typer.Option(None, "--path", help=PATH_HELP),
    target_encoding: str | None = typer.Option(None, "--target-encoding", help=TARGET_HELP),
    file_extension: str | None = typer.Option(
        None, "--file-extension", help=EXTENSION_HELP
    ),
    input_encoding: list[str] | None = typer.Option(
        None, "--input-encoding", help=INPUT_ENCODING_HELP
    ),
    no_detect: bool = typer.Option(
        False, "--no-detect", help="Skip statistical charset detection."
    ),
    min_confidence: float | None = typer.Option(
        None, "--min-confidence", min=0.0, max=1.0, help=CONFIDENCE_HELP
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Resolve and convert in memory without writing files."
    ),
    pause: bool = typer.Option(False, "--pause", help="Wait for Enter before exiting."),
) -> None:
    """Convert a file, or every matching file under a directory, in place.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    config : Path | None
        TOML configuration file.
    dry_run : bool, default=False
        Whether to skip writing converted files.
    pause : bool, default=False
        Whether to wait for Enter before the process exits.

    Notes
    -----
    - In directory mode, failed files are reported and the run continues.
    - In single-file mode, a failed file makes the command exit nonzero.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    overrides: dict[str, Any] = {
        "path": path,
        "target_encoding": target_encoding,
        "file_extension": file_extension,
        "input_encodings": input_encoding or None,
        "detect": False if no_detect else None,
        "min_confidence": min_confidence,
    }

    try:
        from encoding_converter.api import convert_from_config
        from encoding_converter.application.results import ConversionSuccess

        run_config = _load_run_config(config, overrides)
        typer.echo(f"Converting {run_config.path} to {run_config.target_encoding}...")
        report = convert_from_config(run_config, dry_run=dry_run)
        for result in report.results:
            if isinstance(result, ConversionSuccess):
                action = "Converted" if result.written else "Unchanged"
                if dry_run:
                    action = "Would convert"
                typer.secho(
                    f"✓ {action}: {result.path} ({result.encoding_used}, {result.source})",
                    fg=typer.colors.GREEN,
                )
            else:
                typer.secho(
                    f"✗ {result.path}: {result.reason}: {result.message}",
                    fg=typer.colors.RED,
                    err=True,
                )
        typer.echo(f"Done: {len(report.succeeded)} succeeded, {len(report.failed)} failed.")
        exit_code = report.exit_code
    except EncodingConverterError as exc:
        exit_code = _print_error(exc, debug)
    except Exception as exc:
        logger.exception("unexpected error during conversion")
        exit_code = _print_error(exc, debug)

    _wait_for_enter(pause)
    if exit_code:
        raise typer.Exit(code=exit_code)


@app.command("detect")
def detect_cmd(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    path: Path | None = typer.Option(None, "--path", help=PATH_HELP),
    file_extension: str | None = typer.Option(
        None, "--file-extension", help=EXTENSION_HELP
    ),
    input_encoding: list[str] | None = typer.Option(
        None, "--input-encoding", help=INPUT_ENCODING_HELP
    ),
    no_detect: bool = typer.Option(
        False, "--no-detect", help="Skip statistical charset detection."
    ),
    min_confidence: float | None = typer.Option(
        None, "--min-confidence", min=0.0, max=1.0, help=CONFIDENCE_HELP
    ),
    pause: bool = typer.Option(False, "--pause", help="Wait for Enter before exiting."),
) -> None:
    """Print the resolved source encoding of each file without writing.

    A failed file is fatal only when a single file was requested, as in
    ``convert``.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    overrides: dict[str, Any] = {
        "path": path,
        # The target is irrelevant when nothing is written.
        "target_encoding": "utf-8",
        "file_extension": file_extension,
        "input_encodings": input_encoding or None,
        "detect": False if no_detect else None,
        "min_confidence": min_confidence,
    }

    exit_code = 0
    try:
        from encoding_converter.api import detect_from_config

        run_config = _load_run_config(config, overrides)
        reports = detect_from_config(run_config)
        single_file = not run_config.path.is_dir()
        for report in reports:
            if report.candidate is not None:
                candidate = report.candidate
                typer.echo(
                    f"{report.path}: {candidate.encoding} "
                    f"(source={candidate.source}, bom_length={candidate.bom_length})"
                )
            elif report.failure is not None:
                typer.secho(
                    f"{report.path}: {report.failure.reason}: {report.failure.message}",
                    fg=typer.colors.RED,
                    err=True,
                )
                if single_file:
                    exit_code = report.failure.to_error().exit_code
    except EncodingConverterError as exc:
        exit_code = _print_error(exc, debug)
    except Exception as exc:
        logger.exception("unexpected error during detection")
        exit_code = _print_error(exc, debug)

    _wait_for_enter(pause)
    if exit_code:
        raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
