"""Command-line interface for bookforge.

Responsibilities:
- Expose user-facing commands for compiling and exporting manuscripts.
- Convert CLI arguments and optional YAML defaults into `BookforgeConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_chapter_list,
    echo_export_readiness,
    echo_format_catalog,
    echo_upload_summary,
    exit_with_command_error,
)
from .config import BookforgeConfig, ConfigLoader
from .errors import PipelineStageError
from .parsing import normalize_optional_string
from .pipeline import BookforgePipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="bookforge",
    no_args_is_help=True,
    help="Compile manuscripts into ebook artifacts.",
)


class BuildProgressIndicator:
    """Render deterministic per-stage progress lines for export commands."""

    _SPINNER_FRAMES = "|/-\\"

    def __init__(self, command_name: str) -> None:
        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        spinner = self._SPINNER_FRAMES[(stage_index - 1) % len(self._SPINNER_FRAMES)]
        typer.echo(
            f"[progress] command={self._command_name} "
            f"{spinner} {stage_index}/{stage_total} stage={stage_name}"
        )


def _load_yaml_config(config_path: Path | None) -> BookforgeConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _resolve_command_config(
    *,
    config_file: Path | None,
    input_path: Path | None,
    out: Path | None,
    title: str | None,
    author: str | None,
    export_format: str | None,
    keep_leading_text: bool | None,
    escape_markup: bool | None,
) -> BookforgeConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded = _load_yaml_config(config_file)
    if loaded is None:
        if input_path is None:
            raise PipelineStageError(
                stage="config",
                detail="Input manuscript path is required when `--config` is not provided.",
                hint="Pass `<input>` or use `--config <path.yaml>` with `input_path`.",
            )
        loaded = BookforgeConfig(input_path=input_path)

    config = BookforgeConfig(
        input_path=input_path if input_path is not None else loaded.input_path,
        output_dir=out if out is not None else loaded.output_dir,
        title=(normalize_optional_string(title) or "") if title is not None else loaded.title,
        author=(normalize_optional_string(author) or "") if author is not None else loaded.author,
        export_format=(
            (normalize_optional_string(export_format) or "").lower()
            if export_format is not None
            else loaded.export_format
        ),
        language=loaded.language,
        modified_timestamp=loaded.modified_timestamp,
        escape_markup=escape_markup if escape_markup is not None else loaded.escape_markup,
        keep_leading_text=(
            keep_leading_text if keep_leading_text is not None else loaded.keep_leading_text
        ),
    )
    try:
        config.validate()
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=str(exc),
            hint="Run `bookforge formats` to list supported export formats.",
        ) from exc
    return config


@app.command("build")
def build_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="Path to the manuscript (.txt, .docx, .pdf). Required unless set by `--config`.",
        ),
    ] = None,
    title: Annotated[
        str | None, typer.Option("--title", help="Book title (required for export).")
    ] = None,
    author: Annotated[
        str | None, typer.Option("--author", help="Author name (required for export).")
    ] = None,
    export_format: Annotated[
        str | None,
        typer.Option("--format", help="Export format: `kindle`, `universal`, or `pdf`."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output directory (overrides config file value)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with command defaults."),
    ] = None,
    keep_leading_text: Annotated[
        bool | None,
        typer.Option(
            "--keep-leading-text/--drop-leading-text",
            help="Keep text before the first chapter heading as an `Introduction` chapter.",
        ),
    ] = None,
    escape_markup: Annotated[
        bool | None,
        typer.Option(
            "--escape-markup/--no-escape-markup",
            help="Escape markup characters from the manuscript in generated documents.",
        ),
    ] = None,
) -> None:
    """Compile a manuscript and write one export artifact."""

    try:
        config = _resolve_command_config(
            config_file=config_file,
            input_path=input_path,
            out=out,
            title=title,
            author=author,
            export_format=export_format,
            keep_leading_text=keep_leading_text,
            escape_markup=escape_markup,
        )
        progress = BuildProgressIndicator(command_name="build")
        pipeline = BookforgePipeline(
            run_logger=RunLogger(),
            stage_progress_callback=progress.on_stage_start,
        )
        result = pipeline.run(config)
    except Exception as exc:
        exit_with_command_error("build", exc)

    typer.echo(f"Format: {result.artifact.label}")
    typer.echo(f"Artifact: {result.artifact_path}")
    typer.echo(f"Summary: {result.summary_path}")
    echo_upload_summary(result.source_character_count, result.book)


@app.command("list-chapters")
def list_chapters_command(
    input_path: Annotated[Path, typer.Argument(help="Path to the manuscript.")],
    keep_leading_text: Annotated[
        bool,
        typer.Option(
            "--keep-leading-text/--drop-leading-text",
            help="Keep text before the first chapter heading as an `Introduction` chapter.",
        ),
    ] = False,
    title: Annotated[str | None, typer.Option("--title", help="Book title.")] = None,
    author: Annotated[str | None, typer.Option("--author", help="Author name.")] = None,
) -> None:
    """List detected chapters without exporting anything."""

    try:
        config = BookforgeConfig(
            input_path=input_path,
            title=normalize_optional_string(title) or "",
            author=normalize_optional_string(author) or "",
            keep_leading_text=keep_leading_text,
        )
        raw_text, book = BookforgePipeline().load_book(config)
    except Exception as exc:
        exit_with_command_error("list-chapters", exc)

    echo_upload_summary(len(raw_text), book)
    echo_chapter_list(book.chapters)
    echo_export_readiness(book)


@app.command("formats")
def formats_command() -> None:
    """List supported export formats."""

    echo_format_catalog()


def main() -> None:
    """Run the bookforge CLI."""

    app()
