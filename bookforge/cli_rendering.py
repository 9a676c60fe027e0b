"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
upload summaries, chapter listing rows, and the export format catalog.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .export.formats import FORMAT_ROUTES
from .models.datatypes import BookModel, Chapter


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_upload_summary(source_character_count: int, book: BookModel) -> None:
    """Print extracted character count and detected chapter count."""

    typer.echo(f"{source_character_count} characters • {len(book.chapters)} chapters detected")


def echo_chapter_list(chapters: list[Chapter] | tuple[Chapter, ...]) -> None:
    """Print compact chapter position/title rows in book order."""

    for position, chapter in enumerate(chapters, start=1):
        typer.echo(f"{position}. {chapter.title}")


def echo_export_readiness(book: BookModel) -> None:
    """Print which required fields still block export, if any."""

    missing = book.missing_fields()
    if not missing:
        typer.echo("Export ready: yes")
        return
    typer.echo(f"Export ready: no (missing {', '.join(missing)})")


def echo_format_catalog() -> None:
    """Print every export format with its label, extension, and description."""

    for export_format, spec in FORMAT_ROUTES.items():
        typer.echo(f"{export_format.value}: {spec.label} [{spec.extension}]")
        typer.echo(f"  {spec.description}")
