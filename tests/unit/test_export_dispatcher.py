"""Unit tests for export validation, dispatch, and artifact naming."""

from __future__ import annotations

import pytest

from bookforge.errors import PipelineStageError, ValidationError
from bookforge.export.dispatcher import ExportDispatcher
from bookforge.export.formats import FORMAT_ROUTES, ExportFormat
from bookforge.export.package_manifest import PackageManifestBuilder, build_package
from bookforge.export.printable import PrintableDocumentBuilder, build_printable
from bookforge.models.datatypes import BookModel, Chapter


class _RecordingPackageBuilder(PackageManifestBuilder):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def build(self, book: BookModel) -> str:
        self.calls += 1
        return super().build(book)


class _RecordingPrintableBuilder(PrintableDocumentBuilder):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def build(self, book: BookModel) -> str:
        self.calls += 1
        return super().build(book)


def _ready_book(title: str = "T") -> BookModel:
    return BookModel(
        title=title,
        author="A",
        chapters=(Chapter("Chapter 1", "Hello world."), Chapter("Chapter 2", "Goodbye.")),
    )


@pytest.mark.parametrize("export_format", ["kindle", "universal"])
def test_ebook_formats_route_to_package_builder(export_format: str) -> None:
    book = _ready_book()

    artifact = ExportDispatcher().export(book, export_format)

    assert artifact.filename == "T.epub"
    assert artifact.media_type == "application/epub+zip"
    assert artifact.export_format == export_format
    assert artifact.payload == build_package(book).encode("utf-8")


def test_kindle_and_universal_differ_only_in_label() -> None:
    book = _ready_book()
    dispatcher = ExportDispatcher()

    kindle = dispatcher.export(book, ExportFormat.KINDLE)
    universal = dispatcher.export(book, ExportFormat.UNIVERSAL)

    assert kindle.payload == universal.payload
    assert kindle.filename == universal.filename
    assert kindle.label == "Kindle E-Book (.EPUB)"
    assert universal.label == "Universal E-Book (.EPUB)"


def test_pdf_format_routes_to_printable_builder() -> None:
    book = _ready_book("My Book")

    artifact = ExportDispatcher().export(book, "pdf")

    assert artifact.filename == "My Book.html"
    assert artifact.media_type == "text/html"
    assert artifact.text == build_printable(book)


def test_format_identifiers_are_case_insensitive() -> None:
    artifact = ExportDispatcher().export(_ready_book(), " PDF ")

    assert artifact.export_format == "pdf"


def test_unknown_format_raises_validation_error() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ExportDispatcher().export(_ready_book(), "mobi")

    assert "mobi" in exc_info.value.detail
    assert exc_info.value.stage == "validate"


@pytest.mark.parametrize(
    ("book", "missing"),
    [
        (_ready_book().with_title(""), ("title",)),
        (_ready_book().with_author(""), ("author",)),
        (_ready_book().with_chapters([]), ("chapters",)),
    ],
)
@pytest.mark.parametrize("export_format", list(ExportFormat))
def test_incomplete_book_fails_before_any_builder_runs(
    book: BookModel, missing: tuple[str, ...], export_format: ExportFormat
) -> None:
    package_builder = _RecordingPackageBuilder()
    printable_builder = _RecordingPrintableBuilder()
    dispatcher = ExportDispatcher(package_builder, printable_builder)

    with pytest.raises(ValidationError) as exc_info:
        dispatcher.export(book, export_format)

    assert exc_info.value.missing_fields == missing
    assert package_builder.calls == 0
    assert printable_builder.calls == 0


def test_validation_error_is_a_stage_error_with_hint() -> None:
    with pytest.raises(PipelineStageError) as exc_info:
        ExportDispatcher.validate(BookModel(title="", author="", chapters=()))

    assert exc_info.value.detail == (
        "Book is missing required field(s): `title`, `author`, `chapters`."
    )
    assert exc_info.value.hint


def test_validation_does_not_change_the_book() -> None:
    book = _ready_book().with_author("")

    with pytest.raises(ValidationError):
        ExportDispatcher().export(book, "kindle")

    assert book == _ready_book().with_author("")


def test_dispatch_table_covers_every_format() -> None:
    assert set(FORMAT_ROUTES) == set(ExportFormat)
    assert {spec.extension for spec in FORMAT_ROUTES.values()} == {".epub", ".html"}


def test_filename_replaces_unsafe_title_characters() -> None:
    artifact = ExportDispatcher().export(_ready_book("Part/One: Rise?"), "kindle")

    assert artifact.filename == "Part_One_ Rise_.epub"


def test_export_uses_injected_builders() -> None:
    package_builder = _RecordingPackageBuilder()
    printable_builder = _RecordingPrintableBuilder()
    dispatcher = ExportDispatcher(package_builder, printable_builder)

    dispatcher.export(_ready_book(), "universal")
    dispatcher.export(_ready_book(), "pdf")

    assert package_builder.calls == 1
    assert printable_builder.calls == 1
