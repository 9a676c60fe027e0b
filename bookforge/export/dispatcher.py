"""Export dispatch from a book model to one named artifact.

Responsibilities:
- Validate export preconditions before any builder runs.
- Resolve the requested format through the explicit dispatch table.
- Wrap the builder payload into an `ExportArtifact` with a derived filename.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from ..errors import ValidationError
from ..models.datatypes import BookModel, ExportArtifact
from ..text.slug import artifact_filename_stem
from .formats import FORMAT_ROUTES, PACKAGE_BUILDER, PRINTABLE_BUILDER, ExportFormat
from .package_manifest import PackageManifestBuilder
from .printable import PrintableDocumentBuilder

Builder = Callable[[BookModel], str]


class ExportDispatcher:
    """Select, validate, and run the builder for a requested export format."""

    def __init__(
        self,
        package_builder: PackageManifestBuilder | None = None,
        printable_builder: PrintableDocumentBuilder | None = None,
    ) -> None:
        """Initialize builders; defaults use fixed metadata and markup escaping."""

        self._package_builder = package_builder or PackageManifestBuilder()
        self._printable_builder = printable_builder or PrintableDocumentBuilder()

    @property
    def builders(self) -> Mapping[str, Builder]:
        """Builder callables keyed by the builder names used in `FORMAT_ROUTES`."""

        return {
            PACKAGE_BUILDER: self._package_builder.build,
            PRINTABLE_BUILDER: self._printable_builder.build,
        }

    def export(self, book: BookModel, export_format: ExportFormat | str) -> ExportArtifact:
        """Export `book` in the requested format.

        Raises:
            ValidationError: If the format is unknown, or title, author, or
                chapters are empty.
        """

        resolved_format = ExportFormat.parse(export_format)
        self.validate(book)

        route = FORMAT_ROUTES[resolved_format]
        payload = self.builders[route.builder](book)
        return ExportArtifact(
            filename=f"{artifact_filename_stem(book.title)}{route.extension}",
            payload=payload.encode("utf-8"),
            media_type=route.media_type,
            export_format=resolved_format.value,
            label=route.label,
        )

    @staticmethod
    def validate(book: BookModel) -> None:
        """Raise `ValidationError` when `book` is not export-ready."""

        missing = book.missing_fields()
        if missing:
            field_list = ", ".join(f"`{name}`" for name in missing)
            raise ValidationError(
                f"Book is missing required field(s): {field_list}.",
                missing_fields=missing,
                hint="Provide a title and author, and upload manuscript content before exporting.",
            )
