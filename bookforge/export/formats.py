"""Export format variants and their dispatch table.

Responsibilities:
- Enumerate the supported export formats.
- Map every format to exactly one builder, extension, and media type.

`kindle` and `universal` deliberately share the package-manifest route; they
differ only in their human-readable label and description.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import ValidationError

PACKAGE_BUILDER = "package"
PRINTABLE_BUILDER = "printable"


class ExportFormat(str, Enum):
    """Supported export format identifiers."""

    KINDLE = "kindle"
    UNIVERSAL = "universal"
    PDF = "pdf"

    @classmethod
    def parse(cls, value: ExportFormat | str) -> ExportFormat:
        """Resolve a format member from a member or case-insensitive identifier."""

        if isinstance(value, cls):
            return value
        token = str(value).strip().lower()
        for member in cls:
            if member.value == token:
                return member
        supported = ", ".join(f"`{member.value}`" for member in cls)
        raise ValidationError(
            f"Unsupported export format `{value}`.",
            hint=f"Use one of: {supported}.",
        )


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """Route and catalog entry for one export format.

    Attributes:
        label: Human-readable format title.
        description: Target device and layout notes shown in format listings.
        builder: Builder key (`package` or `printable`).
        extension: Output filename extension including the leading dot.
        media_type: MIME type of the produced payload.
    """

    label: str
    description: str
    builder: str
    extension: str
    media_type: str


FORMAT_ROUTES: dict[ExportFormat, FormatSpec] = {
    ExportFormat.KINDLE: FormatSpec(
        label="Kindle E-Book (.EPUB)",
        description=(
            "Minimalist cover, 1:1.6 ratio (2500x1600px, 300 DPI). Text-focused with "
            "clean typography, high contrast. Dark academia aesthetic."
        ),
        builder=PACKAGE_BUILDER,
        extension=".epub",
        media_type="application/epub+zip",
    ),
    ExportFormat.UNIVERSAL: FormatSpec(
        label="Universal E-Book (.EPUB)",
        description=(
            "Same cover as Kindle. Fluid-layout interior, hyperlinked TOC. No fixed "
            "formatting. Optimized for all e-readers."
        ),
        builder=PACKAGE_BUILDER,
        extension=".epub",
        media_type="application/epub+zip",
    ),
    ExportFormat.PDF: FormatSpec(
        label="Premium PDF (Print/Digital)",
        description=(
            "A4/US Letter (8.5x11in), 0.5in margins, CMYK for print. Print-ready with "
            "bleed if needed. Designed for notes/workbook use."
        ),
        builder=PRINTABLE_BUILDER,
        extension=".html",
        media_type="text/html",
    ),
}
