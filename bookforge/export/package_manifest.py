"""EPUB-style package manifest generation.

Responsibilities:
- Render book metadata, the resource manifest, and the reading-order spine.
- Keep output byte-stable for the same book and builder settings.

The payload is the package description only. The `chapter<N>.xhtml` and
`toc.xhtml` resources it references are not generated, and nothing is wrapped
in a ZIP container.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from ..models.datatypes import BookModel

DEFAULT_LANGUAGE = "en"
DEFAULT_MODIFIED_TIMESTAMP = "2025-07-16T00:00:00Z"

_ENTRY_SEPARATOR = "\n    "


class PackageManifestBuilder:
    """Build the OPF package document for a book."""

    def __init__(
        self,
        *,
        language: str = DEFAULT_LANGUAGE,
        modified_timestamp: str = DEFAULT_MODIFIED_TIMESTAMP,
        escape_markup: bool = True,
    ) -> None:
        """Initialize fixed metadata values and the markup escaping policy.

        Args:
            language: Value of `dc:language`.
            modified_timestamp: Value of the `dcterms:modified` meta entry.
            escape_markup: XML-escape title and author; `False` passes them through raw.
        """

        self._language = language
        self._modified_timestamp = modified_timestamp
        self._escape_markup = escape_markup

    def build(self, book: BookModel) -> str:
        """Return the package document text for `book`."""

        chapter_ids = [self.chapter_id(position) for position in range(1, len(book.chapters) + 1)]
        manifest_items = _ENTRY_SEPARATOR.join(
            f'<item id="{chapter_id}" href="{chapter_id}.xhtml" '
            'media-type="application/xhtml+xml"/>'
            for chapter_id in chapter_ids
        )
        spine_items = _ENTRY_SEPARATOR.join(
            f'<itemref idref="{chapter_id}"/>' for chapter_id in chapter_ids
        )
        return f"""<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="3.0">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
    <dc:title>{self._text(book.title)}</dc:title>
    <dc:creator>{self._text(book.author)}</dc:creator>
    <dc:language>{self._text(self._language)}</dc:language>
    <meta property="dcterms:modified">{self._text(self._modified_timestamp)}</meta>
  </metadata>
  <manifest>
    <item id="toc" href="toc.xhtml" media-type="application/xhtml+xml" properties="nav"/>
    {manifest_items}
  </manifest>
  <spine>
    {spine_items}
  </spine>
</package>"""

    @staticmethod
    def chapter_id(position: int) -> str:
        """Return the 1-based resource identifier for a chapter position."""

        return f"chapter{position}"

    def _text(self, value: str) -> str:
        if not self._escape_markup:
            return value
        return escape(value)


def build_package(book: BookModel) -> str:
    """Build a package document with default metadata and escaping."""

    return PackageManifestBuilder().build(book)
