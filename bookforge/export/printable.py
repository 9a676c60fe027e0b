"""Print-styled HTML document generation.

Responsibilities:
- Render a self-contained HTML document standing in for a print-ready PDF.
- Embed fixed page geometry, font, and palette directives as a style block.

Every chapter section, the first one included, starts with a page-break
directive. Line breaks inside chapter content become `<br>` markers.
"""

from __future__ import annotations

import html
import re

from ..models.datatypes import BookModel, Chapter

TEXT_COLOR = "#2d2d2d"
PRIMARY_COLOR = "#7068af"
SECONDARY_TEXT_COLOR = "#5a5a5a"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_STYLE_BLOCK = f"""    <style>
        @page {{ size: A4; margin: 0.5in; }}
        body {{ font-family: 'Times New Roman', serif; color: {TEXT_COLOR}; }}
        .title {{ font-size: 24px; text-align: center; margin-bottom: 20px; color: {PRIMARY_COLOR}; }}
        .author {{ font-size: 18px; text-align: center; margin-bottom: 30px; color: {SECONDARY_TEXT_COLOR}; }}
        .chapter-title {{ font-size: 18px; font-weight: bold; margin-top: 30px; color: {PRIMARY_COLOR}; }}
        .chapter-content {{ line-height: 1.6; margin-bottom: 20px; }}
        .page-break {{ page-break-before: always; }}
    </style>"""


class PrintableDocumentBuilder:
    """Build the printable HTML document for a book."""

    def __init__(self, *, escape_markup: bool = True) -> None:
        """Initialize the markup escaping policy.

        With `escape_markup=False`, title, author, and chapter text are inserted
        verbatim, so embedded markup in the manuscript is rendered as markup.
        """

        self._escape_markup = escape_markup

    def build(self, book: BookModel) -> str:
        """Return the printable document text for `book`."""

        sections = "".join(self._chapter_section(chapter) for chapter in book.chapters)
        return f"""
<!DOCTYPE html>
<html>
<head>
{_STYLE_BLOCK}
</head>
<body>
    <h1 class="title">{self._text(book.title)}</h1>
    <p class="author">by {self._text(book.author)}</p>
    {sections}
</body>
</html>"""

    def _chapter_section(self, chapter: Chapter) -> str:
        content = _LINE_BREAK_RE.sub("<br>", self._text(chapter.content))
        return f"""
        <div class="page-break">
            <h2 class="chapter-title">{self._text(chapter.title)}</h2>
            <div class="chapter-content">{content}</div>
        </div>
    """

    def _text(self, value: str) -> str:
        if not self._escape_markup:
            return value
        return html.escape(value, quote=False)


def build_printable(book: BookModel) -> str:
    """Build a printable document with default escaping."""

    return PrintableDocumentBuilder().build(book)
