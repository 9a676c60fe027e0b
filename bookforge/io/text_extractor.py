"""Manuscript text extraction.

Responsibilities:
- Turn an uploaded manuscript file into one plain-text string.
- Report unreadable or unsupported inputs as `ExtractionError` without partial output.

Supported inputs are `.txt` (UTF-8), `.docx` (paragraph text via python-docx),
and text-based `.pdf` files (page text via pypdf).
"""

from __future__ import annotations

from pathlib import Path

import docx
from pypdf import PdfReader

from ..errors import ExtractionError


class ManuscriptTextExtractor:
    """Extract plain text from supported manuscript files."""

    SUPPORTED_SUFFIXES = (".txt", ".docx", ".pdf")

    def extract(self, path: Path) -> str:
        """Extract the full text of a manuscript file."""

        if not path.exists():
            raise ExtractionError(
                f"Input manuscript not found: `{path}`.",
                hint="Verify the input path and rerun.",
            )

        suffix = path.suffix.lower()
        if suffix == ".txt":
            return self._extract_plain_text(path)
        if suffix == ".docx":
            return self._extract_docx(path)
        if suffix == ".pdf":
            return self._extract_pdf(path)
        raise ExtractionError(
            f"Unsupported manuscript type `{suffix or path.name}`.",
            hint="Supported inputs: " + ", ".join(self.SUPPORTED_SUFFIXES) + ".",
        )

    def _extract_plain_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(
                f"Manuscript `{path}` is not valid UTF-8 text.",
                hint="Re-save the file with UTF-8 encoding.",
            ) from exc

    def _extract_docx(self, path: Path) -> str:
        """Join document paragraphs with newlines; run formatting is discarded."""

        try:
            document = docx.Document(str(path))
        except Exception as exc:
            raise ExtractionError(
                f"Failed to read Word document `{path}`: {exc}",
                hint="Verify the file is a valid `.docx` document.",
            ) from exc
        return "\n".join(paragraph.text for paragraph in document.paragraphs)

    def _extract_pdf(self, path: Path) -> str:
        try:
            reader = PdfReader(str(path))
            pages = [(page.extract_text() or "").replace("\f", "\n").strip() for page in reader.pages]
        except Exception as exc:
            raise ExtractionError(
                f"Failed to read PDF `{path}`: {exc}",
                hint="Only text-based PDFs are supported.",
            ) from exc
        text = "\n".join(pages).strip()
        if not text:
            raise ExtractionError(
                f"No extractable text found in PDF `{path}`.",
                hint="Only text-based PDFs are supported.",
            )
        return text
