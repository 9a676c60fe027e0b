"""Shared pytest fixtures for the full bookforge test suite."""

from __future__ import annotations

from pathlib import Path

import docx
import pytest

from tests.fixture_paths import TWO_CHAPTER_MANUSCRIPT


@pytest.fixture
def two_chapter_txt(tmp_path: Path) -> Path:
    """Write the canonical two-chapter manuscript as UTF-8 text."""

    path = tmp_path / "manuscript.txt"
    path.write_text(TWO_CHAPTER_MANUSCRIPT, encoding="utf-8")
    return path


@pytest.fixture
def two_chapter_docx(tmp_path: Path) -> Path:
    """Write the canonical two-chapter manuscript as a Word document, one paragraph per line."""

    path = tmp_path / "manuscript.docx"
    document = docx.Document()
    for line in TWO_CHAPTER_MANUSCRIPT.split("\n"):
        document.add_paragraph(line)
    document.save(str(path))
    return path
