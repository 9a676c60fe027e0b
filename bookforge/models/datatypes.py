"""Core datatypes shared across bookforge modules.

Responsibilities:
- Represent immutable records passed between compile and export stages.
- Keep edits explicit: a changed book is a new `BookModel`, never a mutation.

Key types:
- `Chapter`, `BookModel`, `ExportArtifact`, and `RunResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from ..io.chapter_splitter import ChapterSplitter


@dataclass(frozen=True, slots=True)
class Chapter:
    """A chapter recognized in manuscript text.

    Attributes:
        title: Trimmed heading label, e.g. `Chapter 3` or `Part 2`.
        content: Trimmed body text; may contain line breaks and may be empty.
    """

    title: str
    content: str


@dataclass(frozen=True, slots=True)
class BookModel:
    """In-memory book compiled from one manuscript upload.

    Attributes:
        title: Book title, required for export.
        author: Author name, required for export.
        chapters: Chapters in source order.
    """

    title: str
    author: str
    chapters: tuple[Chapter, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.chapters, tuple):
            object.__setattr__(self, "chapters", tuple(self.chapters))

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        title: str = "",
        author: str = "",
        splitter: ChapterSplitter | None = None,
    ) -> BookModel:
        """Build a fresh model by segmenting raw manuscript text."""

        from ..io.chapter_splitter import ChapterSplitter

        active_splitter = splitter if splitter is not None else ChapterSplitter()
        return cls(title=title, author=author, chapters=tuple(active_splitter.segment(text)))

    @property
    def character_count(self) -> int:
        """Total number of content characters across all chapters."""

        return sum(len(chapter.content) for chapter in self.chapters)

    def missing_fields(self) -> tuple[str, ...]:
        """Return names of required fields that block export, in display order."""

        missing: list[str] = []
        if not self.title.strip():
            missing.append("title")
        if not self.author.strip():
            missing.append("author")
        if not self.chapters:
            missing.append("chapters")
        return tuple(missing)

    @property
    def is_export_ready(self) -> bool:
        return not self.missing_fields()

    def with_title(self, title: str) -> BookModel:
        return replace(self, title=title)

    def with_author(self, author: str) -> BookModel:
        return replace(self, author=author)

    def with_chapters(self, chapters: Iterable[Chapter]) -> BookModel:
        return replace(self, chapters=tuple(chapters))


@dataclass(frozen=True, slots=True)
class ExportArtifact:
    """Named payload produced by one export request.

    Attributes:
        filename: Suggested download filename including extension.
        payload: UTF-8 encoded document bytes.
        media_type: MIME type advertised for delivery.
        export_format: Format identifier (`kindle`, `universal`, or `pdf`).
        label: Human-readable format label.
    """

    filename: str
    payload: bytes
    media_type: str
    export_format: str
    label: str

    @property
    def text(self) -> str:
        return self.payload.decode("utf-8")


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of one compile-and-export run.

    Attributes:
        book: Book model that was exported.
        artifact: Generated export artifact.
        artifact_path: Where the artifact payload was written.
        summary_path: Where the JSON run summary was written.
        source_character_count: Length of the extracted manuscript text.
    """

    book: BookModel
    artifact: ExportArtifact
    artifact_path: Path
    summary_path: Path
    source_character_count: int
