"""Pipeline orchestration for bookforge.

Responsibilities:
- Define the stage order for the manuscript-to-artifact flow.
- Compile manuscripts into fresh `BookModel` values and export them.

Key types:
- `BookforgePipeline`: orchestration facade.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..config import BookforgeConfig
from ..errors import PipelineStageError
from ..export.dispatcher import ExportDispatcher
from ..export.formats import ExportFormat
from ..export.package_manifest import PackageManifestBuilder
from ..export.printable import PrintableDocumentBuilder
from ..io.chapter_splitter import ChapterSplitter
from ..io.storage import ArtifactStore
from ..io.text_extractor import ManuscriptTextExtractor
from ..models.datatypes import BookModel, ExportArtifact, RunResult
from ..telemetry.logger import RunLogger
from .telemetry import PipelineTelemetryMixin

RUN_SUMMARY_FILENAME = "run_summary.json"


class BookforgePipeline(PipelineTelemetryMixin):
    """Coordinate extraction, segmentation, and export for one manuscript."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
        extractor: ManuscriptTextExtractor | None = None,
    ) -> None:
        """Initialize optional runtime logging, progress hooks, and the text extractor."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback
        self._extractor = extractor or ManuscriptTextExtractor()

    def load_book(self, config: BookforgeConfig) -> tuple[str, BookModel]:
        """Extract and segment the configured manuscript into a fresh book model.

        Returns:
            Extracted raw text and the compiled book. Nothing is returned when
            extraction fails, so a caller's previous model stays in place.
        """

        config.validate()
        raw_text = self._run_stage(
            "extract", lambda: self._extractor.extract(config.input_path)
        )
        splitter = ChapterSplitter(keep_leading_text=config.keep_leading_text)
        book = self._run_stage(
            "split",
            lambda: BookModel.from_text(
                raw_text, title=config.title, author=config.author, splitter=splitter
            ),
        )
        return raw_text, book

    def export(self, book: BookModel, config: BookforgeConfig) -> ExportArtifact:
        """Validate `book` and render it in the configured format."""

        dispatcher = self._dispatcher(config)
        export_format = self._run_stage(
            "validate", lambda: self._validate(dispatcher, book, config.export_format)
        )
        return self._run_stage("render", lambda: dispatcher.export(book, export_format))

    def run(self, config: BookforgeConfig) -> RunResult:
        """Run extraction, segmentation, export, and artifact writing."""

        raw_text, book = self.load_book(config)
        artifact = self.export(book, config)
        store = ArtifactStore(config.output_dir)
        artifact_path, summary_path = self._run_stage(
            "write", lambda: self._write(store, artifact, book, len(raw_text))
        )
        return RunResult(
            book=book,
            artifact=artifact,
            artifact_path=artifact_path,
            summary_path=summary_path,
            source_character_count=len(raw_text),
        )

    @staticmethod
    def _dispatcher(config: BookforgeConfig) -> ExportDispatcher:
        return ExportDispatcher(
            package_builder=PackageManifestBuilder(
                language=config.language,
                modified_timestamp=config.modified_timestamp,
                escape_markup=config.escape_markup,
            ),
            printable_builder=PrintableDocumentBuilder(escape_markup=config.escape_markup),
        )

    @staticmethod
    def _validate(
        dispatcher: ExportDispatcher, book: BookModel, export_format: str
    ) -> ExportFormat:
        resolved = ExportFormat.parse(export_format)
        dispatcher.validate(book)
        return resolved

    @staticmethod
    def _write(
        store: ArtifactStore,
        artifact: ExportArtifact,
        book: BookModel,
        source_character_count: int,
    ) -> tuple[Path, Path]:
        try:
            artifact_path = store.save_artifact(artifact)
            summary_path = store.save_json(
                Path(RUN_SUMMARY_FILENAME),
                {
                    "artifact": artifact.filename,
                    "export_format": artifact.export_format,
                    "label": artifact.label,
                    "media_type": artifact.media_type,
                    "title": book.title,
                    "author": book.author,
                    "chapters": [chapter.title for chapter in book.chapters],
                    "chapter_count": len(book.chapters),
                    "source_character_count": source_character_count,
                },
            )
        except OSError as exc:
            raise PipelineStageError(
                stage="write",
                detail=f"Failed to write artifact under `{store.root}`: {exc}",
                hint="Verify the output directory is writable.",
            ) from exc
        return artifact_path, summary_path
