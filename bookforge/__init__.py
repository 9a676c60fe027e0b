"""Top-level package for bookforge.

This package compiles plain-text manuscripts into chapter-structured book models
and exports them as EPUB-style package manifests or printable HTML documents.
The main orchestration entry point is `BookforgePipeline`.
"""

from .export import ExportDispatcher, ExportFormat, build_package, build_printable
from .io.chapter_splitter import ChapterSplitter, segment
from .models import BookModel, Chapter, ExportArtifact
from .pipeline import BookforgePipeline

__all__ = [
    "BookModel",
    "BookforgePipeline",
    "Chapter",
    "ChapterSplitter",
    "ExportArtifact",
    "ExportDispatcher",
    "ExportFormat",
    "__version__",
    "build_package",
    "build_printable",
    "segment",
]

__version__ = "0.1.0"
