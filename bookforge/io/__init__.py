"""Input/output stage components for bookforge.

This package contains manuscript extraction, chapter segmentation, and artifact
storage used by the pipeline.
"""

from .chapter_splitter import ChapterSplitter, HeadingMatcher, segment
from .storage import ArtifactStore
from .text_extractor import ManuscriptTextExtractor

__all__ = [
    "ArtifactStore",
    "ChapterSplitter",
    "HeadingMatcher",
    "ManuscriptTextExtractor",
    "segment",
]
