"""Text helpers shared by export and storage stages."""

from .slug import FALLBACK_STEM, MAX_STEM_BYTES, artifact_filename_stem

__all__ = ["FALLBACK_STEM", "MAX_STEM_BYTES", "artifact_filename_stem"]
