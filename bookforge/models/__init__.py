"""Shared typed data models for bookforge.

This package contains dataclasses used across compile and export modules to
avoid cross-module coupling and circular imports.
"""

from .datatypes import BookModel, Chapter, ExportArtifact, RunResult

__all__ = ["BookModel", "Chapter", "ExportArtifact", "RunResult"]
