"""bookforge pipeline package.

This package contains the stage orchestration and telemetry helpers that run
extraction, segmentation, export, and artifact writing.
"""

from .orchestrator import BookforgePipeline

__all__ = ["BookforgePipeline"]
