"""Telemetry and observability helpers.

This package emits deterministic stage events for compile and export runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
