"""Domain exceptions for pipeline and CLI diagnostics."""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ExtractionError(PipelineStageError):
    """Raised when manuscript text cannot be extracted from an input file."""

    def __init__(self, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="extract", detail=detail, hint=hint)


class ValidationError(PipelineStageError):
    """Raised when an export request is missing required book fields.

    Attributes:
        missing_fields: Ordered names of the fields that blocked the export.
    """

    def __init__(
        self,
        detail: str,
        *,
        missing_fields: tuple[str, ...] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(stage="validate", detail=detail, hint=hint)
        self.missing_fields = missing_fields
