"""Artifact storage.

Responsibilities:
- Write export artifacts and sidecar text/JSON files under one output root.
- Keep delivery separate from the pure export builders.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..models.datatypes import ExportArtifact


class ArtifactStore:
    """Filesystem-backed store for generated book artifacts."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root output directory."""

        self.root = root

    def save_artifact(self, artifact: ExportArtifact) -> Path:
        """Write an export artifact under its suggested filename and return the path."""

        return self.save_bytes(Path(artifact.filename), artifact.payload)

    def save_bytes(self, relative_path: Path, data: bytes) -> Path:
        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    def save_json(self, relative_path: Path, payload: dict[str, object]) -> Path:
        """Save JSON-serializable payload and return final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True),
            encoding="utf-8",
        )
        return path
