"""Configuration model and loaders for bookforge.

Responsibilities:
- Define runtime configuration for one compile-and-export run as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `BookforgeConfig`: normalized settings for a run.
- `ConfigLoader`: static construction helpers for `BookforgeConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .export.formats import ExportFormat
from .export.package_manifest import DEFAULT_LANGUAGE, DEFAULT_MODIFIED_TIMESTAMP
from .parsing import normalize_optional_string, parse_boolean_option


@dataclass(slots=True)
class BookforgeConfig:
    """Runtime configuration for one run.

    Attributes:
        input_path: Path to the manuscript (`.txt`, `.docx`, or `.pdf`).
        output_dir: Directory receiving the export artifact.
        title: Book title.
        author: Author name.
        export_format: Format identifier (`kindle`, `universal`, or `pdf`).
        language: Language tag written into package metadata.
        modified_timestamp: Fixed modification timestamp for package metadata.
        escape_markup: Escape markup-significant characters in generated documents.
        keep_leading_text: Keep text before the first heading as an introduction chapter.
    """

    input_path: Path
    output_dir: Path = Path("out")
    title: str = ""
    author: str = ""
    export_format: str = ExportFormat.KINDLE.value
    language: str = DEFAULT_LANGUAGE
    modified_timestamp: str = DEFAULT_MODIFIED_TIMESTAMP
    escape_markup: bool = True
    keep_leading_text: bool = False

    def validate(self) -> None:
        """Validate configuration values that do not depend on manuscript content."""

        if self.export_format not in {member.value for member in ExportFormat}:
            supported = ", ".join(f"`{member.value}`" for member in ExportFormat)
            raise ValueError(
                f"`export_format` must be one of {supported}, got `{self.export_format}`."
            )
        if normalize_optional_string(self.language) is None:
            raise ValueError("`language` must be a non-empty string.")
        if normalize_optional_string(self.modified_timestamp) is None:
            raise ValueError("`modified_timestamp` must be a non-empty string.")


class ConfigLoader:
    """Factory methods for loading `BookforgeConfig`."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "input_path",
            "output_dir",
            "title",
            "author",
            "export_format",
            "language",
            "modified_timestamp",
            "escape_markup",
            "keep_leading_text",
        }
    )
    _REQUIRED_YAML_KEYS = frozenset({"input_path"})

    @staticmethod
    def from_yaml(path: Path) -> BookforgeConfig:
        """Load configuration from a YAML mapping file."""

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping.")
        return ConfigLoader._build_config_from_mapping(payload, f"YAML config `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> BookforgeConfig:
        """Load configuration from `BOOKFORGE_*` environment variables."""

        source = os.environ if env is None else env
        input_path = normalize_optional_string(source.get("BOOKFORGE_INPUT_PATH"))
        if input_path is None:
            raise ValueError("Environment variable `BOOKFORGE_INPUT_PATH` is required.")

        payload: dict[str, Any] = {"input_path": input_path}
        for key in ConfigLoader._SUPPORTED_YAML_KEYS - {"input_path"}:
            env_key = f"BOOKFORGE_{key.upper()}"
            if env_key in source:
                payload[key] = source[env_key]
        return ConfigLoader._build_config_from_mapping(payload, "Environment")

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> BookforgeConfig:
        ConfigLoader._validate_keys(payload, source_label)

        input_path = normalize_optional_string(payload.get("input_path"))
        if input_path is None:
            raise ValueError(f"{source_label} requires non-empty `input_path`.")
        output_dir = normalize_optional_string(payload.get("output_dir"))
        export_format = normalize_optional_string(payload.get("export_format"))

        config = BookforgeConfig(
            input_path=Path(input_path),
            output_dir=Path(output_dir) if output_dir is not None else Path("out"),
            title=ConfigLoader._optional_text(payload, "title"),
            author=ConfigLoader._optional_text(payload, "author"),
            export_format=(
                export_format.lower() if export_format is not None else ExportFormat.KINDLE.value
            ),
            language=(
                normalize_optional_string(payload.get("language")) or DEFAULT_LANGUAGE
            ),
            modified_timestamp=(
                normalize_optional_string(payload.get("modified_timestamp"))
                or DEFAULT_MODIFIED_TIMESTAMP
            ),
            escape_markup=ConfigLoader._optional_boolean(
                payload, "escape_markup", source_label, default=True
            ),
            keep_leading_text=ConfigLoader._optional_boolean(
                payload, "keep_leading_text", source_label, default=False
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        unknown = sorted(str(key) for key in set(payload) - ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")

        missing = sorted(key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload)
        if missing:
            raise ValueError(f"{source_label} is missing required key(s): {', '.join(missing)}.")

    @staticmethod
    def _optional_text(payload: Mapping[str, Any], key: str) -> str:
        """Read an optional free-text field, normalizing blanks to an empty string."""

        return normalize_optional_string(payload.get(key)) or ""

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, *, default: bool
    ) -> bool:
        if key not in payload:
            return default
        return parse_boolean_option(payload[key], f"{source_label} field `{key}`")
