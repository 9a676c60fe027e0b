"""Deterministic filename helpers for export artifacts.

Responsibilities:
- Derive a filesystem-safe filename stem from a free-form book title.
- Keep the title readable; only characters unsafe in filenames are replaced.
- Keep the stem short enough that stem plus extension fits a 255-byte filename.
"""

from __future__ import annotations

import re

_UNSAFE_FILENAME_CHARS_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]+')
FALLBACK_STEM = "book"
MAX_STEM_BYTES = 200


def artifact_filename_stem(title: str) -> str:
    """Return a filename stem for `title`, or `book` when nothing usable remains.

    The stem is cut to at most `MAX_STEM_BYTES` UTF-8 bytes on a character
    boundary.
    """

    replaced = _UNSAFE_FILENAME_CHARS_RE.sub("_", title.strip())
    stem = _truncate_utf8(replaced.strip(" ."), MAX_STEM_BYTES).strip(" .")
    return stem or FALLBACK_STEM


def _truncate_utf8(text: str, max_bytes: int) -> str:
    encoded = text.encode("utf-8")
    if len(encoded) <= max_bytes:
        return text
    return encoded[:max_bytes].decode("utf-8", errors="ignore")
