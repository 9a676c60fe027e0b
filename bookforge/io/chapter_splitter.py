"""Chapter segmentation for raw manuscript text.

Responsibilities:
- Tokenize manuscript lines against a small ordered set of heading matchers.
- Convert matched sections into chapter records in source order.

Only the matched heading prefix becomes the chapter title. The remainder of a
heading line stays with the chapter body, so `Chapter 1: Dawn` yields the title
`Chapter 1` and a body starting with `: Dawn`.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from ..models.datatypes import Chapter

_FALLBACK_TITLE = "Chapter 1"
_LEADING_TEXT_TITLE = "Introduction"


@dataclass(frozen=True, slots=True)
class HeadingMatcher:
    """One recognized heading convention anchored at the start of a line.

    Attributes:
        name: Stable matcher identifier used in diagnostics.
        pattern: Compiled pattern matched against the line prefix.
    """

    name: str
    pattern: re.Pattern[str]

    def match(self, line: str) -> str | None:
        """Return the matched heading prefix, or `None` when the line is body text."""

        found = self.pattern.match(line)
        if found is None:
            return None
        return found.group(0)


DEFAULT_HEADING_MATCHERS: tuple[HeadingMatcher, ...] = (
    HeadingMatcher(name="chapter", pattern=re.compile(r"Chapter [0-9]+")),
    HeadingMatcher(name="chapter_upper", pattern=re.compile(r"CHAPTER [0-9]+")),
    HeadingMatcher(name="numbered", pattern=re.compile(r"[0-9]+\.")),
    HeadingMatcher(name="part", pattern=re.compile(r"Part [0-9]+")),
)


@dataclass(frozen=True, slots=True)
class _Section:
    marker: str
    body_lines: list[str]


class ChapterSplitter:
    """Split raw manuscript text into ordered chapter records."""

    def __init__(
        self,
        matchers: tuple[HeadingMatcher, ...] = DEFAULT_HEADING_MATCHERS,
        *,
        keep_leading_text: bool = False,
    ) -> None:
        """Initialize heading matchers and leading-text policy.

        Args:
            matchers: Heading matchers tried in order; the first match wins.
            keep_leading_text: Keep text before the first heading as an
                `Introduction` chapter instead of dropping it.
        """

        self._matchers = matchers
        self._keep_leading_text = keep_leading_text

    def segment(self, text: str) -> list[Chapter]:
        """Segment text into chapters.

        Recognized headings at the start of a line:
        - `Chapter 1`
        - `CHAPTER 2`
        - `3.`
        - `Part 4`

        Text with no recognized heading becomes one `Chapter 1` holding the whole
        trimmed input, so the result is never empty.
        """

        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        leading_lines, sections = self._tokenize(normalized.split("\n"))
        if not sections:
            return [Chapter(title=_FALLBACK_TITLE, content=normalized.strip())]

        chapters: list[Chapter] = []
        leading_text = "\n".join(leading_lines).strip()
        if self._keep_leading_text and leading_text:
            chapters.append(Chapter(title=_LEADING_TEXT_TITLE, content=leading_text))

        for section in sections:
            chapters.append(
                Chapter(
                    title=section.marker.strip(),
                    content="\n".join(section.body_lines).strip(),
                )
            )
        return chapters

    def _tokenize(self, lines: list[str]) -> tuple[list[str], list[_Section]]:
        """Group lines into leading text and heading-started sections."""

        leading_lines: list[str] = []
        sections: list[_Section] = []
        for line in lines:
            marker = self._match_heading(line)
            if marker is not None:
                sections.append(_Section(marker=marker, body_lines=[line[len(marker):]]))
            elif sections:
                sections[-1].body_lines.append(line)
            else:
                leading_lines.append(line)
        return leading_lines, sections

    def _match_heading(self, line: str) -> str | None:
        for matcher in self._matchers:
            marker = matcher.match(line)
            if marker is not None:
                return marker
        return None


def segment(text: str) -> list[Chapter]:
    """Segment text with the default heading matchers and leading-text policy."""

    return ChapterSplitter().segment(text)
