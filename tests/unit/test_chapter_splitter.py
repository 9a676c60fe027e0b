import re

from bookforge.io.chapter_splitter import (
    DEFAULT_HEADING_MATCHERS,
    ChapterSplitter,
    HeadingMatcher,
    segment,
)
from bookforge.models.datatypes import Chapter


def test_segment_splits_two_chapters_in_source_order() -> None:
    chapters = segment("Chapter 1\nHello world.\nChapter 2\nGoodbye.")

    assert chapters == [
        Chapter(title="Chapter 1", content="Hello world."),
        Chapter(title="Chapter 2", content="Goodbye."),
    ]


def test_segment_without_markers_returns_single_fallback_chapter() -> None:
    assert segment("Just some prose.") == [Chapter(title="Chapter 1", content="Just some prose.")]


def test_segment_fallback_chapter_is_trimmed_input() -> None:
    text = "\n  First line.\nSecond line.  \n\n"

    chapters = segment(text)

    assert len(chapters) == 1
    assert chapters[0].content == text.strip()


def test_segment_empty_input_yields_one_empty_chapter() -> None:
    assert segment("") == [Chapter(title="Chapter 1", content="")]


def test_segment_recognizes_all_four_heading_forms() -> None:
    text = (
        "Chapter 1\nalpha\n"
        "CHAPTER 2\nbeta\n"
        "3.\ngamma\n"
        "Part 4\ndelta"
    )

    chapters = segment(text)

    assert [chapter.title for chapter in chapters] == ["Chapter 1", "CHAPTER 2", "3.", "Part 4"]
    assert [chapter.content for chapter in chapters] == ["alpha", "beta", "gamma", "delta"]


def test_segment_ignores_unrecognized_heading_conventions() -> None:
    text = "Chapter IV\nRoman.\nSection 2\nSection.\nchapter 3\nLowercase."

    chapters = segment(text)

    assert chapters == [Chapter(title="Chapter 1", content=text)]


def test_segment_requires_heading_at_line_start() -> None:
    text = "Chapter 1\nSee Chapter 2 for details.\n  Chapter 3 indented."

    chapters = segment(text)

    assert [chapter.title for chapter in chapters] == ["Chapter 1"]
    assert chapters[0].content == "See Chapter 2 for details.\n  Chapter 3 indented."


def test_segment_keeps_heading_line_remainder_in_body() -> None:
    chapters = segment("Chapter 1: Dawn\nThe sun rose.")

    assert chapters == [Chapter(title="Chapter 1", content=": Dawn\nThe sun rose.")]


def test_segment_adjacent_markers_yield_empty_content() -> None:
    chapters = segment("Chapter 1\nChapter 2\nBody two.")

    assert chapters == [
        Chapter(title="Chapter 1", content=""),
        Chapter(title="Chapter 2", content="Body two."),
    ]


def test_segment_drops_text_before_first_marker_by_default() -> None:
    chapters = segment("Preface words.\nChapter 1\nBody.")

    assert chapters == [Chapter(title="Chapter 1", content="Body.")]


def test_splitter_can_keep_leading_text_as_introduction() -> None:
    splitter = ChapterSplitter(keep_leading_text=True)

    chapters = splitter.segment("Preface words.\n\nChapter 1\nBody.")

    assert chapters == [
        Chapter(title="Introduction", content="Preface words."),
        Chapter(title="Chapter 1", content="Body."),
    ]


def test_splitter_keep_leading_text_skips_blank_preamble() -> None:
    splitter = ChapterSplitter(keep_leading_text=True)

    assert splitter.segment("\n\nChapter 1\nBody.") == [Chapter(title="Chapter 1", content="Body.")]


def test_segment_normalizes_windows_line_breaks() -> None:
    chapters = segment("Chapter 1\r\nLine one.\r\nLine two.\r\nChapter 2\r\nEnd.")

    assert chapters[0].content == "Line one.\nLine two."
    assert chapters[1].content == "End."


def test_segment_preserves_multiline_bodies() -> None:
    chapters = segment("Part 1\nfirst\n\nsecond paragraph\nPart 2\nthird")

    assert chapters[0].content == "first\n\nsecond paragraph"


def test_segment_is_deterministic() -> None:
    text = "1.\nOne.\n2.\nTwo.\n3.\nThree."

    assert segment(text) == segment(text)


def test_splitter_accepts_additional_heading_matchers() -> None:
    matchers = DEFAULT_HEADING_MATCHERS + (
        HeadingMatcher(name="section", pattern=re.compile(r"Section \d+")),
    )
    splitter = ChapterSplitter(matchers)

    chapters = splitter.segment("Section 1\nIntro.\nChapter 2\nMain.")

    assert [chapter.title for chapter in chapters] == ["Section 1", "Chapter 2"]


def test_heading_matchers_are_tried_in_order() -> None:
    chapters = segment("Chapter 12.\nBody.")

    assert chapters == [Chapter(title="Chapter 12", content=".\nBody.")]


def test_segment_only_treats_ascii_digits_as_heading_numbers() -> None:
    text = "Chapter ٣\nArabic digit.\nPart ４\nFullwidth.\n٥.\nNumbered."

    chapters = segment(text)

    assert chapters == [Chapter(title="Chapter 1", content=text)]
