"""
Tests for heading outline collection.
"""

from doc_mirror.toc import TocHeading, collect_headings


def test_collects_h2_and_h3_in_order():
    markdown = """# Title

## Install

### From source

Text.

#### Too deep

## Usage
"""
    assert collect_headings(markdown) == [
        TocHeading("Install", 2),
        TocHeading("From source", 3),
        TocHeading("Usage", 2),
    ]


def test_inline_markup_stripped():
    headings = collect_headings("## The `afs` **CLI**\n")
    assert headings == [TocHeading("The afs CLI", 2)]


def test_empty_heading_dropped():
    assert collect_headings("##\n\n## Real\n") == [TocHeading("Real", 2)]


def test_headings_in_code_ignored():
    markdown = "```\n## not a heading\n```\n\n## Heading\n"
    assert collect_headings(markdown) == [TocHeading("Heading", 2)]


def test_setext_heading():
    assert collect_headings("Section\n-------\n") == [TocHeading("Section", 2)]


def test_empty_document():
    assert collect_headings("") == []
