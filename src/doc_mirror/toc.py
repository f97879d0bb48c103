"""
Table of Contents Module

Collects the heading outline of a Markdown document for the page TOC.
"""

from dataclasses import dataclass
from typing import List

from markdown_it import MarkdownIt

# Headings shown in the page TOC
TOC_LEVELS = {"h2": 2, "h3": 3}


@dataclass(frozen=True)
class TocHeading:
    text: str
    level: int


def collect_headings(markdown: str) -> List[TocHeading]:
    """
    Return the level 2 and 3 headings of ``markdown`` in document order.

    Headings with no text are dropped. Anchors are assigned downstream by
    the heading slug processor, so only text and level are reported.
    """
    tokens = MarkdownIt().parse(markdown)
    headings = []

    for i, token in enumerate(tokens):
        if token.type != "heading_open" or token.tag not in TOC_LEVELS:
            continue
        inline = tokens[i + 1]
        # Plain text of the heading, without emphasis/code markup
        text = "".join(child.content for child in (inline.children or []) if child.type in ("text", "code_inline"))
        text = text.strip()
        if text:
            headings.append(TocHeading(text=text, level=TOC_LEVELS[token.tag]))

    return headings
