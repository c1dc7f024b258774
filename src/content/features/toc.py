"""Table of contents extracted from a post body.

The body is rendered with Markdown, then h2/h3 headings are collected.
Headings without an explicit id ({#id} attribute) get "heading-<n>", n
being the heading's position among all collected headings.
"""

from __future__ import annotations

from dataclasses import dataclass

import markdown as md
from bs4 import BeautifulSoup

DEFAULT_MIN_HEADINGS = 3


@dataclass
class TocEntry:
    id: str
    text: str
    level: int  # 2 or 3


def extract_table_of_contents(
    markdown_body: str,
    min_headings: int = DEFAULT_MIN_HEADINGS,
) -> list[TocEntry]:
    """Headings for the TOC, or [] when the post has too few to bother."""
    html = md.markdown(markdown_body, extensions=["attr_list", "fenced_code", "tables"])
    soup = BeautifulSoup(html, "html.parser")

    headings = soup.find_all(["h2", "h3"])
    if len(headings) < min_headings:
        return []

    return [
        TocEntry(
            id=heading.get("id") or f"heading-{index}",
            text=heading.get_text(strip=True),
            level=int(heading.name[1]),
        )
        for index, heading in enumerate(headings)
    ]
