"""Header level detection for a single paragraph."""

from __future__ import annotations


HEADER_MARKER = "#"

# HTML only defines h1..h6
MAX_HEADER_LEVEL = 6


def header_level(paragraph: str) -> int:
    """Determine the header level (1-6) of *paragraph*, or 0 if it is not a header.

    The leading run of ``#`` must be confirmed by a following space. Any other
    character, more than six markers, or running out of text yields 0.
    """
    level = 0
    for c in paragraph:
        if c == HEADER_MARKER:
            level += 1
            if level > MAX_HEADER_LEVEL:
                return 0
        elif c == " ":
            return level
        else:
            return 0
    return 0
