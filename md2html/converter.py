"""Inline markup conversion for a single paragraph.

Main entry point: ``convert_paragraph()`` turns one paragraph of markdown-like
text into an HTML fragment wrapped in ``<p>`` or ``<hN>``.

The scan keeps a partition of the text read so far (``ScanState.contents``)
whose concatenation always equals the converted prefix, plus a ledger of
markers that are currently open. A marker is literal text, an opening tag or
a closing tag depending on the surrounding whitespace and the ledger. When a
closing marker arrives, :func:`collect` walks the partition backward to the
matching opener and folds everything in between into one fragment.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from md2html.header import header_level
from md2html.tags import (
    LINK_CHARS,
    TAGS,
    close_tag,
    longest_tag,
    matching,
    open_tag,
    read_char,
)

log = logging.getLogger(__name__)


@dataclass
class ScanState:
    """Mutable state for converting one paragraph.

    Parameters
    ----------
    paragraph:
        Raw paragraph text.
    last_paren:
        Index of the last ``)`` in the paragraph, -1 if there is none.
    contents:
        Partition of the text read so far into fragments.
    open:
        Marker (or ``[`` / ``(``) -> number of pending openers.
    position:
        Current scan index into ``paragraph``.
    """

    paragraph: str
    last_paren: int = -1
    contents: deque[str] = field(default_factory=deque)
    open: dict[str, int] = field(default_factory=dict)
    position: int = 0

    @classmethod
    def for_paragraph(cls, paragraph: str) -> ScanState:
        return cls(paragraph=paragraph, last_paren=paragraph.rfind(")"))

    def is_open(self, symbol: str) -> bool:
        return self.open.get(symbol, 0) > 0


def collect(state: ScanState, start: str, end: str, as_markup: bool) -> bool:
    """Fold the partition tail back to the nearest fragment equal to *start*.

    Everything after that fragment is joined and wrapped either in the HTML
    element for *start*/*end* (``as_markup``) or in the literal *start*/*end*
    text. The wrapped result replaces the whole span, and *start* is dropped
    from the ledger entirely.

    Returns False, leaving the partition untouched, if no fragment equals
    *start*.
    """
    contents = state.contents
    if start not in contents:
        log.debug("No pending %r fragment to close with %r", start, end)
        return False

    inside = ""
    while True:
        last = contents.pop()
        if last == start:
            if as_markup:
                contents.append(open_tag(start) + inside + close_tag(end))
            else:
                contents.append(start + inside + end)
            state.open.pop(start, None)
            return True
        if last in TAGS:
            # Absorbed as plain text, so it can no longer open a tag
            state.open.pop(last, None)
        inside = last + inside


def resolve_link(state: ScanState) -> None:
    """Handle one of ``[ ] ( )`` at the current position.

    Brackets and parentheses are always collected as literal text. Once a
    ``[label]`` fragment is directly followed by a ``(target)`` fragment, the
    pair is replaced with an anchor.
    """
    c = state.paragraph[state.position]
    match = matching(c)
    contents = state.contents

    if c in "([":
        state.open[c] = 1
        contents.append(c)
    elif state.is_open(match):
        if not collect(state, match, c, as_markup=False):
            contents.append(c)
        state.open[match] = 0
    else:
        contents.append(c)

    if len(contents) >= 2:
        target = contents.pop()
        label = contents.pop()
        if (
            label.startswith("[") and label.endswith("]")
            and target.startswith("(") and target.endswith(")")
        ):
            log.debug("Resolved link %r -> %r", label, target)
            contents.append(f"<a href='{target[1:-1]}'>{label[1:-1]}</a>")
        else:
            contents.append(label)
            contents.append(target)


def _close_tag(state: ScanState, tag: str, last_whitespace: bool) -> int:
    """Process *tag* as a closing candidate; return the scan advance."""
    if last_whitespace:
        # Leading whitespace => not a closing tag
        if state.contents:
            state.contents[-1] += tag
        else:
            state.contents.append(tag)
        return len(tag)

    # Inside a link target that is still to be closed
    as_markup = not (state.is_open("(") and state.position < state.last_paren)
    if not collect(state, tag, tag, as_markup):
        state.contents.append(tag)
        state.open.pop(tag, None)
    return len(tag)


def _open_tag(state: ScanState, tag: str) -> int:
    """Process *tag* as an opening candidate; return the scan advance."""
    paragraph = state.paragraph
    after = state.position + len(tag)
    if after >= len(paragraph):
        # Nothing can follow the marker, so the rest is literal
        state.contents.append(paragraph[state.position:])
        return len(paragraph) - state.position

    if paragraph[after].isspace():
        # Keep the whitespace with the marker so it is not re-read as a boundary
        state.contents.append(tag + paragraph[after])
        return len(tag) + 1

    state.contents.append(tag)
    state.open[tag] = state.open.get(tag, 0) + 1
    return len(tag)


def scan(state: ScanState, start: int) -> str:
    """Convert ``state.paragraph[start:]`` and return the joined fragments."""
    paragraph = state.paragraph
    state.position = start

    while state.position < len(paragraph):
        current = state.position
        now = paragraph[current]

        if now in LINK_CHARS:
            resolve_link(state)
            state.position += 1
            continue

        last_whitespace = current != start and paragraph[current - 1] == " "
        tag = longest_tag(paragraph, current)
        if tag is None:
            state.contents.append(read_char(paragraph, current))
            state.position += 2 if now == "\\" else 1
        elif state.is_open(tag):
            state.position += _close_tag(state, tag, last_whitespace)
        else:
            state.position += _open_tag(state, tag)

    # Unclosed openers stay as literal text
    result = "".join(state.contents)
    state.contents.clear()
    return result


def convert_paragraph(paragraph: str) -> str:
    """Convert one paragraph to HTML.

    Returns the content wrapped in ``<hN>`` when the paragraph starts with a
    valid header marker, otherwise in ``<p>``.
    """
    level = header_level(paragraph)
    state = ScanState.for_paragraph(paragraph)
    if level == 0:
        return f"<p>{scan(state, 0)}</p>"
    return f"<h{level}>{scan(state, level + 1)}</h{level}>"
