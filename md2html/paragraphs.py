"""Group source lines into paragraphs and convert whole documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from md2html.converter import convert_paragraph

log = logging.getLogger(__name__)


def iter_paragraphs(lines: Iterable[str]) -> Iterator[str]:
    """Yield paragraphs from *lines*.

    Consecutive non-empty lines are joined with ``\\n``. An empty line ends
    the current paragraph; runs of empty lines never produce empty paragraphs.
    """
    current: list[str] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line:
            current.append(line)
        elif current:
            yield "\n".join(current)
            current = []
    if current:
        yield "\n".join(current)


def convert_document(text: str, separator: str = "\n") -> str:
    """Convert every paragraph of *text* and join the results with *separator*."""
    converted = [convert_paragraph(p) for p in iter_paragraphs(text.splitlines())]
    log.debug("Converted %d paragraph(s)", len(converted))
    return separator.join(converted)
