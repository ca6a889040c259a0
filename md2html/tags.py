"""Static lookup tables: markup tags, reserved HTML characters, brackets."""

from __future__ import annotations


# Markdown marker -> HTML element
TAGS: dict[str, str] = {
    "*": "em",
    "_": "em",
    "**": "strong",
    "__": "strong",
    "`": "code",
    "--": "s",
    "~": "mark",
}

# Maximum length of a valid marker
MAX_TAG_LENGTH = 2

# HTML reserved characters
RESERVED: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "'": "&apos;",
    '"': "&quot;",
}

LINK_CHARS = frozenset("[]()")

_MATCHING = {"(": ")", ")": "(", "[": "]", "]": "["}


def lookup(symbol: str) -> str | None:
    """Return the HTML element name for a marker, or None."""
    return TAGS.get(symbol)


def longest_tag(text: str, index: int) -> str | None:
    """Return the longest marker starting at *index*, or None if there is none."""
    sub = text[index:index + MAX_TAG_LENGTH]
    while sub:
        if sub in TAGS:
            return sub
        sub = sub[:-1]
    return None


def matching(c: str) -> str:
    """Map a bracket or parenthesis to its counterpart."""
    return _MATCHING[c]


def encode(c: str) -> str:
    return RESERVED.get(c, c)


def escape(text: str) -> str:
    """Replace every reserved character in *text* with its HTML entity."""
    return "".join(encode(c) for c in text)


def read_char(text: str, index: int) -> str:
    """Read the character at *index*, resolving a backslash escape.

    An escaped character is taken literally (but still encoded if reserved).
    A backslash at the very end of *text* yields an empty string.
    """
    c = text[index]
    if c == "\\":
        if index + 1 >= len(text):
            return ""
        c = text[index + 1]
    return encode(c)


def open_tag(symbol: str) -> str:
    return f"<{TAGS[symbol]}>"


def close_tag(symbol: str) -> str:
    return f"</{TAGS[symbol]}>"
