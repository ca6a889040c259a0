"""md2html: inline markdown to HTML conversion.

``convert_paragraph()`` converts a single paragraph; ``convert_document()``
splits text into paragraphs first and converts each one.
"""

from md2html.converter import convert_paragraph
from md2html.header import header_level
from md2html.paragraphs import convert_document, iter_paragraphs

__all__ = [
    "convert_document",
    "convert_paragraph",
    "header_level",
    "iter_paragraphs",
]
