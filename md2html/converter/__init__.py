"""Conversion subsystem — wraps Python-Markdown behind a bytes-in, bytes-out pipeline."""

from md2html.converter.converter import convert_file, read_source, render_markdown
from md2html.converter.models import ConversionResult

__all__ = [
    "ConversionResult",
    "convert_file",
    "read_source",
    "render_markdown",
]
