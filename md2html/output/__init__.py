"""Output subsystem — resolves destination paths and writes HTML files."""

from md2html.output.writer import HTML_SUFFIX, OUTPUT_MODE, HtmlWriter, resolve_output_path

__all__ = [
    "HTML_SUFFIX",
    "HtmlWriter",
    "OUTPUT_MODE",
    "resolve_output_path",
]
