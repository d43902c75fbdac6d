"""md2html - convert a single Markdown file to HTML."""

from md2html.config import Md2HtmlConfig, load_config
from md2html.converter import ConversionResult, convert_file, read_source, render_markdown
from md2html.errors import (
    ConversionError,
    InputAccessError,
    InputNotFoundError,
    InputReadError,
    OutputOpenError,
)
from md2html.output import HtmlWriter, resolve_output_path

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionResult",
    "HtmlWriter",
    "InputAccessError",
    "InputNotFoundError",
    "InputReadError",
    "Md2HtmlConfig",
    "OutputOpenError",
    "convert_file",
    "load_config",
    "read_source",
    "render_markdown",
    "resolve_output_path",
]
