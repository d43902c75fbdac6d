"""Markdown-to-HTML conversion wrapping Python-Markdown."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import markdown

from md2html.config.models import Md2HtmlConfig
from md2html.converter.models import ConversionResult
from md2html.errors import InputAccessError, InputNotFoundError, InputReadError
from md2html.output.writer import HtmlWriter, resolve_output_path

logger = logging.getLogger(__name__)

# Undecodable bytes survive the round trip through str unchanged.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def read_source(path: str | Path) -> bytes:
    """Read the whole source file, separating "missing" from "inaccessible".

    Raises InputNotFoundError, InputAccessError or InputReadError.
    """
    # Path() drops a trailing slash and maps "" to ".", so stat the raw argument.
    raw = os.fspath(path)
    try:
        os.stat(raw)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise InputNotFoundError(raw, e) from e
    except OSError as e:
        raise InputAccessError(raw, e) from e

    path = Path(raw)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise InputReadError(raw, e) from e

    logger.debug("read %s (%d bytes)", path, len(data))
    return data


def render_markdown(source: bytes) -> bytes:
    """Render Markdown bytes to HTML bytes with the library defaults."""
    text = source.decode(_ENCODING, errors=_ERRORS)
    html = markdown.markdown(text)
    return html.encode(_ENCODING, errors=_ERRORS)


def convert_file(
    source: str | Path,
    output: str | Path | None = None,
    *,
    config: Md2HtmlConfig | None = None,
) -> ConversionResult:
    """Convert one Markdown file, writing `<name>.html` to the cwd unless `output` is given.

    The output file is only opened once the source has been read and
    rendered, so input failures never leave an output file behind.
    """
    cfg = config or Md2HtmlConfig()

    data = read_source(source)
    html = render_markdown(data)
    logger.debug("rendered %s (%d -> %d bytes)", source, len(data), len(html))

    dest = resolve_output_path(source, output)
    written = HtmlWriter(cfg.output).write(dest, html)

    return ConversionResult(
        source_path=str(source),
        output_path=str(dest),
        input_bytes=len(data),
        output_bytes=written,
    )
