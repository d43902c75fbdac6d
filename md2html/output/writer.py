"""HtmlWriter — writes rendered HTML bytes to disk with owner-only permissions."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from md2html.config.models import OutputConfig
from md2html.errors import OutputOpenError

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"
OUTPUT_MODE = 0o600


def resolve_output_path(source: str | Path, output: str | Path | None = None) -> Path:
    """Return the explicit output path, or `<source base name>.html` in the cwd."""
    if output is not None:
        return Path(output)
    return Path(Path(source).name + HTML_SUFFIX)


class HtmlWriter:
    """Writes HTML payloads through a buffered writer.

    New files are created with mode 0600 and existing files are truncated,
    so repeated runs produce identical output.
    """

    def __init__(self, config: OutputConfig | None = None) -> None:
        self.config = config or OutputConfig()

    def write(self, path: str | Path, html: bytes) -> int:
        """Write `html` to `path`. Returns the number of bytes written."""
        dest = Path(path)
        try:
            fd = os.open(dest, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_MODE)
        except OSError as e:
            raise OutputOpenError(str(dest), e) from e

        try:
            out = os.fdopen(fd, "wb", buffering=self.config.buffer_size)
        except Exception:
            os.close(fd)
            raise

        with out:
            out.write(html)
            out.flush()

        logger.info("wrote %s (%d bytes)", dest, len(html))
        return len(html)
