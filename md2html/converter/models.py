"""Pydantic models for the conversion pipeline."""

from __future__ import annotations

from pydantic import BaseModel


class ConversionResult(BaseModel):
    """Result of converting one Markdown file to HTML."""

    source_path: str
    output_path: str
    input_bytes: int
    output_bytes: int
