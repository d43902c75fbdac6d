import io

from pydantic import BaseModel, Field, PositiveInt
from typing import Literal


class OutputConfig(BaseModel):
    buffer_size: PositiveInt = io.DEFAULT_BUFFER_SIZE


class Md2HtmlConfig(BaseModel):
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
    log_format: Literal["text", "json"] = "text"
