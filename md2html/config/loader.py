"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Md2HtmlConfig

CONFIG_ENV_VAR = "MD2HTML_CONFIG"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def _candidate_paths(config_path: str | None) -> list[Path]:
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    candidates = [Path(explicit)] if explicit else []
    candidates.append(Path("./md2html.yaml"))
    candidates.append(Path.home() / ".md2html" / "config.yaml")
    return candidates


def _read_yaml(path: Path) -> object:
    """Parse one candidate file. Returns None when it is absent or empty."""
    try:
        if not path.exists():
            return None
        with open(path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Cannot read config {path}: {e}") from e


def load_config(config_path: str | None = None) -> Md2HtmlConfig:
    """Load config with resolution order: explicit or $MD2HTML_CONFIG > project-local > user-global > defaults."""
    for path in _candidate_paths(config_path):
        raw = _read_yaml(path)
        if raw is None:
            continue
        try:
            return Md2HtmlConfig(**_expand_env_vars(raw))
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return Md2HtmlConfig()


def _expand_env_vars(obj: object) -> object:
    """Replace ${VAR} in every string of a parsed YAML tree; unset vars become ""."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    return obj


# Default YAML template, written next to a project as md2html.yaml
DEFAULT_CONFIG_TEMPLATE = """\
# md2html.yaml
# Rendering always uses the Markdown library defaults; only ambient
# behaviour is configurable here.

# Output
output:
  buffer_size: 8192            # bytes buffered before each write to disk

# Logging
log_level: "warn"              # debug | info | warn | error
log_format: "text"             # text | json
"""
