from .loader import CONFIG_ENV_VAR, load_config
from .models import Md2HtmlConfig, OutputConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "Md2HtmlConfig",
    "OutputConfig",
    "load_config",
]
