"""Exception hierarchy for sz."""

from .base import SzError
from .config import ConfigurationError, InvalidConfigError
from .metadata import MetadataError, MetadataResolutionError, ModuleOpenError
from .output import OutputError, OutputWriteError, TemplateError

__all__ = [
    "SzError",
    "MetadataError",
    "ModuleOpenError",
    "MetadataResolutionError",
    "OutputError",
    "TemplateError",
    "OutputWriteError",
    "ConfigurationError",
    "InvalidConfigError",
]
