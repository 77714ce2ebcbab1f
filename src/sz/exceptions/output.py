"""Output exceptions: report template loading and file writing."""

from pathlib import Path

from .base import SzError


class OutputError(SzError):
    """Base class for errors raised while producing report output."""

    pass


class TemplateError(OutputError):
    """Raised when the presentation template cannot be loaded or used."""

    def __init__(self, template: str, reason: str):
        super().__init__(
            f"Cannot use report template: {template}",
            details={"template": template, "reason": reason},
        )
        self.template = template
        self.reason = reason


class OutputWriteError(OutputError):
    """Raised when the report file cannot be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot write report: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
