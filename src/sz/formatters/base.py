"""Base formatter interface for sz output rendering."""

from abc import ABC, abstractmethod

from ..sizing.models import ModuleNode


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, module: ModuleNode) -> None:
        """Print the formatted report to stdout."""
        print(self.format(module))

    @abstractmethod
    def format(self, module: ModuleNode) -> str:
        """Return formatted string representation of the module tree."""
