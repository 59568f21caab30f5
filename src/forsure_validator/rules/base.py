from abc import ABC, abstractmethod
from collections.abc import Set

from ..models import FileMeta, Severity


class ValidationRule(ABC):
    """Abstract base class for all validation checks."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'V001')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name (e.g., 'file-extension')."""
        pass

    @property
    def severity(self) -> Severity:
        return Severity.ERROR


class FileRule(ValidationRule):
    """Checks file metadata without reading the content."""

    @abstractmethod
    def check(self, meta: FileMeta, existing_names: Set[str]) -> list[str]:
        """Return one message per violation."""
        pass


class ContentRule(ValidationRule):
    """Checks the text of a file."""

    @abstractmethod
    def check(self, content: str) -> list[str]:
        """Return one message per violation."""
        pass
