import logging
from collections.abc import Iterable
from typing import Any

from .models import FileMeta, ValidationResult
from .rules.base import ContentRule, FileRule
from .rules.content_rules import BalancedBracesRule, MissingDescriptionRule, RequiredSyntaxRule
from .rules.file_rules import MAX_FILE_SIZE, VALID_EXTENSIONS, DuplicateNameRule, ExtensionRule, FileSizeRule

logger = logging.getLogger(__name__)


def normalize_names(existing: Iterable[Any]) -> frozenset[str]:
    """Accept plain names or records carrying a ``name`` attribute."""
    return frozenset(item if isinstance(item, str) else item.name for item in existing)


class ForSureValidator:
    """Validates candidate ForSure files: metadata first, then content."""

    MAX_FILE_SIZE = MAX_FILE_SIZE
    VALID_EXTENSIONS = VALID_EXTENSIONS

    def __init__(self):
        self.file_rules: list[FileRule] = []
        self.content_rules: list[ContentRule] = []
        self._load_builtin_rules()

    def _load_builtin_rules(self):
        self.file_rules = [ExtensionRule(self.VALID_EXTENSIONS), FileSizeRule(self.MAX_FILE_SIZE), DuplicateNameRule()]
        self.content_rules = [RequiredSyntaxRule(), MissingDescriptionRule(), BalancedBracesRule()]

    def validate_file(self, meta: FileMeta, existing_names: Iterable[Any] = ()) -> ValidationResult:
        """Check extension, size and name uniqueness. Every check runs."""
        names = normalize_names(existing_names)
        result = ValidationResult()
        for rule in self.file_rules:
            for message in rule.check(meta, names):
                result.add(rule.severity, message)
        logger.debug("File checks for %s: %d error(s)", meta.name, len(result.errors))
        return result

    def validate_content(self, content: str) -> ValidationResult:
        """Check syntax markers and bracket balance. Empty content is the only error reported for it."""
        result = ValidationResult()
        if not content.strip():
            result.add_error("File content is empty")
            return result

        for rule in self.content_rules:
            for message in rule.check(content):
                result.add(rule.severity, message)
        return result


_default_validator = ForSureValidator()


def validate_file(meta: FileMeta, existing_names: Iterable[Any] = ()) -> ValidationResult:
    return _default_validator.validate_file(meta, existing_names)


def validate_content(content: str) -> ValidationResult:
    return _default_validator.validate_content(content)
