from .base import ContentRule, FileRule, ValidationRule
from .content_rules import (
    REQUIRED_PATTERNS,
    WARNING_PATTERNS,
    BalancedBracesRule,
    MissingDescriptionRule,
    RequiredSyntaxRule,
)
from .file_rules import MAX_FILE_SIZE, VALID_EXTENSIONS, DuplicateNameRule, ExtensionRule, FileSizeRule

__all__ = [
    "ValidationRule",
    "FileRule",
    "ContentRule",
    "ExtensionRule",
    "FileSizeRule",
    "DuplicateNameRule",
    "RequiredSyntaxRule",
    "MissingDescriptionRule",
    "BalancedBracesRule",
    "MAX_FILE_SIZE",
    "VALID_EXTENSIONS",
    "REQUIRED_PATTERNS",
    "WARNING_PATTERNS",
]
