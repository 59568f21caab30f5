"""File and content validation for ForSure uploads."""

from .batch import InMemoryFileHandle, PathFileHandle, summarize_batch, validate_many
from .braces import check_balanced_braces
from .models import (
    BatchSummary,
    BatchValidationProgress,
    BatchValidationResult,
    BraceCheckResult,
    FileMeta,
    Severity,
    ValidationResult,
)
from .validator import ForSureValidator, validate_content, validate_file

__all__ = [
    "BatchSummary",
    "BatchValidationProgress",
    "BatchValidationResult",
    "BraceCheckResult",
    "FileMeta",
    "ForSureValidator",
    "InMemoryFileHandle",
    "PathFileHandle",
    "Severity",
    "ValidationResult",
    "check_balanced_braces",
    "summarize_batch",
    "validate_content",
    "validate_file",
    "validate_many",
]
