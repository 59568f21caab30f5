from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationResult:
    """Outcome of one validation step. Errors invalidate it, warnings never do."""

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def add(self, severity: Severity, message: str) -> None:
        if severity == Severity.ERROR:
            self.add_error(message)
        else:
            self.add_warning(message)


@dataclass(frozen=True)
class FileMeta:
    name: str
    size: int


@dataclass(frozen=True)
class BraceCheckResult:
    is_balanced: bool
    message: str = ""


@dataclass
class BatchValidationResult:
    file_name: str
    file_validation: ValidationResult
    content_validation: ValidationResult

    @property
    def overall_valid(self) -> bool:
        return self.file_validation.is_valid and self.content_validation.is_valid

    @property
    def has_warnings(self) -> bool:
        return bool(self.file_validation.warnings or self.content_validation.warnings)


@dataclass
class BatchValidationProgress:
    total: int
    completed: int
    current: str
    results: list[BatchValidationResult]


@dataclass(frozen=True)
class BatchSummary:
    total: int
    valid: int
    invalid: int
    warnings: int
