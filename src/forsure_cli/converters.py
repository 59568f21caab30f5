from forsure_formatter.models import NamedFormatResult
from forsure_validator.batch import summarize_batch
from forsure_validator.models import BatchValidationResult

from .models import (
    FileFormatReport,
    FileValidationReport,
    FormatChangeReport,
    ValidationReport,
    ValidationSummary,
)


def batch_result_to_report(result: BatchValidationResult) -> FileValidationReport:
    """Convert an internal dataclass result to an external Pydantic report"""
    return FileValidationReport(
        file_name=result.file_name,
        overall_valid=result.overall_valid,
        file_errors=list(result.file_validation.errors),
        content_errors=list(result.content_validation.errors),
        warnings=[*result.file_validation.warnings, *result.content_validation.warnings],
    )


def batch_results_to_report(results: list[BatchValidationResult]) -> ValidationReport:
    summary = summarize_batch(results)
    return ValidationReport(
        summary=ValidationSummary(
            total=summary.total,
            valid=summary.valid,
            invalid=summary.invalid,
            warnings=summary.warnings,
        ),
        files=[batch_result_to_report(r) for r in results],
    )


def format_result_to_report(item: NamedFormatResult) -> FileFormatReport:
    return FileFormatReport(
        file_name=item.name,
        has_changes=item.result.has_changes,
        changes=[
            FormatChangeReport(
                type=change.type.value,
                line=change.line,
                description=change.description,
                before=change.before,
                after=change.after,
            )
            for change in item.result.changes
        ],
    )
