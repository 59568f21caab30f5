from pydantic import BaseModel, Field


class FileValidationReport(BaseModel):
    file_name: str
    overall_valid: bool
    file_errors: list[str] = Field(default_factory=list)
    content_errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ValidationSummary(BaseModel):
    total: int
    valid: int
    invalid: int
    warnings: int


class ValidationReport(BaseModel):
    summary: ValidationSummary
    files: list[FileValidationReport]


class FormatChangeReport(BaseModel):
    type: str
    line: int
    description: str
    before: str
    after: str


class FileFormatReport(BaseModel):
    file_name: str
    has_changes: bool
    changes: list[FormatChangeReport] = Field(default_factory=list)
