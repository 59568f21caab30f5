"""Rule-based auto-formatter for ForSure notation."""

from .batch import format_many
from .engine import FormatterEngine, format_forsure
from .models import (
    Change,
    ChangeLog,
    ChangeType,
    FormatOptions,
    FormatResult,
    NamedFormatResult,
    SourceFile,
)
from .report import render_format_report

__all__ = [
    "Change",
    "ChangeLog",
    "ChangeType",
    "FormatOptions",
    "FormatResult",
    "FormatterEngine",
    "NamedFormatResult",
    "SourceFile",
    "format_forsure",
    "format_many",
    "render_format_report",
]
