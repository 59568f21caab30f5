import re

from ..models import ChangeType
from .base import FormattingContext, FormattingRule, LineRule

TRAILING_WS = re.compile(r"[ \t]+$")


class LineEndingRule(FormattingRule):
    """Collapses CRLF and lone CR line endings to LF."""

    @property
    def rule_id(self) -> str:
        return "F001"

    @property
    def name(self) -> str:
        return "line-endings"

    @property
    def option(self) -> str:
        return "fix_line_endings"

    def apply(self, context: FormattingContext) -> None:
        normalized = context.source.replace("\r\n", "\n").replace("\r", "\n")
        if normalized != context.source:
            context.log.record(
                ChangeType.FIX,
                1,
                "Normalized line endings to LF",
                "Mixed line endings",
                "LF line endings",
            )
        context.source = normalized


class TrailingWhitespaceRule(LineRule):
    description = "Removed trailing whitespace"

    @property
    def rule_id(self) -> str:
        return "F002"

    @property
    def name(self) -> str:
        return "trailing-whitespace"

    @property
    def option(self) -> str:
        return "remove_trailing_spaces"

    def fix_line(self, line: str) -> str:
        return TRAILING_WS.sub("", line)
