import re

from .base import LineRule

DOUBLE_QUOTED = re.compile(r'"([^"\\]*(?:\\.[^"\\]*)*)"')


class QuoteNormalizationRule(LineRule):
    """Rewrites double-quoted strings as single-quoted, content and escapes kept as-is."""

    description = "Normalized quotes to single quotes"

    @property
    def rule_id(self) -> str:
        return "F005"

    @property
    def name(self) -> str:
        return "quotes"

    @property
    def option(self) -> str:
        return "fix_quotes"

    def fix_line(self, line: str) -> str:
        return DOUBLE_QUOTED.sub(r"'\1'", line)
