from ..models import ChangeType
from .base import LineRule

TERMINATORS = (";", "{", "}", "[", "]", ",")
COMMENT_PREFIXES = ("//", "/*")
DECLARATION_PREFIXES = ("let ", "const ", "var ")


def needs_semicolon(trimmed: str) -> bool:
    if not trimmed or trimmed.startswith(COMMENT_PREFIXES) or trimmed.endswith(TERMINATORS):
        return False
    return (
        "=" in trimmed
        or trimmed.startswith(DECLARATION_PREFIXES)
        or "return " in trimmed
        or "import " in trimmed
    )


class SemicolonRule(LineRule):
    """Terminates assignments, declarations, returns and imports with ';'."""

    change_type = ChangeType.FIX
    description = "Added missing semicolon"

    @property
    def rule_id(self) -> str:
        return "F007"

    @property
    def name(self) -> str:
        return "semicolons"

    @property
    def option(self) -> str:
        return "add_missing_semicolons"

    def fix_line(self, line: str) -> str:
        if needs_semicolon(line.strip()):
            return line + ";"
        return line
