from .base import LineRule


class CommentSpacingRule(LineRule):
    """Puts exactly one space after '//' in line comments."""

    description = "Fixed comment spacing"

    @property
    def rule_id(self) -> str:
        return "F010"

    @property
    def name(self) -> str:
        return "comment-spacing"

    @property
    def option(self) -> str:
        return "format_comments"

    def fix_line(self, line: str) -> str:
        trimmed = line.strip()
        if not trimmed.startswith("//"):
            return line
        return line.replace(trimmed, f"// {trimmed[2:].strip()}", 1)
