from dataclasses import dataclass

from ..models import ChangeType
from .base import FormattingContext, FormattingRule

OPENERS = ("{", "[", "(")
CLOSERS = ("}", "]", ")")
QUOTES = ('"', "'", "`")


@dataclass(frozen=True)
class IndentState:
    """Line-to-line state of the indentation pass."""

    depth: int = 0
    in_string: bool = False
    string_char: str = ""


def scan_strings(text: str, in_string: bool, string_char: str) -> tuple[bool, str]:
    """Track quote state across ``text``. A quote escaped by a backslash on the same line is ignored."""
    for i, char in enumerate(text):
        if char not in QUOTES or (i > 0 and text[i - 1] == "\\"):
            continue
        if in_string and char == string_char:
            in_string, string_char = False, ""
        elif not in_string:
            in_string, string_char = True, char
    return in_string, string_char


def indent_line(line: str, state: IndentState, indent_size: int = 2) -> tuple[str, IndentState]:
    """Re-indent a single line from the running nesting depth.

    Lines that end inside a string literal are returned untouched and leave the
    depth alone. A leading closer dedents the line itself; a trailing opener
    indents the lines that follow.
    """
    trimmed = line.strip()
    if not trimmed:
        return "", state

    in_string, string_char = scan_strings(trimmed, state.in_string, state.string_char)
    if in_string:
        return line, IndentState(state.depth, True, string_char)

    depth = state.depth
    starts_with_closer = trimmed.startswith(CLOSERS)
    expected = max(0, depth - 1) if starts_with_closer else depth
    formatted = " " * (expected * indent_size) + trimmed

    if trimmed.endswith(OPENERS):
        depth += 1
    elif starts_with_closer:
        depth = max(0, depth - 1)

    return formatted, IndentState(depth, False, "")


class IndentationRule(FormattingRule):
    """Bracket-depth indentation, two spaces per level."""

    def __init__(self, indent_size: int = 2):
        self.indent_size = indent_size

    @property
    def rule_id(self) -> str:
        return "F003"

    @property
    def name(self) -> str:
        return "indentation"

    @property
    def option(self) -> str:
        return "fix_indentation"

    def apply(self, context: FormattingContext) -> None:
        state = IndentState()
        formatted_lines = []
        for index, line in enumerate(context.lines):
            formatted, state = indent_line(line, state, self.indent_size)
            if formatted != line:
                context.log.record(ChangeType.IMPROVEMENT, index + 1, "Fixed indentation", line, formatted)
            formatted_lines.append(formatted)
        context.source = "\n".join(formatted_lines)
