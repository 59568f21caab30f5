import re

from ..models import ChangeType
from .base import FormattingContext, FormattingRule

FROM_CLAUSE = re.compile(r"""from\s*['"]([^'"]+)['"]""")
BARE_IMPORT = re.compile(r"""^\s*import\s*['"]([^'"]+)['"]""")


def is_import(line: str) -> bool:
    return line.strip().startswith("import ")


def import_path(line: str) -> str:
    """Module path an import line is sorted by; empty when none can be found."""
    match = FROM_CLAUSE.search(line) or BARE_IMPORT.match(line)
    return match.group(1) if match else ""


def split_import_section(lines: list[str]) -> tuple[list[str], list[str]]:
    """Split off the leading run of import and blank lines."""
    end = 0
    for line in lines:
        if not is_import(line) and line.strip():
            break
        end += 1
    return lines[:end], lines[end:]


class ImportSortingRule(FormattingRule):
    """Sorts the leading import block alphabetically by module path."""

    @property
    def rule_id(self) -> str:
        return "F009"

    @property
    def name(self) -> str:
        return "import-sorting"

    @property
    def option(self) -> str:
        return "sort_imports"

    def apply(self, context: FormattingContext) -> None:
        section, remainder = split_import_section(context.lines)
        imports = [line for line in section if is_import(line)]
        if len(imports) < 2:
            return

        sorted_imports = sorted(imports, key=lambda line: import_path(line).lower())
        if sorted_imports == imports:
            return

        context.source = "\n".join([*sorted_imports, "", *remainder])
        context.log.record(
            ChangeType.IMPROVEMENT,
            1,
            "Sorted import statements",
            "Unsorted imports",
            "Alphabetically sorted imports",
        )
