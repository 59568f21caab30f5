import re

from ..braces import check_balanced_braces
from ..models import Severity
from .base import ContentRule

REQUIRED_PATTERNS = (
    re.compile(
        r"^(component|page|layout|route|api|util|hook|context|service|model|type|interface|const|function):",
        re.IGNORECASE | re.MULTILINE,
    ),
)

WARNING_PATTERNS = (
    # Declaration with an empty body
    re.compile(r"^(component|page|layout):[^{]*\{\s*\}", re.IGNORECASE | re.MULTILINE),
)


class RequiredSyntaxRule(ContentRule):
    """At least one line must open with a ForSure declaration keyword."""

    def __init__(self, patterns: tuple[re.Pattern, ...] = REQUIRED_PATTERNS):
        self.patterns = patterns

    @property
    def rule_id(self) -> str:
        return "V101"

    @property
    def name(self) -> str:
        return "required-syntax"

    def check(self, content: str) -> list[str]:
        if any(pattern.search(content) for pattern in self.patterns):
            return []
        return ["File does not contain valid ForSure syntax"]


class MissingDescriptionRule(ContentRule):
    """Warns once per pattern that finds a declaration with an empty body."""

    def __init__(self, patterns: tuple[re.Pattern, ...] = WARNING_PATTERNS):
        self.patterns = patterns

    @property
    def rule_id(self) -> str:
        return "V102"

    @property
    def name(self) -> str:
        return "missing-description"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    def check(self, content: str) -> list[str]:
        return [
            "Some components are missing descriptions"
            for pattern in self.patterns
            if pattern.search(content)
        ]


class BalancedBracesRule(ContentRule):
    @property
    def rule_id(self) -> str:
        return "V103"

    @property
    def name(self) -> str:
        return "balanced-braces"

    def check(self, content: str) -> list[str]:
        result = check_balanced_braces(content)
        if result.is_balanced:
            return []
        return [f"Unbalanced braces: {result.message}"]
