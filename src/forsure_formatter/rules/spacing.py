import re

from .base import PatternListRule, SubstitutionPattern


class BraceSpacingRule(PatternListRule):
    """Normalizes whitespace around braces and brackets."""

    patterns = (
        SubstitutionPattern(re.compile(r"(\w)\s*\{\s*"), "\\1 {\n", "Fixed opening brace spacing"),
        SubstitutionPattern(re.compile(r"\s*\}\s*"), "\n}", "Fixed closing brace spacing"),
        SubstitutionPattern(re.compile(r"(\w)\s*\[\s*"), "\\1[", "Fixed opening bracket spacing"),
        SubstitutionPattern(re.compile(r"\s*\]\s*"), "]", "Fixed closing bracket spacing"),
    )
    before_label = "Inconsistent brace spacing"
    after_label = "Consistent brace spacing"

    @property
    def rule_id(self) -> str:
        return "F004"

    @property
    def name(self) -> str:
        return "brace-spacing"

    @property
    def option(self) -> str:
        return "fix_braces"


class TokenSpacingRule(PatternListRule):
    """One space after separators, one on each side of operators."""

    patterns = (
        SubstitutionPattern(re.compile(r"\s*,\s*"), ", ", "Fixed comma spacing"),
        SubstitutionPattern(re.compile(r"\s*:\s*"), ": ", "Fixed colon spacing"),
        SubstitutionPattern(re.compile(r"\s*;\s*"), "; ", "Fixed semicolon spacing"),
        SubstitutionPattern(re.compile(r"\s*=\s*"), " = ", "Fixed assignment spacing"),
        SubstitutionPattern(re.compile(r"\s*\+\s*"), " + ", "Fixed operator spacing"),
        SubstitutionPattern(re.compile(r"\s*-\s*"), " - ", "Fixed operator spacing"),
        SubstitutionPattern(re.compile(r"\s*\*\s*"), " * ", "Fixed operator spacing"),
        SubstitutionPattern(re.compile(r"\s*/\s*"), " / ", "Fixed operator spacing"),
    )
    before_label = "Inconsistent spacing"
    after_label = "Consistent spacing"

    @property
    def rule_id(self) -> str:
        return "F006"

    @property
    def name(self) -> str:
        return "token-spacing"

    @property
    def option(self) -> str:
        return "fix_spacing"
