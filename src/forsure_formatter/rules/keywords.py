import re

from .base import PatternListRule, SubstitutionPattern

KEYWORDS = ("component", "page", "layout", "style", "script", "import", "export")


class KeywordCaseRule(PatternListRule):
    """Lowercases ForSure keywords wherever they appear as whole words."""

    patterns = tuple(
        SubstitutionPattern(
            re.compile(rf"\b{keyword}\b", re.IGNORECASE),
            keyword,
            f"Normalized {keyword} keyword",
        )
        for keyword in KEYWORDS
    )
    before_label = "Inconsistent keyword casing"
    after_label = "Consistent keyword casing"

    @property
    def rule_id(self) -> str:
        return "F008"

    @property
    def name(self) -> str:
        return "keyword-case"

    @property
    def option(self) -> str:
        return "normalize_keywords"
