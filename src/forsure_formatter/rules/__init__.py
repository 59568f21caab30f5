from .base import FormattingContext, FormattingRule, LineRule, PatternListRule, SubstitutionPattern
from .comments import CommentSpacingRule
from .indentation import IndentationRule, IndentState, indent_line
from .keywords import KeywordCaseRule
from .quotes import QuoteNormalizationRule
from .semicolons import SemicolonRule
from .spacing import BraceSpacingRule, TokenSpacingRule
from .structure import ImportSortingRule
from .whitespace import LineEndingRule, TrailingWhitespaceRule

__all__ = [
    "FormattingRule",
    "LineRule",
    "PatternListRule",
    "SubstitutionPattern",
    "FormattingContext",
    "LineEndingRule",
    "TrailingWhitespaceRule",
    "IndentationRule",
    "IndentState",
    "indent_line",
    "BraceSpacingRule",
    "QuoteNormalizationRule",
    "TokenSpacingRule",
    "SemicolonRule",
    "KeywordCaseRule",
    "ImportSortingRule",
    "CommentSpacingRule",
]
