import logging

from .models import ChangeLog, FormatOptions, FormatResult
from .rules.base import FormattingContext, FormattingRule
from .rules.comments import CommentSpacingRule
from .rules.indentation import IndentationRule
from .rules.keywords import KeywordCaseRule
from .rules.quotes import QuoteNormalizationRule
from .rules.semicolons import SemicolonRule
from .rules.spacing import BraceSpacingRule, TokenSpacingRule
from .rules.structure import ImportSortingRule
from .rules.whitespace import LineEndingRule, TrailingWhitespaceRule

logger = logging.getLogger(__name__)


class FormatterEngine:
    """Runs ForSure source through an ordered list of text passes."""

    def __init__(self, options: FormatOptions | None = None, rules: list[FormattingRule] | None = None):
        self.options = options or FormatOptions()
        self.rules: list[FormattingRule] = self.default_rules() if rules is None else list(rules)

    @staticmethod
    def default_rules() -> list[FormattingRule]:
        """The fixed pass order. Each pass sees the output of the one before it."""
        return [
            LineEndingRule(),
            TrailingWhitespaceRule(),
            IndentationRule(),
            BraceSpacingRule(),
            QuoteNormalizationRule(),
            TokenSpacingRule(),
            SemicolonRule(),
            KeywordCaseRule(),
            ImportSortingRule(),
            CommentSpacingRule(),
        ]

    def add_rule(self, rule: FormattingRule) -> "FormatterEngine":
        """Register an extra pass at the end of the pipeline."""
        self.rules.append(rule)
        return self

    def is_enabled(self, rule: FormattingRule) -> bool:
        return getattr(self.options, rule.option, True)

    def format_string(self, source: str) -> FormatResult:
        context = FormattingContext(source=source, log=ChangeLog())

        for rule in self.rules:
            if not self.is_enabled(rule):
                continue
            recorded = len(context.log)
            rule.apply(context)
            logger.debug("%s %s: %d change(s)", rule.rule_id, rule.name, len(context.log) - recorded)

        return FormatResult(formatted=context.source, changes=tuple(context.log.changes))


def format_forsure(source: str, options: FormatOptions | None = None) -> FormatResult:
    """Format ForSure source with the default pass pipeline."""
    return FormatterEngine(options).format_string(source)
