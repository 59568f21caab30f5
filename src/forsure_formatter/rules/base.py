import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..models import ChangeLog, ChangeType


@dataclass
class FormattingContext:
    source: str
    log: ChangeLog = field(default_factory=ChangeLog)

    @property
    def lines(self) -> list[str]:
        return self.source.split("\n")


@dataclass(frozen=True)
class SubstitutionPattern:
    """A whole-text regex rewrite reported as one generic change."""

    pattern: re.Pattern
    replacement: str
    description: str


class FormattingRule(ABC):
    """Abstract base class for all formatting passes."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'F001')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name (e.g., 'line-endings')."""
        pass

    @property
    @abstractmethod
    def option(self) -> str:
        """Name of the FormatOptions flag that enables this rule."""
        pass

    @abstractmethod
    def apply(self, context: FormattingContext) -> None:
        """Rewrite ``context.source`` and record every change in ``context.log``."""
        pass


class PatternListRule(FormattingRule):
    """Runs an ordered list of substitutions over the whole text."""

    patterns: tuple[SubstitutionPattern, ...] = ()
    change_type: ChangeType = ChangeType.IMPROVEMENT
    before_label: str = ""
    after_label: str = ""

    def apply(self, context: FormattingContext) -> None:
        for item in self.patterns:
            before = context.source
            context.source = item.pattern.sub(item.replacement, context.source)
            if context.source != before:
                context.log.record(
                    self.change_type, 1, item.description, self.before_label, self.after_label
                )


class LineRule(FormattingRule):
    """Rewrites each line independently, one change per modified line."""

    change_type: ChangeType = ChangeType.IMPROVEMENT
    description: str = ""

    @abstractmethod
    def fix_line(self, line: str) -> str:
        pass

    def apply(self, context: FormattingContext) -> None:
        fixed_lines = []
        for index, line in enumerate(context.lines):
            fixed = self.fix_line(line)
            if fixed != line:
                context.log.record(self.change_type, index + 1, self.description, line, fixed)
            fixed_lines.append(fixed)
        context.source = "\n".join(fixed_lines)
