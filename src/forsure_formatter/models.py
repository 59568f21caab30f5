from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any


@dataclass
class FormatOptions:
    """Switches for the individual formatting passes. Every pass is on by default."""

    fix_indentation: bool = True
    fix_braces: bool = True
    fix_quotes: bool = True
    fix_spacing: bool = True
    fix_line_endings: bool = True
    add_missing_semicolons: bool = True
    remove_trailing_spaces: bool = True
    normalize_keywords: bool = True
    sort_imports: bool = True
    format_comments: bool = True

    @classmethod
    def option_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], base: "FormatOptions | None" = None) -> "FormatOptions":
        """Overlay a partial mapping on top of ``base`` (defaults when omitted)."""
        known = set(cls.option_names())
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown format option(s): {', '.join(unknown)}")

        merged = {name: getattr(base or cls(), name) for name in known}
        for name, value in values.items():
            if not isinstance(value, bool):
                raise ValueError(f"Format option '{name}' must be a boolean, got {value!r}")
            merged[name] = value
        return cls(**merged)

    @classmethod
    def none(cls) -> "FormatOptions":
        return cls(**{name: False for name in cls.option_names()})


class ChangeType(str, Enum):
    FIX = "fix"
    IMPROVEMENT = "improvement"
    WARNING = "warning"


@dataclass(frozen=True)
class Change:
    """One recorded edit made by a formatting pass."""

    type: ChangeType
    line: int
    description: str
    before: str
    after: str
    column: int | None = None


@dataclass(frozen=True)
class FormatResult:
    formatted: str
    changes: tuple[Change, ...] = ()

    @property
    def has_changes(self) -> bool:
        return len(self.changes) > 0


@dataclass
class SourceFile:
    name: str
    content: str


@dataclass(frozen=True)
class NamedFormatResult:
    name: str
    result: FormatResult


@dataclass
class ChangeLog:
    """Append-only sink shared by every pass of one formatting run."""

    changes: list[Change] = field(default_factory=list)

    def record(
        self,
        change_type: ChangeType,
        line: int,
        description: str,
        before: str,
        after: str,
    ) -> None:
        self.changes.append(
            Change(type=change_type, line=line, description=description, before=before, after=after)
        )

    def __len__(self) -> int:
        return len(self.changes)
