from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from .models import NamedFormatResult

MAX_INLINE_FRAGMENT = 100


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp(moment: datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"


def render_format_report(
    results: Sequence[NamedFormatResult],
    now: Callable[[], datetime] = _utc_now,
) -> str:
    """Render a plain-text report of a batch formatting run."""
    lines = [
        "ForSure Auto-Format Report",
        f"Generated: {_timestamp(now())}",
        "=" * 50,
        "",
    ]

    files_with_changes = sum(1 for item in results if item.result.has_changes)
    total_changes = sum(len(item.result.changes) for item in results)

    lines += [
        "Summary:",
        f"- Total files processed: {len(results)}",
        f"- Files with changes: {files_with_changes}",
        f"- Total changes made: {total_changes}",
        "",
    ]

    for item in results:
        lines += [f"File: {item.name}", "─" * 30]

        if not item.result.has_changes:
            lines += ["No changes needed - file is already well-formatted", ""]
            continue

        lines += [f"Changes made: {len(item.result.changes)}", ""]
        for number, change in enumerate(item.result.changes, start=1):
            lines += [
                f"{number}. {change.description}",
                f"   Line: {change.line}",
                f"   Type: {change.type.value}",
            ]
            # Long fragments would swamp the report.
            if len(change.before) < MAX_INLINE_FRAGMENT:
                lines += [f"   Before: {change.before}", f"   After: {change.after}"]
            lines.append("")

    return "\n".join(lines) + "\n"
