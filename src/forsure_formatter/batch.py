import asyncio
import logging
from collections.abc import Callable, Sequence

from .engine import FormatterEngine
from .models import FormatOptions, NamedFormatResult, SourceFile

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


def _as_source_file(item: SourceFile | tuple[str, str]) -> SourceFile:
    if isinstance(item, tuple):
        name, content = item
        return SourceFile(name=name, content=content)
    return item


async def format_many(
    files: Sequence[SourceFile | tuple[str, str]],
    options: FormatOptions | None = None,
    on_progress: ProgressCallback | None = None,
    delay: float = 0.01,
) -> list[NamedFormatResult]:
    """Format files one after another, in input order.

    ``on_progress(current, total, name)`` fires before each file with a
    1-based ``current``. The loop yields to the event loop between files.
    """
    engine = FormatterEngine(options)
    sources = [_as_source_file(item) for item in files]
    total = len(sources)
    results: list[NamedFormatResult] = []

    for index, source in enumerate(sources, start=1):
        if on_progress:
            on_progress(index, total, source.name)

        await asyncio.sleep(delay)

        result = engine.format_string(source.content)
        logger.debug("Formatted %s (%d change(s))", source.name, len(result.changes))
        results.append(NamedFormatResult(name=source.name, result=result))

    return results
