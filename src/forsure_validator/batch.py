import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from .models import (
    BatchSummary,
    BatchValidationProgress,
    BatchValidationResult,
    FileMeta,
    ValidationResult,
)
from .validator import ForSureValidator, normalize_names

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[BatchValidationProgress], None]


class FileHandle(Protocol):
    """A candidate file: metadata up front, content on demand."""

    name: str

    @property
    def size(self) -> int: ...

    async def read_text(self) -> str: ...


class PathFileHandle:
    """File on disk, read as UTF-8 off the event loop."""

    def __init__(self, path: Path | str, name: str | None = None):
        self.path = Path(path)
        self.name = name or self.path.name

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    async def read_text(self) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding="utf-8")


@dataclass
class InMemoryFileHandle:
    name: str
    content: str

    @property
    def size(self) -> int:
        return len(self.content.encode("utf-8"))

    async def read_text(self) -> str:
        return self.content


async def _read_handle(handle: FileHandle) -> str:
    return await handle.read_text()


async def validate_many(
    files: Sequence[FileHandle],
    existing_names: Iterable[Any] = (),
    on_progress: ProgressCallback | None = None,
    read_text: Callable[[FileHandle], Awaitable[str]] = _read_handle,
    delay: float = 0.05,
    validator: ForSureValidator | None = None,
) -> list[BatchValidationResult]:
    """Validate files strictly in order.

    Content is only read and checked once the file-level checks pass; a failed
    read becomes a content error instead of aborting the run. ``on_progress``
    fires before every file and once more after the last one.
    """
    validator = validator or ForSureValidator()
    names = normalize_names(existing_names)
    total = len(files)
    results: list[BatchValidationResult] = []

    for index, handle in enumerate(files):
        if on_progress:
            on_progress(
                BatchValidationProgress(total=total, completed=index, current=handle.name, results=list(results))
            )

        try:
            meta = FileMeta(name=handle.name, size=handle.size)
        except OSError as e:
            logger.warning("Failed to stat %s: %s", handle.name, e)
            file_validation = ValidationResult(is_valid=False, errors=[f"Failed to read file: {e}"])
        else:
            file_validation = validator.validate_file(meta, names)

        content_validation = ValidationResult.ok()
        if file_validation.is_valid:
            try:
                content = await read_text(handle)
            except Exception as e:
                logger.warning("Failed to read %s: %s", handle.name, e)
                content_validation = ValidationResult(is_valid=False, errors=[f"Failed to read file: {e}"])
            else:
                content_validation = validator.validate_content(content)

        results.append(
            BatchValidationResult(
                file_name=handle.name,
                file_validation=file_validation,
                content_validation=content_validation,
            )
        )

        await asyncio.sleep(delay)

    if on_progress:
        on_progress(BatchValidationProgress(total=total, completed=total, current="", results=list(results)))

    return results


def summarize_batch(results: Sequence[BatchValidationResult]) -> BatchSummary:
    valid = sum(1 for r in results if r.overall_valid)
    return BatchSummary(
        total=len(results),
        valid=valid,
        invalid=len(results) - valid,
        warnings=sum(1 for r in results if r.has_warnings),
    )
