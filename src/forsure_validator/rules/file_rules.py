from collections.abc import Set

from ..models import FileMeta
from ..utils import format_file_size, get_file_extension
from .base import FileRule

MAX_FILE_SIZE = 5 * 1024 * 1024
VALID_EXTENSIONS = (".fs", ".forsure", ".txt")


class ExtensionRule(FileRule):
    def __init__(self, allowed: tuple[str, ...] = VALID_EXTENSIONS):
        self.allowed = allowed

    @property
    def rule_id(self) -> str:
        return "V001"

    @property
    def name(self) -> str:
        return "file-extension"

    def check(self, meta: FileMeta, existing_names: Set[str]) -> list[str]:
        extension = get_file_extension(meta.name).lower()
        if extension in self.allowed:
            return []
        return [f"Invalid file extension: {extension}. Allowed extensions: {', '.join(self.allowed)}"]


class FileSizeRule(FileRule):
    def __init__(self, max_size: int = MAX_FILE_SIZE):
        self.max_size = max_size

    @property
    def rule_id(self) -> str:
        return "V002"

    @property
    def name(self) -> str:
        return "file-size"

    def check(self, meta: FileMeta, existing_names: Set[str]) -> list[str]:
        if meta.size <= self.max_size:
            return []
        return [f"File size exceeds the maximum allowed size of {format_file_size(self.max_size)}"]


class DuplicateNameRule(FileRule):
    @property
    def rule_id(self) -> str:
        return "V003"

    @property
    def name(self) -> str:
        return "duplicate-name"

    def check(self, meta: FileMeta, existing_names: Set[str]) -> list[str]:
        if meta.name in existing_names:
            return [f'A file with the name "{meta.name}" already exists']
        return []
