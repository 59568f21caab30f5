SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def get_file_extension(filename: str) -> str:
    """Everything from the last dot on, or '' when the name has no dot."""
    index = filename.rfind(".")
    return filename[index:] if index != -1 else ""


def format_file_size(size: int) -> str:
    """Human-readable size, e.g. ``5 MB`` or ``1.5 KB``."""
    if size <= 0:
        return "0 Bytes"
    unit = 0
    while unit < len(SIZE_UNITS) - 1 and size >= 1024 ** (unit + 1):
        unit += 1
    value = round(size / 1024**unit, 2)
    return f"{value:g} {SIZE_UNITS[unit]}"
