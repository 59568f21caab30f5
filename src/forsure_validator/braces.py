from .models import BraceCheckResult

PAIRS = {"{": "}", "[": "]", "(": ")"}
CLOSERS = frozenset(PAIRS.values())


def check_balanced_braces(content: str) -> BraceCheckResult:
    """Stack-based bracket check. Stops at the first imbalance it finds."""
    stack: list[tuple[str, int]] = []

    for line_number, line in enumerate(content.split("\n"), start=1):
        for char in line:
            if char in PAIRS:
                stack.append((char, line_number))
            elif char in CLOSERS:
                if not stack:
                    return BraceCheckResult(False, f"Unexpected closing '{char}' at line {line_number}")
                opener, _ = stack.pop()
                expected = PAIRS[opener]
                if char != expected:
                    return BraceCheckResult(
                        False, f"Expected '{expected}' but found '{char}' at line {line_number}"
                    )

    if stack:
        opener, line_number = stack[-1]
        return BraceCheckResult(False, f"Unclosed '{opener}' from line {line_number}")

    return BraceCheckResult(True)
