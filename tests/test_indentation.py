from forsure_formatter.engine import FormatterEngine
from forsure_formatter.rules.indentation import IndentationRule, IndentState, indent_line


def format_indent(source: str):
    return FormatterEngine(rules=[IndentationRule()]).format_string(source)


def test_indent_line_opener_increases_depth():
    line, state = indent_line("component: A {", IndentState())

    assert line == "component: A {"
    assert state == IndentState(depth=1)


def test_indent_line_closer_dedents_itself():
    line, state = indent_line("    }", IndentState(depth=2))

    assert line == "  }"
    assert state.depth == 1


def test_indentation_simple_block():
    result = format_indent("page: Home {\nheader\n}")

    assert result.formatted == "page: Home {\n  header\n}"
    assert len(result.changes) == 1
    change = result.changes[0]
    assert change.line == 2
    assert change.description == "Fixed indentation"
    assert change.before == "header"
    assert change.after == "  header"


def test_indentation_nested_brackets():
    result = format_indent("a {\nb [\nc\n]\n}")

    assert result.formatted == "a {\n  b [\n    c\n  ]\n}"


def test_indentation_removes_excess_indent():
    result = format_indent("    a")

    assert result.formatted == "a"


def test_indentation_depth_never_negative():
    source = "}\n}\nx"
    result = format_indent(source)

    assert result.formatted == source
    assert not result.has_changes


def test_indentation_empties_whitespace_only_lines():
    result = format_indent("a {\n   \nb\n}")

    assert result.formatted == "a {\n\n  b\n}"
    assert [c.line for c in result.changes] == [2, 3]


def test_indentation_skips_open_string_literal():
    source = 'x = "abc\n    y {\nz"'
    result = format_indent(source)

    assert result.formatted == source
    assert not result.has_changes


def test_indentation_escaped_quote_does_not_toggle():
    line, state = indent_line('  say "a \\" b" {', IndentState())

    assert line == 'say "a \\" b" {'
    assert state == IndentState(depth=1)


def test_indentation_idempotency():
    first = format_indent("a {\nb {\nc\n}\n}")
    second = format_indent(first.formatted)

    assert second.formatted == first.formatted
    assert not second.has_changes
