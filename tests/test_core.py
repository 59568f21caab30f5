import pytest
from forsure_formatter.engine import FormatterEngine, format_forsure
from forsure_formatter.models import ChangeType, FormatOptions, FormatResult
from forsure_formatter.rules.base import FormattingRule


class MockRule(FormattingRule):
    @property
    def rule_id(self) -> str:
        return "T001"

    @property
    def name(self) -> str:
        return "mock"

    @property
    def option(self) -> str:
        return "fix_quotes"

    def apply(self, context):
        if "old" in context.source:
            context.source = context.source.replace("old", "new")
            context.log.record(ChangeType.IMPROVEMENT, 1, "Replaced old", "old", "new")


def only(**enabled) -> FormatOptions:
    return FormatOptions.from_mapping(enabled, base=FormatOptions.none())


def test_format_options_defaults():
    options = FormatOptions()
    assert all(getattr(options, name) for name in FormatOptions.option_names())
    assert len(FormatOptions.option_names()) == 10


def test_format_options_from_partial_mapping():
    options = FormatOptions.from_mapping({"fix_quotes": False})
    assert options.fix_quotes is False
    assert options.fix_spacing is True


def test_format_options_rejects_unknown_and_non_bool():
    with pytest.raises(ValueError, match="Unknown format option"):
        FormatOptions.from_mapping({"fix_everything": True})
    with pytest.raises(ValueError, match="must be a boolean"):
        FormatOptions.from_mapping({"fix_quotes": "yes"})


def test_engine_applies_rules():
    engine = FormatterEngine(rules=[]).add_rule(MockRule())

    result = engine.format_string("This is old code")

    assert isinstance(result, FormatResult)
    assert result.formatted == "This is new code"
    assert result.has_changes is True


def test_engine_no_change():
    engine = FormatterEngine(rules=[MockRule()])

    source = "This is clean code"
    result = engine.format_string(source)

    assert result.formatted == source
    assert result.changes == ()
    assert result.has_changes is False


def test_engine_skips_disabled_rule():
    engine = FormatterEngine(FormatOptions(fix_quotes=False), rules=[MockRule()])

    result = engine.format_string("old")

    assert result.formatted == "old"
    assert not result.has_changes


def test_default_rule_order():
    ids = [rule.rule_id for rule in FormatterEngine.default_rules()]
    assert ids == [f"F{n:03d}" for n in range(1, 11)]


def test_missing_semicolon_scenario():
    result = format_forsure("let x=1\n", only(add_missing_semicolons=True))

    assert result.formatted == "let x=1;\n"
    assert len(result.changes) == 1
    assert result.changes[0].type == ChangeType.FIX
    assert "semicolon" in result.changes[0].description.lower()


def test_changes_follow_pass_order():
    result = format_forsure("x = 1   \r\n", only(fix_line_endings=True, remove_trailing_spaces=True))

    assert result.formatted == "x = 1\n"
    assert [c.description for c in result.changes] == [
        "Normalized line endings to LF",
        "Removed trailing whitespace",
    ]


def test_all_passes_disabled_leaves_text_alone():
    source = "Component:Foo{  \r\n}"
    result = format_forsure(source, FormatOptions.none())

    assert result.formatted == source
    assert not result.has_changes


def test_full_pipeline_on_unrecognized_text():
    result = format_forsure("@@@ ??? ###")

    assert result.formatted == "@@@ ??? ###"
    assert result.changes == ()


def test_full_pipeline_declaration():
    result = format_forsure("let x=1")

    assert result.formatted == "let x = 1;"
    assert [c.description for c in result.changes] == [
        "Fixed assignment spacing",
        "Added missing semicolon",
    ]
