import asyncio

from forsure_formatter.batch import format_many
from forsure_formatter.models import FormatOptions, SourceFile


def test_format_many_progress_order():
    calls = []

    results = asyncio.run(
        format_many(
            [SourceFile("a", "x"), SourceFile("b", "y")],
            FormatOptions(),
            on_progress=lambda current, total, name: calls.append((current, total, name)),
            delay=0,
        )
    )

    assert calls == [(1, 2, "a"), (2, 2, "b")]
    assert [item.name for item in results] == ["a", "b"]


def test_format_many_progress_fires_before_each_file():
    seen = []
    files = [SourceFile("one.fs", "let a=1"), SourceFile("two.fs", "let b=2")]

    async def run():
        return await format_many(files, on_progress=lambda c, t, n: seen.append(n), delay=0)

    results = asyncio.run(run())

    assert seen == ["one.fs", "two.fs"]
    assert results[0].result.formatted == "let a = 1;"
    assert results[1].result.formatted == "let b = 2;"


def test_format_many_accepts_tuples():
    results = asyncio.run(format_many([("a.fs", "let x=1")], delay=0))

    assert results[0].name == "a.fs"
    assert results[0].result.has_changes


def test_format_many_empty():
    calls = []

    results = asyncio.run(format_many([], on_progress=lambda *args: calls.append(args), delay=0))

    assert results == []
    assert calls == []
