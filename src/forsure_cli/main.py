import asyncio
import json
import logging
from pathlib import Path

import typer
from forsure_formatter.batch import format_many
from forsure_formatter.models import SourceFile
from forsure_formatter.report import render_format_report
from forsure_validator.batch import PathFileHandle, summarize_batch, validate_many

from .config import ConfigError, ForSureConfig, find_config
from .converters import batch_results_to_report, format_result_to_report

app = typer.Typer(help="ForSure Tools - Format and validate ForSure project files")

DEFAULT_CONFIG = Path(".forsure.toml")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """ForSure formatter and validator"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_file: Path) -> ForSureConfig:
    try:
        return ForSureConfig(find_config(config_file, DEFAULT_CONFIG))
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--config")


@app.command("format")
def format_files(
    files: list[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Files to format"),
    write: bool = typer.Option(False, help="Write formatted text back to the files"),
    check: bool = typer.Option(False, help="Exit with code 1 if any file would change"),
    report: Path | None = typer.Option(None, help="Write a plain-text report to this path"),
    json_output: bool = typer.Option(False, "--json", help="Print changes as JSON"),
    disable: list[str] | None = typer.Option(None, help="Format option to switch off (repeatable)"),
    config_file: Path = typer.Option(DEFAULT_CONFIG, "--config", help="Path to config file"),
):
    """Run the auto-formatter on ForSure files"""
    config = _load_config(config_file)
    try:
        options = config.disable(disable or [])
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--disable")

    sources = [SourceFile(name=str(path), content=path.read_text(encoding="utf-8")) for path in files]

    def on_progress(current: int, total: int, name: str) -> None:
        if not json_output:
            typer.echo(f"[{current}/{total}] {name}")

    results = asyncio.run(format_many(sources, options, on_progress=on_progress, delay=0))

    if json_output:
        payload = [format_result_to_report(item).model_dump() for item in results]
        typer.echo(json.dumps(payload, indent=2))
    else:
        for item in results:
            typer.echo(f"  {item.name}: {len(item.result.changes)} change(s)")

    if write:
        for source, item in zip(sources, results):
            if item.result.formatted != source.content:
                Path(source.name).write_text(item.result.formatted, encoding="utf-8")

    if report:
        report.write_text(render_format_report(results), encoding="utf-8")
        if not json_output:
            typer.echo(f"Report written to {report}")

    changed = sum(1 for item in results if item.result.has_changes)
    if not json_output:
        typer.echo(f"\n{changed} of {len(results)} file(s) need formatting")

    if check and changed:
        raise typer.Exit(code=1)


@app.command()
def validate(
    files: list[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Files to validate"),
    existing: list[str] | None = typer.Option(None, help="File name that already exists (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    config_file: Path = typer.Option(DEFAULT_CONFIG, "--config", help="Path to config file"),
):
    """Validate ForSure files"""
    config = _load_config(config_file)
    names = [*config.existing_names, *(existing or [])]
    handles = [PathFileHandle(path) for path in files]

    results = asyncio.run(validate_many(handles, names, delay=0))

    if json_output:
        typer.echo(batch_results_to_report(results).model_dump_json(indent=2))
    else:
        for result in results:
            status = "VALID" if result.overall_valid else "INVALID"
            typer.echo(f"{status}: {result.file_name}")
            for message in [*result.file_validation.errors, *result.content_validation.errors]:
                typer.echo(f"  ERROR: {message}")
            for message in [*result.file_validation.warnings, *result.content_validation.warnings]:
                typer.echo(f"  WARNING: {message}")

        summary = summarize_batch(results)
        typer.echo(
            f"\nTotal: {summary.total}, valid: {summary.valid}, "
            f"invalid: {summary.invalid}, with warnings: {summary.warnings}"
        )

    if any(not r.overall_valid for r in results):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
