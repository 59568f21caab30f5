import json

from forsure_cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def invoke(tmp_path, *args):
    return runner.invoke(app, [*args, "--config", str(tmp_path / "none.toml")])


def test_cli_format_help():
    result = runner.invoke(app, ["format", "--help"])
    assert result.exit_code == 0
    assert "Run the auto-formatter on ForSure files" in result.stdout


def test_cli_format_write(tmp_path):
    file_path = tmp_path / "a.fs"
    file_path.write_text("let x=1", encoding="utf-8")

    result = invoke(tmp_path, "format", str(file_path), "--write")

    assert result.exit_code == 0
    assert "[1/1]" in result.stdout
    assert "1 of 1 file(s) need formatting" in result.stdout
    assert file_path.read_text(encoding="utf-8") == "let x = 1;"


def test_cli_format_check_fails_on_changes(tmp_path):
    file_path = tmp_path / "a.fs"
    file_path.write_text("let x=1", encoding="utf-8")

    result = invoke(tmp_path, "format", str(file_path), "--check")

    assert result.exit_code == 1
    assert file_path.read_text(encoding="utf-8") == "let x=1"


def test_cli_format_disable(tmp_path):
    file_path = tmp_path / "a.fs"
    file_path.write_text("let x=1", encoding="utf-8")

    result = invoke(tmp_path, "format", str(file_path), "--write", "--disable", "fix_spacing")

    assert result.exit_code == 0
    assert file_path.read_text(encoding="utf-8") == "let x=1;"


def test_cli_format_unknown_disable(tmp_path):
    file_path = tmp_path / "a.fs"
    file_path.write_text("x", encoding="utf-8")

    result = invoke(tmp_path, "format", str(file_path), "--disable", "fix_everything")

    assert result.exit_code == 2


def test_cli_format_report(tmp_path):
    file_path = tmp_path / "a.fs"
    file_path.write_text("let x=1", encoding="utf-8")
    report_path = tmp_path / "report.txt"

    result = invoke(tmp_path, "format", str(file_path), "--report", str(report_path))

    assert result.exit_code == 0
    report = report_path.read_text(encoding="utf-8")
    assert report.startswith("ForSure Auto-Format Report")
    assert "Added missing semicolon" in report


def test_cli_format_json(tmp_path):
    file_path = tmp_path / "a.fs"
    file_path.write_text("let x=1", encoding="utf-8")

    result = invoke(tmp_path, "format", str(file_path), "--json")

    payload = json.loads(result.stdout)
    assert payload[0]["has_changes"] is True
    assert payload[0]["changes"][-1]["type"] == "fix"


def test_cli_validate_valid(tmp_path):
    file_path = tmp_path / "home.fs"
    file_path.write_text("page: Home {\n  title\n}", encoding="utf-8")

    result = invoke(tmp_path, "validate", str(file_path))

    assert result.exit_code == 0
    assert "VALID: home.fs" in result.stdout
    assert "Total: 1, valid: 1" in result.stdout


def test_cli_validate_bad_extension(tmp_path):
    file_path = tmp_path / "x.exe"
    file_path.write_text("page: Home", encoding="utf-8")

    result = invoke(tmp_path, "validate", str(file_path))

    assert result.exit_code == 1
    assert "INVALID: x.exe" in result.stdout
    assert "Invalid file extension" in result.stdout


def test_cli_validate_existing(tmp_path):
    file_path = tmp_path / "home.fs"
    file_path.write_text("page: Home", encoding="utf-8")

    result = invoke(tmp_path, "validate", str(file_path), "--existing", "home.fs")

    assert result.exit_code == 1
    assert "already exists" in result.stdout


def test_cli_validate_json(tmp_path):
    file_path = tmp_path / "home.fs"
    file_path.write_text("component: Foo {}", encoding="utf-8")

    result = invoke(tmp_path, "validate", str(file_path), "--json")

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["summary"]["total"] == 1
    assert payload["summary"]["warnings"] == 1
    assert payload["files"][0]["warnings"] == ["Some components are missing descriptions"]


def test_cli_reads_pyproject_when_no_forsure_toml(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pyproject.toml").write_text(
        '[tool.forsure.validate]\nexisting = ["home.fs"]\n', encoding="utf-8"
    )
    file_path = tmp_path / "home.fs"
    file_path.write_text("page: Home", encoding="utf-8")

    result = runner.invoke(app, ["validate", str(file_path)])

    assert result.exit_code == 1
    assert "already exists" in result.stdout
