from __future__ import annotations

import io
import json

import pytest
from rich.console import Console

from json_to_swift import cli

from conftest import BILBO_JSON

FRODO_JSON = '{"name": "Frodo", "age": 50}'


@pytest.fixture
def output(monkeypatch) -> io.StringIO:
    """Diagnostics written by the CLI; stdout is left to capsys."""
    buffer = io.StringIO()
    monkeypatch.setattr(
        cli, "console", Console(file=io.StringIO(), force_terminal=False, width=200)
    )
    monkeypatch.setattr(
        cli, "err_console", Console(file=buffer, force_terminal=False, width=200)
    )
    return buffer


@pytest.fixture
def bilbo_file(tmp_path):
    path = tmp_path / "bilbo.json"
    path.write_text(BILBO_JSON, encoding="utf-8")
    return path


def test_writes_full_declaration(bilbo_file, tmp_path, output) -> None:
    target = tmp_path / "Root.swift"

    assert cli.main([str(bilbo_file), "-o", str(target), "--root-name", "Hobbit"]) == 0

    code = target.read_text(encoding="utf-8")
    assert code.startswith("struct Hobbit {\n    let name: String!\n")
    assert "struct Key {" in code
    assert "saved to" in output.getvalue()


def test_reads_standard_input(monkeypatch, capsys, output) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(FRODO_JSON))

    assert cli.main(["--fragment", "properties", "--use-var", "--optional"]) == 0

    assert capsys.readouterr().out == "    var name: String?\n    var age: Int?\n"


def test_flags_override_settings_file(tmp_path, monkeypatch, capsys, output) -> None:
    settings = tmp_path / "settings.json"
    settings.write_text(
        json.dumps({"declaration": "let", "addKeys": False, "indentationWidth": 2}),
        encoding="utf-8",
    )
    monkeypatch.setattr("sys.stdin", io.StringIO(FRODO_JSON))

    args = ["--settings", str(settings), "--fragment", "properties", "--use-var"]
    assert cli.main(args) == 0
    assert capsys.readouterr().out == "  var name: String!\n  var age: Int!\n"

    monkeypatch.setattr("sys.stdin", io.StringIO(FRODO_JSON))
    assert cli.main(["--settings", str(settings), "--fragment", "keys"]) == 0
    assert capsys.readouterr().out == ""


def test_tabs_and_types_fragment(tmp_path, output) -> None:
    source = tmp_path / "user.json"
    source.write_text('{"user": {"city": "Bree"}}', encoding="utf-8")
    target = tmp_path / "types.swift"

    args = [str(source), "--fragment", "types", "--tabs", "--type-suffix", "Model"]
    assert cli.main(args + ["-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8") == (
        "\nstruct <#UserModel#> {\n\tlet city: String!\n}\n"
    )


def test_piped_output_holds_only_code(tmp_path, capsys, output) -> None:
    source = tmp_path / "loose.json"
    source.write_text('{"tags": [], "x": null}', encoding="utf-8")

    assert cli.main([str(source), "--fragment", "properties", "-v"]) == 0

    captured = capsys.readouterr()
    assert captured.out == "    let tags: [Any]!\n    let x: Any!\n"
    assert "Empty array tags" in output.getvalue()
    assert "Field x" in output.getvalue()


def test_verbose_prints_metadata(bilbo_file, tmp_path, output) -> None:
    target = tmp_path / "Root.swift"

    assert cli.main([str(bilbo_file), "-v", "-o", str(target)]) == 0
    assert "Generation Metadata" in output.getvalue()


def test_warnings_are_reported(tmp_path, output) -> None:
    source = tmp_path / "tags.json"
    source.write_text('{"tags": []}', encoding="utf-8")

    assert cli.main([str(source), "-o", str(tmp_path / "out.swift")]) == 0
    assert "Empty array tags" in output.getvalue()


@pytest.mark.parametrize(
    ("argv", "stdin", "message"),
    [
        (["--fragment", "keys"], "42", "Standard input is not a JSON object"),
        (["missing.json"], "", "File not found"),
        (["--language", "go"], FRODO_JSON, "Unsupported language 'go'"),
        (["--indent-width", "-1"], FRODO_JSON, "Indentation width"),
    ],
)
def test_failures_exit_with_one(monkeypatch, output, argv, stdin, message) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))

    assert cli.main(argv) == 1
    assert message in output.getvalue()
