import json

import pytest
from typer.testing import CliRunner

from pyskim import __version__
from pyskim.cli import app

runner = CliRunner()

SOURCE = '''LIMIT: int = 10

def run(task: str, *args):
    pass

class Worker(Base, Mixin):
    def __init__(self, name: str, retries=3):
        pass

class Plain:
    pass
'''


@pytest.fixture
def source_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "worker.py"
    path.write_text(SOURCE)
    return path


def test_app_has_scan_command():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "scan" in result.stdout


def test_app_has_show_and_find_commands():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "show" in result.stdout
    assert "find" in result.stdout


def test_version_option():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_scan_requires_file_argument():
    result = runner.invoke(app, ["scan"])

    assert result.exit_code != 0


def test_scan_outputs_tables_by_default(source_file):
    result = runner.invoke(app, ["scan", "worker.py"])

    assert result.exit_code == 0
    assert "Functions" in result.stdout
    assert "Classes" in result.stdout
    assert "Globals" in result.stdout
    assert "Worker" in result.stdout
    assert "LIMIT" in result.stdout


def test_scan_outputs_json_with_flag(source_file):
    result = runner.invoke(app, ["scan", "--json", "worker.py"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["functions"] == [{
        "name": "run",
        "arguments": [{"name": "task", "type_annotation": "str"}, {"name": "*args"}],
    }]
    assert data["classes"][0] == {
        "name": "Worker",
        "base_classes": ["Base", "Mixin"],
        "constructor_arguments": [
            {"name": "self"},
            {"name": "name", "type_annotation": "str"},
            {"name": "retries"},
        ],
    }
    assert data["classes"][1] == {"name": "Plain", "base_classes": [], "constructor_arguments": []}
    assert data["globals"] == [{"name": "LIMIT", "type_annotation": "int", "value_expression": "10"}]


def test_scan_honors_config_file(source_file, tmp_path):
    (tmp_path / ".pyskim").write_text("scan:\n  hide_self: true\n  include_globals: false\n")

    result = runner.invoke(app, ["scan", "--json", "worker.py"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert "globals" not in data
    assert [a["name"] for a in data["classes"][0]["constructor_arguments"]] == ["name", "retries"]


def test_scan_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["scan", "nope.py"])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_scan_unsupported_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.md").write_text("# notes\n")

    result = runner.invoke(app, ["scan", "notes.md"])

    assert result.exit_code == 1
    assert "Unsupported file type" in result.output


def test_show_renders_stubs(source_file):
    result = runner.invoke(app, ["show", "worker.py"])

    assert result.exit_code == 0
    assert "LIMIT: int = 10" in result.stdout
    assert "def run(task: str, *args):" in result.stdout
    assert "class Worker(Base, Mixin):" in result.stdout
    assert "    def __init__(self, name: str, retries):" in result.stdout
    assert "class Plain:" in result.stdout


def test_find_function(source_file):
    result = runner.invoke(app, ["find", "worker.py", "run"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["function"]["name"] == "run"


def test_find_class(source_file):
    result = runner.invoke(app, ["find", "worker.py", "Plain"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "class": {"name": "Plain", "base_classes": [], "constructor_arguments": []}
    }


def test_find_by_base(source_file):
    result = runner.invoke(app, ["find", "--base", "worker.py", "Mixin"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [entry["class"]["name"] for entry in data] == ["Worker"]


def test_find_ignores_include_options(source_file, tmp_path):
    (tmp_path / ".pyskim").write_text("scan:\n  include_functions: false\n")

    result = runner.invoke(app, ["find", "worker.py", "run"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["function"]["name"] == "run"


def test_find_not_found(source_file):
    result = runner.invoke(app, ["find", "worker.py", "Missing"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_find_by_base_not_found(source_file):
    result = runner.invoke(app, ["find", "--base", "worker.py", "Nothing"])

    assert result.exit_code == 1
    assert "inherits from" in result.output
