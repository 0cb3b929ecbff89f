import json
from pathlib import Path

import pytest
from rich.console import Console

import switchboard.__main__ as entry
from switchboard.__main__ import get_root_parser, main

DECLARATIONS = """\
arguments:
  - name: interval
    type: numeric
options:
  - names: [unit, -u]
    value: days
  - names: force
    value: false
"""


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep `main()` from installing handlers on the root logger."""
    monkeypatch.setattr(entry, "setup_logging", lambda **kwargs: None)


@pytest.fixture(autouse=True)
def plain_consoles(monkeypatch):
    """Render without color codes so output can be asserted on."""
    monkeypatch.setattr(entry, "console", Console(color_system=None, width=200))
    monkeypatch.setattr(
        entry, "error_console", Console(color_system=None, width=200, stderr=True)
    )


@pytest.fixture
def config_file(tmp_path) -> Path:
    path = tmp_path / "switches.yaml"
    path.write_text(DECLARATIONS, encoding="UTF-8")
    return path


def test_root_parser_collects_tokens():
    args = get_root_parser().parse_args(["--json", "switches.yaml", "3", "--unit", "months"])
    assert args.config == "switches.yaml"
    assert args.json is True
    assert args.tokens == ["3", "--unit", "months"]


def test_usage(config_file, capsys):
    assert main(["--usage", str(config_file)]) == 0
    captured = capsys.readouterr()
    assert "N [--force] [-u, --unit=days]" in captured.out


def test_json_output(config_file, capsys):
    assert main(["--json", str(config_file), "--", "3", "-u", "months", "extra"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "values": {"unit": "months", "force": False},
        "arguments": [3],
        "trailing": ["extra"],
    }


def test_table_output(config_file, capsys):
    assert main([str(config_file), "3", "--force"]) == 0
    captured = capsys.readouterr()
    assert "Parse result" in captured.out
    assert "force" in captured.out


def test_parse_error(config_file, capsys):
    assert main([str(config_file), "--", "--unit", "months"]) == 2
    captured = capsys.readouterr()
    assert "no value provided for required arguments 'interval'" in captured.err
    assert "usage:" in captured.err


def test_missing_config(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert "config error" in capsys.readouterr().err


def test_invalid_config(tmp_path, capsys):
    path = tmp_path / "switches.yaml"
    path.write_text("options:\n  - names: task\n    type: unknown\n", encoding="UTF-8")
    assert main([str(path)]) == 1
    assert "config error" in capsys.readouterr().err
