from __future__ import annotations

import json

import pytest

import find_food


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch):
    monkeypatch.setattr(find_food, "_configure_logging", lambda level: None)


def test_markdown_output(capsys, catalog_file) -> None:
    code = find_food.main(["--college", "Alpha", "--budget", "10", "--catalog", str(catalog_file)])
    assert code == 0
    out = capsys.readouterr().out
    assert "1. Near Diner" in out
    assert "$8.00 • 0.2 mi • ~4 min walk • Value 8.80" in out


def test_json_output(capsys, catalog_file) -> None:
    code = find_food.main(["--college", "Beta", "--budget", "20", "--catalog", str(catalog_file), "--json"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["restaurant"] == "Far Grill"
    assert payload[0]["combo"]["template"] == "main+drink"
    assert payload[0]["combo"]["item_names"] == ["Steak", "Lemonade"]


def test_default_college_from_env(monkeypatch, capsys, catalog_file) -> None:
    monkeypatch.setenv("DEFAULT_COLLEGE", "Beta")
    assert find_food.main(["--budget", "20", "--catalog", str(catalog_file)]) == 0
    assert "Residential college: Beta" in capsys.readouterr().out


def test_invalid_budget_exit_code(capsys, catalog_file) -> None:
    assert find_food.main(["--college", "Alpha", "--budget", "nan", "--catalog", str(catalog_file)]) == 2
    assert "valid budget" in capsys.readouterr().err


def test_missing_college(capsys, catalog_file) -> None:
    assert find_food.main(["--budget", "10", "--catalog", str(catalog_file)]) == 2


def test_broken_catalog(tmp_path, capsys) -> None:
    missing = tmp_path / "nope.json"
    assert find_food.main(["--college", "Alpha", "--budget", "10", "--catalog", str(missing)]) == 1


def test_bad_config_exit_code(monkeypatch, capsys, catalog_file) -> None:
    monkeypatch.setenv("MAX_RESULTS", "abc")
    assert find_food.main(["--college", "Alpha", "--budget", "10", "--catalog", str(catalog_file)]) == 1
    assert "invalid configuration" in capsys.readouterr().err
