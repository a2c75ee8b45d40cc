"""
Tests for settings persistence, path rendering and the command line.
"""

import json

from PIL import Image

from crucible import cli
from crucible.render import CELL_SIZE, render_path
from crucible.search import CostGrid, RunConstraints, Solver
from crucible.settings import DEFAULT_SETTINGS, load_settings, save_settings

from conftest import EXAMPLE_MAP, FORCING_MAP


def test_load_settings_missing_file_returns_defaults(tmp_path):
    settings = load_settings(tmp_path / "absent.json")
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_settings_round_trip_merges_defaults(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"min_run": 4, "max_run": 10}, path)

    settings = load_settings(path)
    assert settings["min_run"] == 4
    assert settings["max_run"] == 10
    assert settings["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]


def test_corrupt_settings_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_render_path_writes_png(tmp_path):
    grid = CostGrid.from_text(FORCING_MAP)
    solution = Solver(grid, RunConstraints.create(4, 10)).solve()

    out = render_path(grid, solution, tmp_path / "debug_path.png")
    assert out.exists()
    with Image.open(out) as img:
        assert img.size == (grid.cols * CELL_SIZE, grid.rows * CELL_SIZE)


def test_render_prunes_old_debug_images(tmp_path, monkeypatch):
    monkeypatch.setattr("crucible.render.DEBUG_DIR", tmp_path)
    monkeypatch.setattr("crucible.render.MAX_DEBUG_IMAGES", 2)
    grid = CostGrid.from_text("12\n34")
    for i in range(4):
        render_path(grid, None, tmp_path / f"debug_{i}.png")
    assert len(list(tmp_path.glob("debug_*.png"))) == 2


def _write_grid(tmp_path, text=EXAMPLE_MAP):
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_prints_minimum_cost(tmp_path, capsys):
    grid_file = _write_grid(tmp_path)
    config = tmp_path / "config.json"

    assert cli.main([str(grid_file), "--config", str(config)]) == 0
    assert capsys.readouterr().out.strip() == "102"

    assert cli.main([str(grid_file), "--config", str(config),
                     "--min-run", "4", "--max-run", "10", "-s", "dijkstra"]) == 0
    assert capsys.readouterr().out.strip() == "94"


def test_cli_reads_constraints_from_settings(tmp_path, capsys):
    grid_file = _write_grid(tmp_path, FORCING_MAP)
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"min_run": 4, "max_run": 10}), encoding="utf-8")

    assert cli.main([str(grid_file), "--config", str(config)]) == 0
    assert capsys.readouterr().out.strip() == "71"


def test_cli_reports_errors_with_exit_code(tmp_path, capsys):
    config = str(tmp_path / "config.json")
    bad_grid = _write_grid(tmp_path, "12\n3")
    assert cli.main([str(bad_grid), "--config", config]) == 1

    grid_file = _write_grid(tmp_path, "123")
    assert cli.main([str(grid_file), "--config", config, "--min-run", "4", "--max-run", "10"]) == 1
    assert cli.main([str(grid_file), "--config", config, "--min-run", "5", "--max-run", "2"]) == 1
    assert cli.main([str(tmp_path / "missing.txt"), "--config", config]) == 1
    assert capsys.readouterr().out == ""


def test_cli_custom_endpoints_and_render(tmp_path, capsys):
    grid_file = _write_grid(tmp_path, "123\n456\n789")
    image = tmp_path / "out" / "path.png"

    code = cli.main([str(grid_file), "--config", str(tmp_path / "config.json"),
                     "--start", "2,2", "--target", "0,0", "--seeds", "N,W",
                     "--render", str(image)])
    assert code == 0
    assert capsys.readouterr().out.strip() == "12"
    assert image.exists()


def test_render_outside_debug_dir_keeps_existing_images(tmp_path, monkeypatch):
    monkeypatch.setattr("crucible.render.DEBUG_DIR", tmp_path / "debug")
    for i in range(12):
        (tmp_path / f"debug_user_{i}.png").write_bytes(b"")

    render_path(CostGrid.from_text("12\n34"), None, tmp_path / "my_render.png")
    assert len(list(tmp_path.glob("debug_user_*.png"))) == 12


def test_cli_configures_logging_before_loading_settings(tmp_path, monkeypatch, capsys):
    calls = []
    configure = cli.configure_logging
    load = cli.load_settings
    monkeypatch.setattr(cli, "configure_logging",
                        lambda *a, **kw: (calls.append("logging"), configure(*a, **kw)))
    monkeypatch.setattr(cli, "load_settings",
                        lambda *a, **kw: (calls.append("settings"), load(*a, **kw))[1])

    config = tmp_path / "config.json"
    config.write_text("{not json", encoding="utf-8")
    grid_file = _write_grid(tmp_path)

    assert cli.main([str(grid_file), "--config", str(config)]) == 0
    assert calls == ["logging", "settings"]
    assert capsys.readouterr().out.strip() == "102"
