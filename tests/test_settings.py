import configparser
from dataclasses import replace

import pytest

from acrotester.settings import (
    GridSize,
    Scene,
    Settings,
    Visibility,
    browse_target,
    parse_grid_size,
    visibility_for,
)


def test_defaults_match_dialog():
    settings = Settings()
    assert settings.scene == "AG06"
    assert settings.mes_path == "http://127.0.0.1:8088/mes"
    assert settings.auto_path == "c:\\IPS\\TaskData"
    assert settings.local_port == "64101"
    assert settings.site_rows == "10"
    assert settings.site_cols == "5"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "file" / "settings.ini"
    original = replace(
        Settings(),
        scene=Scene.AP8000.value,
        station="7",
        site_direction=2,
        log_path="E:\\Logs",
        site_rows="4",
    )
    original.save(path)
    assert Settings.load(path) == original


def test_saved_file_uses_sections(tmp_path):
    path = tmp_path / "settings.ini"
    Settings().save(path)
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    parser.read(path, encoding="utf-8")
    assert parser.get("Paths", "ReportPath") == "D:\\Mes\\Report"
    assert parser.get("General", "Handle1") == "192.168.1.100"
    assert parser.get("Grid", "SiteDirection") == "0"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings.load(tmp_path / "absent.ini")


def test_load_missing_keys_are_empty(tmp_path):
    path = tmp_path / "settings.ini"
    path.write_text("[Scene]\nCurrentScene=AG06\n", encoding="utf-8")
    loaded = Settings.load(path)
    assert loaded.scene == "AG06"
    assert loaded.log_path == ""
    assert loaded.site_direction == 0


def test_grid_size_from_settings():
    settings = replace(Settings(), site_rows="3", site_cols="2", base_rows="4", base_cols="8")
    assert settings.grid_size() == GridSize(3, 2, 4, 8)


@pytest.mark.parametrize("rows,cols", [("0", "5"), ("abc", "5"), ("3", "-1"), ("", "")])
def test_parse_grid_size_rejects_invalid(rows, cols):
    with pytest.raises(ValueError):
        parse_grid_size(rows, cols, "1", "1")


def test_parse_grid_size_bad_base_counts_as_zero():
    assert parse_grid_size("2", "3", "x", "") == GridSize(2, 3, 0, 0)


def test_visibility_aging_test():
    vis = visibility_for(Scene.AGING_TEST)
    assert vis.coordinates and vis.timing
    assert not (vis.auto_type or vis.project_path or vis.aprog2_path)


def test_visibility_ag06():
    vis = visibility_for("AG06")
    assert vis.aprog2_path and vis.coordinates and vis.station
    assert not vis.multi_aprog_path
    assert not vis.timing


def test_visibility_ap8000():
    vis = visibility_for(Scene.AP8000)
    assert vis.multi_aprog_path and vis.exec_cmd
    assert not vis.aprog2_path
    assert not vis.coordinates and not vis.timing


def test_visibility_unknown_scene():
    assert visibility_for("other") == Visibility()


def test_browse_target_auto_path_is_file():
    assert browse_target("btnAutoPath") == (
        "auto_path",
        "ACSTask Files (*.actask);;BIN Files (*.bin)",
    )


def test_browse_target_directory():
    assert browse_target("btnReportPath") == ("report_path", None)


@pytest.mark.parametrize("name", ["btnOK", "lineEditLogPath"])
def test_browse_target_rejects_unknown(name):
    with pytest.raises(ValueError):
        browse_target(name)