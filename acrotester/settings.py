"""Tester configuration: the ini file, the per-scene layout and the grid size."""

from __future__ import annotations

import configparser
import os
import re
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path

_GENERAL = "General"
_INTEGER = re.compile(r"[+-]?\d+")

AUTO_TASK_FILTER = "ACSTask Files (*.actask);;BIN Files (*.bin)"


class Scene(Enum):
    """Test scenes the tester can be configured for."""

    AGING_TEST = "老化测试"
    AG06 = "AG06"
    AP8000 = "AP8000"


@dataclass(frozen=True)
class Visibility:
    """Which groups of settings are shown for a scene."""

    common_paths: bool = True
    auto_type: bool = False
    exec_cmd: bool = False
    station: bool = False
    project_path: bool = False
    aprog2_path: bool = False
    multi_aprog_path: bool = False
    coordinates: bool = False
    timing: bool = False


@dataclass(frozen=True)
class GridSize:
    """Site grid and per-site block grid dimensions."""

    rows: int
    cols: int
    base_rows: int
    base_cols: int


# Attribute name -> ini key; keys without a section live in [General].
_KEYS: dict[str, str] = {
    "scene": "Scene/CurrentScene",
    "mode": "Mode/CurrentMode",
    "auto_type": "AutoType/CurrentAutoType",
    "exec_cmd": "ExecCmd/CurrentExecCmd",
    "station": "Station/CurrentStation",
    "log_path": "Paths/LogPath",
    "log_trans_path": "Paths/LogTransPath",
    "report_path": "Paths/ReportPath",
    "auto_path": "Paths/AutoPath",
    "mes_path": "Paths/MesPath",
    "recipe_path": "Paths/RecipePath",
    "project_path": "Paths/ProjectPath",
    "aprog2_path": "Paths/Aprog2Path",
    "multi_aprog_path": "Paths/MultiAprogPath",
    "handle1": "Handle1",
    "handle2": "Handle2",
    "alarm_server1": "AlarmServer1",
    "alarm_server2": "AlarmServer2",
    "local_port": "LocalPort",
    "site_direction": "Grid/SiteDirection",
    "site_rows": "Grid/SiteRows",
    "site_cols": "Grid/SiteCols",
    "base_rows": "Grid/BaseRows",
    "base_cols": "Grid/BaseCols",
    "comm_timeout": "CommTimeout",
    "cmd_interval": "CmdInterval",
    "auth_interval": "AuthInterval",
    "auto_login_interval": "AutoLoginInterval",
    "power_check_interval": "PowerCheckInterval",
    "data_refresh_interval": "DataRefreshInterval",
}

_BROWSE_FIELDS = {
    "LogPath": "log_path",
    "LogTransPath": "log_trans_path",
    "ReportPath": "report_path",
    "AutoPath": "auto_path",
    "MesPath": "mes_path",
    "RecipePath": "recipe_path",
    "ProjectPath": "project_path",
    "Aprog2Path": "aprog2_path",
    "MultiAprogPath": "multi_aprog_path",
}


def _split_key(key: str) -> tuple[str, str]:
    section, _, name = key.rpartition("/")
    return section or _GENERAL, name


def _to_int(text: str) -> int | None:
    stripped = text.strip()
    return int(stripped) if _INTEGER.fullmatch(stripped) else None


def _parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None, delimiters=("=",))
    parser.optionxform = str  # keep key case
    return parser


@dataclass
class Settings:
    """All values of the settings dialog, with the dialog's defaults."""

    scene: str = Scene.AG06.value
    mode: str = "MES模式"
    auto_type: str = "IPS5800S"
    exec_cmd: str = "指令1"
    station: str = "1"
    log_path: str = "D:\\Mes\\ProjSave"
    log_trans_path: str = "D:\\Mes\\ProjSave"
    report_path: str = "D:\\Mes\\Report"
    auto_path: str = "c:\\IPS\\TaskData"
    mes_path: str = "http://127.0.0.1:8088/mes"
    recipe_path: str = "D:\\Recipe"
    project_path: str = "D:\\Project"
    aprog2_path: str = "D:\\Aprog2"
    multi_aprog_path: str = "D:\\MultiAprog"
    handle1: str = "192.168.1.100"
    handle2: str = "64100"
    alarm_server1: str = "127.0.0.1"
    alarm_server2: str = "5000"
    local_port: str = "64101"
    site_direction: int = 0
    site_rows: str = "10"
    site_cols: str = "5"
    base_rows: str = "1"
    base_cols: str = "1"
    comm_timeout: str = "1"
    cmd_interval: str = "5"
    auth_interval: str = "5"
    auto_login_interval: str = "5"
    power_check_interval: str = "5"
    data_refresh_interval: str = "1"

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Settings:
        """Read settings from an ini file; keys absent from the file become empty.

        Raises FileNotFoundError when the file does not exist.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"settings file not found: {file_path}")
        parser = _parser()
        parser.read(file_path, encoding="utf-8")

        values: dict[str, object] = {}
        for field in fields(cls):
            section, name = _split_key(_KEYS[field.name])
            raw = parser.get(section, name, fallback="")
            if field.name == "site_direction":
                values[field.name] = _to_int(raw) or 0
            else:
                values[field.name] = raw
        return cls(**values)  # type: ignore[arg-type]

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write every setting to an ini file, creating its directory if needed."""
        parser = _parser()
        for field in fields(self):
            section, name = _split_key(_KEYS[field.name])
            if not parser.has_section(section):
                parser.add_section(section)
            parser.set(section, name, str(getattr(self, field.name)))
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding="utf-8") as handle:
            parser.write(handle)

    def grid_size(self) -> GridSize:
        """The configured grid; raises ValueError when rows or columns are invalid."""
        return parse_grid_size(self.site_rows, self.site_cols, self.base_rows, self.base_cols)


def visibility_for(scene: Scene | str) -> Visibility:
    """Which setting groups the dialog shows for a scene."""
    try:
        scene = Scene(scene.value if isinstance(scene, Scene) else scene)
    except ValueError:
        return Visibility()
    if scene is Scene.AGING_TEST:
        return Visibility(coordinates=True, timing=True)
    extras = dict(auto_type=True, exec_cmd=True, station=True, project_path=True)
    if scene is Scene.AG06:
        return Visibility(aprog2_path=True, coordinates=True, timing=False, **extras)
    return Visibility(multi_aprog_path=True, coordinates=False, timing=False, **extras)


def parse_grid_size(rows: str, cols: str, base_rows: str, base_cols: str) -> GridSize:
    """Parse grid fields; rows and columns must be positive integers.

    Unparsable base values count as 0.
    """
    parsed_rows = _to_int(rows)
    parsed_cols = _to_int(cols)
    if parsed_rows is None or parsed_cols is None or parsed_rows <= 0 or parsed_cols <= 0:
        raise ValueError(f"invalid grid size: {rows!r} x {cols!r}")
    return GridSize(
        parsed_rows,
        parsed_cols,
        _to_int(base_rows) or 0,
        _to_int(base_cols) or 0,
    )


def browse_target(button_name: str) -> tuple[str, str | None]:
    """The setting a browse button fills and its file filter (None means a directory)."""
    if not button_name.startswith("btn"):
        raise ValueError(f"not a browse button: {button_name!r}")
    attribute = _BROWSE_FIELDS.get(button_name[len("btn"):])
    if attribute is None:
        raise ValueError(f"unknown browse button: {button_name!r}")
    file_filter = AUTO_TASK_FILTER if button_name == "btnAutoPath" else None
    return attribute, file_filter