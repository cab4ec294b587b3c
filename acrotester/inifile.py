"""Reading of plain ini lines and style sheets without a settings library."""

from __future__ import annotations

import os
from pathlib import Path


def current_info(argv0: str) -> tuple[str, str]:
    """Return the directory and base name (up to the first dot) of a program path."""
    directory = os.path.dirname(argv0) or "."
    name = os.path.basename(argv0).split(".")[0]
    return directory, name


def _read_lines(path: str | os.PathLike[str]) -> list[str] | None:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.readlines()
    except OSError:
        return None


def get_ini_value(file_name: str | os.PathLike[str], key: str) -> str:
    """Return the value of the first line starting with ``key``, or an empty string."""
    for line in _read_lines(file_name) or []:
        if line.startswith(key):
            return line.replace("\n", "").strip().split("=")[-1]
    return ""


def get_ini_value_for(argv0: str, key: str, directory: str = "", file: str = "") -> str:
    """Look up ``key`` in ``<program dir>/<directory><name>.ini``.

    ``file`` overrides the program's own name, so a renamed program still finds
    its configuration.
    """
    path, name = current_info(argv0)
    if file:
        name = file
    return get_ini_value(f"{path}/{directory}{name}.ini", key)


def check_ini_file(ini_file: str | os.PathLike[str]) -> bool:
    """Tell whether an ini file exists, is non-empty and has no ``key=`` lines without a value."""
    path = Path(ini_file)
    try:
        if path.stat().st_size == 0:
            return False
    except OSError:
        return False

    lines = _read_lines(path)
    if lines is None:
        return False
    for line in lines:
        parts = line.replace("\r", "").replace("\n", "").split("=")
        if len(parts) == 2 and not parts[1]:
            return False
    return True


def read_style(qss_file: str | os.PathLike[str]) -> str:
    """Read a style sheet, putting each whitespace-separated word on its own line."""
    try:
        content = Path(qss_file).read_text(encoding="utf-8-sig", errors="replace")
    except OSError:
        return ""
    return "\n".join(content.split()).strip()


def palette_color(qss: str) -> str:
    """Return the seven characters at offset 20, where style sheets keep their palette colour."""
    return qss[20:27]