"""Process, path and platform helpers for the tester application."""

from __future__ import annotations

import locale
import os
import subprocess
import sys
import time
from pathlib import Path
from typing import Sequence

_ANDROID_SUFFIXES = ("_armeabi-v7a", "_arm64-v8a")
_VIRTUAL_MARKERS = ("VMware", "VirtualBox", "Alibaba")


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def app_name(executable: str) -> str:
    """Program name from an executable path, without extension or Android ABI suffix."""
    name = executable.split("/")[-1].split(".")[0]
    for suffix in _ANDROID_SUFFIXES:
        name = name.replace(suffix, "")
    return name


def check_path(dir_name: str, app_path: str) -> str:
    """Resolve a directory against ``app_path`` and create it if it does not exist."""
    path = dir_name
    if path.startswith("./"):
        path = app_path + path.replace(".", "")
    elif not path.startswith("/") and ":/" not in path:
        path = f"{app_path}/{path}"
    Path(path).mkdir(parents=True, exist_ok=True)
    return path


def check_file(file_name: str, app_path: str) -> str:
    """Resolve a ``./``-relative file name against ``app_path``."""
    if file_name.startswith("./"):
        return app_path + file_name[1:]
    return file_name


def sleep(msec: int) -> None:
    """Block for ``msec`` milliseconds; non-positive values return at once."""
    if msec <= 0:
        return
    time.sleep(msec / 1000)


def _decode(output: bytes) -> str:
    return output.decode(locale.getpreferredencoding(False) or "utf-8", errors="replace")


def run_command(program: str, arguments: Sequence[str] = (), timeout: int = 1000) -> str:
    """Run a program and return its standard output on one simplified line.

    The program is given ``timeout`` milliseconds; whatever it printed by then is
    returned. A program that cannot be started yields an empty string.
    """
    try:
        process = subprocess.Popen(
            [program, *arguments],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
        )
    except OSError:
        return ""
    try:
        output, _ = process.communicate(timeout=max(timeout, 0) / 1000)
    except subprocess.TimeoutExpired:
        process.kill()
        output, _ = process.communicate()
    text = _decode(output or b"").replace("\r", "").replace("\n", "")
    return " ".join(text.split())


def is_video_card_enabled(output: str | None = None) -> bool:
    """Tell whether the video controller reports no error.

    Without ``output`` the controller status is queried on Windows; elsewhere the
    card is taken as enabled.
    """
    if output is None:
        output = ""
        if _is_windows():
            output = run_command(
                "wmic", ["path", "win32_VideoController", "get", "name,Status"]
            )
    return "Error" not in output


def is_virtual_system(output: str | None = None) -> bool:
    """Tell whether the machine model names a known virtual platform.

    Without ``output`` the model is queried from the system.
    """
    if output is None:
        output = ""
        if _is_windows():
            output = run_command("wmic", ["computersystem", "get", "Model"])
        elif sys.platform.startswith("linux"):
            output = run_command("lscpu", [])
    return any(marker in output for marker in _VIRTUAL_MARKERS)


def complete_extension(result: str, name_filter: str) -> str:
    """Append the first extension of a file-dialog filter to a name that has none.

    ``"Text (*.txt *.log)"`` turns ``"notes"`` into ``"notes.txt"``; a ``*.*``
    filter leaves the name alone.
    """
    if "." in result or "*." not in name_filter:
        return result
    pattern = name_filter.split("(")[-1]
    pattern = pattern[: len(pattern) - 1]
    if "*.*" in pattern:
        return result
    first = pattern.split(" ")[0]
    return result + first[1:]


def date_command(year: str, month: str, day: str, hour: str, minute: str, second: str) -> str:
    """The ``date`` command line that sets the system clock to the given moment."""
    return f"date {month}{day}{hour}{minute}{year}.{second}"


def _process_list() -> str:
    command = ["tasklist"] if _is_windows() else ["ps", "-aux"]
    try:
        completed = subprocess.run(
            command, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, timeout=30
        )
    except (OSError, subprocess.TimeoutExpired):
        return ""
    return _decode(completed.stdout or b"")


def start(path: str, name: str, binary: bool = True) -> bool:
    """Start ``path/name`` detached unless a process of that name is running.

    Returns whether a new process was started.
    """
    if name in _process_list():
        return False
    if _is_windows():
        command = f"{path}/{name}{'.exe' if binary else ''}"
    else:
        command = f"{path}/{name}"
    options: dict = {"cwd": path}
    if _is_windows():
        options["creationflags"] = getattr(subprocess, "DETACHED_PROCESS", 0)
    else:
        options["start_new_session"] = True
    subprocess.Popen([command], **options)
    return True