"""Per-programmer debug settings: UART selection, log level and reboot commands."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import MutableMapping

SUB_CMD_DEBUG_SETTING = "SubCmd_MU_DebugSetting"
SUB_CMD_REBOOT = "SubCmd_MU_RebootMU"

DEFAULT_UART_INDEX = 8
DEFAULT_LOG_LEVEL_INDEX = 1

_UART_OPTIONS = tuple((f"BPU{n}", n) for n in range(8)) + (("MU", 8),)
_LOG_LEVEL_OPTIONS = (("Debug", 0), ("Normal", 1), ("Warning", 2), ("Error", 3))


@dataclass(frozen=True)
class DebugCommand:
    """A command sent to all units of one programmer."""

    ip: str
    hop: int
    sub_command: str
    payload: dict = field(default_factory=dict)

    @property
    def body(self) -> str:
        """The payload as compact JSON with sorted keys."""
        return json.dumps(self.payload, separators=(",", ":"), sort_keys=True)


def uart_options() -> list[tuple[str, int]]:
    """UART choices as (label, value) pairs."""
    return list(_UART_OPTIONS)


def log_level_options() -> list[tuple[str, int]]:
    """Device log level choices as (label, value) pairs."""
    return list(_LOG_LEVEL_OPTIONS)


def ip_hop(ip: str, hop: int) -> str:
    """The ``ip:hop`` text that identifies a programmer."""
    return f"{ip}:{hop}"


def _stored_index(
    index_map: MutableMapping[str, int] | None, ip: str, hop: int, default: int
) -> int:
    if index_map is None:
        return default
    value = index_map.get(ip_hop(ip, hop), -1)
    return default if value == -1 else value


def uart_index(index_map: MutableMapping[str, int] | None, ip: str, hop: int) -> int:
    """Remembered UART index of a programmer; MU when unknown."""
    return _stored_index(index_map, ip, hop, DEFAULT_UART_INDEX)


def log_level_index(index_map: MutableMapping[str, int] | None, ip: str, hop: int) -> int:
    """Remembered log level index of a programmer; Normal when unknown."""
    return _stored_index(index_map, ip, hop, DEFAULT_LOG_LEVEL_INDEX)


def _parse_ip_hop(ip_hop_text: str) -> tuple[str, int]:
    parts = ip_hop_text.split(":")
    if len(parts) < 2:
        raise ValueError(f"not an ip:hop value: {ip_hop_text!r}")
    try:
        hop = int(parts[1])
    except ValueError:
        raise ValueError(f"invalid hop in {ip_hop_text!r}") from None
    return parts[0], hop


def _remember(index_map: MutableMapping[str, int] | None, key: str, value: int) -> None:
    if index_map is not None and key in index_map:
        index_map[key] = value


def switch_uart(
    index_map: MutableMapping[str, int] | None, ip_hop_text: str, uart: int
) -> DebugCommand:
    """Record a UART choice for a known programmer and build the command for it."""
    ip, hop = _parse_ip_hop(ip_hop_text)
    _remember(index_map, ip_hop_text, uart)
    return DebugCommand(ip, hop, SUB_CMD_DEBUG_SETTING, {"ChangeUART": uart})


def switch_log_level(
    index_map: MutableMapping[str, int] | None, ip_hop_text: str, level: int
) -> DebugCommand:
    """Record a log level for a known programmer and build the command for it."""
    ip, hop = _parse_ip_hop(ip_hop_text)
    _remember(index_map, ip_hop_text, level)
    return DebugCommand(ip, hop, SUB_CMD_DEBUG_SETTING, {"LogLevelThreshold": level})


def reboot_command(ip_hop_text: str) -> DebugCommand:
    """The command that reboots a programmer after one second."""
    ip, hop = _parse_ip_hop(ip_hop_text)
    return DebugCommand(ip, hop, SUB_CMD_REBOOT, {"ResetCommand": 1, "DelayTime": 1000})