"""Coloured message log with a bounded line count and a built-in colour palette."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable

_COLORS: tuple[tuple[int, int, int], ...] = (
    (0, 176, 180), (0, 113, 193), (255, 192, 0),
    (72, 103, 149), (185, 87, 86), (0, 177, 125),
    (214, 77, 84), (71, 164, 233), (34, 163, 169),
    (59, 123, 156), (162, 121, 197), (72, 202, 245),
    (0, 150, 121), (111, 9, 176), (250, 170, 20),
)


class MessageType(Enum):
    """Kinds of log message, each with its label and display colour."""

    SEND = (0, "发送", "#3BA372")
    RECEIVE = (1, "接收", "#EE6668")
    PARSE = (2, "解析", "#9861B4")
    ERROR = (3, "错误", "#FA8359")
    INFO = (4, "提示", "#22A3A9")

    def __init__(self, code: int, label: str, color: str) -> None:
        self.code = code
        self.label = label
        self.color = color

    @classmethod
    def from_code(cls, code: int) -> MessageType | None:
        return next((member for member in cls if member.code == code), None)


@dataclass(frozen=True)
class LogEntry:
    """One line added to a message log."""

    message_type: MessageType | None
    text: str

    @property
    def color(self) -> str | None:
        return self.message_type.color if self.message_type else None


def _timestamp(moment: datetime) -> str:
    return f"{moment:%H:%M:%S} {moment.microsecond // 1000:03d}"


class MessageLog:
    """A log that empties itself once ``max_count`` lines have been written."""

    def __init__(
        self,
        max_count: int,
        replace_crlf: bool = True,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.max_count = max_count
        self.replace_crlf = replace_crlf
        self._clock = clock or datetime.now
        self.entries: list[LogEntry] = []

    @property
    def current_count(self) -> int:
        return len(self.entries)

    def clear(self) -> None:
        """Remove every line."""
        self.entries.clear()

    def append(
        self,
        message_type: MessageType | int,
        data: str,
        clear: bool = False,
        pause: bool = False,
    ) -> str:
        """Add a line and return its text; return an empty string when clearing or paused."""
        if clear:
            self.clear()
            return ""
        if pause:
            return ""
        if len(self.entries) >= self.max_count:
            self.clear()

        if isinstance(message_type, MessageType):
            kind: MessageType | None = message_type
        else:
            kind = MessageType.from_code(message_type)
        label = kind.label if kind else ""

        text = data
        if self.replace_crlf:
            text = text.replace("\r", "").replace("\n", "")

        line = f"时间[{_timestamp(self._clock())}] {label}: {text}"
        self.entries.append(LogEntry(kind, line))
        return line


def color_list() -> list[tuple[int, int, int]]:
    """The built-in palette as RGB triples."""
    return list(_COLORS)


def color_names() -> list[str]:
    """The built-in palette as lower-case ``#rrggbb`` names."""
    return [f"#{r:02x}{g:02x}{b:02x}" for r, g, b in _COLORS]


def rand_color(rng: random.Random | None = None) -> tuple[int, int, int]:
    """Pick a random colour from the palette."""
    return (rng or random).choice(_COLORS)