"""State of one test site: its status, timer and grid of socket blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

SITE_COLUMN = 8
SITE_ROW = 3

BLOCK_STYLE = "QPushButton {{ background-color: {};  border: 1px solid black; }}"
STATUS_STYLE = "QLabel {{ background-color: {}; color: black; padding: 5px; }}"
START_IMAGE = "QPushButton { border-image: url(:/acroViewTester/qrc/pics/startG.png); }"
PAUSE_IMAGE = "QPushButton { border-image: url(:/acroViewTester/qrc/pics/pauseY.png); }"

BASE_STYLE = """
        QPushButton {
            background-color: white;
            border: 1px solid #333;
            color: #333;
            border-radius: 4px;
            padding: 8px 16px;
            font-size: 14px;
            font-weight: 500;
            transition: all 0.3s ease;
        }
        QPushButton:hover {
            background-color: #f5f5f5;
            border-color: #666;
        }
        QPushButton:pressed {
            background-color: #e0e0e0;
            border-color: #444;
            transform: translateY(1px);
        }
        QPushButton:disabled {
            background-color: #f0f0f0;
            border-color: #999;
            color: #666;
            cursor: not-allowed;
        }
        QPushButton:focus {
            outline: none;
            box-shadow: 0 0 0 2px rgba(51, 51, 51, 0.3);
        }
    """


class Status(Enum):
    IDLE = 0
    ENABLE = 1
    TESTING = 2
    COMPLETED = 3
    FAILED = 4
    DISABLED = 5


_COLORS = {
    Status.IDLE: "#808080",
    Status.ENABLE: "#0000FF",
    Status.TESTING: "#FFFA65",
    Status.COMPLETED: "#008000",
    Status.FAILED: "#FF0000",
    Status.DISABLED: "#A9A9A9",
}

# The status label has no text for ENABLE.
_LABELS = {
    Status.IDLE: "Idle",
    Status.ENABLE: "",
    Status.TESTING: "Testing",
    Status.COMPLETED: "Completed",
    Status.FAILED: "Failed",
    Status.DISABLED: "Disabled",
}


def status_color(status: Status) -> str:
    """Display colour of a status."""
    return _COLORS.get(status, "#808080")


def _tooltip(index: int, status_text: str, time: str) -> str:
    return f"Tester {index + 1}\nStatus: {status_text}\nTime: {time}"


@dataclass
class StatusBlock:
    """One socket block in a site's grid."""

    row: int
    col: int
    min_size: int
    is_clicked: bool = False
    tooltip: str = ""
    style: str = ""

    def refresh_style(self) -> None:
        status = Status.ENABLE if self.is_clicked else Status.IDLE
        self.style = BLOCK_STYLE.format(status_color(status))


class TestSite:
    """A test site with a grid of ``base_rows`` x ``base_cols`` socket blocks."""

    __test__ = False

    def __init__(
        self,
        site_number: int,
        base_rows: int = SITE_ROW,
        base_cols: int = SITE_COLUMN,
        grid_rows: int = SITE_ROW,
        grid_cols: int = SITE_COLUMN,
    ) -> None:
        self.site_number = site_number
        self.title = f"Test Site {site_number}"
        self.site_label = str(site_number)
        self.time = "00:00:00"
        self.started = False
        self.action_style = ""
        self.base_style = BASE_STYLE
        self.start_listeners: list[Callable[[], None]] = []
        self.blocks: list[StatusBlock] = []
        self.set_status(Status.IDLE)
        self._create_blocks(base_rows, base_cols, grid_rows * grid_cols)

    def _create_blocks(self, rows: int, cols: int, grid_area: int) -> None:
        min_size = 30 if grid_area < 16 else 15
        self.blocks = []
        for index in range(rows * cols):
            block = StatusBlock(row=index // cols, col=index % cols, min_size=min_size)
            block.refresh_style()
            block.tooltip = _tooltip(index, "空闲", "00:00:00")
            self.blocks.append(block)

    def toggle_block(self, index: int) -> StatusBlock:
        """Flip a block between enabled and idle and return it."""
        block = self.blocks[index]
        block.is_clicked = not block.is_clicked
        block.refresh_style()
        return block

    def toggle_action(self) -> bool:
        """Switch between started and paused; notify listeners on start. Returns the new state."""
        if self.started:
            self.action_style = self.base_style + START_IMAGE
            self.started = False
        else:
            self.action_style = self.base_style + PAUSE_IMAGE
            self.started = True
            for listener in self.start_listeners:
                listener()
        return self.started

    def set_status(self, status: Status) -> None:
        """Set the site status and refresh the block tooltips."""
        self.status = status
        self.status_text = _LABELS[status]
        self.status_style = STATUS_STYLE.format(status_color(status))
        self._refresh_tooltips()

    def update_time(self, time: str) -> None:
        """Set the displayed time and refresh the block tooltips."""
        self.time = time
        self._refresh_tooltips()

    def _refresh_tooltips(self) -> None:
        for index, block in enumerate(self.blocks):
            block.tooltip = _tooltip(index, self.status_text, self.time)

    def tooltips(self) -> list[str]:
        """Tooltips of all blocks in order."""
        return [block.tooltip for block in self.blocks]

    def collect_blocks_status(self, site_rows: int = 2, site_cols: int = 2) -> dict:
        """Grid size and per-socket enabled state, with 1-based coordinates."""
        return {
            "row": site_rows,
            "col": site_cols,
            "sockets": [
                {
                    "row": index // site_cols + 1,
                    "col": index % site_cols + 1,
                    "enabled": block.is_clicked,
                }
                for index, block in enumerate(self.blocks)
            ],
        }