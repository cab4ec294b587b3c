import random
from datetime import datetime

import pytest

from acrotester.messages import (
    LogEntry,
    MessageLog,
    MessageType,
    color_list,
    color_names,
    rand_color,
)


def fixed_clock():
    return datetime(2024, 1, 2, 3, 4, 5, 6000)


def test_append_formats_line():
    log = MessageLog(10, clock=fixed_clock)
    line = log.append(MessageType.SEND, "hello")
    assert line == "时间[03:04:05 006] 发送: hello"
    assert log.entries == [LogEntry(MessageType.SEND, line)]


def test_append_accepts_integer_code():
    log = MessageLog(10, clock=fixed_clock)
    line = log.append(3, "bad")
    assert "错误" in line
    assert log.entries[0].color == MessageType.ERROR.color


def test_unknown_type_has_no_label_or_color():
    log = MessageLog(10, clock=fixed_clock)
    line = log.append(99, "x")
    assert line.endswith("] : x")
    assert log.entries[0].color is None


def test_crlf_removed_by_default():
    log = MessageLog(10, clock=fixed_clock)
    assert log.append(MessageType.INFO, "a\r\nb").endswith("ab")


def test_crlf_kept_when_disabled():
    log = MessageLog(10, replace_crlf=False, clock=fixed_clock)
    assert log.append(MessageType.INFO, "a\nb").endswith("a\nb")


def test_pause_and_clear_return_empty():
    log = MessageLog(10, clock=fixed_clock)
    log.append(MessageType.SEND, "one")
    assert log.append(MessageType.SEND, "two", pause=True) == ""
    assert log.current_count == 1
    assert log.append(MessageType.SEND, "three", clear=True) == ""
    assert log.current_count == 0


def test_rollover_at_max_count():
    log = MessageLog(2, clock=fixed_clock)
    for text in ("a", "b", "c"):
        log.append(MessageType.RECEIVE, text)
    assert log.current_count == 1
    assert log.entries[0].text.endswith("c")


def test_clear_method():
    log = MessageLog(5, clock=fixed_clock)
    log.append(MessageType.PARSE, "p")
    log.clear()
    assert log.entries == []


def test_palette():
    colors = color_list()
    names = color_names()
    assert len(colors) == len(names) == 15
    assert names[0] == "#00b0b4"
    assert all(name.startswith("#") and len(name) == 7 for name in names)


@pytest.mark.parametrize("seed", range(5))
def test_rand_color_in_palette(seed):
    assert rand_color(random.Random(seed)) in color_list()