import pytest

from acrotester.debugsetting import (
    SUB_CMD_DEBUG_SETTING,
    SUB_CMD_REBOOT,
    ip_hop,
    log_level_index,
    log_level_options,
    reboot_command,
    switch_log_level,
    switch_uart,
    uart_index,
    uart_options,
)


def test_uart_options():
    options = uart_options()
    assert options[0] == ("BPU0", 0)
    assert options[7] == ("BPU7", 7)
    assert options[-1] == ("MU", 8)
    assert [value for _, value in options] == list(range(9))


def test_log_level_options():
    assert log_level_options() == [("Debug", 0), ("Normal", 1), ("Warning", 2), ("Error", 3)]


def test_ip_hop():
    assert ip_hop("10.0.0.5", 2) == "10.0.0.5:2"


def test_uart_index_defaults():
    assert uart_index(None, "10.0.0.5", 2) == 8
    assert uart_index({}, "10.0.0.5", 2) == 8
    assert uart_index({"10.0.0.5:2": -1}, "10.0.0.5", 2) == 8


def test_uart_index_stored():
    assert uart_index({"10.0.0.5:2": 3}, "10.0.0.5", 2) == 3


def test_log_level_index_defaults_and_stored():
    assert log_level_index(None, "10.0.0.5", 0) == 1
    assert log_level_index({"10.0.0.5:0": -1}, "10.0.0.5", 0) == 1
    assert log_level_index({"10.0.0.5:0": 3}, "10.0.0.5", 0) == 3


def test_switch_uart_updates_known_entry():
    index_map = {"10.0.0.5:2": 8}
    command = switch_uart(index_map, "10.0.0.5:2", 4)
    assert index_map["10.0.0.5:2"] == 4
    assert command.ip == "10.0.0.5"
    assert command.hop == 2
    assert command.sub_command == SUB_CMD_DEBUG_SETTING
    assert command.body == '{"ChangeUART":4}'


def test_switch_uart_ignores_unknown_entry():
    index_map = {}
    switch_uart(index_map, "10.0.0.5:2", 4)
    assert index_map == {}


def test_switch_uart_then_index_round_trip():
    index_map = {"10.0.0.9:1": -1}
    switch_uart(index_map, ip_hop("10.0.0.9", 1), 5)
    assert uart_index(index_map, "10.0.0.9", 1) == 5


def test_switch_log_level():
    index_map = {"10.0.0.5:1": 1}
    command = switch_log_level(index_map, "10.0.0.5:1", 2)
    assert index_map["10.0.0.5:1"] == 2
    assert command.payload == {"LogLevelThreshold": 2}
    assert command.body == '{"LogLevelThreshold":2}'


def test_switch_log_level_without_map():
    command = switch_log_level(None, "10.0.0.5:1", 0)
    assert command.hop == 1


def test_reboot_command():
    command = reboot_command("10.0.0.7:3")
    assert command.ip == "10.0.0.7"
    assert command.hop == 3
    assert command.sub_command == SUB_CMD_REBOOT
    assert command.payload == {"ResetCommand": 1, "DelayTime": 1000}
    assert command.body == '{"DelayTime":1000,"ResetCommand":1}'


def test_malformed_ip_hop_rejected():
    with pytest.raises(ValueError):
        reboot_command("10.0.0.7")
    with pytest.raises(ValueError):
        switch_uart(None, "10.0.0.7:x", 1)