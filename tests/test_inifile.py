from acrotester.inifile import (
    check_ini_file,
    current_info,
    get_ini_value,
    get_ini_value_for,
    palette_color,
    read_style,
)


def test_current_info_splits_path_and_name():
    assert current_info("/opt/app/tester.exe") == ("/opt/app", "tester")


def test_current_info_without_directory():
    assert current_info("tester.tar.gz") == (".", "tester")


def test_get_ini_value_finds_key(tmp_path):
    ini = tmp_path / "app.ini"
    ini.write_text("[General]\nName=alpha\nPort=8080\n", encoding="utf-8")
    assert get_ini_value(ini, "Port") == "8080"
    assert get_ini_value(ini, "Name") == "alpha"


def test_get_ini_value_matches_prefix(tmp_path):
    ini = tmp_path / "app.ini"
    ini.write_text("Name=alpha\n", encoding="utf-8")
    assert get_ini_value(ini, "Na") == "alpha"


def test_get_ini_value_missing_key(tmp_path):
    ini = tmp_path / "app.ini"
    ini.write_text("Name=alpha\n", encoding="utf-8")
    assert get_ini_value(ini, "Port") == ""


def test_get_ini_value_missing_file(tmp_path):
    assert get_ini_value(tmp_path / "none.ini", "Port") == ""


def test_get_ini_value_for_uses_program_name(tmp_path):
    conf = tmp_path / "conf"
    conf.mkdir()
    (conf / "tester.ini").write_text("Mode=local\n", encoding="utf-8")
    argv0 = str(tmp_path / "tester.bin")
    assert get_ini_value_for(argv0, "Mode", "conf/") == "local"


def test_get_ini_value_for_file_override(tmp_path):
    (tmp_path / "other.ini").write_text("Mode=mes\n", encoding="utf-8")
    argv0 = str(tmp_path / "tester.bin")
    assert get_ini_value_for(argv0, "Mode", "", "other") == "mes"
    assert get_ini_value_for(argv0, "Mode") == ""


def test_check_ini_file_valid(tmp_path):
    ini = tmp_path / "ok.ini"
    ini.write_text("[Section]\na=1\r\nb=2\nc=x=y\n", encoding="utf-8")
    assert check_ini_file(ini) is True


def test_check_ini_file_empty_value(tmp_path):
    ini = tmp_path / "bad.ini"
    ini.write_text("a=1\nb=\n", encoding="utf-8")
    assert check_ini_file(ini) is False


def test_check_ini_file_empty_or_missing(tmp_path):
    empty = tmp_path / "empty.ini"
    empty.write_text("", encoding="utf-8")
    assert check_ini_file(empty) is False
    assert check_ini_file(tmp_path / "missing.ini") is False


def test_read_style_one_word_per_line(tmp_path):
    qss = tmp_path / "style.qss"
    qss.write_text("QWidget {\n   color: red; }\n\n", encoding="utf-8")
    assert read_style(qss) == "QWidget\n{\ncolor:\nred;\n}"


def test_read_style_missing_file(tmp_path):
    assert read_style(tmp_path / "missing.qss") == ""


def test_palette_color_reads_fixed_offset():
    qss = "x" * 20 + "#123456" + "rest"
    assert palette_color(qss) == "#123456"


def test_palette_color_short_text():
    assert palette_color("short") == ""