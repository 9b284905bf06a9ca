import re

import pytest

from mostools.bintoc import HELP, array_stem, convert, main, to_c_source


@pytest.mark.parametrize(
    "path, stem",
    [("icode_check.b", "icode_check"), ("loop.b", "loop"), ("plain", "plain"), ("a.b.c", "a")],
)
def test_array_stem(path, stem):
    assert array_stem(path) == stem


def test_to_c_source_exact():
    assert to_c_source(b"\x01\xff", "test", "loop") == (
        "unsigned int binary_test_loop_size = 2;\n"
        "unsigned char binary_test_loop_start[] = {0x1,0xff};\n"
    )


def test_to_c_source_empty():
    assert to_c_source(b"", "", "x") == (
        "unsigned int binary__x_size = 0;\n"
        "unsigned char binary__x_start[] = {;\n"
    )


def _decode(source):
    body = source.split("{", 1)[1].rsplit("}", 1)[0]
    return bytes(int(item, 16) for item in body.split(","))


def test_to_c_source_round_trip():
    data = bytes(range(256))
    source = to_c_source(data, "test", "blob")
    assert _decode(source) == data
    assert f"binary_test_blob_size = {len(data)};" in source


def test_convert_writes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "prog.b").write_bytes(b"\x00\x10\x7f")
    assert convert("prog.b", "prog.b.c", "test") == 3
    text = (tmp_path / "prog.b.c").read_text()
    assert text == to_c_source(b"\x00\x10\x7f", "test", "prog")


def test_main_converts(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "loop.b").write_bytes(b"\xab\xcd")
    assert main(["-f", "loop.b", "-o", "loop.b.c", "-p", "test"]) == 0
    text = (tmp_path / "loop.b.c").read_text()
    assert re.search(r"binary_test_loop_size = 2;", text)
    assert _decode(text) == b"\xab\xcd"


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == HELP


def test_main_unknown_option_prints_help(capsys):
    assert main(["-z"]) == 0
    assert capsys.readouterr().out.startswith("convert ELF binary file to C file.")


def test_main_missing_output(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "x.b")]) == 1
    assert "-o" in capsys.readouterr().err


def test_main_duplicate_option(capsys):
    assert main(["-f", "a.b", "-f", "b.b", "-o", "out.c"]) == 1
    assert "more than once" in capsys.readouterr().err


def test_main_option_without_value(capsys):
    assert main(["-o", "out.c", "-f"]) == 1
    assert "-f" in capsys.readouterr().err


def test_main_missing_input_file(tmp_path):
    assert main(["-f", str(tmp_path / "none.b"), "-o", str(tmp_path / "o.c")]) == 1