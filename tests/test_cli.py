import json

import pytest

from bytecursor.cli import main, parse_assignment
from bytecursor.models.common import ScalarKind


def test_parse_assignment():
    assert parse_assignment("u32=0xDEADBEEF") == (ScalarKind.U32, 0xDEADBEEF)
    assert parse_assignment("bool=true") == (ScalarKind.BOOL, True)
    assert parse_assignment("f64=1.5") == (ScalarKind.F64, 1.5)


def test_encode_then_decode(tmp_path, capsys):
    out = tmp_path / "x.bin"
    assert main(["encode", str(out), "u32=0xDEADBEEF", "s16=-1", "bool=1"]) == 0
    assert out.read_bytes() == b"\xDE\xAD\xBE\xEF\xFF\xFF\x01"

    assert main(["decode", str(out), "--layout", "u32,s16,bool"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert [v["value"] for v in doc["values"]] == [0xDEADBEEF, -1, True]


def test_decode_repeat(tmp_path, capsys):
    p = tmp_path / "r.bin"
    p.write_bytes(b"\x00\x01\x00\x02\x00\x03")
    assert main(["decode", str(p), "--layout", "u16", "--max-records", "2"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert [r["values"][0]["value"] for r in doc] == [1, 2]


def test_errors_exit_2(tmp_path, capsys):
    p = tmp_path / "short.bin"
    p.write_bytes(b"\x00")
    assert main(["decode", str(p), "--layout", "u32"]) == 2
    assert "error:" in capsys.readouterr().err
    assert main(["encode", str(tmp_path / "o.bin"), "u8=300"]) == 2
    assert main(["encode", str(tmp_path / "o.bin"), "u8"]) == 2


def test_info(tmp_path, capsys):
    p = tmp_path / "i.bin"
    p.write_bytes(b"\x01\x02\x03")
    assert main(["info", str(p), "--head", "2"]) == 0
    out = capsys.readouterr().out
    assert "size=3" in out
    assert "head=01 02" in out


def test_missing_subcommand():
    with pytest.raises(SystemExit):
        main([])


def test_encode_f32_overflow_exits_2(tmp_path, capsys):
    assert main(["encode", str(tmp_path / "o.bin"), "f32=1e40"]) == 2
    assert "error:" in capsys.readouterr().err
    assert not (tmp_path / "o.bin").exists()


def test_missing_input_exits_2(tmp_path, capsys):
    missing = str(tmp_path / "nope.bin")
    assert main(["decode", missing, "--layout", "u8"]) == 2
    assert main(["info", missing]) == 2
    assert "error:" in capsys.readouterr().err
