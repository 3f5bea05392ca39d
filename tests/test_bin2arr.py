import pytest

from saikodev.bin2arr import main, render


def _parse_values(text):
    body = text.split("{", 1)[1].split("}", 1)[0]
    return [int(tok, 16) for tok in body.replace("\n", "").replace("\t", "").split(",") if tok]


def test_render_small_array():
    assert render("sym", b"\x01\xab", 16) == (
        "#include <stdint.h>\nconst uint8_t sym[2] =\n{\n\t0x01,0xAB,\n};\n\n"
    )


def test_render_round_trip():
    data = bytes(range(256))
    assert _parse_values(render("all", data, 7)) == list(data)


def test_render_respects_items_per_line():
    text = render("s", bytes(range(50)), 8)
    rows = [line for line in text.splitlines() if line.startswith("\t")]
    assert len(rows) == 7
    assert all(line.count(",") <= 8 for line in rows)
    assert "const uint8_t s[50]" in text


def test_render_full_last_row_adds_blank_line():
    text = render("s", bytes(4), 4)
    assert text.endswith(",\n\n};\n\n")
    assert _parse_values(text) == [0, 0, 0, 0]


def test_render_rejects_bad_items_per_line():
    with pytest.raises(ValueError):
        render("s", b"\x00", 0)


def test_main_writes_c_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.bin").write_bytes(b"\x10\x20\x30")
    assert main(["in.bin", "table", "2"]) == 0
    assert (tmp_path / "table.c").read_text() == render("table", b"\x10\x20\x30", 2)


def test_main_invalid_items_defaults(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.bin").write_bytes(bytes(20))
    assert main(["in.bin", "t", "abc"]) == 0
    assert (tmp_path / "t.c").read_text() == render("t", bytes(20), 16)
    assert "Warning" in capsys.readouterr().err


def test_main_missing_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["missing.bin", "t"]) == 1
    assert "for reading" in capsys.readouterr().err
    assert not (tmp_path / "t.c").exists()


def test_main_too_few_arguments(capsys):
    assert main(["only"]) == 1
    assert "Usage" in capsys.readouterr().err