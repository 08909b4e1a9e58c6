import pytest

from adm1state.errors import RecordParseError
from adm1state.io import textio


def test_write_array_then_read_tokens(tmp_path):
    path = tmp_path / "out" / "vec.csv"
    textio.write_array(path, [1.0, 0.012, 2.3e-7])
    assert path.read_text(encoding="utf-8") == "1.0;0.012;2.3e-07\n"
    assert textio.read_tokens(path) == ["1.0", "0.012", "2.3e-07"]


def test_read_tokens_skips_blank_lines_and_uses_first_line(tmp_path):
    path = tmp_path / "vec.csv"
    path.write_text("\n   \n1;2;3\n4;5;6\n", encoding="utf-8")
    assert textio.read_tokens(path) == ["1", "2", "3"]


def test_read_tokens_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("\n\n", encoding="utf-8")
    with pytest.raises(RecordParseError):
        textio.read_tokens(path)


def test_format_value_is_locale_independent():
    assert textio.format_value(1234567.25) == "1234567.25"
    assert textio.format_value(1e22) == "1e+22"
