import logging

import numpy as np
import pytest

from adm1state.errors import MalformedRecordError, RecordParseError
from adm1state.io.delimited import DelimitedCodec, parse_token
from adm1state.record import InfluentState, InitialState
from adm1state.schema import CodecSettings


@pytest.fixture
def influent_codec():
    return DelimitedCodec(InfluentState)


def test_write_line_emits_all_fields_without_trailing_separator():
    line = DelimitedCodec(InitialState).write_line(InitialState())
    tokens = line.split(";")
    assert len(tokens) == 42
    assert tokens[0] == "0.012"
    assert tokens[7] == "2.3e-07"
    assert tokens[36] == "35.0"
    assert not line.endswith(";")
    assert "\n" not in line


@pytest.mark.parametrize("cls", [InitialState, InfluentState])
def test_defaults_round_trip_exactly(cls):
    codec = DelimitedCodec(cls)
    rec = cls()
    assert codec.read_line(codec.write_line(rec)) == rec


def test_awkward_values_round_trip_exactly():
    codec = DelimitedCodec(InitialState)
    rec = InitialState()
    rec.set("S_su", 0.1 + 0.2)
    rec.set("S_h2", 1.0 / 3.0e9)
    rec.set("X_I", -123456789.123456789)
    rec.set("T_D", 1e-310)
    out = codec.read_line(codec.write_line(rec))
    assert out.to_array().tobytes() == rec.to_array().tobytes()


def test_read_line_tolerates_padding_and_line_end(influent_codec):
    line = influent_codec.write_line(InfluentState())
    text = " ; ".join(line.split(";")) + "\r\n"
    assert influent_codec.read_line(text) == InfluentState()


def test_read_legacy_line(influent_codec, legacy_feed):
    line = ";".join(str(v) for v in legacy_feed)
    rec = influent_codec.read_line(line)
    assert rec.flow_rate == 170.0
    assert rec.temperature == 0.0
    assert rec.ph == 0.0


def test_legacy_decode_is_logged_to_injected_logger(caplog, legacy_feed):
    log = logging.getLogger("test.digester.codec")
    codec = DelimitedCodec(InfluentState, logger=log)
    with caplog.at_level(logging.INFO, logger="test.digester.codec"):
        codec.read_line(";".join(str(v) for v in legacy_feed))
    assert any("legacy" in r.getMessage() and r.name == "test.digester.codec" for r in caplog.records)


def test_initial_rejects_legacy_line(legacy_feed):
    with pytest.raises(MalformedRecordError):
        DelimitedCodec(InitialState).read_line(";".join(str(v) for v in legacy_feed))


@pytest.mark.parametrize("bad", ["abc", "", "1,5", "0x1p3", "1_000", "1.0.0"])
def test_invalid_token_raises_parse_error(influent_codec, bad):
    tokens = ["1.0"] * 42
    tokens[5] = bad
    with pytest.raises(RecordParseError, match="field 5"):
        influent_codec.read_line(";".join(tokens))


def test_trailing_separator_is_rejected(influent_codec):
    line = influent_codec.write_line(InfluentState()) + ";"
    with pytest.raises(RecordParseError):
        influent_codec.read_line(line)


def test_wrong_width_is_malformed(influent_codec):
    with pytest.raises(MalformedRecordError):
        influent_codec.read_line(";".join(["1.0"] * 30))


def test_parse_token_accepts_exponents_and_signs():
    assert parse_token("1.02e-005", 0) == 1.02e-5
    assert parse_token("+3", 1) == 3.0
    assert parse_token("-0.5", 2) == -0.5


def test_custom_delimiter():
    codec = DelimitedCodec(InitialState, settings=CodecSettings(delimiter="\t"))
    line = codec.write_line(InitialState())
    assert line.count("\t") == 41
    assert codec.read_line(line) == InitialState()


def test_codec_refuses_other_record_type():
    with pytest.raises(TypeError):
        DelimitedCodec(InitialState).write_line(InfluentState())
    with pytest.raises(TypeError):
        DelimitedCodec(dict)


def test_file_round_trip(tmp_path, influent_codec):
    rec = InfluentState()
    rec.update({"Q_D": 180.5, "pH": 7.05})
    path = tmp_path / "nested" / "influent.csv"
    influent_codec.write_file(rec, path)
    assert path.read_text(encoding="utf-8").count("\n") == 1
    assert influent_codec.read_file(path) == rec


def test_missing_file_raises_os_error(tmp_path, influent_codec):
    with pytest.raises(OSError):
        influent_codec.read_file(tmp_path / "absent.csv")


def test_non_finite_values_warn_but_round_trip(caplog):
    codec = DelimitedCodec(InitialState)
    rec = InitialState()
    rec.set("COD", float("inf"))
    with caplog.at_level(logging.WARNING):
        line = codec.write_line(rec)
    assert "COD" in caplog.text
    out = codec.read_line(line)
    assert np.isinf(out.get("COD"))


def test_tab_delimited_trailing_separator_is_rejected():
    codec = DelimitedCodec(InitialState, settings=CodecSettings(delimiter="\t"))
    line = codec.write_line(InitialState())
    with pytest.raises(RecordParseError):
        codec.read_line(line + "\t")
    with pytest.raises(RecordParseError):
        codec.read_line("\t" + line + "\n")


def test_tab_delimited_file_with_trailing_separator(tmp_path):
    codec = DelimitedCodec(InitialState, settings=CodecSettings(delimiter="\t"))
    path = tmp_path / "init.tsv"
    path.write_text(codec.write_line(InitialState()) + "\t\n", encoding="utf-8")
    with pytest.raises(RecordParseError):
        codec.read_file(path)


def test_codec_refuses_abstract_record_base():
    from adm1state.record import StateRecord

    with pytest.raises(TypeError, match="concrete"):
        DelimitedCodec(StateRecord)


def test_influent_rejects_line_with_legacy_temperature(influent_codec, legacy_feed):
    with pytest.raises(MalformedRecordError):
        influent_codec.read_line(";".join(str(v) for v in legacy_feed + [35.0]))
