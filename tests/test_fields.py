import pytest

from adm1state import constants
from adm1state.errors import UnknownFieldError
from adm1state.fields import RecordKind, canonical_name, defaults, field_names, index_of, schema


@pytest.mark.parametrize("kind", list(RecordKind))
def test_schema_is_complete_and_contiguous(kind):
    fields = schema(kind)
    assert len(fields) == constants.RECORD_WIDTH
    assert [f.index for f in fields] == list(range(constants.RECORD_WIDTH))
    assert len(set(field_names(kind))) == constants.RECORD_WIDTH
    assert len(defaults(kind)) == len(field_names(kind))
    assert all(f.default == d for f, d in zip(fields, defaults(kind)))


def test_kinds_share_leading_fields():
    initial = field_names(RecordKind.INITIAL)
    influent = field_names(RecordKind.INFLUENT)
    assert initial[:37] == influent[:37]
    assert initial[35:37] == ("Q_D", "T_D")
    assert initial[37:] != influent[37:]
    assert influent[39] == "pH"


def test_initial_defaults_are_digester_steady_state():
    values = defaults(RecordKind.INITIAL)
    assert values[0] == 0.012
    assert values[7] == 2.30e-7
    assert values[8] == 0.055
    assert values[23] == 25.6
    assert values[36] == 35.0
    assert values[35] == 0.0


def test_influent_defaults_are_untreated_feed():
    values = defaults(RecordKind.INFLUENT)
    assert values[14] == 20.0
    assert values[35] == 170.0
    assert values[36] == 0.0
    assert all(v == 0.0 for v in values[26:35])


def test_index_of_and_aliases():
    assert index_of(RecordKind.INITIAL, "S_su") == 0
    assert index_of(RecordKind.INITIAL, "X_I") == 23
    assert index_of(RecordKind.INFLUENT, "flow_rate") == 35
    assert index_of("influent", "temperature") == 36
    assert canonical_name(RecordKind.INITIAL, "temperature") == "T_D"


def test_index_of_rejects_names_from_other_kind():
    assert index_of(RecordKind.INFLUENT, "pH") == 39
    with pytest.raises(UnknownFieldError) as excinfo:
        index_of(RecordKind.INITIAL, "pH")
    assert excinfo.value.name == "pH"
    assert isinstance(excinfo.value, KeyError)


def test_field_groups_are_in_schema():
    names = field_names(RecordKind.INFLUENT)
    assert [names.index(n) for n in constants.EQUILIBRIUM_FIELDS] == list(range(26, 32))
    assert [names.index(n) for n in constants.GAS_PHASE_FIELDS] == [32, 33, 34]
