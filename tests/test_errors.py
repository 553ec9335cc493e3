import pytest

from silentpcg.errors import (
    ChannelError,
    CrhfError,
    DpfError,
    ExpandError,
    FieldMismatch,
    InvalidInput,
    InvalidPartyIndex,
    LpnError,
    MissingParameter,
    NotImplementedPcgError,
    PcgError,
    SeedGenError,
    SerializationError,
    SvoleError,
)
from silentpcg.field import F2
from silentpcg.svole import xor_f2_vectors


def _all_errors(detail):
    return [
        SeedGenError(detail),
        ExpandError(detail),
        DpfError(detail),
        LpnError(detail),
        ChannelError(detail),
        InvalidPartyIndex(detail),
        MissingParameter(detail),
        SvoleError(detail),
        FieldMismatch(detail),
        InvalidInput(detail),
        CrhfError(detail),
        SerializationError(detail),
        NotImplementedPcgError(detail),
    ]


def test_every_error_is_a_pcg_error_with_its_message():
    errors = _all_errors("failure detail")
    assert len(errors) == 13
    for err in errors:
        assert isinstance(err, PcgError)
        assert isinstance(err, Exception)
        assert str(err) == "failure detail"


def test_error_types_are_all_distinct():
    errors = _all_errors("x")
    assert len({type(err) for err in errors}) == len(errors)


def test_not_implemented_is_also_builtin_not_implemented():
    err = NotImplementedPcgError("Secure DPF Gen needs implementation")
    assert isinstance(err, NotImplementedError)
    assert isinstance(err, PcgError)
    assert str(err) == "Secure DPF Gen needs implementation"


def test_distinct_error_types_do_not_catch_each_other():
    err = DpfError("Alpha out of domain bounds")
    assert not isinstance(err, LpnError)
    assert isinstance(err, PcgError)
    assert str(err) == "Alpha out of domain bounds"


def test_package_raises_invalid_input_as_pcg_error():
    with pytest.raises(PcgError) as info:
        xor_f2_vectors([F2.one()], [F2.one(), F2.zero()])
    assert isinstance(info.value, InvalidInput)