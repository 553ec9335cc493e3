import pytest

from silentpcg.errors import InvalidInput, InvalidPartyIndex, LpnError
from silentpcg.field import F2, Field128
from silentpcg.lpn import CodeType, LpnParameters
from silentpcg.pcg_core import SvoleReceiverSeed, SvoleSenderSeed
from silentpcg.svole import (
    SvolePcg,
    SvoleReceiverOutput,
    SvoleSenderOutput,
    add_fq_vectors,
    pack_f2_vector,
    spread_f2_vector,
    sub_fq_vectors,
    unpack_f2_vector,
    xor_f2_vectors,
)


def _bits(*values):
    return [F2(v) for v in values]


def _pcg(k=4, n=16):
    return SvolePcg(LpnParameters(n=n, k=k, t=2, code_type=CodeType.RANDOM_LINEAR))


def test_pack_bit_order():
    assert pack_f2_vector(_bits(1, 0, 0, 0, 0, 0, 0, 0, 1)) == b"\x01\x01"
    assert pack_f2_vector(_bits(0, 1)) == b"\x02"
    assert pack_f2_vector([]) == b""


def test_pack_unpack_round_trip():
    values = _bits(1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 0)
    assert unpack_f2_vector(pack_f2_vector(values), len(values)) == values


def test_unpack_pads_with_zeros():
    assert unpack_f2_vector(b"\x03", 10) == _bits(1, 1, 0, 0, 0, 0, 0, 0, 0, 0)


def test_spread():
    assert spread_f2_vector(_bits(1, 0)) == [Field128.one(), Field128.zero()]


def test_xor_vectors():
    assert xor_f2_vectors(_bits(1, 1, 0), _bits(1, 0, 0)) == _bits(0, 1, 0)


def test_xor_length_mismatch():
    with pytest.raises(InvalidInput):
        xor_f2_vectors(_bits(1), _bits(1, 0))


def test_add_sub_round_trip():
    a = [Field128(5), Field128(9)]
    b = [Field128(2), Field128(11)]
    assert sub_fq_vectors(add_fq_vectors(a, b), b) == a


def test_add_truncates_to_shorter():
    assert len(add_fq_vectors([Field128(1)] * 3, [Field128(1)] * 2)) == 2


def test_gen_seed_shapes():
    pcg = _pcg()
    sender, receiver = pcg.gen(128)
    assert isinstance(sender, SvoleSenderSeed)
    assert isinstance(receiver, SvoleReceiverSeed)
    assert sender.delta == receiver.delta
    assert len(sender.y) == 4
    assert len(receiver.x) == 16
    assert len(sender.s_delta) == 16
    assert sender.h_matrix.nrows() == 4 and sender.h_matrix.ncols() == 16
    assert receiver.h_transpose_matrix.nrows() == 16


def test_expand_output_shapes():
    pcg = _pcg()
    sender, receiver = pcg.gen(128)
    out0 = pcg.expand(0, sender)
    out1 = pcg.expand(1, receiver)
    assert isinstance(out0, SvoleSenderOutput)
    assert isinstance(out1, SvoleReceiverOutput)
    assert len(out0.u) == 16
    assert len(out0.v) == 4
    assert len(out1.w) == 16
    assert out1.x == receiver.x
    assert all(u in (Field128.zero(), Field128.one()) for u in out0.u)


def test_shares_differ_in_exactly_one_point():
    pcg = _pcg()
    sender, receiver = pcg.gen(128)
    out0 = pcg.expand(0, sender)
    out1 = pcg.expand(1, receiver)
    combined = [
        u + w + x * receiver.delta for u, w, x in zip(out0.u, out1.w, out1.x)
    ]
    assert sum(1 for value in combined if value == Field128.one()) == 1
    assert all(value in (Field128.zero(), Field128.one(), Field128(2)) for value in combined)


def test_v_without_mask_is_u_plus_y():
    pcg = _pcg()
    sender, _ = pcg.gen(0)
    assert sender.s_delta == b""
    out0 = pcg.expand(0, sender)
    for i, y_i in enumerate(sender.y):
        assert out0.v[i] == out0.u[i] + Field128(int(y_i))


def test_wrong_party_index():
    pcg = _pcg()
    sender, receiver = pcg.gen(16)
    with pytest.raises(InvalidPartyIndex):
        pcg.expand(1, sender)
    with pytest.raises(InvalidPartyIndex):
        pcg.expand(0, receiver)


def test_unknown_seed_type():
    with pytest.raises(InvalidInput):
        _pcg().expand(0, "seed")


def test_sender_expand_requires_matching_domain():
    pcg = _pcg(k=4, n=10)
    sender, receiver = pcg.gen(16)
    with pytest.raises(InvalidInput):
        pcg.expand(0, sender)
    assert len(pcg.expand(1, receiver).w) == 10


def test_gen_propagates_lpn_error():
    pcg = SvolePcg(LpnParameters(n=16, k=4, t=2, code_type=CodeType.QUASI_CYCLIC))
    with pytest.raises(LpnError):
        pcg.gen(16)