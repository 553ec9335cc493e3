import copy

import pytest

from silentpcg.dpf import DpfKey
from silentpcg.field import F2, Field128
from silentpcg.lpn import DenseMatrix
from silentpcg.pcg_core import (
    PcgExpander,
    PcgSeedGenerator,
    SvoleReceiverSeed,
    SvoleSenderSeed,
)


def test_seed_generator_is_abstract():
    with pytest.raises(TypeError):
        PcgSeedGenerator()


def test_expander_is_abstract():
    with pytest.raises(TypeError):
        PcgExpander()


def test_sender_seed_holds_its_fields():
    key = DpfKey.placeholder()
    matrix = DenseMatrix([[1, 0], [0, 1]])
    seed = SvoleSenderSeed(
        k_dpf=key, s_delta=b"\x05", y=[F2.one(), F2.zero()], h_matrix=matrix,
        delta=Field128(7),
    )
    assert seed.k_dpf == key
    assert seed.s_delta == b"\x05"
    assert seed.y == [F2.one(), F2.zero()]
    assert seed.h_matrix.nrows() == 2
    assert seed.delta == Field128(7)


def test_receiver_seed_copy_is_equal_and_independent():
    seed = SvoleReceiverSeed(
        k_dpf=DpfKey.placeholder(),
        x=[F2.one(), F2.one()],
        h_transpose_matrix=DenseMatrix([[1], [0]]),
        delta=Field128(3),
    )
    clone = copy.deepcopy(seed)
    assert clone == seed
    clone.x[0] = F2.zero()
    assert seed.x[0] == F2.one()


def test_receiver_seed_defaults():
    seed = SvoleReceiverSeed(k_dpf=DpfKey.placeholder())
    assert seed.x == []
    assert seed.h_transpose_matrix is None
    assert seed.delta.is_zero()