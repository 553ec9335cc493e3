"""Subfield VOLE pseudorandom correlation generator and F2 vector helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .dpf import Dpf
from .errors import InvalidInput, InvalidPartyIndex
from .field import F2, Field128
from .lpn import LpnParameters
from .pcg_core import PcgExpander, PcgSeedGenerator, SvoleReceiverSeed, SvoleSenderSeed

__all__ = [
    "SvoleSenderOutput",
    "SvoleReceiverOutput",
    "SvolePcg",
    "pack_f2_vector",
    "unpack_f2_vector",
    "spread_f2_vector",
    "xor_f2_vectors",
    "add_fq_vectors",
    "sub_fq_vectors",
]


@dataclass
class SvoleSenderOutput:
    """Output share of the sVOLE sender: vectors u and v."""

    u: list[Field128]
    v: list[Field128]


@dataclass
class SvoleReceiverOutput:
    """Output share of the sVOLE receiver: vectors x and w."""

    x: list[F2]
    w: list[Field128]


def _hash_to_index(data: bytes, domain_size: int) -> int:
    if domain_size == 0:
        return 0
    return sum(data) % domain_size


class SvolePcg(PcgSeedGenerator, PcgExpander):
    """sVOLE PCG whose DPF domain has ``k`` bits and one-bit outputs."""

    def __init__(self, lpn_params: LpnParameters) -> None:
        self.lpn_params = lpn_params
        self._dpf = Dpf(lpn_params.k, F2)

    def gen(self, security_param: int) -> tuple[SvoleSenderSeed, SvoleReceiverSeed]:
        """Return the sender seed and the receiver seed."""
        k, n = self.lpn_params.k, self.lpn_params.n
        h_matrix = self.lpn_params.generate_matrix()
        h_transpose = h_matrix.transpose()

        delta = Field128.random()
        x = [F2.random() for _ in range(n)]
        y = [F2.random() for _ in range(k)]

        alpha_bytes = pack_f2_vector(y) + delta.to_bytes()
        alpha = _hash_to_index(alpha_bytes, self._dpf.domain_bits())
        k0, k1 = self._dpf.gen(alpha, 1)

        s_delta = pack_f2_vector([F2.random() for _ in range(security_param)])

        sender = SvoleSenderSeed(
            k_dpf=k0, s_delta=s_delta, y=y, h_matrix=h_matrix, delta=delta
        )
        receiver = SvoleReceiverSeed(
            k_dpf=k1, x=x, h_transpose_matrix=h_transpose, delta=delta
        )
        return sender, receiver

    def expand(
        self, party_index: int, seed: SvoleSenderSeed | SvoleReceiverSeed
    ) -> SvoleSenderOutput | SvoleReceiverOutput:
        """Expand a seed into that party's output share."""
        if isinstance(seed, SvoleSenderSeed):
            if party_index != 0:
                raise InvalidPartyIndex("Sender seed used by receiver party")
            z0 = self._dpf.full_eval(seed.k_dpf)
            width = seed.h_matrix.ncols() if seed.h_matrix is not None else 0
            s = unpack_f2_vector(seed.s_delta, width)
            t = xor_f2_vectors(z0, s)
            v = add_fq_vectors(spread_f2_vector(t), spread_f2_vector(seed.y))
            return SvoleSenderOutput(u=spread_f2_vector(z0), v=v)
        if isinstance(seed, SvoleReceiverSeed):
            if party_index != 1:
                raise InvalidPartyIndex("Receiver seed used by sender party")
            z1 = self._dpf.full_eval(seed.k_dpf)
            x_delta = [x_i * seed.delta for x_i in seed.x]
            w = sub_fq_vectors(spread_f2_vector(z1), x_delta)
            return SvoleReceiverOutput(x=list(seed.x), w=w)
        raise InvalidInput(f"Unknown seed type: {type(seed).__name__}")


def pack_f2_vector(values: Sequence[F2]) -> bytes:
    """Pack F2 values into bytes, least significant bit first."""
    packed = bytearray((len(values) + 7) // 8)
    for i, value in enumerate(values):
        if value.is_one():
            packed[i // 8] |= 1 << (i % 8)
    return bytes(packed)


def unpack_f2_vector(data: bytes, length: int) -> list[F2]:
    """Unpack ``length`` F2 values; bits beyond ``data`` are zero."""
    return [
        F2((data[i // 8] >> (i % 8)) & 1) if i // 8 < len(data) else F2.zero()
        for i in range(length)
    ]


def spread_f2_vector(values: Sequence[F2]) -> list[Field128]:
    """Embed F2 values into Field128."""
    return [Field128.one() if value.is_one() else Field128.zero() for value in values]


def xor_f2_vectors(a: Sequence[F2], b: Sequence[F2]) -> list[F2]:
    """Element-wise sum of two equally long F2 vectors."""
    if len(a) != len(b):
        raise InvalidInput("Vector lengths must match for XOR")
    return [x + y for x, y in zip(a, b)]


def add_fq_vectors(a: Sequence[Field128], b: Sequence[Field128]) -> list[Field128]:
    """Element-wise sum, as long as the shorter vector."""
    return [x + y for x, y in zip(a, b)]


def sub_fq_vectors(a: Sequence[Field128], b: Sequence[Field128]) -> list[Field128]:
    """Element-wise difference, as long as the shorter vector."""
    return [x - y for x, y in zip(a, b)]