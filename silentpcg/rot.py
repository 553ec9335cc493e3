"""Random oblivious transfer PCG built on the sVOLE PCG and a correlation-robust hash."""

from __future__ import annotations

from dataclasses import dataclass

from .crhf import AesCrhf
from .errors import ExpandError, InvalidInput, InvalidPartyIndex, SeedGenError
from .field import F2, Field128
from .pcg_core import PcgExpander, PcgSeedGenerator, SvoleReceiverSeed, SvoleSenderSeed
from .svole import SvolePcg, SvoleReceiverOutput, SvoleSenderOutput

__all__ = [
    "RotSenderSeed",
    "RotReceiverSeed",
    "RotSenderOutput",
    "RotReceiverOutput",
    "RotPcg",
]

_INDEX_BYTES = 8


@dataclass
class RotSenderSeed:
    """Seed of the OT sender, which plays the sVOLE receiver."""

    svole_seed: SvoleReceiverSeed
    crhf: AesCrhf


@dataclass
class RotReceiverSeed:
    """Seed of the OT receiver, which plays the sVOLE sender."""

    svole_seed: SvoleSenderSeed
    crhf: AesCrhf


@dataclass
class RotSenderOutput:
    """Hashed messages H(i, w_i) of the OT sender."""

    outputs: list[bytes]


@dataclass
class RotReceiverOutput:
    """Pairs (c_i, H(i, v_i)) of the OT receiver, c_i being its choice bit."""

    outputs: list[tuple[F2, bytes]]


def _hash_element(crhf: AesCrhf, index: int, value: Field128) -> bytes:
    data = index.to_bytes(_INDEX_BYTES, "little") + value.to_bytes()
    return crhf.hash(index, data)


class RotPcg(PcgSeedGenerator, PcgExpander):
    """Random OT PCG: expands sVOLE seeds and hashes the results with a CRHF."""

    def __init__(self, svole_pcg: SvolePcg, crhf: AesCrhf, output_bytes: int) -> None:
        self.svole_pcg = svole_pcg
        self.crhf = crhf
        self.output_bytes = output_bytes

    @classmethod
    def new_with_default_crhf(cls, svole_pcg: SvolePcg, output_bytes: int) -> RotPcg:
        """An instance using the AES hash with the all-zero key."""
        return cls(svole_pcg, AesCrhf.default(), output_bytes)

    def gen(self, security_param: int) -> tuple[RotSenderSeed, RotReceiverSeed]:
        """Return the OT sender seed and the OT receiver seed."""
        svole_sender, svole_receiver = self.svole_pcg.gen(security_param)
        if not isinstance(svole_sender, SvoleSenderSeed):
            raise SeedGenError("Incorrect sVOLE seed type for ROT receiver")
        if not isinstance(svole_receiver, SvoleReceiverSeed):
            raise SeedGenError("Incorrect sVOLE seed type for ROT sender")
        return (
            RotSenderSeed(svole_seed=svole_receiver, crhf=self.crhf),
            RotReceiverSeed(svole_seed=svole_sender, crhf=self.crhf),
        )

    def expand(
        self, party_index: int, seed: RotSenderSeed | RotReceiverSeed
    ) -> RotSenderOutput | RotReceiverOutput:
        """Expand a seed; party 0 holds the sender seed, party 1 the receiver seed."""
        if isinstance(seed, RotSenderSeed):
            if party_index != 0:
                raise InvalidPartyIndex("Sender seed used by receiver party")
            out = self.svole_pcg.expand(1, seed.svole_seed)
            if not isinstance(out, SvoleReceiverOutput):
                raise ExpandError("Incorrect sVOLE output type for ROT sender")
            return RotSenderOutput(
                outputs=[_hash_element(seed.crhf, i, w_i) for i, w_i in enumerate(out.w)]
            )
        if isinstance(seed, RotReceiverSeed):
            if party_index != 1:
                raise InvalidPartyIndex("Receiver seed used by sender party")
            out = self.svole_pcg.expand(0, seed.svole_seed)
            if not isinstance(out, SvoleSenderOutput):
                raise ExpandError("Incorrect sVOLE output type for ROT receiver")
            return RotReceiverOutput(
                outputs=[
                    (u_i.to_f2(), _hash_element(seed.crhf, i, v_i))
                    for i, (u_i, v_i) in enumerate(zip(out.u, out.v))
                ]
            )
        raise InvalidInput(f"Unknown seed type: {type(seed).__name__}")