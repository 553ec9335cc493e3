"""Core interfaces and seed records for pseudorandom correlation generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .dpf import DpfKey
from .field import F2, Field128
from .lpn import LpnMatrix

__all__ = [
    "PcgSeedGenerator",
    "PcgExpander",
    "SvoleSenderSeed",
    "SvoleReceiverSeed",
]


class PcgSeedGenerator(ABC):
    """Produces a pair of correlated seeds (k0, k1), one per party."""

    @abstractmethod
    def gen(self, security_param: int) -> tuple[Any, Any]:
        """Return the seeds of party 0 and party 1."""


class PcgExpander(ABC):
    """Expands one party's seed into its share of the correlated output."""

    @abstractmethod
    def expand(self, party_index: int, seed: Any) -> Any:
        """Return the output share of party ``party_index`` (0 or 1) for ``seed``."""


@dataclass
class SvoleSenderSeed:
    """Seed of the sVOLE sender (party 0)."""

    k_dpf: DpfKey
    s_delta: bytes
    y: list[F2] = field(default_factory=list)
    h_matrix: LpnMatrix | None = None
    delta: Field128 = field(default_factory=Field128.zero)


@dataclass
class SvoleReceiverSeed:
    """Seed of the sVOLE receiver (party 1)."""

    k_dpf: DpfKey
    x: list[F2] = field(default_factory=list)
    h_transpose_matrix: LpnMatrix | None = None
    delta: Field128 = field(default_factory=Field128.zero)