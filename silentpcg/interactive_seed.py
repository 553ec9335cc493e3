"""Two-party sVOLE seed generation over a message channel."""

from __future__ import annotations

import copy
import logging
import queue
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Sequence

from .dpf import Dpf, DpfKey
from .errors import ChannelError, NotImplementedPcgError, SeedGenError
from .field import F2, Field128
from .lpn import LpnParameters
from .pcg_core import PcgSeedGenerator, SvoleReceiverSeed, SvoleSenderSeed
from .svole import pack_f2_vector

__all__ = [
    "Channel",
    "QueueChannel",
    "BaseOtType",
    "BaseOtOracle",
    "MockBaseOt",
    "secure_dpf_key_gen",
    "InteractiveSeedGenerator",
]

_log = logging.getLogger(__name__)
_MOCK_MESSAGE_BYTES = 16


class Channel(ABC):
    """A bidirectional message channel between two parties."""

    @abstractmethod
    def send(self, message: Any) -> None:
        """Deliver ``message`` to the other party."""

    @abstractmethod
    def recv(self) -> Any:
        """Wait for and return the next message from the other party."""


class QueueChannel(Channel):
    """A channel made of two queues, one per direction."""

    def __init__(self, outgoing: queue.Queue, incoming: queue.Queue) -> None:
        self._outgoing = outgoing
        self._incoming = incoming

    def send(self, message: Any) -> None:
        try:
            self._outgoing.put_nowait(message)
        except queue.Full as exc:
            raise ChannelError("Outgoing queue is full") from exc

    def recv(self) -> Any:
        return self._incoming.get()


class BaseOtType(Enum):
    """Role of a party in a base oblivious transfer."""

    SENDER = "sender"
    RECEIVER = "receiver"


class BaseOtOracle(ABC):
    """Base oblivious transfer functionality."""

    @abstractmethod
    def send(self, messages: Sequence[tuple[bytes, bytes]]) -> None:
        """Offer one pair of messages per transfer."""

    @abstractmethod
    def receive(self, choices: Sequence[int]) -> list[bytes]:
        """Return the chosen message of every transfer."""


class MockBaseOt(BaseOtOracle):
    """A stand-in base OT that returns fixed messages derived from the choices."""

    def __init__(self, party_type: BaseOtType) -> None:
        self.party_type = party_type

    def send(self, messages: Sequence[tuple[bytes, bytes]]) -> None:
        if self.party_type is not BaseOtType.SENDER:
            raise SeedGenError("Mock OT called as wrong type")
        _log.info("Mock OT Sender sending %d pairs.", len(messages))

    def receive(self, choices: Sequence[int]) -> list[bytes]:
        if self.party_type is not BaseOtType.RECEIVER:
            raise SeedGenError("Mock OT called as wrong type")
        _log.info("Mock OT Receiver receiving for %d choices.", len(choices))
        return [bytes([choice]) * _MOCK_MESSAGE_BYTES for choice in choices]


def secure_dpf_key_gen(
    channel: Channel,
    sec_param: int,
    dpf_domain_bits: int,
    alpha: int,
    beta: bytes,
) -> DpfKey:
    """Jointly generate a DPF key share with the other party.

    No secure two-party generation is available, so this always raises.
    """
    raise NotImplementedPcgError("Secure DPF Gen needs implementation")


class InteractiveSeedGenerator(PcgSeedGenerator):
    """One party's side of the interactive sVOLE seed generation."""

    def __init__(self, party_id: int, lpn_params: LpnParameters, channel: Channel) -> None:
        self.party_id = party_id
        self.lpn_params = lpn_params
        self.channel = channel

    @classmethod
    def new_pair(
        cls, lpn_params: LpnParameters
    ) -> tuple[InteractiveSeedGenerator, InteractiveSeedGenerator]:
        """Create generators for parties 0 and 1 joined by in-memory queues."""
        to_party1: queue.Queue = queue.Queue()
        to_party0: queue.Queue = queue.Queue()
        channel0 = QueueChannel(outgoing=to_party1, incoming=to_party0)
        channel1 = QueueChannel(outgoing=to_party0, incoming=to_party1)
        return (
            cls(0, copy.deepcopy(lpn_params), channel0),
            cls(1, lpn_params, channel1),
        )

    def generate_local_seed(self) -> SvoleSenderSeed | SvoleReceiverSeed:
        """Run the protocol and return this party's sVOLE seed share."""
        _log.info("Starting interactive seed generation for Party %d...", self.party_id)
        k, n = self.lpn_params.k, self.lpn_params.n
        dpf_key = secure_dpf_key_gen(
            self.channel, 128, k, 0, pack_f2_vector([F2.one()])
        )
        _log.info("Party %d: DPF key generated/received.", self.party_id)

        h_matrix = self.lpn_params.generate_matrix()

        if self.party_id == 0:
            s_packed = pack_f2_vector([F2.random() for _ in range(k)])
            _log.warning("P0 using zero vector for y=Hx in interactive gen.")
            return SvoleSenderSeed(
                k_dpf=dpf_key,
                s_delta=s_packed,
                y=[F2.zero() for _ in range(k)],
                h_matrix=h_matrix,
                delta=Field128.zero(),
            )
        x = [F2.random() for _ in range(n)]
        return SvoleReceiverSeed(
            k_dpf=dpf_key,
            x=x,
            h_transpose_matrix=h_matrix.transpose(),
            delta=Field128.random(),
        )

    def gen(self, security_param: int) -> tuple[SvoleSenderSeed, SvoleReceiverSeed]:
        """Generate both seeds locally, with a DPF on point 0 and value 1."""
        _log.info(
            "Starting non-mutating interactive seed generation for party %d",
            self.party_id,
        )
        k, n = self.lpn_params.k, self.lpn_params.n
        sender_key, receiver_key = Dpf(k, F2).gen(0, 1)

        delta = Field128.random()
        x = [F2.random() for _ in range(n)]
        s_delta = pack_f2_vector([F2.random() for _ in range(k)])
        h_matrix = self.lpn_params.generate_matrix()
        h_transpose = h_matrix.transpose()

        sender = SvoleSenderSeed(
            k_dpf=sender_key, s_delta=s_delta, h_matrix=h_matrix, delta=delta
        )
        receiver = SvoleReceiverSeed(
            k_dpf=receiver_key, x=x, h_transpose_matrix=h_transpose, delta=delta
        )
        return sender, receiver