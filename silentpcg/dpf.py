"""Two-party distributed point function over a binary tree of AES-expanded seeds."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import DpfError
from .field import F2

__all__ = ["CorrectionWord", "DpfKey", "Dpf", "gen_keys", "full_eval_key"]

BLOCK_SIZE = 16
_TWEAK = b"\xff" * BLOCK_SIZE


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _clear_lsb(block: bytes) -> bytes:
    return block[:-1] + bytes([block[-1] & 0xFE])


def _lsb(block: bytes) -> int:
    return block[-1] & 1


def _convert(seed: bytes) -> int:
    return seed[0] & 1


@dataclass(frozen=True)
class CorrectionWord:
    """Per-level correction: a seed mask and the control-bit masks for both children."""

    seed: bytes
    t_left: int
    t_right: int


@dataclass(frozen=True)
class DpfKey:
    """One party's share of a point function."""

    key_id: int
    domain_bits: int
    s0: bytes
    cw: tuple[CorrectionWord, ...]
    cw_final: int
    key_data: bytes = field(default=b"")

    @classmethod
    def placeholder(cls) -> DpfKey:
        """An empty key for a zero-bit domain; not the output of a real generation."""
        return cls(key_id=0, domain_bits=0, s0=bytes(BLOCK_SIZE), cw=(), cw_final=0)


class _Prg:
    """Length-doubling PRG built from fixed-key AES."""

    def __init__(self, key: bytes = bytes(BLOCK_SIZE)) -> None:
        self._encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()

    def expand(self, seeds: Sequence[bytes]) -> list[tuple[bytes, bytes]]:
        """Return the (left, right) children of every seed; each child's LSB is its control bit."""
        data = b"".join(
            _clear_lsb(seed) + _clear_lsb(_xor(seed, _TWEAK)) for seed in seeds
        )
        out = self._encryptor.update(data)
        step = 2 * BLOCK_SIZE
        return [
            (out[start:start + BLOCK_SIZE], out[start + BLOCK_SIZE:start + step])
            for start in range(0, len(out), step)
        ]


class Dpf:
    """Generates and evaluates keys for point functions with a one-bit output."""

    def __init__(self, domain_bits: int, output_type: Callable[[int], Any] = int) -> None:
        if domain_bits < 0:
            raise DpfError("Domain size must not be negative")
        self._domain_bits = domain_bits
        self._output_type = output_type
        self._prg = _Prg()

    def domain_bits(self) -> int:
        return self._domain_bits

    def gen(self, alpha: int, beta: int) -> tuple[DpfKey, DpfKey]:
        """Return keys whose evaluations XOR to ``beta`` at ``alpha`` and to 0 elsewhere."""
        beta = int(beta)
        if beta not in (0, 1):
            raise DpfError("DPF Gen currently only supports beta = 0 or 1")
        n = self._domain_bits
        if not 0 <= alpha < 1 << n:
            raise DpfError("Alpha out of domain bounds")

        initial = tuple(_clear_lsb(secrets.token_bytes(BLOCK_SIZE)) for _ in range(2))
        seeds = list(initial)
        controls = [0, 1]
        correction_words = []

        for level in range(n):
            alpha_bit = (alpha >> (n - 1 - level)) & 1
            lose = 1 - alpha_bit
            children = self._prg.expand(seeds)
            child_bits = [(_lsb(left), _lsb(right)) for left, right in children]
            child_seeds = [(_clear_lsb(left), _clear_lsb(right)) for left, right in children]

            cw = CorrectionWord(
                seed=_xor(child_seeds[0][lose], child_seeds[1][lose]),
                t_left=child_bits[0][0] ^ child_bits[1][0] ^ alpha_bit ^ 1,
                t_right=child_bits[0][1] ^ child_bits[1][1] ^ alpha_bit,
            )
            keep_mask = (cw.t_left, cw.t_right)[alpha_bit]
            correction_words.append(cw)

            next_seeds, next_controls = [], []
            for pair, bits, control in zip(child_seeds, child_bits, controls):
                seed, bit = pair[alpha_bit], bits[alpha_bit]
                if control:
                    seed = _xor(seed, cw.seed)
                    bit ^= keep_mask
                next_seeds.append(seed)
                next_controls.append(bit)
            seeds, controls = next_seeds, next_controls

        cw_final = beta ^ _convert(seeds[0]) ^ _convert(seeds[1])
        words = tuple(correction_words)
        return tuple(
            DpfKey(key_id=party, domain_bits=n, s0=initial[party], cw=words, cw_final=cw_final)
            for party in (0, 1)
        )

    def full_eval(self, key: DpfKey) -> list:
        """Evaluate ``key`` on every point of the domain, in index order."""
        if key.domain_bits != self._domain_bits:
            raise DpfError("Key domain size mismatch")
        if len(key.cw) != key.domain_bits:
            raise DpfError("Key has the wrong number of correction words")

        level = [(key.s0, key.key_id & 1)]
        for cw in key.cw:
            children = self._prg.expand([seed for seed, _ in level])
            next_level = []
            for (left, right), (_, control) in zip(children, level):
                for child, t_mask in ((left, cw.t_left), (right, cw.t_right)):
                    seed, bit = _clear_lsb(child), _lsb(child)
                    if control:
                        seed = _xor(seed, cw.seed)
                        bit ^= t_mask
                    next_level.append((seed, bit))
            level = next_level

        return [
            self._output_type(_convert(seed) ^ (control & key.cw_final))
            for seed, control in level
        ]


def gen_keys(domain_bits: int, alpha: int, beta: bytes) -> tuple[DpfKey, DpfKey]:
    """Generate a key pair; ``beta`` is 1 unless it is empty or starts with a zero byte."""
    beta_bit = 1 if beta and beta[0] != 0 else 0
    return Dpf(domain_bits).gen(alpha, beta_bit)


def full_eval_key(key: DpfKey) -> list[F2]:
    """Evaluate a key over its whole domain with F2 outputs."""
    return Dpf(key.domain_bits, F2).full_eval(key)