# silentpcg

Building blocks for pseudorandom correlation generators (PCGs), as used in
silent oblivious transfer:

- `silentpcg.field`: the binary field `F2` and a 128-bit prime field
  `Field128` (modulus `MODULUS`), with arithmetic operators, `inverse()`,
  `random()`, and for `Field128` also `to_bytes()` and `to_f2()`.
- `silentpcg.dpf`: a two-party distributed point function with one-bit
  output (`Dpf`, `DpfKey`, `gen_keys`, `full_eval_key`).
- `silentpcg.lpn`: LPN parameters (`LpnParameters`, `CodeType`), the matrix
  types `DenseMatrix`, `SparseMatrix` and `EmptyMatrix`, and the products
  `matrix_vector_multiply_f2`, `matrix_transpose_vector_multiply_fq` and
  `matrix_vector_multiply_fq`.
- `silentpcg.crhf`: an AES-based correlation-robust hash, `AesCrhf`.
- `silentpcg.pcg_core`: the `PcgSeedGenerator` and `PcgExpander` interfaces
  and the seed records `SvoleSenderSeed` and `SvoleReceiverSeed`.
- `silentpcg.svole`: a subfield VOLE PCG, `SvolePcg`, plus the vector helpers
  `pack_f2_vector`, `unpack_f2_vector`, `spread_f2_vector`, `xor_f2_vectors`,
  `add_fq_vectors` and `sub_fq_vectors`.
- `silentpcg.rot`: a random OT PCG, `RotPcg`, that expands sVOLE seeds and
  hashes the results with `AesCrhf`.
- `silentpcg.interactive_seed`: the `Channel` interface and an in-memory
  `QueueChannel`, a base OT interface with `MockBaseOt`, and
  `InteractiveSeedGenerator`.

Errors are raised as subclasses of `silentpcg.errors.PcgError`
(for example `DpfError`, `LpnError`, `CrhfError`, `InvalidPartyIndex`).

This is experimental code. Several parts are simplified (fixed all-zero AES
keys, a naive sparse-matrix generator, an additive hash to pick the DPF
point) and it must not be used to protect real data.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example: distributed point function

```python
from silentpcg.dpf import Dpf
from silentpcg.field import F2

dpf = Dpf(8, F2)
k0, k1 = dpf.gen(alpha=37, beta=1)
e0 = dpf.full_eval(k0)
e1 = dpf.full_eval(k1)
assert [i for i, (a, b) in enumerate(zip(e0, e1)) if a + b == F2.one()] == [37]
```

`Dpf.gen` raises `DpfError` when `beta` is not 0 or 1 or when `alpha` lies
outside the domain of `2 ** domain_bits` points.

## Example: LPN matrices

```python
from silentpcg.field import F2
from silentpcg.lpn import CodeType, LpnParameters, matrix_vector_multiply_f2

dense = LpnParameters(n=8, k=4, t=1, code_type=CodeType.RANDOM_LINEAR).generate_matrix()
sparse = LpnParameters(n=8, k=4, t=1, code_type=CodeType.LDPC, sparsity=2).generate_matrix()
y = matrix_vector_multiply_f2(dense, [F2.one()] * 8)
assert len(y) == 4
```

`CodeType.QUASI_CYCLIC` is accepted as a value, but `generate_matrix()`
raises `LpnError` for it.

## Example: sVOLE seeds

The DPF domain of `SvolePcg` has `k` bits, and the sender's expansion
combines its `2 ** k` DPF outputs with `n` unpacked bits, so `n` must equal
`2 ** k` for both parties to expand.

```python
from silentpcg.lpn import CodeType, LpnParameters
from silentpcg.svole import SvolePcg

params = LpnParameters(n=64, k=6, t=5, code_type=CodeType.RANDOM_LINEAR)
pcg = SvolePcg(params)
sender_seed, receiver_seed = pcg.gen(128)
sender_out = pcg.expand(0, sender_seed)      # SvoleSenderOutput(u, v)
receiver_out = pcg.expand(1, receiver_seed)  # SvoleReceiverOutput(x, w)
```

Expanding a seed with the other party's index raises `InvalidPartyIndex`.

## Example: random OT

```python
from silentpcg.lpn import LpnParameters
from silentpcg.rot import RotPcg
from silentpcg.svole import SvolePcg

rot = RotPcg.new_with_default_crhf(SvolePcg(LpnParameters(n=64, k=6, t=5)), 16)
sender_seed, receiver_seed = rot.gen(128)
sender_out = rot.expand(0, sender_seed)      # outputs: list of 16-byte hashes
receiver_out = rot.expand(1, receiver_seed)  # outputs: list of (F2 choice bit, hash)
```

## Example: hashing with the CRHF

```python
from silentpcg.crhf import AesCrhf

crhf = AesCrhf(bytes(16))
digest = crhf.hash(42, b"\x01\x02\x03\x04\x05")
assert len(digest) == 16
```

The key must be 16 bytes and the input must not be empty; otherwise
`CrhfError` is raised.

## What the package does not do

- There is no secure two-party DPF key generation: `secure_dpf_key_gen`
  always raises `NotImplementedPcgError`, and so does
  `InteractiveSeedGenerator.generate_local_seed`, which relies on it.
  `InteractiveSeedGenerator.gen` produces both seeds locally instead.
- `MockBaseOt` does not transfer anything; its receiver returns 16-byte
  messages made by repeating each choice byte.
- There is no network transport; `QueueChannel` only links two parties in
  the same process.
- There is no command-line program.