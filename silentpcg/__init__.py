"""Pseudorandom correlation generators for subfield VOLE and random OT: fields, DPF, LPN matrices, CRHF and seed generation."""

__version__ = "0.1.0"

__all__ = [
    "crhf",
    "dpf",
    "errors",
    "field",
    "interactive_seed",
    "lpn",
    "pcg_core",
    "rot",
    "svole",
]