"""Arithmetic over the secp256k1 prime field, with endomorphism vectors and byte-point table serialization."""

__version__ = "0.1.0"
__all__ = ["field", "fieldmul", "fieldsquare", "fieldpow", "endomorphism", "precompute"]