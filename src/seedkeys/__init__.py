"""
seedkeys - Deterministic secp256k1 keys for test fixtures

Derives reproducible keypairs from seed strings and orders them by
compressed public key.
"""

__version__ = "0.1.0"

from seedkeys.derivation import (
    SECP256K1_N,
    EncodingError,
    InvalidScalarError,
    Keypair,
    SeedKeyError,
    derive,
    derive_keypair,
    derive_keys,
    seed_range,
    seed_to_scalar,
    seed_to_secret,
    sha256_digest,
)
from seedkeys.ordering import Ordering, compare, pubkey_sort_key, sort_keys

__all__ = [
    "EncodingError",
    "InvalidScalarError",
    "Keypair",
    "Ordering",
    "SECP256K1_N",
    "SeedKeyError",
    "compare",
    "derive",
    "derive_keypair",
    "derive_keys",
    "pubkey_sort_key",
    "seed_range",
    "seed_to_scalar",
    "seed_to_secret",
    "sha256_digest",
    "sort_keys",
]
