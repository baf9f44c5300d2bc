"""
Deterministic secp256k1 key derivation from seed strings.

Each seed is hashed (SHA-256 of its UTF-8 bytes) and the digest is used
directly as the private key. The digest is never reduced modulo the curve
order: a digest outside the valid scalar range is an error.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from coincurve import PrivateKey, PublicKey
from loguru import logger

from seedkeys.ordering import sort_keys

# secp256k1 curve order
SECP256K1_N = int("FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16)
SCALAR_SIZE = 32

Hasher = Callable[[bytes], bytes]


class SeedKeyError(Exception):
    """Base class for seed key derivation failures."""

    def __init__(self, message: str, seed: object = None):
        super().__init__(message)
        self.seed = seed


class InvalidScalarError(SeedKeyError):
    """The digest of a seed is not a valid secp256k1 private key."""

    pass


class EncodingError(SeedKeyError):
    """A seed could not be encoded as UTF-8 bytes."""

    pass


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


@dataclass(frozen=True)
class Keypair:
    """
    A private key derived from a seed together with its public key.

    Equality and hashing consider the key material only, so two seeds
    that derive the same key compare equal.
    """

    seed: str = field(compare=False)
    secret: bytes
    compressed: bytes = field(repr=False)

    @classmethod
    def from_secret(cls, seed: str, secret: bytes) -> Keypair:
        public_key = PrivateKey(secret).public_key
        return cls(seed=seed, secret=secret, compressed=public_key.format(compressed=True))

    @property
    def scalar(self) -> int:
        return int.from_bytes(self.secret, "big")

    @property
    def private_key(self) -> PrivateKey:
        """Return a coincurve PrivateKey for this keypair."""
        return PrivateKey(self.secret)

    @property
    def public_key(self) -> PublicKey:
        """Return a coincurve PublicKey for this keypair."""
        return PublicKey(self.compressed)

    def public_key_bytes(self) -> bytes:
        """Compressed public key (33 bytes, 0x02/0x03 prefix + x)."""
        return self.compressed

    def public_key_hex(self) -> str:
        return self.compressed.hex()

    def private_key_hex(self) -> str:
        return self.secret.hex()

    def sign(self, message: bytes) -> bytes:
        """Sign a message with SHA256 hashing."""
        return self.private_key.sign(message)


def encode_seed(seed: str) -> bytes:
    """
    Encode a seed as UTF-8.

    Raises:
        EncodingError: If the seed is not a string or has no UTF-8 encoding
    """
    if not isinstance(seed, str):
        raise EncodingError(f"Seed must be a string, got {type(seed).__name__}", seed)
    try:
        return seed.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Seed {seed!r} cannot be encoded as UTF-8: {e}", seed) from e


def seed_to_secret(seed: str, hasher: Hasher = sha256_digest) -> bytes:
    """
    Hash a seed into a 32-byte private key.

    Args:
        seed: Any string, including the empty string
        hasher: Hash function returning a 32-byte digest

    Returns:
        The digest, which is the big-endian private scalar

    Raises:
        EncodingError: If the seed cannot be encoded
        InvalidScalarError: If the digest is not in the range [1, n-1]
    """
    digest = hasher(encode_seed(seed))

    if len(digest) != SCALAR_SIZE:
        raise InvalidScalarError(
            f"Digest of seed {seed!r} is {len(digest)} bytes, expected {SCALAR_SIZE}", seed
        )

    scalar = int.from_bytes(digest, "big")
    if scalar == 0:
        raise InvalidScalarError(f"Seed {seed!r} hashes to a zero scalar", seed)
    if scalar >= SECP256K1_N:
        raise InvalidScalarError(f"Seed {seed!r} hashes to a scalar >= curve order", seed)

    return digest


def seed_to_scalar(seed: str, hasher: Hasher = sha256_digest) -> int:
    return int.from_bytes(seed_to_secret(seed, hasher), "big")


def derive_keypair(seed: str, hasher: Hasher = sha256_digest) -> Keypair:
    return Keypair.from_secret(seed, seed_to_secret(seed, hasher))


def derive(seeds: Iterable[str], hasher: Hasher = sha256_digest) -> list[Keypair]:
    """
    Derive one keypair per seed, preserving input order.

    Either every seed derives or the first failure is raised; no partial
    list is returned.
    """
    keys = [derive_keypair(seed, hasher) for seed in seeds]
    logger.debug(f"Derived {len(keys)} keypairs from seeds")
    return keys


def derive_keys(
    seeds: Iterable[str], sorted: bool = False, hasher: Hasher = sha256_digest
) -> list[Keypair]:
    """
    Derive keypairs for test fixtures.

    Args:
        seeds: Seed strings, one key per seed
        sorted: Return keys ordered by compressed public key
        hasher: Hash function returning a 32-byte digest

    Returns:
        List of keypairs, same length as seeds
    """
    keys = derive(seeds, hasher)
    if sorted:
        return sort_keys(keys)
    return keys


def seed_range(prefix: str, count: int, start: int = 1) -> list[str]:
    """
    Build numbered seeds such as ["fed1", "fed2", ...].

    Args:
        prefix: Seed prefix
        count: Number of seeds
        start: First index
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    return [f"{prefix}{i}" for i in range(start, start + count)]
