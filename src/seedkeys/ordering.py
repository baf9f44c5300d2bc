"""
Canonical ordering of keypairs by compressed public key.

Keys are compared byte by byte (unsigned) on their 33-byte compressed
encoding, which is the order multisig federations use for their keys.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from seedkeys.derivation import Keypair


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def pubkey_sort_key(keypair: Keypair) -> bytes:
    """Sort key for use with sorted()/list.sort()."""
    return keypair.public_key_bytes()


def compare(a: Keypair, b: Keypair) -> Ordering:
    left = pubkey_sort_key(a)
    right = pubkey_sort_key(b)
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def sort_keys(keys: Iterable[Keypair]) -> list[Keypair]:
    """
    Return a new list of keys ordered by compressed public key.

    The sort is stable and the input is left untouched.
    """
    result = sorted(keys, key=pubkey_sort_key)
    logger.debug(f"Sorted {len(result)} keypairs by public key")
    return result
