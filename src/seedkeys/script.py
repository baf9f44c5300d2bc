"""
Multisig redeem scripts and segwit outputs for fixture key sets.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence

import bech32

from seedkeys.derivation import Keypair

OP_HASH160 = 0xA9
OP_EQUAL = 0x87
OP_CHECKMULTISIG = 0xAE
OP_1 = 0x51
# OP_CHECKMULTISIG accepts at most 20 public keys
MAX_MULTISIG_KEYS = 20

NETWORK_HRPS = {"mainnet": "bc", "testnet": "tb", "regtest": "bcrt"}


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data))"""
    h = hashlib.new("ripemd160")
    h.update(hashlib.sha256(data).digest())
    return h.digest()


def small_int_opcode(n: int) -> int:
    """OP_1..OP_16"""
    if not 1 <= n <= 16:
        raise ValueError(f"No small integer opcode for {n}")
    return OP_1 + n - 1


def push_number(n: int) -> bytes:
    """
    Push a key count or threshold onto the script.

    1..16 use OP_1..OP_16; larger values are a one-byte minimal push
    (e.g. 20 -> 0x01 0x14).
    """
    if 1 <= n <= 16:
        return bytes([small_int_opcode(n)])
    if 16 < n <= 0x7F:
        return bytes([1, n])
    raise ValueError(f"Cannot push multisig count {n}")


def majority_threshold(key_count: int) -> int:
    return key_count // 2 + 1


def create_multisig_redeem_script(threshold: int, keys: Sequence[Keypair]) -> bytes:
    """
    Build a multisig redeem script.

    <m> <pubkey_1> ... <pubkey_n> <n> OP_CHECKMULTISIG

    Keys are pushed in the order given; sort them first for a canonical script.
    Federations above 16 keys get their counts as data pushes rather than
    OP_N opcodes.

    Args:
        threshold: Required signatures (m)
        keys: Keypairs whose compressed public keys are pushed

    Returns:
        Redeem script bytes
    """
    if not keys:
        raise ValueError("At least one key is required")
    if len(keys) > MAX_MULTISIG_KEYS:
        raise ValueError(f"Too many keys: {len(keys)} > {MAX_MULTISIG_KEYS}")
    if not 1 <= threshold <= len(keys):
        raise ValueError(f"Threshold {threshold} out of range for {len(keys)} keys")

    script = push_number(threshold)
    for key in keys:
        pubkey = key.public_key_bytes()
        script += bytes([len(pubkey)]) + pubkey
    script += push_number(len(keys)) + bytes([OP_CHECKMULTISIG])
    return script


def network_hrp(network: str) -> str:
    try:
        return NETWORK_HRPS[network]
    except KeyError:
        raise ValueError(f"Unknown network: {network}") from None


def witness_v0_address(program: bytes, network: str = "mainnet") -> str:
    """Bech32 (BIP173) address for a version 0 witness program."""
    address = bech32.encode(network_hrp(network), 0, program)
    if address is None:
        raise ValueError(f"Invalid witness program of {len(program)} bytes")
    return address


def pubkey_to_p2wpkh_address(pubkey_bytes: bytes, network: str = "mainnet") -> str:
    if len(pubkey_bytes) != 33:
        raise ValueError(f"Invalid compressed pubkey length: {len(pubkey_bytes)}")
    return witness_v0_address(hash160(pubkey_bytes), network)


def script_to_p2wsh_scriptpubkey(script: bytes) -> bytes:
    """P2WSH scriptPubKey (OP_0 <32-byte-hash>)"""
    return bytes([0x00, 0x20]) + hashlib.sha256(script).digest()


def script_to_p2wsh_address(script: bytes, network: str = "mainnet") -> str:
    # P2WSH commits to SHA256 of the script, not HASH160
    return witness_v0_address(hashlib.sha256(script).digest(), network)


def script_to_p2sh_p2wsh_scriptpubkey(script: bytes) -> bytes:
    """
    P2SH-wrapped P2WSH scriptPubKey.

    OP_HASH160 <hash160(OP_0 <sha256(script)>)> OP_EQUAL

    The P2WSH scriptPubKey is the P2SH redeem script, so the spending
    scriptSig is a single push of it.
    """
    witness_redeem = script_to_p2wsh_scriptpubkey(script)
    return bytes([OP_HASH160, 0x14]) + hash160(witness_redeem) + bytes([OP_EQUAL])
