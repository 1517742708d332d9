"""Round functions of the substitution-permutation network."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

from wbspn.constants import BLOCK_SIZE, KEY_SCHEDULE_ROUNDS, KEY_SIZE, SBOX
from wbspn.gf import MULTIPLICATION_TABLE
from wbspn.keccak import shake128

ROUND_KEY_COUNT = KEY_SCHEDULE_ROUNDS + 1
"""Number of one-byte round keys the key schedule derives."""


def _check_length(name: str, data: Sequence[int], expected: int) -> bytes:
    if len(data) != expected:
        raise ValueError(f"{name} must be {expected} bytes, got {len(data)}")
    return bytes(data)


def key_schedule(master_key: bytes) -> bytes:
    """Derive the one-byte round keys from a 16-byte master key with SHAKE128."""
    key = _check_length("master key", master_key, KEY_SIZE)
    return shake128(key, ROUND_KEY_COUNT)


def gamma(state: bytes, master_key: bytes) -> bytes:
    """Key-dependent substitution layer: key mixing and repeated AES S-box."""
    block = _check_length("state", state, BLOCK_SIZE)
    round_keys = key_schedule(master_key)
    values = [value ^ round_keys[0] for value in block]
    for round_key in round_keys[1:]:
        values = [SBOX[value] ^ round_key for value in values]
    return bytes(values)


def theta(state: bytes) -> bytes:
    """Linear diffusion layer; it is its own inverse."""
    block = _check_length("state", state, BLOCK_SIZE)
    return bytes(
        reduce(
            xor,
            (MULTIPLICATION_TABLE[i ^ j][value] for i, value in enumerate(block)),
        )
        for j in range(BLOCK_SIZE)
    )


def sigma(state: bytes, round_number: int) -> bytes:
    """Round-constant addition; it is its own inverse."""
    block = _check_length("state", state, BLOCK_SIZE)
    base = (round_number - 1) * BLOCK_SIZE
    return bytes(
        value ^ ((base + i + 1) & 0xFF) for i, value in enumerate(block)
    )


def invert_sbox(sbox: bytes) -> bytes:
    """Return the inverse of a 256-entry byte permutation."""
    table = _check_length("S-box", sbox, 256)
    if len(set(table)) != 256:
        raise ValueError("S-box is not a permutation")
    inverse = bytearray(256)
    for index, value in enumerate(table):
        inverse[value] = index
    return bytes(inverse)