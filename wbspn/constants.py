"""Cipher parameters and the byte substitution tables the SPN is built on."""

from __future__ import annotations

ROUNDS = 10
"""Number of rounds of the white-box SPN."""

KEY_SCHEDULE_ROUNDS = 64
"""Number of S-box layers folded into the white-box S-box (round keys minus one)."""

SBOX_INPUT_BITS = 8
"""Width in bits of a single S-box input."""

BLOCK_BITS = 128
"""Block size in bits."""

KEY_BITS = 128
"""Master key size in bits."""

BLOCK_SIZE = BLOCK_BITS // SBOX_INPUT_BITS
"""Number of S-boxes (bytes) per block."""

KEY_SIZE = KEY_BITS // 8
"""Master key size in bytes."""

SBOX: bytes = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)
"""The AES substitution box."""


def _inverse_of(table: bytes) -> bytes:
    inverse = bytearray(len(table))
    for index, value in enumerate(table):
        inverse[value] = index
    return bytes(inverse)


SBOX_INV: bytes = _inverse_of(SBOX)
"""The inverse of the AES substitution box."""

GF_COEFFICIENTS: tuple[int, ...] = (
    0x08, 0x16, 0x8A, 0x01, 0x70, 0x8D, 0x24, 0x76,
    0xA8, 0x91, 0xAD, 0x48, 0x05, 0xB5, 0xAF, 0xF8,
)
"""Coefficients of the diffusion layer; output byte j takes input byte i times
the coefficient at index ``i ^ j`` in GF(2^8)."""


def _check_byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int byte value, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def sbox_lookup(value: int) -> int:
    """Return the AES S-box substitution of a byte value."""
    return SBOX[_check_byte(value)]


def sbox_inverse_lookup(value: int) -> int:
    """Return the inverse AES S-box substitution of a byte value."""
    return SBOX_INV[_check_byte(value)]