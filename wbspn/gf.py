"""Arithmetic in GF(2^8) with the AES reduction polynomial."""

from __future__ import annotations

from collections.abc import Iterable

from wbspn.constants import GF_COEFFICIENTS

AES_MODULUS = 0x11B
"""The reduction polynomial x^8 + x^4 + x^3 + x + 1."""


def _check_byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int byte value, got {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def gf_multiply(a: int, b: int) -> int:
    """Multiply two bytes as elements of GF(2^8)."""
    a = _check_byte(a)
    b = _check_byte(b)
    result = 0
    while b:
        if b & 1:
            result ^= a
        b >>= 1
        a <<= 1
        if a & 0x100:
            a ^= AES_MODULUS
    return result


def build_multiplication_table(coefficients: Iterable[int]) -> tuple[bytes, ...]:
    """Return one 256-entry row per coefficient: ``row[x] == coefficient * x``."""
    return tuple(
        bytes(gf_multiply(coefficient, x) for x in range(256))
        for coefficient in coefficients
    )


MULTIPLICATION_TABLE: tuple[bytes, ...] = build_multiplication_table(GF_COEFFICIENTS)
"""Multiplication rows for the diffusion layer's coefficients."""