"""The Keccak-p[1600] permutation, the sponge construction and SHAKE128."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

MASK64 = (1 << 64) - 1
NUM_LANES = 25
STATE_BYTES = 200
STATE_BITS = 1600
PERMUTATION_ROUNDS = 24
SHAKE_SUFFIX = 0x1F


def lane_index(x: int, y: int) -> int:
    """Return the position of lane (x, y) in the flat 25-lane state."""
    return 5 * y + x


def rot64_left(value: int, amount: int) -> int:
    """Rotate a 64-bit word left."""
    amount %= 64
    value &= MASK64
    if amount == 0:
        return value
    return ((value << amount) | (value >> (64 - amount))) & MASK64


def rot64_right(value: int, amount: int) -> int:
    """Rotate a 64-bit word right."""
    amount %= 64
    value &= MASK64
    if amount == 0:
        return value
    return ((value >> amount) | (value << (64 - amount))) & MASK64


def _check_lanes(lanes: Sequence[int]) -> None:
    if len(lanes) != NUM_LANES:
        raise ValueError(f"state must have {NUM_LANES} lanes, got {len(lanes)}")


def _format_lane(value: int) -> str:
    # printf's "%#018x" prints zero without the 0x prefix.
    return "0" * 18 if value == 0 else f"{value:#018x}"


def format_state(lanes: Sequence[int]) -> str:
    """Render the state as five rows of five lanes in hexadecimal."""
    _check_lanes(lanes)
    return "".join(
        "".join(_format_lane(lanes[lane_index(x, y)]) + " " for x in range(5)) + "\n"
        for y in range(5)
    )


def theta(lanes: Sequence[int]) -> list[int]:
    """Column parity mixing step."""
    _check_lanes(lanes)
    parity = [reduce(xor, (lanes[lane_index(x, y)] for y in range(5))) for x in range(5)]
    effect = [parity[(x + 4) % 5] ^ rot64_left(parity[(x + 1) % 5], 1) for x in range(5)]
    return [lane ^ effect[i % 5] for i, lane in enumerate(lanes)]


def _rho_offsets() -> tuple[int, ...]:
    offsets = [0] * NUM_LANES
    x, y = 1, 0
    for t in range(24):
        offsets[lane_index(x, y)] = (t + 1) * (t + 2) // 2
        x, y = y, (2 * x + 3 * y) % 5
    return tuple(offsets)


_RHO_OFFSETS = _rho_offsets()


def rho(lanes: Sequence[int]) -> list[int]:
    """Per-lane rotation step."""
    _check_lanes(lanes)
    return [rot64_left(lane, offset) for lane, offset in zip(lanes, _RHO_OFFSETS)]


def pi(lanes: Sequence[int]) -> list[int]:
    """Lane permutation step."""
    _check_lanes(lanes)
    result = [0] * NUM_LANES
    for x in range(5):
        for y in range(5):
            result[lane_index(x, y)] = lanes[lane_index((x + 3 * y) % 5, x)]
    return result


def chi(lanes: Sequence[int]) -> list[int]:
    """Non-linear row step."""
    _check_lanes(lanes)
    result = [0] * NUM_LANES
    for x in range(5):
        for y in range(5):
            result[lane_index(x, y)] = lanes[lane_index(x, y)] ^ (
                (~lanes[lane_index((x + 1) % 5, y)] & MASK64)
                & lanes[lane_index((x + 2) % 5, y)]
            )
    return result


def round_constant_bit(t: int) -> int:
    """Output bit of the Keccak round-constant LFSR after ``t`` steps."""
    t %= 255
    register = 1
    for _ in range(t):
        register = (register << 1) & 0x1FF
        if register & 0x100:
            register ^= 0x71
    return register & 1


def _round_constants() -> tuple[int, ...]:
    return tuple(
        reduce(
            xor,
            (round_constant_bit(j + 7 * ir) << ((1 << j) - 1) for j in range(7)),
        )
        for ir in range(PERMUTATION_ROUNDS)
    )


ROUND_CONSTANTS: tuple[int, ...] = _round_constants()
"""The 24 lane constants that the iota step adds."""


def iota(lanes: Sequence[int], round_index: int) -> list[int]:
    """Round-constant addition step."""
    _check_lanes(lanes)
    result = list(lanes)
    result[0] ^= ROUND_CONSTANTS[round_index]
    return result


def keccak_round(lanes: Sequence[int], round_index: int) -> list[int]:
    """Apply one full Keccak round."""
    return iota(chi(pi(rho(theta(lanes)))), round_index)


def keccak_p(num_rounds: int, state: bytes) -> bytes:
    """Apply the last ``num_rounds`` rounds of Keccak-p[1600] to a 200-byte state."""
    if len(state) != STATE_BYTES:
        raise ValueError(f"state must be {STATE_BYTES} bytes, got {len(state)}")
    if not 0 <= num_rounds <= PERMUTATION_ROUNDS:
        raise ValueError(f"number of rounds must be in 0..{PERMUTATION_ROUNDS}")
    lanes = [
        int.from_bytes(state[8 * i : 8 * i + 8], "little") for i in range(NUM_LANES)
    ]
    for round_index in range(PERMUTATION_ROUNDS - num_rounds, PERMUTATION_ROUNDS):
        lanes = keccak_round(lanes, round_index)
    return b"".join(lane.to_bytes(8, "little") for lane in lanes)


def pad0star_1(rate: int, message_bits: int) -> bytes:
    """Return the padding bytes to append to a message whose last byte
    already carries the domain suffix and the first padding bit."""
    m = message_bits - 4
    j = (-m - 2) % rate
    zeros = (j - 10) // 8 if j >= 10 else 0
    return bytes(zeros) + b"\x80"


def _check_rate(rate: int) -> None:
    if rate <= 0 or rate >= STATE_BITS or rate % 8:
        raise ValueError(f"rate must be a positive multiple of 8 below {STATE_BITS}")


def sponge(message: bytes, output_length: int, rate: int) -> bytes:
    """Absorb ``message`` into the sponge and squeeze ``output_length`` bytes."""
    _check_rate(rate)
    if output_length < 0:
        raise ValueError("output length must not be negative")
    padded = bytes(message) + pad0star_1(rate, 8 * len(message))
    block = rate // 8
    state = bytes(STATE_BYTES)
    for i in range(8 * len(padded) // rate):
        chunk = padded[i * block : (i + 1) * block]
        mixed = bytes(a ^ b for a, b in zip(state[:block], chunk))
        state = keccak_p(PERMUTATION_ROUNDS, mixed + state[block:])
    output = bytearray()
    while len(output) < output_length:
        output += state[:block]
        state = keccak_p(PERMUTATION_ROUNDS, state)
    return bytes(output[:output_length])


def keccak(capacity: int, message: bytes, output_length: int) -> bytes:
    """Keccak sponge with the given capacity in bits."""
    return sponge(message, output_length, STATE_BITS - capacity)


def shake128(data: bytes, output_length: int) -> bytes:
    """Return ``output_length`` bytes of SHAKE128 output for ``data``."""
    return keccak(256, bytes(data) + bytes([SHAKE_SUFFIX]), output_length)