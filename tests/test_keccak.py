import hashlib

import pytest

from wbspn.keccak import (
    ROUND_CONSTANTS,
    chi,
    format_state,
    iota,
    keccak,
    keccak_p,
    keccak_round,
    lane_index,
    pad0star_1,
    pi,
    rho,
    rot64_left,
    rot64_right,
    round_constant_bit,
    shake128,
    sponge,
    theta,
)


def test_lane_index_corners():
    assert lane_index(0, 0) == 0
    assert lane_index(4, 4) == 24
    assert lane_index(1, 2) == 11


@pytest.mark.parametrize("amount", [0, 1, 13, 63, 64, 100])
def test_rotations_are_inverse(amount):
    value = 0x0123456789ABCDEF
    assert rot64_right(rot64_left(value, amount), amount) == value


def test_rotate_left_wraps_top_bit():
    assert rot64_left(1 << 63, 1) == 1
    assert rot64_right(1, 1) == 1 << 63


@pytest.mark.parametrize(
    "round_index,expected",
    [
        (0, 0x0000000000000001),
        (1, 0x0000000000008082),
        (2, 0x800000000000808A),
        (23, 0x8000000080008008),
    ],
)
def test_iota_applies_source_round_constants(round_index, expected):
    assert iota([0] * 25, round_index)[0] == expected


def test_round_constant_bit_is_periodic():
    assert round_constant_bit(0) == 1
    for t in range(20):
        assert round_constant_bit(t) == round_constant_bit(t + 255)


def test_steps_keep_zero_state_zero():
    zero = [0] * 25
    assert theta(zero) == zero
    assert rho(zero) == zero
    assert pi(zero) == zero
    assert chi(zero) == zero


def test_pi_permutes_lanes():
    lanes = list(range(1, 26))
    result = pi(lanes)
    assert sorted(result) == lanes
    assert result[0] == lanes[0]


def test_iota_only_touches_first_lane():
    lanes = list(range(25))
    result = iota(lanes, 1)
    assert result[0] == lanes[0] ^ ROUND_CONSTANTS[1]
    assert result[1:] == lanes[1:]


def test_keccak_round_on_zero_adds_constant():
    result = keccak_round([0] * 25, 0)
    assert result[0] == 0x0000000000000001
    assert result[1:] == [0] * 24


def test_step_rejects_wrong_lane_count():
    with pytest.raises(ValueError):
        theta([0] * 24)


def test_format_state_layout():
    lanes = [0] * 25
    lanes[lane_index(1, 0)] = 0xAB
    text = format_state(lanes)
    rows = text.splitlines()
    assert len(rows) == 5
    assert rows[0].split()[1] == "0x00000000000000ab"
    assert rows[4].split() == ["0" * 18] * 5


def test_keccak_p_zero_rounds_is_identity():
    state = bytes(range(200))
    assert keccak_p(0, state) == state


def test_keccak_p_rejects_bad_length():
    with pytest.raises(ValueError):
        keccak_p(24, bytes(199))


def test_keccak_p_rejects_too_many_rounds():
    with pytest.raises(ValueError):
        keccak_p(25, bytes(200))


@pytest.mark.parametrize("length", [1, 17, 100, 200])
def test_padding_fills_to_block_boundary(length):
    pad = pad0star_1(1344, 8 * length)
    assert (length + len(pad)) * 8 % 1344 == 0
    assert pad[-1] == 0x80
    assert set(pad[:-1]) <= {0}


@pytest.mark.parametrize(
    "data,length",
    [(b"", 32), (bytes(range(16)), 65), (b"abc" * 40, 10), (bytes(300), 400)],
)
def test_shake128_matches_hashlib(data, length):
    assert shake128(data, length) == hashlib.shake_128(data).digest(length)


def test_shake128_is_prefix_consistent():
    data = b"white box"
    assert shake128(data, 200)[:65] == shake128(data, 65)


def test_keccak_with_sha3_suffix_matches_sha3_256():
    data = b"abc"
    assert keccak(512, data + b"\x06", 32) == hashlib.sha3_256(data).digest()


def test_keccak_equals_shake_with_suffix():
    data = b"\x00\x01\x02"
    assert keccak(256, data + b"\x1f", 40) == shake128(data, 40)


def test_sponge_zero_output_is_empty():
    assert sponge(b"\x1f", 0, 1344) == b""


def test_sponge_rejects_bad_rate():
    with pytest.raises(ValueError):
        sponge(b"\x1f", 16, 1601)
    with pytest.raises(ValueError):
        sponge(b"\x1f", 16, 1343)


def test_sponge_rejects_negative_length():
    with pytest.raises(ValueError):
        sponge(b"\x1f", -1, 1344)