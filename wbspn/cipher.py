"""Block and file encryption with a white-box SPN S-box."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from wbspn.constants import BLOCK_SIZE, ROUNDS
from wbspn.spn import invert_sbox, sigma, theta

SBOX_SIZE = 256


def _blocks(data: bytes) -> Iterator[bytes]:
    for offset in range(0, len(data), BLOCK_SIZE):
        yield data[offset : offset + BLOCK_SIZE]


class WhiteBoxCipher:
    """The SPN block cipher whose keyed layer is a single 256-entry S-box."""

    block_size = BLOCK_SIZE

    def __init__(self, sbox: bytes) -> None:
        if len(sbox) != SBOX_SIZE:
            raise ValueError(f"S-box must be {SBOX_SIZE} bytes, got {len(sbox)}")
        self.sbox = bytes(sbox)
        self.sbox_inverse = invert_sbox(self.sbox)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> WhiteBoxCipher:
        """Load the cipher from the first 256 bytes of an S-box file."""
        with open(path, "rb") as handle:
            table = handle.read(SBOX_SIZE)
        if len(table) != SBOX_SIZE:
            raise ValueError(f"S-box table '{path}' is incomplete")
        return cls(table)

    def _check_block(self, block: bytes) -> bytes:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
        return bytes(block)

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        state = self._check_block(block)
        for round_number in range(1, ROUNDS + 1):
            state = sigma(theta(state.translate(self.sbox)), round_number)
        return state

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        state = self._check_block(block)
        for round_number in range(ROUNDS, 0, -1):
            state = theta(sigma(state, round_number)).translate(self.sbox_inverse)
        return state

    def encrypt(self, data: bytes) -> bytes:
        """Zero-pad ``data`` to whole blocks and encrypt each block."""
        padded = bytes(data) + bytes(-len(data) % BLOCK_SIZE)
        return b"".join(self.encrypt_block(block) for block in _blocks(padded))

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt whole blocks; the zero padding is kept."""
        data = bytes(data)
        if len(data) % BLOCK_SIZE:
            raise ValueError(
                f"ciphertext length {len(data)} is not a multiple of {BLOCK_SIZE}"
            )
        return b"".join(self.decrypt_block(block) for block in _blocks(data))

    def encrypt_file(
        self, source: str | PathLike[str], destination: str | PathLike[str]
    ) -> None:
        """Encrypt the file ``source`` into ``destination``."""
        Path(destination).write_bytes(self.encrypt(Path(source).read_bytes()))

    def decrypt_file(
        self, source: str | PathLike[str], destination: str | PathLike[str]
    ) -> None:
        """Decrypt the file ``source`` into ``destination``."""
        Path(destination).write_bytes(self.decrypt(Path(source).read_bytes()))