"""Generation of a random master key and the white-box S-box derived from it."""

from __future__ import annotations

import argparse
import secrets
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from wbspn.constants import KEY_SIZE, SBOX
from wbspn.spn import key_schedule

MASTER_KEY_FILE = "master_key.bin"
SBOX_FILE = "WB_SBOX.bin"


def generate_master_key() -> bytes:
    """Return a fresh random 16-byte master key."""
    return secrets.token_bytes(KEY_SIZE)


def build_wb_sbox(master_key: bytes) -> bytes:
    """Fold the whole key-dependent substitution layer into one 256-entry table."""
    round_keys = key_schedule(master_key)
    table = [value ^ round_keys[0] for value in range(256)]
    for round_key in round_keys[1:]:
        table = [SBOX[value] ^ round_key for value in table]
    return bytes(table)


def write_key_material(
    master_key: bytes,
    sbox: bytes,
    key_path: str | PathLike[str],
    sbox_path: str | PathLike[str],
) -> None:
    """Write the master key and the white-box S-box to their files."""
    if len(master_key) != KEY_SIZE:
        raise ValueError(f"master key must be {KEY_SIZE} bytes, got {len(master_key)}")
    if len(sbox) != 256:
        raise ValueError(f"S-box must be 256 bytes, got {len(sbox)}")
    Path(key_path).write_bytes(bytes(master_key))
    Path(sbox_path).write_bytes(bytes(sbox))


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a master key and its white-box S-box in the current directory."""
    parser = argparse.ArgumentParser(
        description=f"Generate {MASTER_KEY_FILE} and the white-box S-box {SBOX_FILE}."
    )
    parser.parse_args(argv)

    master_key = generate_master_key()
    sbox = build_wb_sbox(master_key)
    try:
        write_key_material(master_key, sbox, MASTER_KEY_FILE, SBOX_FILE)
    except OSError:
        print("Error opening file for writing.", file=sys.stderr)
        return 1
    print(f"S-Box generated and saved to {SBOX_FILE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())