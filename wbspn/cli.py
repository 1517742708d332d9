"""Command line front end: encrypt or decrypt a file with WB_SBOX.bin."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from wbspn.cipher import WhiteBoxCipher

SBOX_FILE = "WB_SBOX.bin"


def _print_usage(prog: str) -> None:
    print(f"Usage: {prog} <mode> <input_file> <output_file>", file=sys.stderr)
    print("  mode: 'encrypt' or 'decrypt'", file=sys.stderr)


def _run(
    cipher: WhiteBoxCipher, encrypting: bool, input_file: str, output_file: str
) -> bool:
    source_kind, target_kind = (
        ("plaintext", "ciphertext") if encrypting else ("ciphertext", "plaintext")
    )
    try:
        data = Path(input_file).read_bytes()
    except OSError:
        print(f"Error opening {source_kind} file.", file=sys.stderr)
        return False
    try:
        result = cipher.encrypt(data) if encrypting else cipher.decrypt(data)
    except ValueError as error:
        print(f"Error: {error}.", file=sys.stderr)
        return False
    try:
        Path(output_file).write_bytes(result)
    except OSError:
        print(f"Error writing to {target_kind} file.", file=sys.stderr)
        return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``<mode> <input_file> <output_file>``; return the exit status."""
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "wbspn"
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        _print_usage(prog)
        return 1

    try:
        cipher = WhiteBoxCipher.from_file(SBOX_FILE)
    except FileNotFoundError:
        print(f"Error: S-Box table '{SBOX_FILE}' not found.", file=sys.stderr)
        return 1
    except ValueError:
        print(f"Error: S-Box table '{SBOX_FILE}' is incomplete.", file=sys.stderr)
        return 1
    except OSError:
        print(f"Error: S-Box table '{SBOX_FILE}' not found.", file=sys.stderr)
        return 1

    mode, input_file, output_file = args
    if mode == "encrypt":
        print(f"Encrypting '{input_file}' to '{output_file}'...")
        if _run(cipher, True, input_file, output_file):
            print("Encryption successful.")
            return 0
        print("Encryption failed.", file=sys.stderr)
        return 1
    if mode == "decrypt":
        print(f"Decrypting '{input_file}' to '{output_file}'...")
        if _run(cipher, False, input_file, output_file):
            print("Decryption successful.")
            return 0
        print("Decryption failed.", file=sys.stderr)
        return 1

    print(f"Error: Invalid mode '{mode}'.", file=sys.stderr)
    _print_usage(prog)
    return 1


if __name__ == "__main__":
    sys.exit(main())