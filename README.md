# wbspn

A small white-box block cipher. It is built as a substitution-permutation
network over 16-byte blocks. The secret master key is not used at encryption
time. Instead it is folded into a single 256-entry S-box, and that S-box is
all the cipher needs to encrypt or decrypt.

Each of the 10 rounds applies three steps:

1. the white-box S-box to every byte,
2. a linear diffusion layer built from GF(2^8) multiplication tables,
3. a round-constant addition.

Decryption runs the rounds in reverse order. It uses the inverse S-box. The
diffusion and round-constant steps are their own inverses.

The S-box is derived from a random 128-bit master key in two steps. First,
SHAKE128 expands the key into 65 round-key bytes. Then the first round-key
byte is XORed into every byte value, and the AES S-box followed by a
round-key XOR is applied once for each of the other 64 round-key bytes.

This construction is experimental. It has not been analysed for security,
so do not use it to protect real data.

## Installation

```
pip install .
```

The package needs only the Python standard library, Python 3.10 or later.

## Command line

First generate a master key and its white-box S-box:

```
wbspn-keygen
```

This writes two files to the current directory, replacing any that exist:

- `master_key.bin`: 16 random bytes.
- `WB_SBOX.bin`: the 256-byte white-box S-box.

Keep `master_key.bin` private. Only `WB_SBOX.bin` is needed to run the
cipher. If a file cannot be written, `wbspn-keygen` prints an error to
standard error and exits with status 1.

Then encrypt or decrypt a file. The command reads `WB_SBOX.bin` from the
current directory:

```
wbspn encrypt plain.txt cipher.bin
wbspn decrypt cipher.bin restored.txt
```

The command takes exactly three arguments: a mode (`encrypt` or `decrypt`),
an input file and an output file. It reports progress on standard output.
If anything goes wrong, it prints a message to standard error and exits
with status 1. The possible errors are:

- a wrong number of arguments,
- an unknown mode,
- a missing or incomplete `WB_SBOX.bin` (fewer than 256 bytes),
- an input file that cannot be read, or an output file that cannot be
  written,
- for `decrypt`, an input whose length is not a multiple of 16.

Before encryption the plaintext is padded with zero bytes up to a multiple
of 16. Decryption does not remove this padding, so a restored file keeps any
zero bytes that were added.

## Library use

```python
from wbspn.cipher import WhiteBoxCipher
from wbspn.keygen import build_wb_sbox, generate_master_key

master_key = generate_master_key()
cipher = WhiteBoxCipher(build_wb_sbox(master_key))

ciphertext = cipher.encrypt(b"attack at dawn")
assert len(ciphertext) == 16
assert cipher.decrypt(ciphertext) == b"attack at dawn\x00\x00"
```

`WhiteBoxCipher(sbox)` raises `ValueError` in two cases: the S-box is not
256 bytes long, or it is not a permutation.

To load an S-box written earlier by `wbspn-keygen`:

```python
cipher = WhiteBoxCipher.from_file("WB_SBOX.bin")
cipher.encrypt_file("plain.txt", "cipher.bin")
cipher.decrypt_file("cipher.bin", "restored.txt")
```

`from_file` reads the first 256 bytes of the file. It raises `ValueError`
if the file is shorter than that.

- `encrypt_block` and `decrypt_block` each work on exactly one 16-byte
  block.
- `decrypt` raises `ValueError` if the data is not a whole number of blocks.

`wbspn.keygen.write_key_material(master_key, sbox, key_path, sbox_path)`
writes a key and an S-box to the paths you choose.

### Building blocks

- `wbspn.keccak.shake128(data, output_length)` is a self-contained SHAKE128.
  The module also exposes:
  - the Keccak-p[1600] permutation (`keccak_p`), its step functions
    (`theta`, `rho`, `pi`, `chi`, `iota`, `keccak_round`) and
    `format_state`,
  - the sponge construction (`sponge`, `keccak`, `pad0star_1`).
- `wbspn.spn` provides:
  - `key_schedule`, which expands a 16-byte master key into 65 round-key
    bytes,
  - the round steps `gamma` (the keyed substitution layer applied to a
    16-byte state), `theta` and `sigma`,
  - `invert_sbox`.
- `wbspn.gf` provides `gf_multiply`, which multiplies in the AES field, and
  `build_multiplication_table`.
- `wbspn.constants` provides the cipher parameters, the AES S-box, and
  `sbox_lookup` and `sbox_inverse_lookup`.

## What it does not do

- Decryption does not strip padding. Trailing zero bytes stay in the output.
- Ciphertexts carry no authentication or integrity check.
- No command rebuilds `WB_SBOX.bin` from an existing `master_key.bin`.
  `wbspn-keygen` always makes a new key. To rebuild from an existing key,
  call `build_wb_sbox(master_key)` from Python.

## Running the tests

```
pip install .[test]
pytest
```