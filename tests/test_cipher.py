import pytest

from wbspn.cipher import WhiteBoxCipher
from wbspn.keygen import build_wb_sbox


@pytest.fixture
def cipher():
    master_key = bytes(range(16))
    return WhiteBoxCipher(build_wb_sbox(master_key))


def test_block_round_trip(cipher):
    for seed in range(8):
        block = bytes((seed * 31 + i * 7) & 0xFF for i in range(16))
        encrypted = cipher.encrypt_block(block)
        assert len(encrypted) == 16
        assert cipher.decrypt_block(encrypted) == block


def test_encryption_changes_block(cipher):
    block = bytes(16)
    encrypted = cipher.encrypt_block(block)
    assert encrypted != block
    assert cipher.decrypt_block(encrypted) == block


def test_encrypt_pads_to_block_multiple(cipher):
    data = b"hello white box"
    encrypted = cipher.encrypt(data)
    assert len(encrypted) == 16
    assert cipher.decrypt(encrypted) == data + b"\x00"


def test_aligned_data_is_not_padded(cipher):
    data = bytes(range(32))
    encrypted = cipher.encrypt(data)
    assert len(encrypted) == 32
    assert cipher.decrypt(encrypted) == data


def test_empty_data(cipher):
    assert cipher.encrypt(b"") == b""
    assert cipher.decrypt(b"") == b""


def test_identical_blocks_encrypt_identically(cipher):
    block = b"0123456789abcdef"
    encrypted = cipher.encrypt(block * 2)
    assert encrypted[:16] == encrypted[16:]
    assert encrypted[:16] == cipher.encrypt_block(block)


def test_decrypt_rejects_partial_block(cipher):
    with pytest.raises(ValueError):
        cipher.decrypt(bytes(17))


@pytest.mark.parametrize("length", [0, 15, 17])
def test_block_length_checked(cipher, length):
    with pytest.raises(ValueError):
        cipher.encrypt_block(bytes(length))
    with pytest.raises(ValueError):
        cipher.decrypt_block(bytes(length))


def test_sbox_must_have_256_entries():
    with pytest.raises(ValueError):
        WhiteBoxCipher(bytes(255))


def test_sbox_must_be_permutation():
    with pytest.raises(ValueError):
        WhiteBoxCipher(bytes(256))


def test_inverse_sbox(cipher):
    assert all(cipher.sbox_inverse[cipher.sbox[v]] == v for v in range(256))


def test_from_file_uses_first_256_bytes(tmp_path, cipher):
    path = tmp_path / "WB_SBOX.bin"
    path.write_bytes(cipher.sbox + b"extra")
    loaded = WhiteBoxCipher.from_file(path)
    assert loaded.sbox == cipher.sbox
    assert loaded.encrypt_block(bytes(16)) == cipher.encrypt_block(bytes(16))


def test_from_file_incomplete(tmp_path):
    path = tmp_path / "WB_SBOX.bin"
    path.write_bytes(bytes(range(100)))
    with pytest.raises(ValueError):
        WhiteBoxCipher.from_file(path)


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        WhiteBoxCipher.from_file(tmp_path / "absent.bin")


def test_file_round_trip(tmp_path, cipher):
    plain = tmp_path / "plain.txt"
    enc = tmp_path / "plain.enc"
    dec = tmp_path / "plain.dec"
    plain.write_bytes(b"some file content that spans blocks")
    cipher.encrypt_file(plain, enc)
    cipher.decrypt_file(enc, dec)
    assert len(enc.read_bytes()) == 48
    assert dec.read_bytes().rstrip(b"\x00") == plain.read_bytes()