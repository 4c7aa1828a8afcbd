import pytest

from aasidgen import digest


def test_take_hex_is_uppercase_prefix_of_sha256():
    assert digest.take_hex("", 8) == "E3B0C442"
    assert digest.take_hex("", 64) == "E3B0C44298FC1C149AFBF4C8996FB92427AE41E4649B934CA495991B7852B855"


def test_decimal_digits_are_left_padded(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(digest, "sha256_digest", lambda seed: b"\x00" * 31 + b"\x07")
    assert digest.take_decimal_digits("anything", 16) == "0000000000000007"


def test_decimal_digits_read_digest_big_endian(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(digest, "sha256_digest", lambda seed: b"\xff" * 32)
    assert digest.take_decimal_digits("anything", 16) == "1157920892373161"


def test_decimal_digits_depend_on_seed():
    first = digest.take_decimal_digits("asset:Motor1", 16)
    assert first == digest.take_decimal_digits("asset:Motor1", 16)
    assert first != digest.take_decimal_digits("asset:motor1", 16)
    assert first.isdigit() and len(first) == 16


def test_random_digits_pad_and_truncate(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(digest.secrets, "token_bytes", lambda n: b"\x01" + b"\x00" * (n - 1))
    assert digest.random_digits(16) == "0000000000000001"

    monkeypatch.setattr(digest.secrets, "token_bytes", lambda n: b"\xff" * n)
    assert digest.random_digits(16) == "1844674407370955"


def test_group_digits():
    assert digest.group_digits("0000111122223333") == "0000_1111_2222_3333"
