"""Digest and digit/hex extraction helpers for identifier bodies."""

from __future__ import annotations

import hashlib
import secrets


def sha256_digest(seed: str) -> bytes:
    """Return the SHA-256 digest of the UTF-8 encoded seed.

    Example:
        >>> len(sha256_digest("asset:Motor1"))
        32
    """
    return hashlib.sha256(seed.encode("utf-8")).digest()


def take_hex(seed: str, length: int) -> str:
    """Return the first ``length`` upper-case hex characters of the seed digest.

    Example:
        >>> take_hex("", 8)
        'E3B0C442'
    """
    return sha256_digest(seed).hex().upper()[:length]


def take_decimal_digits(seed: str, length: int) -> str:
    """Read the digest as an unsigned big-endian integer and keep ``length`` decimal digits.

    Example:
        >>> len(take_decimal_digits("sm:Motor1:Nameplate", 16))
        16
    """
    number = int.from_bytes(sha256_digest(seed), byteorder="big", signed=False)
    return str(number).rjust(length, "0")[:length]


def random_digits(length: int) -> str:
    """Return ``length`` decimal digits drawn from a 64-bit secure random value."""
    while True:
        value = int.from_bytes(secrets.token_bytes(8), byteorder="little", signed=False)
        digits = str(value).rjust(length, "0")[:length]
        if digits.strip():
            return digits


def group_digits(digits: str, size: int = 4, separator: str = "_") -> str:
    """Split a digit string into fixed-size groups.

    Example:
        >>> group_digits("1234567890123456")
        '1234_5678_9012_3456'
    """
    return separator.join(digits[index : index + size] for index in range(0, len(digits), size))
