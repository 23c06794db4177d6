"""
Multikey Encoding
*****************

Encoding of BIP340 x-only public keys as base58btc multibase strings.

A multikey is the 2 byte type prefix followed by the 32 byte x-only public key.
The 34 bytes are base58 (bitcoin alphabet) encoded and prefixed with the
multibase character ``z``. base58btc has no checksum of its own, so the prefix
is checked against a known SHA-256 digest when decoding.
"""

import hashlib
import logging
from typing import NamedTuple

import base58

from .errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)

BASE58BTC_MULTIBASE_PREFIX = "z"
BASE58BTC_ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")
BIP340_MULTIKEY_PREFIX: bytes = bytes([0xe1, 0x4a])
BIP340_MULTIKEY_PREFIX_HASH = "b8f54beb0c765fcb38fd625a6194439e47a742da2c85df5abcfa071554d21d21"
MULTIKEY_LENGTH = len(BIP340_MULTIKEY_PREFIX) + 32


class Multikey(NamedTuple):
    """A decoded multikey: the type prefix and the x-only public key."""
    prefix: bytes
    public_key: bytes

    def __bytes__(self) -> bytes:
        return self.prefix + self.public_key


def sha256(s: bytes) -> bytes:
    return hashlib.sha256(s).digest()


def encode(x_only: bytes) -> str:
    """
    Encode an x-only public key as a base58btc multibase string.

    :param x_only: The 32 byte x-coordinate of the public key
    :raises EncodeError: if ``x_only`` is not 32 bytes
    """
    if len(x_only) != 32:
        raise EncodeError("Invalid argument: must be x-only public key (32 bytes)")

    multikey_bytes = BIP340_MULTIKEY_PREFIX + bytes(x_only)
    return BASE58BTC_MULTIBASE_PREFIX + base58.b58encode(multikey_bytes).decode("ascii")


def decode(multibase: str) -> Multikey:
    """
    Decode a base58btc multibase string into its prefix and x-only public key.

    :param multibase: The ``z``-prefixed multibase string
    :raises DecodeError: if the string is not base58btc multibase, is not 34 bytes long
        once decoded, or the prefix does not hash to the BIP340 multikey prefix digest
    """
    if not multibase.startswith(BASE58BTC_MULTIBASE_PREFIX):
        raise DecodeError(f"Invalid argument: multibase must start with '{BASE58BTC_MULTIBASE_PREFIX}' (base58btc)")

    # b58decode strips trailing whitespace; anything outside the alphabet is rejected here
    if any(c not in BASE58BTC_ALPHABET for c in multibase[1:]):
        raise DecodeError("Invalid argument: not a base58btc string")

    try:
        data = base58.b58decode(multibase[1:])
    except ValueError as e:
        raise DecodeError(f"Invalid argument: not a base58btc string ({e})") from e

    if len(data) != MULTIKEY_LENGTH:
        raise DecodeError(f"Invalid argument: must be {MULTIKEY_LENGTH} byte publicKeyMultibase")

    prefix, public_key = data[:2], data[2:]
    if sha256(prefix).hex() != BIP340_MULTIKEY_PREFIX_HASH:
        raise DecodeError(f"Invalid prefix: malformed multibase prefix {prefix.hex()}")

    logger.debug("decoded multikey %s", multibase)
    return Multikey(prefix, public_key)
