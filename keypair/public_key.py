import logging
from typing import TYPE_CHECKING, Union

from . import curve, multikey
from .errors import ConstructorError, DerivationError, OutOfRangeError, PUBLIC_KEY_CONSTRUCTOR_ERROR, RANDOM_PUBLIC_KEY_ERROR
from .utils import bytes_to_int, to_bytes

if TYPE_CHECKING:
    from .private_key import PrivateKey

logger = logging.getLogger(__name__)


class PublicKey:
    """
    A secp256k1 public key.

    Stored as the 33 byte compressed encoding ``[parity, x]``. A 32 byte x-only
    key is given the even parity byte ``0x02``; the parity byte of a 33 byte key
    is kept as is.
    """

    def __init__(self, data: bytes) -> None:
        """
        :param data: 32 byte x-only or 33 byte compressed public key
        :raises ConstructorError: if the length is not 32 or 33, or the header byte is not 0x02/0x03
        :raises OutOfRangeError: if x is not the x-coordinate of a point on the curve
        """
        data = to_bytes(data, PUBLIC_KEY_CONSTRUCTOR_ERROR)
        if len(data) not in (32, 33):
            raise ConstructorError(
                "Invalid argument: byte length must be 32 (x-only) or 33 (compressed)",
                PUBLIC_KEY_CONSTRUCTOR_ERROR)
        if len(data) == 32:
            data = bytes([curve.COMPRESSED_EVEN]) + data
        elif data[0] not in (curve.COMPRESSED_EVEN, curve.COMPRESSED_ODD):
            raise ConstructorError(
                f"Invalid argument: compressed public key must start with 0x02 or 0x03, not {data[0]:#04x}",
                PUBLIC_KEY_CONSTRUCTOR_ERROR)

        if not curve.is_x_coord(bytes_to_int(data[1:])):
            raise OutOfRangeError("Invalid argument: x is not the x-coordinate of a point on the curve",
                                  PUBLIC_KEY_CONSTRUCTOR_ERROR)

        self._bytes: bytes = data

    @classmethod
    def from_private_key(cls, private_key: Union['PrivateKey', bytes]) -> 'PublicKey':
        """
        Computes the deterministic public key for a given private key.

        :param private_key: A :class:`~keypair.private_key.PrivateKey` or its 32 raw bytes
        """
        from .private_key import PrivateKey

        if not isinstance(private_key, PrivateKey):
            private_key = PrivateKey(private_key)
        return private_key.compute_public_key()

    @classmethod
    def from_multibase(cls, multibase: str) -> 'PublicKey':
        """
        Create a :class:`~PublicKey` from a base58btc multikey string.

        The multikey only carries the x-coordinate, so the result has even parity.
        """
        logger.debug("public key from multibase %s", multibase)
        return cls(multikey.decode(multibase).public_key)

    @classmethod
    def generate(cls) -> 'PublicKey':
        """
        Generate a random public key. The private key is thrown away, so this is
        only useful for tests and placeholders.
        """
        from .private_key import random_private_key_bytes

        data = curve.point_from_scalar(random_private_key_bytes(), True)
        if data is None:
            raise DerivationError("Missing public key: failed to generate public key", RANDOM_PUBLIC_KEY_ERROR)
        return cls(data)

    @property
    def compressed(self) -> bytes:
        return self._bytes

    @property
    def parity(self) -> int:
        """The header byte: 0x02 for even y, 0x03 for odd y."""
        return self._bytes[0]

    @property
    def x(self) -> bytes:
        """The 32 byte x-only public key."""
        return self._bytes[1:33]

    @property
    def uncompressed(self) -> bytes:
        """The 65 byte uncompressed public key ``0x04 || x || y``, computed on every access."""
        return curve.lift_x(self.x, self.parity)

    @property
    def y(self) -> bytes:
        return self.uncompressed[33:65]

    @property
    def multibase(self) -> str:
        return self.encode()

    @property
    def prefix(self) -> bytes:
        """The 2 byte multikey prefix."""
        return self.decode().prefix

    def encode(self) -> str:
        """Encode the x-only public key as a base58btc multibase string."""
        return multikey.encode(self.x)

    def decode(self) -> multikey.Multikey:
        """Decode this key's own multibase string back into its prefix and x-only key."""
        return multikey.decode(self.multibase)

    def hex(self) -> str:
        return self._bytes.hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.hex() == other.hex()

    def __hash__(self) -> int:
        return hash(self.hex())

    def __repr__(self) -> str:
        return f"PublicKey({self.hex()})"

    # defined last: the name shadows the builtin inside the class body
    @property
    def bytes(self) -> bytes:
        """The 33 byte compressed public key ``[parity, x]``."""
        return self._bytes
