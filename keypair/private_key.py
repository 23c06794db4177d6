import logging
from typing import Optional

from . import curve
from .errors import ConstructorError, DerivationError, OutOfRangeError, PRIVATE_KEY_CONSTRUCTOR_ERROR, SET_PRIVATE_KEY_ERROR
from .field import SECP256K1_ORDER
from .public_key import PublicKey
from .utils import bytes_to_int, int_to_bytes, random_bytes, to_bytes

logger = logging.getLogger(__name__)


def secret_to_bytes(secret: int) -> bytes:
    """
    Convert an integer secret to 32 private key bytes.

    The result is checked again with the curve library's own private key predicate.
    """
    if secret < 0 or secret.bit_length() > 256:
        raise OutOfRangeError("Invalid private key: secret out of valid range", SET_PRIVATE_KEY_ERROR)
    data = int_to_bytes(secret)
    if not curve.is_private(data):
        raise OutOfRangeError("Invalid private key: secret out of valid range", SET_PRIVATE_KEY_ERROR)
    return data


def random_private_key_bytes() -> bytes:
    """Generate valid random 32 private key bytes from the system CSPRNG."""
    while True:
        data = random_bytes(32)
        # all but ~2^-128 of the draws are valid
        if curve.is_private(data):
            return data


class PrivateKey:
    """
    A secp256k1 private key: a 32 byte big-endian scalar d with 1 <= d < n.

    Build it from raw bytes with ``PrivateKey(data)`` / :meth:`from_bytes`, or
    from an integer with :meth:`from_secret`. Both resolve to the same canonical
    32 bytes; the integer form is computed once, on first use.
    """

    def __init__(self, data: bytes) -> None:
        """
        :param data: The 32 private key bytes
        :raises ConstructorError: if ``data`` is not 32 bytes
        :raises OutOfRangeError: if the scalar is 0 or not less than the group order
        """
        data = to_bytes(data, PRIVATE_KEY_CONSTRUCTOR_ERROR)
        if len(data) != 32:
            raise ConstructorError("Invalid argument: must provide a 32-byte private key", PRIVATE_KEY_CONSTRUCTOR_ERROR)
        if not 1 <= bytes_to_int(data) < SECP256K1_ORDER:
            raise OutOfRangeError("Invalid argument: private key out of valid range", PRIVATE_KEY_CONSTRUCTOR_ERROR)
        self._bytes: bytes = data
        self._secret: Optional[int] = None

    @classmethod
    def from_bytes(cls, data: bytes) -> 'PrivateKey':
        return cls(data)

    @classmethod
    def from_secret(cls, secret: int) -> 'PrivateKey':
        """
        Create a :class:`~PrivateKey` from an integer secret.

        :raises ConstructorError: if ``secret`` is not an integer
        :raises OutOfRangeError: if ``secret`` is not in [1, n-1]
        """
        if isinstance(secret, bool) or not isinstance(secret, int):
            raise ConstructorError("Invalid argument: secret must be an integer", PRIVATE_KEY_CONSTRUCTOR_ERROR)
        if secret < 1 or secret >= SECP256K1_ORDER:
            raise OutOfRangeError("Invalid argument: secret out of valid range", PRIVATE_KEY_CONSTRUCTOR_ERROR)
        key = cls(secret_to_bytes(secret))
        key._secret = secret
        return key

    @classmethod
    def generate(cls) -> 'PrivateKey':
        """Generate a new random private key."""
        return cls(random_private_key_bytes())

    @property
    def secret(self) -> int:
        """The private key as an integer."""
        if self._secret is None:
            self._secret = bytes_to_int(self._bytes)
        return self._secret

    @property
    def point(self) -> int:
        """The x-coordinate of the corresponding public key, as an integer."""
        return bytes_to_int(self.compute_public_key().x)

    def compute_public_key(self) -> PublicKey:
        """
        Compute the public key d*G with the curve library.

        :raises DerivationError: if the curve library returns nothing, or something that is not a compressed point
        """
        data = curve.point_from_scalar(self._bytes, True)
        if data is None:
            raise DerivationError("Invalid compute: failed to derive public key")
        if len(data) != 33 or not curve.is_point_compressed(data):
            raise DerivationError("Invalid compute: public key not compressed format")
        logger.debug("computed public key %s", data.hex())
        return PublicKey(data)

    def hex(self) -> str:
        return self._bytes.hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return NotImplemented
        return self.hex() == other.hex()

    def __hash__(self) -> int:
        return hash(self.hex())

    def __repr__(self) -> str:
        return "PrivateKey(<redacted>)"

    def __reduce__(self):
        raise TypeError("PrivateKey objects can not be pickled")

    # defined last: the name shadows the builtin inside the class body
    @property
    def bytes(self) -> bytes:
        """The 32 private key bytes."""
        return self._bytes
