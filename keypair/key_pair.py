import logging
from typing import Optional, Union

from .errors import ConstructorError, UnavailableError, KEYPAIR_CONSTRUCTOR_ERROR
from .private_key import PrivateKey
from .public_key import PublicKey

logger = logging.getLogger(__name__)


class KeyPair:
    """
    A :class:`~keypair.public_key.PublicKey` together with its (optional)
    :class:`~keypair.private_key.PrivateKey`.
    """

    def __init__(self,
                 private_key: Optional[Union[PrivateKey, bytes]] = None,
                 public_key: Optional[Union[PublicKey, bytes]] = None) -> None:
        """
        At least one of the keys is required. If only the private key is given, the
        public key is computed from it. If both are given, they must match.

        :param private_key: A PrivateKey, or its 32 raw bytes
        :param public_key: A PublicKey, or its 32 (x-only) or 33 (compressed) bytes
        """
        if private_key is None and public_key is None:
            raise ConstructorError("Argument missing: must at least provide a publicKey", KEYPAIR_CONSTRUCTOR_ERROR)

        if private_key is not None and not isinstance(private_key, PrivateKey):
            private_key = PrivateKey(private_key)
        if public_key is not None and not isinstance(public_key, PublicKey):
            public_key = PublicKey(public_key)

        if private_key is not None:
            computed = private_key.compute_public_key()
            if public_key is None:
                public_key = computed
            elif public_key.x != computed.x:
                raise ConstructorError("Invalid argument: publicKey does not match privateKey", KEYPAIR_CONSTRUCTOR_ERROR)

        self._private_key: Optional[PrivateKey] = private_key
        self._public_key: PublicKey = public_key

    @classmethod
    def from_private_key(cls, private_key: Union[PrivateKey, bytes]) -> 'KeyPair':
        """Creates a new KeyPair from a PrivateKey object or private key bytes."""
        return cls(private_key=private_key)

    @classmethod
    def from_secret(cls, secret: int) -> 'KeyPair':
        """Creates a new KeyPair from an integer secret."""
        return cls(private_key=PrivateKey.from_secret(secret))

    @classmethod
    def generate(cls) -> 'KeyPair':
        """Generates a new random KeyPair."""
        key_pair = cls(private_key=PrivateKey.generate())
        logger.debug("generated key pair for %s", key_pair.public_key.hex())
        return key_pair

    @property
    def public_key(self) -> PublicKey:
        return self._public_key

    @property
    def private_key(self) -> PrivateKey:
        """
        :raises UnavailableError: if this is a public-key-only pair
        """
        if self._private_key is None:
            raise UnavailableError("Private key not available")
        return self._private_key

    def has_private_key(self) -> bool:
        return self._private_key is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return self._public_key == other._public_key and self._private_key == other._private_key

    def __hash__(self) -> int:
        return hash(self._public_key)

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self._public_key.hex()}, private_key={'<redacted>' if self.has_private_key() else None})"
