from .curve import lift_x
from .errors import (
    ConstructorError,
    DecodeError,
    DerivationError,
    EncodeError,
    KeyPairError,
    OutOfRangeError,
    UnavailableError,
)
from .field import SECP256K1_FIELD_SIZE, SECP256K1_ORDER, mod_pow, sqrt_mod
from .key_pair import KeyPair
from .multikey import BIP340_MULTIKEY_PREFIX, BIP340_MULTIKEY_PREFIX_HASH, Multikey
from .private_key import PrivateKey
from .public_key import PublicKey

__version__ = "0.1.0"
