"""
Curve Operations
****************

Point recovery from x-only keys, plus the thin layer over ``coincurve`` (the
libsecp256k1 bindings) that performs every group-law computation the key
classes need. Nothing in this package reimplements scalar multiplication.
"""

import logging
from typing import Optional

from coincurve import PublicKey as _PK
from coincurve.utils import validate_secret

from .errors import ConstructorError, OutOfRangeError, LIFT_X_ERROR
from .field import SECP256K1_B, SECP256K1_FIELD_SIZE, jacobi_symbol, mod_pow, sqrt_mod
from .utils import bytes_to_int, int_to_bytes

logger = logging.getLogger(__name__)

COMPRESSED_EVEN = 0x02
COMPRESSED_ODD = 0x03
UNCOMPRESSED = 0x04


def is_x_coord(x: int) -> bool:
    """Test whether x is a valid X coordinate on the curve."""
    if x <= 0 or x >= SECP256K1_FIELD_SIZE:
        return False
    x_3 = mod_pow(x, 3, SECP256K1_FIELD_SIZE)
    return jacobi_symbol(x_3 + SECP256K1_B, SECP256K1_FIELD_SIZE) != -1


def lift_x(x_bytes: bytes, parity: Optional[int] = None) -> bytes:
    """
    Lift a 32-byte x-coordinate into the 65-byte uncompressed point ``0x04 || x || y``.

    Without ``parity`` no root is selected: ``y`` is whichever square root
    :func:`~keypair.field.sqrt_mod` produces, which is not necessarily the even
    one. With ``parity`` set to ``0x02`` (even) or ``0x03`` (odd), the root with
    the matching evenness is returned.

    :param x_bytes: The 32 byte big-endian x-coordinate
    :param parity: Optional compressed-key header byte selecting the y root
    :raises ConstructorError: if ``x_bytes`` is not 32 bytes or ``parity`` is not a header byte
    :raises OutOfRangeError: if x is not in [1, p-1] or is not the x-coordinate of a curve point
    """
    if len(x_bytes) != 32:
        raise ConstructorError("Invalid argument: x-coordinate length must be 32 bytes", LIFT_X_ERROR)
    if parity is not None and parity not in (COMPRESSED_EVEN, COMPRESSED_ODD):
        raise ConstructorError(f"Invalid argument: parity must be 0x02 or 0x03, not {parity:#04x}", LIFT_X_ERROR)

    x = bytes_to_int(x_bytes)
    if x <= 0 or x >= SECP256K1_FIELD_SIZE:
        raise OutOfRangeError("Invalid conversion: x out of range", LIFT_X_ERROR)

    # y^2 = x^3 + 7 (mod p)
    y_squared = (mod_pow(x, 3, SECP256K1_FIELD_SIZE) + SECP256K1_B) % SECP256K1_FIELD_SIZE
    y = sqrt_mod(y_squared, SECP256K1_FIELD_SIZE)
    if mod_pow(y, 2, SECP256K1_FIELD_SIZE) != y_squared:
        raise OutOfRangeError("Invalid point: x is not the x-coordinate of a point on the curve", LIFT_X_ERROR)

    if parity is not None and (y & 1) != (parity & 1):
        y = SECP256K1_FIELD_SIZE - y

    return bytes([UNCOMPRESSED]) + bytes(x_bytes) + int_to_bytes(y)


def has_even_y(point: bytes) -> bool:
    """Whether a 65-byte uncompressed point has an even Y coordinate."""
    if len(point) != 65 or point[0] != UNCOMPRESSED:
        raise ConstructorError("Invalid argument: expected a 65 byte uncompressed point", LIFT_X_ERROR)
    return point[64] & 1 == 0


def is_private(scalar: bytes) -> bool:
    """Whether ``scalar`` is a valid 32-byte secp256k1 private key (1 <= d < n)."""
    if len(scalar) != 32:
        return False
    try:
        validate_secret(scalar)
    except ValueError:
        return False
    return True


def is_point(point: bytes) -> bool:
    """Whether ``point`` is a valid compressed or uncompressed serialization of a curve point."""
    if len(point) not in (33, 65):
        return False
    try:
        _PK(point)
    except ValueError:
        return False
    return True


def is_point_compressed(point: bytes) -> bool:
    return len(point) == 33 and is_point(point)


def point_from_scalar(scalar: bytes, compressed: bool = True) -> Optional[bytes]:
    """
    Multiply the generator by ``scalar``.

    :return: The serialized point, or ``None`` if the curve library rejects the scalar
    """
    try:
        pk = _PK.from_secret(scalar)
    except ValueError as e:
        logger.debug("point_from_scalar rejected by curve library: %s", e)
        return None
    return pk.format(compressed=compressed)
