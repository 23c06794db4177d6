from typing import Optional, Tuple

from keypair.field import SECP256K1_G as G

# Independent affine-coordinate arithmetic, used to cross-check the curve library.

p = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
n = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

Point = Optional[Tuple[int, int]]


def point_add(p1: Point, p2: Point) -> Point:
    if (p1 is None):
        return p2
    if (p2 is None):
        return p1
    if (p1[0] == p2[0] and p1[1] != p2[1]):
        return None
    if (p1 == p2):
        lam = (3 * p1[0] * p1[0] * pow(2 * p1[1], p - 2, p)) % p
    else:
        lam = ((p2[1] - p1[1]) * pow(p2[0] - p1[0], p - 2, p)) % p
    x3 = (lam * lam - p1[0] - p2[0]) % p
    return (x3, (lam * (p1[0] - x3) - p1[1]) % p)


def point_mul(P: Point, k: int) -> Point:
    r = None
    for i in range(256):
        if ((k >> i) & 1):
            r = point_add(r, P)
        P = point_add(P, P)
    return r


def point_to_bytes(P: Point, compressed: bool = True) -> bytes:
    if P is None:
        raise ValueError("Cannot convert None to bytes")
    if compressed:
        return (b'\x03' if P[1] & 1 else b'\x02') + P[0].to_bytes(32, byteorder="big")
    return b'\x04' + P[0].to_bytes(32, byteorder="big") + P[1].to_bytes(32, byteorder="big")


# generator, as bytes
G_X = G[0].to_bytes(32, byteorder="big")
G_Y = G[1].to_bytes(32, byteorder="big")

# BIP340 test vectors 0 and 1: (secret key, x-only public key)
BIP340_VECTORS = [
    (
        bytes.fromhex("0000000000000000000000000000000000000000000000000000000000000003"),
        bytes.fromhex("F9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9"),
    ),
    (
        bytes.fromhex("B7E151628AED2A6ABF7158809CF4F3C762E7160F38B4DA56A784D9045190CFEF"),
        bytes.fromhex("DFF1D77F2A671C5F36183726DB2341BE58FEAE1DA2DECED843240F7B502BA659"),
    ),
]

# BIP340 test vector 5: public key not on the curve
NOT_ON_CURVE_X = bytes.fromhex("EEFDEA4CDB677750A420FEE807EACF21EB9898AE79B9768766E4FAA04A2D4A34")

PRIVATE_KEY_BYTES = bytes([
    115, 253, 220, 18, 252, 147, 66, 187,
    41, 174, 155, 94, 212, 118, 50, 59,
    220, 105, 58, 17, 110, 54, 81, 36,
    85, 174, 232, 48, 254, 138, 37, 162
])
