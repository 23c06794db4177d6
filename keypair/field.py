"""
Finite field arithmetic over the secp256k1 base field.
"""

from .errors import OutOfRangeError, FIELD_ERROR

SECP256K1_FIELD_SIZE = 2**256 - 2**32 - 977
SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECP256K1_B = 7
SECP256K1_G = (0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798, 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute base^exponent mod modulus by repeated squaring.

    The caller is responsible for passing a modulus greater than 1.
    """
    if exponent < 0:
        raise OutOfRangeError("Invalid argument: exponent must be non-negative", FIELD_ERROR)
    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def jacobi_symbol(n: int, k: int) -> int:
    """Compute the Jacobi symbol of n modulo k

    See https://en.wikipedia.org/wiki/Jacobi_symbol

    For our application k is always prime, so this is the same as the Legendre symbol."""
    assert k > 0 and k & 1, "jacobi symbol is only defined for positive odd k"
    n %= k
    t = 0
    while n != 0:
        while n & 1 == 0:
            n >>= 1
            r = k & 7
            t ^= (r == 3 or r == 5)
        n, k = k, n
        t ^= (n & k & 3 == 3)
        n = n % k
    if k == 1:
        return -1 if t else 1
    return 0


def sqrt_mod(a: int, p: int) -> int:
    """Compute a square root of a modulo p when p % 4 = 3.

    The Tonelli-Shanks algorithm can be used. See https://en.wikipedia.org/wiki/Tonelli-Shanks_algorithm

    Limiting this function to only work for p % 4 = 3 means we don't need to
    iterate through the loop. The highest n such that p - 1 = 2^n Q with Q odd
    is n = 1. Therefore Q = (p-1)/2 and sqrt = a^((Q+1)/2) = a^((p+1)/4)

    secp256k1's is defined over field of size 2**256 - 2**32 - 977, which is 3 mod 4.

    The result is only a square root if a is a quadratic residue modulo p.
    This is not checked here: callers that can receive a non-residue must
    check the result (or the Jacobi symbol of a) themselves.
    """
    if p % 4 != 3:
        raise NotImplementedError("sqrt_mod only implemented for p % 4 = 3")
    return mod_pow(a, (p + 1) // 4, p)
