import secrets
from typing import Union

from typing_extensions import TypeGuard

from .errors import ConstructorError

BytesLike = Union[bytes, bytearray, memoryview]


def is_bytes_like(data: object) -> TypeGuard[BytesLike]:
    """Returns `True` if `data` is a bytes-like object that can be copied into `bytes`."""
    return isinstance(data, (bytes, bytearray, memoryview))


def to_bytes(data: object, code: str) -> bytes:
    """
    Returns an immutable copy of `data`, so that later changes to a caller's
    bytearray can not reach the key objects.

    Raises ConstructorError (with the given error code) if `data` is not bytes-like.
    """
    if not is_bytes_like(data):
        raise ConstructorError(f"Invalid argument: expected bytes, got {type(data).__name__}", code)
    return bytes(data)


def int_to_bytes(n: int, length: int = 32) -> bytes:
    """Big-endian, fixed length encoding of a non-negative integer."""
    return n.to_bytes(length, byteorder="big")


def bytes_to_int(b: bytes) -> int:
    return int.from_bytes(b, byteorder="big")


def random_bytes(n: int = 32) -> bytes:
    """Returns `n` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(n)
