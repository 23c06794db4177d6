"""
Errors and Error Codes
**********************

Exceptions raised by the key classes and the multikey codec.
Every error carries a message and a string code naming the operation that failed.
"""

# Error codes
PRIVATE_KEY_CONSTRUCTOR_ERROR = "PRIVATE_KEY_CONSTRUCTOR_ERROR"
SET_PRIVATE_KEY_ERROR = "SET_PRIVATE_KEY_ERROR"
COMPUTE_PUBLIC_KEY_ERROR = "COMPUTE_PUBLIC_KEY_ERROR"
PUBLIC_KEY_CONSTRUCTOR_ERROR = "PUBLIC_KEY_CONSTRUCTOR_ERROR"
LIFT_X_ERROR = "LIFT_X_ERROR"
FIELD_ERROR = "FIELD_ERROR"
ENCODE_PUBLIC_KEY_ERROR = "ENCODE_PUBLIC_KEY_ERROR"
DECODE_PUBLIC_KEY_ERROR = "DECODE_PUBLIC_KEY_ERROR"
KEYPAIR_CONSTRUCTOR_ERROR = "KEYPAIR_CONSTRUCTOR_ERROR"
PRIVATE_KEY_ERROR = "PRIVATE_KEY_ERROR"
RANDOM_PUBLIC_KEY_ERROR = "RANDOM_PUBLIC_KEY_FAILED"


class KeyPairError(Exception):
    """
    Generic error type that all errors raised by this package inherit from.
    """
    def __init__(self, msg: str, code: str) -> None:
        """
        :param msg: The error message
        :param code: The error code
        """
        Exception.__init__(self)
        self.code = code
        self.msg = msg

    def get_code(self) -> str:
        """
        Get the error code for this Error
        """
        return self.code

    def get_msg(self) -> str:
        """
        Get the error message for this Error
        """
        return self.msg

    def __str__(self) -> str:
        return self.msg


class ConstructorError(KeyPairError):
    """
    Malformed or missing input: wrong byte length, wrong header byte, no key at all.
    """
    def __init__(self, msg: str, code: str = PRIVATE_KEY_CONSTRUCTOR_ERROR) -> None:
        KeyPairError.__init__(self, msg, code)


class OutOfRangeError(KeyPairError):
    """
    A value is outside of its valid field or group order range.
    """
    def __init__(self, msg: str, code: str = FIELD_ERROR) -> None:
        KeyPairError.__init__(self, msg, code)


class DerivationError(KeyPairError):
    """
    The curve library did not produce a usable point.
    """
    def __init__(self, msg: str, code: str = COMPUTE_PUBLIC_KEY_ERROR) -> None:
        KeyPairError.__init__(self, msg, code)


class EncodeError(KeyPairError):
    def __init__(self, msg: str, code: str = ENCODE_PUBLIC_KEY_ERROR) -> None:
        KeyPairError.__init__(self, msg, code)


class DecodeError(KeyPairError):
    def __init__(self, msg: str, code: str = DECODE_PUBLIC_KEY_ERROR) -> None:
        KeyPairError.__init__(self, msg, code)


class UnavailableError(KeyPairError):
    """
    The private key of a public-key-only :class:`~keypair.key_pair.KeyPair` was requested.
    """
    def __init__(self, msg: str, code: str = PRIVATE_KEY_ERROR) -> None:
        KeyPairError.__init__(self, msg, code)
