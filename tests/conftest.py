import pytest

import sys
import os

root_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '../')
sys.path.append(root_path)

from keypair import PrivateKey, PublicKey  # noqa: E402
from test_utils import PRIVATE_KEY_BYTES  # noqa: E402


@pytest.fixture
def private_key_bytes() -> bytes:
    return PRIVATE_KEY_BYTES


@pytest.fixture
def private_key(private_key_bytes: bytes) -> PrivateKey:
    return PrivateKey(private_key_bytes)


@pytest.fixture
def public_key(private_key: PrivateKey) -> PublicKey:
    return private_key.compute_public_key()
