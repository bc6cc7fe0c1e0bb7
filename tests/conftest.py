import hashlib

import pytest
from Crypto.PublicKey import RSA


def reference_mgf1(seed: bytes, mask_len: int, hash_func=hashlib.sha256) -> bytes:
    counter = 0
    output = b""
    while len(output) < mask_len:
        output += hash_func(seed + counter.to_bytes(4, byteorder="big")).digest()
        counter += 1
    return output[:mask_len]


def xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


@pytest.fixture(scope="session")
def rsa_key():
    return RSA.generate(1024)
