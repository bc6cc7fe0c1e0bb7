import hashlib

import pytest
from Crypto.Hash import SHA1, SHA256, SHA512

from hashes import DEFAULT_HASH, HASH_ALGORITHMS, digest_size, get_hash, hash_bytes, new_hash


def test_default_is_sha256():
    assert DEFAULT_HASH is SHA256


@pytest.mark.parametrize("name,expected", [("sha1", SHA1), ("SHA-256", SHA256), ("sha512", SHA512)])
def test_get_hash(name, expected):
    assert get_hash(name) is expected


def test_get_hash_unknown():
    with pytest.raises(KeyError, match="md5"):
        get_hash("md5")


@pytest.mark.parametrize("name,size", [("sha1", 20), ("sha224", 28), ("sha256", 32), ("sha384", 48), ("sha512", 64)])
def test_digest_size(name, size):
    assert digest_size(HASH_ALGORITHMS[name]) == size


def test_hashlib_constructors_accepted():
    assert digest_size(hashlib.sha256) == 32
    assert hash_bytes(hashlib.sha256, b"abc") == hashlib.sha256(b"abc").digest()
    assert hash_bytes(SHA256, b"abc") == hashlib.sha256(b"abc").digest()


def test_new_hash_returns_fresh_instances():
    first = new_hash(SHA256)
    first.update(b"contaminated")
    assert new_hash(SHA256).digest() == hashlib.sha256(b"").digest()
