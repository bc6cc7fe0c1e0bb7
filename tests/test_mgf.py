import hashlib

import pytest
from Crypto.Hash import SHA1, SHA256
from Crypto.Signature.pss import MGF1

from conftest import reference_mgf1
from mgf import mgf1
from oaep_errors import MaskTooLongError


@pytest.mark.parametrize("mask_len", [0, 1, 20, 32, 33, 96, 200])
def test_matches_pycryptodome(mask_len):
    seed = bytes(range(32))
    assert mgf1(seed, mask_len, SHA256) == MGF1(seed, mask_len, SHA256)
    assert mgf1(seed, mask_len, SHA1) == MGF1(seed, mask_len, SHA1)


def test_hashlib_and_pycryptodome_agree():
    seed = b"seed"
    assert mgf1(seed, 77, hashlib.sha256) == mgf1(seed, 77, SHA256) == reference_mgf1(seed, 77)


def test_exact_length():
    assert len(mgf1(b"x", 100)) == 100


def test_deterministic():
    assert mgf1(b"abc", 64) == mgf1(b"abc", 64)
    assert mgf1(b"abc", 64) != mgf1(b"abd", 64)


def test_mask_too_long():
    with pytest.raises(MaskTooLongError):
        mgf1(b"seed", 2 ** 32 * 32 + 1, SHA256)


def test_negative_length():
    with pytest.raises(ValueError):
        mgf1(b"seed", -1)
