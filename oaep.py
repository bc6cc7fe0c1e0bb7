"""
OAEP encoding (encode side only).

Two variants are provided:

* ``encode``: OAEP as in RFC 2437, section 9.1.1.1, EM = maskedSeed || maskedDB
* ``eme_encode``: RSAES-OAEP as in RFC 3447, section 7.1.1,
  EM = 0x00 || maskedSeed || maskedDB

Both are pure functions of their inputs and the seed. The hash, the mask
generation function and the seed source are passed in; the defaults are
SHA-256, MGF1 and a secure random source.

The length of the parameter string / label is not checked against the input
limit of the hash function (2^61 - 1 octets for SHA-1). Callers must not rely
on that check being done here.
"""
from byte_buffer import concat, create_uninitialized, create_zeroed, wipe, xor_buffers
from hashes import DEFAULT_HASH, digest_size, hash_bytes
from mgf import mgf1
from oaep_errors import LengthMismatchError, MessageTooLongError
from seed_source import fill_with_random


def max_message_length(length: int, hash_algo=DEFAULT_HASH, rsaes: bool = False) -> int:
    """Largest message that fits; negative when `length` is too small for any message."""
    h_len = digest_size(hash_algo)
    if rsaes:
        return length - 2 * h_len - 2
    return length - 2 * h_len - 1


def _mask(db: bytes, h_len: int, hash_algo, mgf, seed_function):
    seed = create_uninitialized(h_len)
    seed_function(seed)
    try:
        db_mask = mgf(bytes(seed), len(db), hash_algo)
        masked_db = xor_buffers(db, db_mask)
        seed_mask = mgf(masked_db, h_len, hash_algo)
        masked_seed = xor_buffers(seed, seed_mask)
    finally:
        wipe(seed)
    return masked_seed, masked_db


# === OAEP (RFC 2437) ===
def encode(message: bytes, length: int, parameters: bytes = b"", hash_algo=DEFAULT_HASH,
           mgf=mgf1, seed_function=fill_with_random) -> bytes:
    """
    Encodes `message` into an OAEP block of exactly `length` (emLen) bytes.

    Raises MessageTooLongError if len(message) > emLen - 2hLen - 1.
    """
    h_len = digest_size(hash_algo)
    max_size = max_message_length(length, hash_algo)
    if len(message) > max_size:
        raise MessageTooLongError(len(message), max_size)

    # PS may be empty
    ps = create_zeroed(length - len(message) - 2 * h_len - 1)
    p_hash = hash_bytes(hash_algo, parameters)

    # DB = pHash || PS || 0x01 || M
    db = concat(p_hash, ps, 0x01, message)
    if len(db) != length - h_len:
        raise LengthMismatchError(f"Data block is {len(db)} bytes, expected {length - h_len}")

    masked_seed, masked_db = _mask(db, h_len, hash_algo, mgf, seed_function)

    em = concat(masked_seed, masked_db)
    if len(em) != length:
        raise LengthMismatchError(f"Encoded message is {len(em)} bytes, expected {length}")
    return em


# === RSAES-OAEP (RFC 3447) ===
def eme_encode(message: bytes, k: int, label: bytes = b"", hash_algo=DEFAULT_HASH,
               mgf=mgf1, seed_function=fill_with_random) -> bytes:
    """
    Encodes `message` into an EME-OAEP block of exactly `k` bytes, where `k`
    is the byte length of the RSA modulus. The first byte is always 0x00 so the
    block, read as an integer, is smaller than the modulus.

    Raises MessageTooLongError if len(message) > k - 2hLen - 2.
    """
    h_len = digest_size(hash_algo)
    max_size = max_message_length(k, hash_algo, rsaes=True)
    if len(message) > max_size:
        raise MessageTooLongError(len(message), max_size)

    l_hash = hash_bytes(hash_algo, label)
    ps = create_zeroed(k - len(message) - 2 * h_len - 2)

    # DB = lHash || PS || 0x01 || M
    db = concat(l_hash, ps, 0x01, message)
    if len(db) != k - h_len - 1:
        raise LengthMismatchError(f"Data block is {len(db)} bytes, expected {k - h_len - 1}")

    masked_seed, masked_db = _mask(db, h_len, hash_algo, mgf, seed_function)

    em = concat(0x00, masked_seed, masked_db)
    if len(em) != k:
        raise LengthMismatchError(f"Encoded message is {len(em)} bytes, expected {k}")
    return em
