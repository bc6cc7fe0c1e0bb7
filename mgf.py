from hashes import DEFAULT_HASH, digest_size, hash_bytes
from oaep_errors import MaskTooLongError


# === MGF1 ===
def mgf1(seed: bytes, mask_length: int, hash_algo=DEFAULT_HASH) -> bytes:
    """
    Mask Generation Function based on a hash function (MGF1, RFC 8017 B.2.1).
    """
    if mask_length < 0:
        raise ValueError(f"Mask length must not be negative, got {mask_length}")
    h_len = digest_size(hash_algo)
    if mask_length > (2 ** 32) * h_len:
        raise MaskTooLongError("mask too long")

    seed = bytes(seed)
    output = bytearray()
    counter = 0
    while len(output) < mask_length:
        # 4-byte big-endian counter appended to the seed
        output += hash_bytes(hash_algo, seed + counter.to_bytes(4, byteorder="big"))
        counter += 1
    return bytes(output[:mask_length])
