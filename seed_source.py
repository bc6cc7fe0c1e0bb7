from Crypto.Random import get_random_bytes


def fill_with_random(buf: bytearray) -> None:
    """Fills `buf` in place with cryptographically secure random bytes."""
    buf[:] = get_random_bytes(len(buf))


def fixed_seed(value: bytes):
    """
    Returns a seed function that always produces `value`.
    Only meant for deterministic tests and known-answer vectors.
    """
    value = bytes(value)

    def fill(buf: bytearray) -> None:
        if len(buf) != len(value):
            raise ValueError(f"Seed must be {len(buf)} bytes long, got {len(value)}")
        buf[:] = value

    return fill
