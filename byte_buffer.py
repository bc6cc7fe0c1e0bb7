from Crypto.Util.strxor import strxor

from oaep_errors import LengthMismatchError


def create_zeroed(size: int) -> bytearray:
    if size < 0:
        raise ValueError(f"Buffer size must not be negative, got {size}")
    return bytearray(size)


def create_uninitialized(size: int) -> bytearray:
    """
    Allocates a buffer meant to be overwritten by the caller.
    Python has no uninitialized memory, so it starts out zeroed.
    """
    return create_zeroed(size)


def concat(*parts) -> bytes:
    """Concatenates byte strings and single octets (ints) into a new buffer."""
    out = bytearray()
    for part in parts:
        if isinstance(part, int):
            out.append(part)
        else:
            out += part
    return bytes(out)


def xor_buffers(a: bytes, b: bytes) -> bytes:
    """
    Byte-wise XOR of two buffers of equal length.
    Never truncates: unequal lengths raise LengthMismatchError.
    """
    if len(a) != len(b):
        raise LengthMismatchError(f"Cannot XOR buffers of length {len(a)} and {len(b)}")
    if not a:
        return b""
    return strxor(bytes(a), bytes(b))


def wipe(buf: bytearray) -> None:
    buf[:] = bytes(len(buf))
