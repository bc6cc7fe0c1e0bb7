from Crypto.Hash import SHA1, SHA224, SHA256, SHA384, SHA512

# === Hash registry ===
HASH_ALGORITHMS = {
    "sha1": SHA1,
    "sha224": SHA224,
    "sha256": SHA256,
    "sha384": SHA384,
    "sha512": SHA512,
}

DEFAULT_HASH = SHA256


def get_hash(name: str):
    key = name.lower().replace("-", "")
    try:
        return HASH_ALGORITHMS[key]
    except KeyError:
        known = ", ".join(sorted(HASH_ALGORITHMS))
        raise KeyError(f"Unknown hash algorithm {name!r} (known: {known})") from None


# === Hash capability ===
# Accepts pycryptodome hash modules (Crypto.Hash.SHA256) as well as
# hashlib constructors (hashlib.sha256).

def new_hash(hash_algo):
    """Returns a fresh hash object; instances are never shared between calls."""
    if hasattr(hash_algo, "new"):
        return hash_algo.new()
    return hash_algo()


def digest_size(hash_algo) -> int:
    size = getattr(hash_algo, "digest_size", None)
    if isinstance(size, int):
        return size
    return new_hash(hash_algo).digest_size


def hash_bytes(hash_algo, data: bytes) -> bytes:
    h = new_hash(hash_algo)
    h.update(data)
    return h.digest()
