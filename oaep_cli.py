#!/usr/bin/env python3
import sys

from Crypto.PublicKey import RSA
from Crypto.Random import get_random_bytes

from hashes import HASH_ALGORITHMS
from oaep import encode, eme_encode, max_message_length
from oaep_errors import OAEPError

# Menu entries: option -> (registry name, label)
HASH_MENU = {
    "1": ("sha256", "SHA-256 (default)"),
    "2": ("sha1", "SHA-1"),
    "3": ("sha512", "SHA-512"),
}


def read_modulus_length(pub_path: str) -> int:
    """Byte length of the modulus of the RSA public key stored in `pub_path`."""
    with open(pub_path, 'rb') as f:
        pub = RSA.import_key(f.read())
    return pub.size_in_bytes()


def choose_hash(opt: str):
    name, _ = HASH_MENU.get(opt.strip(), HASH_MENU["1"])
    return name, HASH_ALGORITHMS[name]


# === Interactive CLI ===
def main() -> int:
    print("OAEP: encode a message block")

    # Variant selection
    choice = input("1: RSAES-OAEP (RFC 3447)\n2: OAEP (RFC 2437)\n>>> ").strip()
    if choice not in ("1", "2"):
        print("Invalid option.")
        return 1
    rsaes = choice == "1"

    # Target length
    source = input("\nTarget length: number of bytes, or path to a public key PEM\n>>> ").strip()
    if source.isdigit():
        length = int(source)
    else:
        try:
            length = read_modulus_length(source)
        except (OSError, ValueError) as e:
            print(f"Cannot read public key: {e}")
            return 1
        if not rsaes:
            # legacy emLen is one byte shorter than the modulus
            length -= 1
    print(f"Encoded block length: {length} bytes")

    # Hash function selection
    print("\nSelect hash function for OAEP:")
    print("\n".join(f" {opt}. {label}" for opt, (_, label) in HASH_MENU.items()))
    hname, hfunc = choose_hash(input(">>> "))
    print(f"Using hash: {hname}")
    print(f"Maximum message size: {max(max_message_length(length, hfunc, rsaes), 0)} bytes")

    # Message selection
    msg_choice = input("\nGenerate random 128-bit AES key as the message? (y/N): ").strip().lower()
    if msg_choice == "y":
        message = get_random_bytes(16)
    else:
        message = input("Enter message text:\n>>> ").encode()
    label = input("Label / parameters (empty for none):\n>>> ").encode()
    print(f"\nMessage (hex): {message.hex()}")

    try:
        if rsaes:
            em = eme_encode(message, length, label, hash_algo=hfunc)
        else:
            em = encode(message, length, label, hash_algo=hfunc)
    except OAEPError as e:
        print(f"OAEP encoding error: {e}")
        return 1

    print(f"[OAEP] Encoded block (hex): {em.hex()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
