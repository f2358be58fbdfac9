"""
Ed25519 signature primitive backed by libsodium (PyNaCl bindings).

Secret keys use libsodium's expanded 64-byte layout (seed || public key).
Operations that must succeed for well-formed input raise InternalCryptoError
when libsodium reports a failure.
"""

from __future__ import annotations

import nacl.bindings
from nacl.exceptions import BadSignatureError, CryptoError

from ..errors import InternalCryptoError

PUBLIC_KEY_SIZE = nacl.bindings.crypto_sign_PUBLICKEYBYTES
SECRET_KEY_SIZE = nacl.bindings.crypto_sign_SECRETKEYBYTES
SEED_SIZE = nacl.bindings.crypto_sign_SEEDBYTES
SIGNATURE_SIZE = nacl.bindings.crypto_sign_BYTES

assert PUBLIC_KEY_SIZE == 32, "Unexpected public key length"
assert SEED_SIZE == 32, "Unexpected seed length"
assert SECRET_KEY_SIZE == 64, "Unexpected secret key length"
assert SIGNATURE_SIZE == 64, "Unexpected signature length"


def keypair() -> tuple[bytes, bytes]:
    """Fresh random (public_key, secret_key)."""
    try:
        return nacl.bindings.crypto_sign_keypair()
    except CryptoError as e:
        raise InternalCryptoError("error generating random secret key") from e


def seed_keypair(seed: bytes) -> tuple[bytes, bytes]:
    """
    Deterministic (public_key, secret_key) from a 32-byte seed.

    The caller checks the seed length.
    """
    try:
        return nacl.bindings.crypto_sign_seed_keypair(bytes(seed))
    except CryptoError as e:
        raise InternalCryptoError("error generating secret key from seed") from e


def sk_to_pk(secret_key: bytes) -> bytes:
    try:
        return nacl.bindings.crypto_sign_ed25519_sk_to_pk(bytes(secret_key))
    except CryptoError as e:
        raise InternalCryptoError(
            "error extracting public key from secret key"
        ) from e


def sk_to_seed(secret_key: bytes) -> bytes:
    try:
        return nacl.bindings.crypto_sign_ed25519_sk_to_seed(bytes(secret_key))
    except CryptoError as e:
        raise InternalCryptoError("error extracting seed from secret key") from e


def sign_detached(message: bytes, secret_key: bytes) -> bytes:
    """
    Deterministic Ed25519 signature (64 bytes) of message.

    Args:
        message: Arbitrary bytes to sign.
        secret_key: 64-byte expanded secret key.

    Returns:
        64-byte signature (R || S).
    """
    try:
        signed = nacl.bindings.crypto_sign(bytes(message), bytes(secret_key))
    except CryptoError as e:
        raise InternalCryptoError("error while signing") from e
    return signed[:SIGNATURE_SIZE]


def verify_detached(signature: bytes, message: bytes, public_key: bytes) -> bool:
    """
    Verify a detached Ed25519 signature.

    Args:
        signature: 64-byte signature.
        message: Original message bytes.
        public_key: 32-byte public key.

    Returns:
        True iff signature is valid.
    """
    try:
        nacl.bindings.crypto_sign_open(bytes(signature) + bytes(message), bytes(public_key))
    except BadSignatureError:
        return False
    return True


def random_bytes(size: int) -> bytes:
    """Cryptographically secure random bytes from libsodium."""
    return nacl.bindings.randombytes(size)


__all__: tuple[str, ...] = (
    "PUBLIC_KEY_SIZE",
    "SECRET_KEY_SIZE",
    "SEED_SIZE",
    "SIGNATURE_SIZE",
    "keypair",
    "random_bytes",
    "seed_keypair",
    "sign_detached",
    "sk_to_pk",
    "sk_to_seed",
    "verify_detached",
)
