"""Elliptic-curve crypto: Ed25519 via libsodium."""

from .ed25519 import (PUBLIC_KEY_SIZE, SECRET_KEY_SIZE, SEED_SIZE,
                      SIGNATURE_SIZE, keypair, random_bytes, seed_keypair,
                      sign_detached, sk_to_pk, sk_to_seed, verify_detached)

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
