#!/usr/bin/env python3
"""Example: generate a key, sign, verify through the cache, print the StrKeys."""

from ledgerkeys import (SecretKey, flush_verify_sig_cache_counts,
                        verify_signature)

with SecretKey.random() as sk:
    pk = sk.get_public_key()
    seed = sk.get_strkey_seed()
    signature = sk.sign(b"hello")

print("Public key:", pk.to_strkey())
print("Seed:", seed[:4] + "...")
print("Verify:", verify_signature(pk, signature, b"hello"))
print("Verify again:", verify_signature(pk, signature, b"hello"))
print("Tampered:", verify_signature(pk, signature, b"hello!"))
print("Cache (hits, misses):", flush_verify_sig_cache_counts())
