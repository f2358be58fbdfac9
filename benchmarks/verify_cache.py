"""
Benchmark signature verification: raw libsodium verify vs the verification
cache on a cold and a warm cache.

Run from repo root:

  PYTHONPATH=src python benchmarks/verify_cache.py

Or after pip install -e .:

  python benchmarks/verify_cache.py
"""

from __future__ import annotations

import os
import sys
import time

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from ledgerkeys import SecretKey, VerificationCache
from ledgerkeys.curves import verify_detached

N = 2000
MSG = b"bench message for ed25519"


def _time_it(fn, *args, n: int = N) -> float:
    start = time.perf_counter()
    for _ in range(n):
        fn(*args)
    return (time.perf_counter() - start) / n


def main() -> None:
    with SecretKey.random() as sk:
        pk = sk.get_public_key()
        sig = sk.sign(MSG)

    raw = _time_it(verify_detached, sig, MSG, pk.value)

    cold_cache = VerificationCache(N)
    msgs = [MSG + b"%d" % i for i in range(N)]
    start = time.perf_counter()
    for m in msgs:
        cold_cache.verify(pk, sig, m)
    cold = (time.perf_counter() - start) / N

    warm_cache = VerificationCache()
    warm_cache.verify(pk, sig, MSG)
    warm = _time_it(warm_cache.verify, pk, sig, MSG)
    hits, misses = warm_cache.flush_counts()

    print(f"raw verify      : {raw * 1e6:8.1f} us/call")
    print(f"cache miss path : {cold * 1e6:8.1f} us/call")
    print(f"cache hit path  : {warm * 1e6:8.1f} us/call  (hits={hits}, misses={misses})")


if __name__ == "__main__":
    main()
