"""Shared fixtures: every test gets a fresh process-wide verification cache."""

from __future__ import annotations

import pytest

from ledgerkeys import VerificationCache, set_default_cache


@pytest.fixture(autouse=True)
def fresh_default_cache():
    cache = VerificationCache(1024)
    set_default_cache(cache)
    yield cache
    set_default_cache(None)
