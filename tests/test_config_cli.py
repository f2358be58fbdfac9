"""Tests for settings loading and the command line."""

from __future__ import annotations

import io
import logging

import pytest
from vectors import (RFC_PUBLIC_STRKEY, RFC_SEED_STRKEY,
                     ZERO_SEED_PUBLIC_STRKEY, ZERO_SEED_STRKEY)

from ledgerkeys import InvalidInputError, PublicKey, SecretKey
from ledgerkeys.cli import main
from ledgerkeys.config import DEFAULT_VERIFY_CACHE_SIZE, Settings, load_settings
from ledgerkeys.logger import get_logger


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("LEDGERKEYS_VERIFY_CACHE_SIZE", raising=False)
    monkeypatch.delenv("LEDGERKEYS_LOG_LEVEL", raising=False)
    return monkeypatch


def test_default_settings(clean_env) -> None:
    s = load_settings(dotenv=False)
    assert s.verify_cache_size == DEFAULT_VERIFY_CACHE_SIZE == 0xFFFF
    assert s.log_level == "WARNING"


def test_settings_from_env(clean_env) -> None:
    clean_env.setenv("LEDGERKEYS_VERIFY_CACHE_SIZE", "0x100")
    clean_env.setenv("LEDGERKEYS_LOG_LEVEL", "debug")
    s = load_settings(dotenv=False)
    assert s.verify_cache_size == 256
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["abc", "0", "-5", "1.5"])
def test_bad_cache_size(clean_env, value: str) -> None:
    clean_env.setenv("LEDGERKEYS_VERIFY_CACHE_SIZE", value)
    with pytest.raises(InvalidInputError):
        load_settings(dotenv=False)


def test_bad_log_level() -> None:
    with pytest.raises(InvalidInputError):
        Settings(log_level="LOUD")


def test_logger_namespace() -> None:
    log = get_logger("signing.cache")
    assert log.name == "ledgerkeys.signing.cache"
    assert get_logger("ledgerkeys.keys").name == "ledgerkeys.keys"
    assert logging.getLogger("ledgerkeys").handlers


def test_cli_convert_id(capsys) -> None:
    assert main(["convert-id", RFC_SEED_STRKEY]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Seed:\n")
    assert RFC_PUBLIC_STRKEY in out


def test_cli_convert_id_unknown(capsys) -> None:
    assert main(["convert-id", "nonsense"]) == 0
    assert capsys.readouterr().out == "Unknown key type\n"


def test_cli_gen_seed(capsys) -> None:
    assert main(["gen-seed"]) == 0
    seed_line, public_line = capsys.readouterr().out.splitlines()
    seed = seed_line.split(": ", 1)[1]
    public = public_line.split(": ", 1)[1]
    with SecretKey.from_strkey_seed(seed) as sk:
        assert sk.get_public_key() == PublicKey.from_strkey(public)


def test_cli_sec_to_pub(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(ZERO_SEED_STRKEY + "\n"))
    assert main(["sec-to-pub"]) == 0
    assert capsys.readouterr().out.strip() == ZERO_SEED_PUBLIC_STRKEY


def test_cli_sec_to_pub_bad_seed(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("not a seed\n"))
    assert main(["sec-to-pub"]) == 1
    assert "error:" in capsys.readouterr().err
