"""Tests for PublicKey, SecretKey and Seed."""

from __future__ import annotations

import copy
import gc
import pickle

import nacl.bindings
import nacl.exceptions
import pytest
from vectors import (RFC_EMPTY_SIG, RFC_HELLO_SIG, RFC_PUBLIC,
                     RFC_PUBLIC_STRKEY, RFC_SEED, RFC_SEED_STRKEY, ZERO_SEED,
                     ZERO_SEED_HELLO_SIG, ZERO_SEED_PUBLIC,
                     ZERO_SEED_PUBLIC_STRKEY, ZERO_SEED_STRKEY)

from ledgerkeys import (InternalCryptoError, InvalidInputError, KeyType,
                        MalformedEncodingError, PublicKey, SecretKey, Seed,
                        UnsupportedKeyTypeError, verify_signature)
from ledgerkeys.keys import from_key_version, to_key_version
from ledgerkeys.serde import VersionByte


def test_random_sign_verify() -> None:
    with SecretKey.random() as k:
        pk = k.get_public_key()
        sig = k.sign(b"hello")
    assert len(sig) == 64
    assert verify_signature(pk, sig, b"hello") is True
    assert verify_signature(pk, sig, b"hello!") is False


def test_random_keys_differ() -> None:
    with SecretKey.random() as a, SecretKey.random() as b:
        assert a != b
        assert a.get_public_key() != b.get_public_key()


def test_zero_seed_fixture() -> None:
    with SecretKey.from_seed(ZERO_SEED) as sk:
        assert sk.get_public_key().value == ZERO_SEED_PUBLIC
        assert sk.get_strkey_public() == ZERO_SEED_PUBLIC_STRKEY
        assert sk.get_strkey_seed() == ZERO_SEED_STRKEY
        assert sk.sign(b"hello") == ZERO_SEED_HELLO_SIG


def test_rfc8032_vector() -> None:
    with SecretKey.from_seed(RFC_SEED) as sk:
        assert sk.get_public_key().value == RFC_PUBLIC
        assert sk.sign(b"") == RFC_EMPTY_SIG
        assert sk.sign(b"hello") == RFC_HELLO_SIG


def test_from_seed_deterministic() -> None:
    with SecretKey.from_seed(RFC_SEED) as a, SecretKey.from_seed(RFC_SEED) as b:
        assert a == b
        assert a.get_public_key().value == b.get_public_key().value


def test_sign_deterministic() -> None:
    with SecretKey.random() as sk:
        assert sk.sign(b"payload") == sk.sign(b"payload")


@pytest.mark.parametrize("size", [0, 31, 33, 64])
def test_from_seed_wrong_length(size: int) -> None:
    with pytest.raises(InvalidInputError):
        SecretKey.from_seed(bytes(size))


def test_get_seed_inverts_from_seed() -> None:
    with SecretKey.from_seed(RFC_SEED) as sk, sk.get_seed() as seed:
        assert seed == Seed(RFC_SEED)
        assert seed.to_strkey() == RFC_SEED_STRKEY
        with seed.to_secret_key() as again:
            assert again == sk


def test_from_strkey_seed() -> None:
    with SecretKey.from_strkey_seed(RFC_SEED_STRKEY) as sk:
        assert sk.get_strkey_public() == RFC_PUBLIC_STRKEY


@pytest.mark.parametrize(
    "text", [RFC_PUBLIC_STRKEY, RFC_SEED_STRKEY[:-1], RFC_SEED_STRKEY.lower(), "junk"]
)
def test_from_strkey_seed_rejects(text: str) -> None:
    with pytest.raises(MalformedEncodingError):
        SecretKey.from_strkey_seed(text)


def test_is_zero() -> None:
    sk = SecretKey()
    assert sk.is_zero()
    with SecretKey.random() as sk2:
        assert not sk2.is_zero()
    assert sk2.is_zero()


def test_context_manager_wipes_secret_key() -> None:
    with SecretKey.from_seed(RFC_SEED) as sk:
        buf = sk._buf
        assert any(buf)
    assert buf == bytearray(64)


def test_context_manager_wipes_on_error() -> None:
    with pytest.raises(RuntimeError):
        with SecretKey.from_seed(RFC_SEED) as sk:
            buf = sk._buf
            raise RuntimeError("boom")
    assert buf == bytearray(64)


def test_collection_wipes_secret_key() -> None:
    sk = SecretKey.random()
    buf = sk._buf
    del sk
    gc.collect()
    assert buf == bytearray(64)


def test_seed_wiped() -> None:
    with SecretKey.from_seed(RFC_SEED) as sk:
        seed = sk.get_seed()
    buf = seed._buf
    assert bytes(buf) == RFC_SEED
    with seed:
        pass
    assert buf == bytearray(32)
    assert seed.is_zero()


def test_seed_wrong_length() -> None:
    with pytest.raises(InvalidInputError):
        Seed(bytes(31))


def test_secret_material_not_copyable() -> None:
    with SecretKey.random() as sk:
        with pytest.raises(TypeError):
            pickle.dumps(sk)
        with pytest.raises(TypeError):
            copy.copy(sk)
        with pytest.raises(TypeError):
            copy.deepcopy(sk)
        with pytest.raises(TypeError):
            hash(sk)


def test_repr_redacted() -> None:
    with SecretKey.from_seed(RFC_SEED) as sk:
        assert RFC_SEED.hex() not in repr(sk)
        assert "redacted" in repr(sk)


def test_public_key_strkey() -> None:
    pk = PublicKey(RFC_PUBLIC)
    assert pk.to_strkey() == RFC_PUBLIC_STRKEY
    assert str(pk) == RFC_PUBLIC_STRKEY
    assert PublicKey.from_strkey(RFC_PUBLIC_STRKEY) == pk
    assert pk.hex() == RFC_PUBLIC.hex()


def test_public_key_from_seed_strkey_rejected() -> None:
    with pytest.raises(MalformedEncodingError):
        PublicKey.from_strkey(RFC_SEED_STRKEY)


def test_public_key_value_semantics() -> None:
    a = PublicKey(RFC_PUBLIC)
    b = PublicKey(bytearray(RFC_PUBLIC))
    assert a == b
    assert hash(a) == hash(b) == int.from_bytes(RFC_PUBLIC[:4], "big")
    assert len({a, b, PublicKey(ZERO_SEED_PUBLIC)}) == 2


@pytest.mark.parametrize("size", [0, 31, 33])
def test_public_key_wrong_length(size: int) -> None:
    with pytest.raises(InvalidInputError):
        PublicKey(bytes(size))


def test_public_key_random() -> None:
    a, b = PublicKey.random(), PublicKey.random()
    assert len(a.value) == 32
    assert a != b


def test_public_key_verify_method() -> None:
    pk = PublicKey(RFC_PUBLIC)
    assert pk.verify(RFC_EMPTY_SIG, b"") is True
    assert pk.verify(RFC_EMPTY_SIG, b"x") is False


def test_unsupported_key_type() -> None:
    with pytest.raises(UnsupportedKeyTypeError):
        PublicKey(RFC_PUBLIC, 7)
    with pytest.raises(UnsupportedKeyTypeError):
        SecretKey(7)
    with pytest.raises(UnsupportedKeyTypeError):
        to_key_version(7)
    with pytest.raises(UnsupportedKeyTypeError):
        from_key_version(VersionByte.SEED_ED25519)


def test_key_version_mapping() -> None:
    assert to_key_version(KeyType.ED25519) == VersionByte.PUBKEY_ED25519
    assert from_key_version(VersionByte.PUBKEY_ED25519) == KeyType.ED25519


@pytest.mark.parametrize(
    "binding,operation",
    [
        ("crypto_sign_ed25519_sk_to_pk", lambda sk: sk.get_public_key()),
        ("crypto_sign", lambda sk: sk.sign(b"hello")),
        ("crypto_sign_ed25519_sk_to_seed", lambda sk: sk.get_seed()),
        ("crypto_sign_seed_keypair", lambda sk: SecretKey.from_seed(RFC_SEED)),
        ("crypto_sign_keypair", lambda sk: SecretKey.random()),
    ],
)
def test_primitive_failure_is_internal_crypto_error(
    monkeypatch, binding: str, operation
) -> None:
    def broken(*args):
        raise nacl.exceptions.RuntimeError("Unexpected library error")

    with SecretKey.from_seed(RFC_SEED) as sk:
        monkeypatch.setattr(nacl.bindings, binding, broken)
        with pytest.raises(InternalCryptoError):
            operation(sk)


def test_equal_keys_with_different_contents() -> None:
    with SecretKey.from_seed(RFC_SEED) as a, SecretKey.from_seed(RFC_SEED) as b:
        assert a == b
        b.wipe()
        assert a != b
        assert b == SecretKey()
