"""Key material: public keys, secret keys, seeds and the diagnostic dump."""

from .dump import format_key, log_key
from .secret import SecretKey, Seed
from .types import (KeyType, PublicKey, Signature, check_key_type,
                    from_key_version, to_key_version)

__all__: tuple[str, ...] = (
    "KeyType",
    "PublicKey",
    "SecretKey",
    "Seed",
    "Signature",
    "check_key_type",
    "format_key",
    "from_key_version",
    "log_key",
    "to_key_version",
)
