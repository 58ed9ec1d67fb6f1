"""Input-layer public API: raw key decoding and key-to-action bindings."""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import DEFAULT_BINDINGS, default_key_registry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "DEFAULT_BINDINGS",
    "default_key_registry",
]
