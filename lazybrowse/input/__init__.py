"""Input-layer public API for key decoding and command dispatch.

Exports are split between low-level terminal decoding (`read_key`) and the
higher-level key handler used by the runtime loop.
"""

from .key_registry import CommandBinding, CommandRegistry
from .keys import KeyContext, KeyHandler, handle_key, set_status_message
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "CommandBinding",
    "CommandRegistry",
    "KeyContext",
    "KeyHandler",
    "handle_key",
    "set_status_message",
]
