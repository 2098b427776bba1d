from enum import Enum


class LogType(str, Enum):
    """Event types found in cosmos tx logs."""

    MESSAGE = "message"
    EXECUTE = "execute"
    WASM = "wasm"
    TRANSFER = "transfer"
    INSTANTIATE = "instantiate"
    REPLY = "reply"
    FROM_CONTRACT = "from_contract"  # columbus-4 contract events
