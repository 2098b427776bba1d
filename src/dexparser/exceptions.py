from dexparser.domain.enums import ParseErrorType


class DexParserError(Exception):
    """Base error for the parser pipeline."""

    ERROR_TYPE: ParseErrorType = ParseErrorType.INTERNAL_PARSE_ERROR


class StructuralMismatchError(DexParserError):
    """Matched result has the wrong length or an empty value."""

    ERROR_TYPE = ParseErrorType.STRUCTURAL_MISMATCH_ERROR

    def __init__(self, action: str, detail: str) -> None:
        self.action = action
        self.detail = detail
        super().__init__(f"{action}: {detail}")


class AssetFormatError(StructuralMismatchError):
    """Amount/asset string is not in the `<amount><addr>` format."""


class UnknownPairError(DexParserError):
    ERROR_TYPE = ParseErrorType.UNKNOWN_PAIR_ERROR

    def __init__(self, contract_addr: str) -> None:
        self.contract_addr = contract_addr
        super().__init__(f"no pair({contract_addr})")


class AmbiguousTransferError(DexParserError):
    ERROR_TYPE = ParseErrorType.AMBIGUOUS_TRANSFER_ERROR

    def __init__(self, sender: str, recipient: str) -> None:
        self.sender = sender
        self.recipient = recipient
        super().__init__(f"transfer cannot be both from and to a pair: from({sender}), to({recipient})")


class ConfigError(DexParserError):
    ERROR_TYPE = ParseErrorType.CONFIG_ERROR


class UnsupportedChainError(ConfigError):
    ERROR_TYPE = ParseErrorType.UNSUPPORTED_CHAIN_ERROR

    def __init__(self, chain_id: str) -> None:
        self.chain_id = chain_id
        super().__init__(f"chain id is not supported: {chain_id}")


class RemoteHeightError(DexParserError):
    """Source node height is behind or stalled."""


class PoolValidationError(DexParserError):
    ERROR_TYPE = ParseErrorType.POOL_VALIDATION_ERROR


class SyncedHeightMismatchError(DexParserError):
    """Synced height row for `height - 1` is missing."""

    def __init__(self, chain_id: str, height: int) -> None:
        self.chain_id = chain_id
        self.height = height
        super().__init__(f"synced height({height - 1}) not found for chain({chain_id})")


class ExternalServiceError(DexParserError):
    """Retriable failure talking to a source node."""
