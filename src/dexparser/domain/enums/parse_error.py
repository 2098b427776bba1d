from enum import Enum


class ParseErrorType(str, Enum):
    """Categorized parse errors, stored with each ParseErrorRecord."""

    STRUCTURAL_MISMATCH_ERROR = "StructuralMismatchError"
    UNKNOWN_PAIR_ERROR = "UnknownPairError"
    AMBIGUOUS_TRANSFER_ERROR = "AmbiguousTransferError"
    UNSUPPORTED_CHAIN_ERROR = "UnsupportedChainError"
    CONFIG_ERROR = "ConfigError"
    POOL_VALIDATION_ERROR = "PoolValidationError"
    INTERNAL_PARSE_ERROR = "InternalParseError"
