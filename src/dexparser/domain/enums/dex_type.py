from enum import Enum


class DexType(str, Enum):
    """DEX protocol families with parser support."""

    TERRASWAP = "terraswap"
    DEZSWAP = "dezswap"
    STARFLEIT = "starfleit"
