"""Exact arithmetic on base-unit amount strings and `<amount><addr>` parsing."""

import re
from decimal import ROUND_DOWN, Decimal, localcontext

from dexparser.exceptions import AssetFormatError
from dexparser.parser.utils.types import Asset

_LEADING_DIGITS = re.compile(r"^\d+")
_SIGNED_INT = re.compile(r"-?[0-9]+")


def to_int(amount: str) -> int:
    """Parse a signed integer amount. Empty string counts as 0."""
    if amount == "":
        return 0
    if not _SIGNED_INT.fullmatch(amount):
        raise AssetFormatError("amount", f"invalid number({amount})")
    return int(amount)


def negate(amount: str) -> str:
    return str(-to_int(amount))


def add(a: str, b: str) -> str:
    return str(to_int(a) + to_int(b))


def sub(a: str, b: str) -> str:
    return str(to_int(a) - to_int(b))


def mul_truncate(amount: str, factor: Decimal) -> str:
    """Multiply by a decimal factor exactly, truncating toward zero."""
    value = to_int(amount)
    with localcontext() as ctx:
        # enough digits for the full product
        ctx.prec = len(str(abs(value))) + len(factor.as_tuple().digits) + 1
        product = Decimal(value) * factor
        return str(int(product.to_integral_value(rounding=ROUND_DOWN)))


def parse_asset(amount_asset: str) -> Asset:
    """"1000uluna" -> Asset(addr="uluna", amount="1000")."""
    text = amount_asset.strip()
    found = _LEADING_DIGITS.match(text)
    amount = found.group(0) if found else ""
    addr = text[len(amount):]
    if not amount or not addr:
        raise AssetFormatError("asset", f"string format must be 0000AAAA, got({amount_asset})")
    return Asset(addr=addr, amount=amount)


def parse_assets(amounts_assets: str) -> list[Asset]:
    """Parse exactly two comma separated `<amount><addr>` items."""
    parts = [p.strip() for p in amounts_assets.split(",")]
    if len(parts) != 2:
        raise AssetFormatError("assets", f"wrong format of assets amount({amounts_assets})")
    return [parse_asset(p) for p in parts]


def parse_coins(coins: str) -> list[Asset]:
    """Parse a native multi-coin string: one or more comma separated items."""
    return [parse_asset(p) for p in coins.split(",")]


def order_by_pair(assets: list[Asset], pair_assets: list[str]) -> list[Asset]:
    """Swap the two legs when the first one isn't the pair's first asset."""
    if assets[0].addr != pair_assets[0]:
        return [assets[1], assets[0]]
    return list(assets)
