from decimal import Decimal

import pytest

from dexparser.exceptions import AssetFormatError, StructuralMismatchError
from dexparser.parser.utils.amounts import (
    add,
    mul_truncate,
    negate,
    order_by_pair,
    parse_asset,
    parse_assets,
    parse_coins,
    sub,
    to_int,
)
from dexparser.parser.utils.types import Asset


class TestArithmetic:
    def test_empty_is_zero(self):
        assert to_int("") == 0

    def test_negate(self):
        assert negate("100") == "-100"
        assert negate("-100") == "100"
        assert negate("0") == "0"

    def test_big_numbers_exact(self):
        big = "123456789012345678901234567890"
        assert add(big, "1") == "123456789012345678901234567891"
        assert sub("0", big) == "-" + big

    def test_invalid_number(self):
        with pytest.raises(AssetFormatError):
            to_int("12a")

    def test_mul_truncate_toward_zero(self):
        factor = Decimal("0.9939285487078243")
        assert mul_truncate("1000000", factor) == "993928"
        assert mul_truncate("2000000", factor) == "1987857"
        assert mul_truncate("-1000000", factor) == "-993928"

    def test_mul_truncate_beyond_default_precision(self):
        amount = 10**30 - 1
        exact = amount * 9939285487078243 // 10**16
        factor = Decimal("0.9939285487078243")

        assert mul_truncate(str(amount), factor) == str(exact)
        assert mul_truncate(str(-amount), factor) == str(-exact)

    @pytest.mark.parametrize("text", ["1_000", " 5 ", "+5", "5\n", "--5", "-"])
    def test_only_plain_digit_strings(self, text):
        with pytest.raises(AssetFormatError):
            to_int(text)


class TestParseAsset:
    def test_native(self):
        assert parse_asset("1000uluna") == Asset(addr="uluna", amount="1000")

    def test_cw20_and_whitespace(self):
        assert parse_asset(" 25xpla1token ") == Asset(addr="xpla1token", amount="25")

    def test_ibc_denom(self):
        assert parse_asset("7ibc/ABCD") == Asset(addr="ibc/ABCD", amount="7")

    @pytest.mark.parametrize("text", ["uluna", "1000", ""])
    def test_bad_format(self, text):
        with pytest.raises(AssetFormatError):
            parse_asset(text)

    def test_asset_format_error_is_structural(self):
        with pytest.raises(StructuralMismatchError):
            parse_asset("uluna")

    def test_parse_assets_pair(self):
        assets = parse_assets("1000000A, 2000000B")
        assert assets == [Asset(addr="A", amount="1000000"), Asset(addr="B", amount="2000000")]

    def test_parse_assets_wrong_count(self):
        with pytest.raises(AssetFormatError):
            parse_assets("1A")

    def test_parse_coins_multi(self):
        assert parse_coins("1uluna,2uusd,3ukrw") == [
            Asset(addr="uluna", amount="1"),
            Asset(addr="uusd", amount="2"),
            Asset(addr="ukrw", amount="3"),
        ]


class TestOrderByPair:
    def test_keeps_order(self):
        legs = [Asset(addr="A", amount="1"), Asset(addr="B", amount="2")]
        assert order_by_pair(legs, ["A", "B"]) == legs

    def test_swaps_order(self):
        legs = [Asset(addr="B", amount="2"), Asset(addr="A", amount="1")]
        assert order_by_pair(legs, ["A", "B"]) == [Asset(addr="A", amount="1"), Asset(addr="B", amount="2")]
