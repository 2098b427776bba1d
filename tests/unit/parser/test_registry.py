import pytest

from dexparser.domain.enums import DexType
from dexparser.exceptions import ConfigError, UnsupportedChainError
from dexparser.parser.dex.dezswap import DezswapProfile
from dexparser.parser.dex.starfleit import StarfleitProfile
from dexparser.parser.dex.terraswap import ColumbusV1Profile, ColumbusV2Profile, PhoenixProfile
from dexparser.parser.generic.pair import PairActionStrategy, RefundReconcilingStrategy
from dexparser.parser.registry import build_profile, build_target_app
from dexparser.rules import dezswap as ds
from dexparser.rules import starfleit as sf
from dexparser.rules import terraswap as ts


class TestBuildProfile:
    @pytest.mark.parametrize(
        "dex_type, chain_id, expected",
        [
            (DexType.TERRASWAP, "phoenix-1", PhoenixProfile),
            (DexType.TERRASWAP, "pisco-1", PhoenixProfile),
            (DexType.TERRASWAP, "columbus-4", ColumbusV1Profile),
            (DexType.TERRASWAP, "columbus-5", ColumbusV2Profile),
            (DexType.DEZSWAP, "dimension_37-1", DezswapProfile),
            (DexType.DEZSWAP, "cube_47-5", DezswapProfile),
            (DexType.STARFLEIT, "fetchhub-4", StarfleitProfile),
            (DexType.STARFLEIT, "dorado-1", StarfleitProfile),
        ],
    )
    def test_supported(self, dex_type, chain_id, expected):
        profile = build_profile(dex_type, chain_id)
        assert type(profile) is expected
        assert profile.PROTOCOL == dex_type
        assert profile.name == f"{dex_type.value}/{expected.__name__}"

    def test_dex_type_by_value(self):
        assert isinstance(build_profile("dezswap", "dimension_37-1"), DezswapProfile)

    def test_default_factory(self):
        assert build_profile(DexType.DEZSWAP, "cube_47-5").factory_address == ds.FACTORY_ADDRESS["cube_47"]
        assert build_profile(DexType.STARFLEIT, "fetchhub-4").factory_address == sf.FACTORY_ADDRESS["fetchhub"]
        assert build_profile(DexType.TERRASWAP, "columbus-5").factory_address == ts.FACTORY_ADDRESS["columbus-5"]

    @pytest.mark.parametrize(
        "dex_type, chain_id",
        [
            (DexType.TERRASWAP, "columbus-3"),
            (DexType.TERRASWAP, "dimension_37-1"),
            (DexType.DEZSWAP, "phoenix-1"),
            (DexType.STARFLEIT, "cube_47-5"),
        ],
    )
    def test_unsupported_chain(self, dex_type, chain_id):
        with pytest.raises(UnsupportedChainError):
            build_profile(dex_type, chain_id)

    def test_unknown_dex_type(self):
        with pytest.raises(ConfigError):
            build_profile("uniswap", "phoenix-1")

    def test_target_app(self):
        app = build_target_app(DexType.DEZSWAP, "dimension_37-1", factory_address="xpla1custom")
        assert app.chain_id == "dimension_37-1"
        assert app.profile.factory_address == "xpla1custom"


class TestHeightVersioning:
    def test_strategy_switches_at_v2_height(self):
        profile = build_profile(DexType.DEZSWAP, "dimension_37-1")
        assert type(profile.pair_strategy(ds.MAINNET_V2_HEIGHT - 1)) is PairActionStrategy
        assert isinstance(profile.pair_strategy(ds.MAINNET_V2_HEIGHT), RefundReconcilingStrategy)

    def test_testnet_threshold(self):
        profile = build_profile(DexType.DEZSWAP, "cube_47-5")
        assert profile.is_v2(ds.TESTNET_V2_HEIGHT) is True
        assert profile.is_v2(ds.TESTNET_V2_HEIGHT - 1) is False

    def test_msg_index_only_on_testnet(self):
        assert build_profile(DexType.DEZSWAP, "cube_47-5").post_event_attr_len(ds.TESTNET_SDK_V50_HEIGHT) == 1
        assert build_profile(DexType.DEZSWAP, "dimension_37-1").post_event_attr_len(ds.TESTNET_SDK_V50_HEIGHT) == 0
