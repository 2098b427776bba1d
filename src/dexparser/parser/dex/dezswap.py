"""Dezswap profile (XPLA)."""

from dexparser.domain.enums import DexType
from dexparser.parser.dex.base import HeightVersionedProfile
from dexparser.rules import dezswap as ds


class DezswapProfile(HeightVersionedProfile):
    PROTOCOL = DexType.DEZSWAP
    CW20_PREFIX = ds.CW20_PREFIX
    V2_HEIGHT = ds.V2_HEIGHT
    FACTORY_ADDRESS = ds.FACTORY_ADDRESS

    def post_event_attr_len(self, height: int) -> int:
        # cube_47 runs cosmos-sdk v0.50 from TESTNET_SDK_V50_HEIGHT: every event ends with msg_index
        if self.prefix == ds.TESTNET_PREFIX and height >= ds.TESTNET_SDK_V50_HEIGHT:
            return 1
        return 0
