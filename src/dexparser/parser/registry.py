"""Target app lookup: (dex type, chain id) -> DexApp with the matching profile."""

from dexparser.domain.enums import DexType
from dexparser.exceptions import ConfigError, UnsupportedChainError
from dexparser.parser.app import DexApp
from dexparser.parser.dex.base import DexProfile
from dexparser.parser.dex.dezswap import DezswapProfile
from dexparser.parser.dex.starfleit import StarfleitProfile
from dexparser.parser.dex.terraswap import terraswap_profile
from dexparser.rules import terraswap as ts

TERRASWAP_PREFIXES = {ts.MAINNET_PREFIX, ts.TESTNET_PREFIX, ts.CLASSIC_PREFIX}
TERRASWAP_CLASSIC_CHAIN_IDS = {ts.COLUMBUS_V1_CHAIN_ID, ts.COLUMBUS_V2_CHAIN_ID}


def build_profile(dex_type: DexType | str, chain_id: str, factory_address: str | None = None) -> DexProfile:
    """Pick the protocol profile. Unknown chains fail here, before any parsing."""
    try:
        dex_type = DexType(dex_type)
    except ValueError:
        raise ConfigError(f"unsupported dex type: {dex_type}") from None

    prefix = chain_id.split("-")[0]
    if dex_type == DexType.TERRASWAP:
        if prefix not in TERRASWAP_PREFIXES:
            raise UnsupportedChainError(chain_id)
        if prefix == ts.CLASSIC_PREFIX and chain_id not in TERRASWAP_CLASSIC_CHAIN_IDS:
            raise UnsupportedChainError(chain_id)
        return terraswap_profile(chain_id, factory_address)
    if dex_type == DexType.DEZSWAP:
        return DezswapProfile(chain_id, factory_address)
    return StarfleitProfile(chain_id, factory_address)


def build_target_app(dex_type: DexType | str, chain_id: str, factory_address: str | None = None) -> DexApp:
    return DexApp(build_profile(dex_type, chain_id, factory_address))
