"""Starfleit profile (Fetch.ai)."""

from dexparser.domain.enums import DexType
from dexparser.parser.dex.base import HeightVersionedProfile
from dexparser.rules import starfleit as sf


class StarfleitProfile(HeightVersionedProfile):
    PROTOCOL = DexType.STARFLEIT
    CW20_PREFIX = sf.CW20_PREFIX
    V2_HEIGHT = sf.V2_HEIGHT
    FACTORY_ADDRESS = sf.FACTORY_ADDRESS
