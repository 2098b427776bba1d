"""Dezswap deployments on XPLA."""

MAINNET_PREFIX = "dimension_37"
TESTNET_PREFIX = "cube_47"

MAINNET_V2_HEIGHT = 3_166_247
TESTNET_V2_HEIGHT = 2_975_818

# testnet moved to cosmos-sdk v0.50: events carry a trailing msg_index attribute
TESTNET_SDK_V50_HEIGHT = 10_187_000

FACTORY_ADDRESS: dict[str, str] = {
    "dimension_37": "xpla1j33xdql0h4kpgj2mhggy4vutw655u90z7nyj4afhxgj4v5urtadq44e3vd",
    "cube_47": "xpla1j4kgjl6h4rt96uddtzdxdu39h0mhn4vrtydufdrk4uxxnrpsnw2qug2yx2",
}

V2_HEIGHT: dict[str, int] = {
    MAINNET_PREFIX: MAINNET_V2_HEIGHT,
    TESTNET_PREFIX: TESTNET_V2_HEIGHT,
}

CW20_PREFIX = "xpla1"
