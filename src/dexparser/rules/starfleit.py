"""Starfleit deployments on Fetch.ai."""

MAINNET_PREFIX = "fetchhub"
TESTNET_PREFIX = "dorado"

MAINNET_V2_HEIGHT = 11_543_129
TESTNET_V2_HEIGHT = 11_543_129

FACTORY_ADDRESS: dict[str, str] = {
    "fetchhub": "fetch1slz6c85kxp4ek5ufmcakfhnscv9r2snlemxgwz6cjhklgh7v2hms8rgt5v",
    "dorado": "fetch1kmag3937lrl6dtsv29mlfsedzngl9egv5c3apnr468q50gu04zrqea398u",
}

V2_HEIGHT: dict[str, int] = {
    MAINNET_PREFIX: MAINNET_V2_HEIGHT,
    TESTNET_PREFIX: TESTNET_V2_HEIGHT,
}

CW20_PREFIX = "fetch1"
