"""Terraswap deployments: phoenix/pisco (Terra 2), columbus-4 and columbus-5 (Terra Classic)."""

from dexparser.rules.common import (
    COL4_CONTRACT_KEY,
    PROVIDE_ACTION,
    SWAP_ACTION,
    WASM_TRANSFER_ACTION,
    WASM_TRANSFER_FIELDS,
    WASM_TRANSFER_FROM_ACTION,
    WASM_TRANSFER_FROM_FIELDS,
    WITHDRAW_ACTION,
    ActionLayout,
)

MAINNET_PREFIX = "phoenix"
TESTNET_PREFIX = "pisco"
CLASSIC_PREFIX = "columbus"

COLUMBUS_V1_CHAIN_ID = "columbus-4"
COLUMBUS_V2_CHAIN_ID = "columbus-5"

FACTORY_ADDRESS: dict[str, str] = {
    "phoenix": "terra1466nf3zuxpya8q9emxukd7vftaf6h4psr0a07srl5zw74zh84yjqxl5qul",
    "pisco": "terra1jha5avc92uerwp9qzx3flvwnyxs3zax2rrm6jkcedy2qvzwd2k7qk7yxcl",
    "columbus-4": "terra1ulgw0td86nvs4wtpsc80thv6xelk76ut7a7apj",
    "columbus-5": "terra1jkndu9w5attpz09ut02sgey5dd3e8sq5watzm0",
}

CW20_PREFIX = "terra1"

# columbus-4 contract events: from_contract / contract_address, swap carries tax_amount
COL4_SWAP_FIELDS = (
    "offer_asset", "ask_asset", "offer_amount", "return_amount",
    "tax_amount", "spread_amount", "commission_amount",
)
COL4_PROVIDE_FIELDS = ("assets", "share")
COL4_WITHDRAW_FIELDS = ("withdrawn_share", "refund_assets")

COL4_PAIR_LAYOUT = ActionLayout(
    contract_key=COL4_CONTRACT_KEY,
    fields={SWAP_ACTION: COL4_SWAP_FIELDS, PROVIDE_ACTION: COL4_PROVIDE_FIELDS, WITHDRAW_ACTION: COL4_WITHDRAW_FIELDS},
)
COL4_WASM_TRANSFER_LAYOUT = ActionLayout(
    contract_key=COL4_CONTRACT_KEY,
    fields={WASM_TRANSFER_ACTION: WASM_TRANSFER_FIELDS, WASM_TRANSFER_FROM_ACTION: WASM_TRANSFER_FROM_FIELDS},
)


def factory_address_of(chain_id: str) -> str | None:
    prefix = chain_id.split("-")[0]
    if prefix == CLASSIC_PREFIX:
        return FACTORY_ADDRESS.get(chain_id)
    return FACTORY_ADDRESS.get(prefix)
