"""Cosmos LCD (REST) source store: blocks via the tx service, pools via wasm smart queries."""

import base64
import json
import logging
from typing import Any

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from dexparser.domain.enums import LogType
from dexparser.eventlog.types import Attribute, LogEntry
from dexparser.exceptions import ExternalServiceError
from dexparser.infra.http.rate_limited_client import RateLimitedClient
from dexparser.infra.source.base import SourceDataStore
from dexparser.parser.utils.types import Asset, Pair, PoolInfo, RawTx

logger = logging.getLogger(__name__)

LATEST_BLOCK_PATH = "/cosmos/base/tendermint/v1beta1/blocks/latest"
BLOCK_TXS_PATH = "/cosmos/tx/v1beta1/txs/block/{height}"
SMART_QUERY_PATH = "/cosmwasm/wasm/v1/contract/{contract}/smart/{query}"
HEIGHT_HEADER = "x-cosmos-block-height"

POOL_QUERY = base64.b64encode(json.dumps({"pool": {}}).encode()).decode()


def flatten_events(events: list[dict]) -> list[LogEntry]:
    """Concatenate attributes of same-typed events, keeping first-appearance order of types."""
    grouped: dict[str, list[Attribute]] = {}
    for event in events:
        attrs = grouped.setdefault(event.get("type", ""), [])
        for attr in event.get("attributes") or []:
            attrs.append(Attribute(key=attr.get("key", ""), value=attr.get("value") or ""))
    return [LogEntry(type=t, attributes=attrs) for t, attrs in grouped.items()]


def to_raw_tx(tx_response: dict) -> RawTx:
    events: list[dict] = []
    logs = tx_response.get("logs") or []
    if logs:
        for log in logs:
            events.extend(log.get("events") or [])
    else:
        # cosmos-sdk v0.50 drops per-message logs; events live on the response
        events = tx_response.get("events") or []

    entries = flatten_events(events)
    sender = ""
    for entry in entries:
        if entry.type == LogType.MESSAGE:
            sender = next((a.value for a in entry.attributes if a.key == "sender"), "")
            break

    return RawTx(
        hash=tx_response["txhash"],
        timestamp=tx_response.get("timestamp") or None,
        sender=sender,
        log_entries=entries,
    )


class LcdSourceStore(SourceDataStore):
    def __init__(self, lcd_url: str, http_client: RateLimitedClient) -> None:
        self._lcd_url = lcd_url.rstrip("/")
        self._http = http_client

    @retry(
        retry=retry_if_exception_type(ExternalServiceError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
    )
    async def _get(self, path: str, params: dict | None = None, headers: dict | None = None) -> dict[str, Any]:
        resp = await self._http.get(f"{self._lcd_url}{path}", params=params, headers=headers)
        if resp.status_code == 429 or resp.status_code >= 500:
            raise ExternalServiceError(f"LCD error ({resp.status_code}) for {path}")
        data = resp.json()
        if resp.status_code != 200:
            raise ExternalServiceError(f"LCD request failed ({resp.status_code}) for {path}: {data.get('message', data)}")
        return data

    async def get_source_synced_height(self) -> int:
        data = await self._get(LATEST_BLOCK_PATH)
        block = data.get("block") or data.get("sdk_block") or {}
        return int(block["header"]["height"])

    async def get_source_txs(self, height: int) -> list[RawTx]:
        data = await self._get(BLOCK_TXS_PATH.format(height=height))
        txs: list[RawTx] = []
        for tx_response in data.get("tx_responses") or []:
            if tx_response.get("code", 0) != 0:
                continue
            txs.append(to_raw_tx(tx_response))
        logger.debug("Fetched %d txs at height %d", len(txs), height)
        return txs

    async def get_pool_infos(self, height: int, pairs: list[Pair]) -> list[PoolInfo]:
        pools: list[PoolInfo] = []
        for pair in pairs:
            data = await self._get(
                SMART_QUERY_PATH.format(contract=pair.contract_addr, query=POOL_QUERY),
                headers={HEIGHT_HEADER: str(height)},
            )
            pool = data.get("data") or {}
            assets = pool.get("assets") or []
            if len(assets) != 2:
                raise ExternalServiceError(f"Unexpected pool response for {pair.contract_addr}: {pool}")
            pools.append(PoolInfo(
                contract_addr=pair.contract_addr,
                assets=[
                    Asset(addr=pair.assets[0], amount=str(assets[0]["amount"])),
                    Asset(addr=pair.assets[1], amount=str(assets[1]["amount"])),
                ],
                total_share=str(pool.get("total_share", "0")),
            ))
        return pools
