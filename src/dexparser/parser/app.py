"""DexApp: per-transaction orchestration of the five parsers."""

import logging

from dexparser.domain.enums import TxType
from dexparser.parser.dex.base import DexProfile
from dexparser.parser.utils.types import Asset, Pair, PairRegistry, ParsedTx, RawTx

logger = logging.getLogger(__name__)


def _same_leg(a: Asset, b: Asset) -> bool:
    return a.addr == b.addr and a.amount == b.amount


def is_duplicated(pair_tx: ParsedTx, transfer: ParsedTx) -> bool:
    """A transfer already accounted for by a pair action in the same tx."""
    if pair_tx.hash != transfer.hash:
        return False
    if pair_tx.contract_addr not in (transfer.contract_addr, transfer.sender):
        return False
    return _same_leg(pair_tx.assets[0], transfer.assets[0]) or _same_leg(pair_tx.assets[1], transfer.assets[1])


def remove_duplicated(pair_txs: list[ParsedTx], transfers: list[ParsedTx]) -> list[ParsedTx]:
    return [t for t in transfers if not any(is_duplicated(p, t) for p in pair_txs)]


class DexApp:
    """Turns one RawTx into ParsedTx records for a single DEX deployment.

    Pure apart from the in-place registry update on CreatePair. Pairs holding
    tokens outside their two assets are remembered in `flagged_pairs`.
    """

    def __init__(self, profile: DexProfile) -> None:
        self.profile = profile
        self.flagged_pairs: set[str] = set()

    @property
    def chain_id(self) -> str:
        return self.profile.chain_id

    def is_validation_exception_candidate(self, contract_addr: str) -> bool:
        return contract_addr in self.flagged_pairs

    def parse_txs(self, tx: RawTx, height: int, registry: PairRegistry) -> list[ParsedTx]:
        logs = tx.log_entries
        results: list[ParsedTx] = []

        create_pair_parser = self.profile.create_pair_parser(height)
        for created in create_pair_parser.parse(logs, tx.hash, tx.timestamp):
            registry[created.contract_addr] = Pair(
                contract_addr=created.contract_addr,
                lp_addr=created.lp_addr,
                assets=[created.assets[0].addr, created.assets[1].addr],
            )
            created.sender = tx.sender
            results.append(created)
            logger.info("Pair %s created in tx %s at height %d", created.contract_addr, tx.hash, height)

        # rebuilt after CreatePair so pairs created in this tx are visible
        pair_parser = self.profile.pair_action_parser(registry, height)
        initial_provide_parser = self.profile.initial_provide_parser(registry, height)
        wasm_transfer_parser = self.profile.wasm_transfer_parser(registry, height, self.flagged_pairs)
        transfer_parser = self.profile.transfer_parser(registry, height, self.flagged_pairs)

        pair_txs: list[ParsedTx] = []
        wasm_txs: list[ParsedTx] = []
        transfer_txs: list[ParsedTx] = []
        for entry in logs:
            entry_logs = [entry]
            ptxs = pair_parser.parse(entry_logs, tx.hash, tx.timestamp)
            pair_txs.extend(ptxs)

            # LP minted to the pair only accompanies a provide in the same entry
            if initial_provide_parser is not None and any(p.type == TxType.PROVIDE for p in ptxs):
                pair_txs.extend(initial_provide_parser.parse(entry_logs, tx.hash, tx.timestamp))

            wasm_txs.extend(wasm_transfer_parser.parse(entry_logs, tx.hash, tx.timestamp))
            transfer_txs.extend(transfer_parser.parse([self.profile.prepare_entry(entry)], tx.hash, tx.timestamp))

        for ptx in pair_txs:
            ptx.sender = tx.sender
        results.extend(pair_txs)
        results.extend(remove_duplicated(pair_txs, wasm_txs))
        results.extend(remove_duplicated(pair_txs, transfer_txs))
        return results
