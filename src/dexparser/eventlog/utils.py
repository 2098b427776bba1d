"""Helpers for reshaping attributes and matched results."""

from collections.abc import Sequence

from dexparser.eventlog.types import Attribute, Match

MSG_INDEX_KEY = "msg_index"


def sort_attributes(attrs: Sequence[Attribute], keys: Sequence[str]) -> list[Attribute]:
    """Keep attributes whose key is in `keys`; order each chunk of len(keys) by `keys`.

    Native `transfer` events can list recipient/sender/amount in any order.
    A trailing partial chunk is kept as-is.
    """
    if not keys:
        raise ValueError("keys must be provided")

    order = {key: i for i, key in enumerate(keys)}
    filtered = [a for a in attrs if a.key in order]

    size = len(keys)
    for start in range(0, len(filtered) - size + 1, size):
        filtered[start:start + size] = sorted(filtered[start:start + size], key=lambda a: order[a.key])
    return filtered


def result_to_item_map(match: Match) -> dict[str, Attribute]:
    item_map: dict[str, Attribute] = {}
    for item in match:
        if item.key in item_map:
            raise ValueError(f"duplicated key({item.key})")
        item_map[item.key] = item
    return item_map


def sort_segments(match: Match, splitter: str) -> Match:
    """Sort keys alphabetically inside each `splitter`-delimited segment.

    `msg_index` always stays at the end of its segment.
    """
    def sort_key(a: Attribute) -> tuple[bool, str]:
        return (a.key == MSG_INDEX_KEY, a.key)

    result: Match = []
    segment: Match = []
    for item in match:
        if item.key == splitter and segment:
            result.extend(sorted(segment, key=sort_key))
            segment = []
        segment.append(item)
    result.extend(sorted(segment, key=sort_key))
    return result
