import pytest

from dexparser.domain.enums import LogType
from dexparser.eventlog.finder import LogFinder
from dexparser.eventlog.rule import Rule, RuleItem, member_of
from dexparser.eventlog.types import Attribute, LogEntry
from dexparser.exceptions import ConfigError


def _attrs(*pairs: tuple[str, str]) -> list[Attribute]:
    return [Attribute(key=k, value=v) for k, v in pairs]


def _finder(*items: RuleItem, until: str | None = None, log_type: str = LogType.WASM) -> LogFinder:
    return LogFinder(Rule(type=log_type, items=tuple(items), until=until))


class TestRule:
    def test_empty_items_rejected(self):
        with pytest.raises(ConfigError):
            Rule(type=LogType.WASM, items=())

    def test_empty_key_rejected(self):
        with pytest.raises(ConfigError):
            RuleItem("")

    def test_bad_filter_rejected(self):
        with pytest.raises(ConfigError):
            RuleItem("a", 42)

    def test_member_of_takes_snapshot(self):
        addrs = {"a"}
        accept = member_of(addrs)
        addrs.add("b")
        assert accept("a") is True
        assert accept("b") is False


class TestFindFromAttrs:
    def test_filter_matches_each_position(self):
        finder = _finder(RuleItem("contract", member_of({"a", "b", "c"})))
        attrs = _attrs(("contract", "a"), ("contract", "b"), ("contract", "c"), ("contract", "d"))
        assert len(finder.find_from_attrs(attrs)) == 3

    def test_nil_filter_matches_any_value(self):
        finder = _finder(RuleItem("a"))
        attrs = _attrs(("a", "Value is not important"), ("a", "TEST"), ("a", ""))
        assert len(finder.find_from_attrs(attrs)) == 3

    def test_all_items_must_match(self):
        finder = _finder(RuleItem("a"), RuleItem("b", "b"), RuleItem("c", lambda v: v == "c"))
        results = finder.find_from_attrs(_attrs(("a", "a"), ("b", "b"), ("c", "c")))
        assert results == [_attrs(("a", "a"), ("b", "b"), ("c", "c"))]

    def test_failing_predicate_matches_nothing(self):
        finder = _finder(RuleItem("a"), RuleItem("b", "b"), RuleItem("c", lambda v: False))
        attrs = _attrs(("a", "a"), ("b", "b"), ("c", "c")) * 3
        assert finder.find_from_attrs(attrs) == []

    def test_rule_longer_than_attrs(self):
        finder = _finder(RuleItem("a"), RuleItem("b"))
        assert finder.find_from_attrs(_attrs(("a", "1"))) == []

    def test_until_extends_to_next_segment(self):
        finder = _finder(RuleItem("_contract_address", "pair"), RuleItem("action", "swap"), until="_contract_address")
        attrs = _attrs(
            ("_contract_address", "pair"), ("action", "swap"), ("offer_amount", "1"), ("return_amount", "2"),
            ("_contract_address", "token"), ("action", "transfer"), ("amount", "1"),
        )
        results = finder.find_from_attrs(attrs)
        assert len(results) == 1
        assert [a.key for a in results[0]] == ["_contract_address", "action", "offer_amount", "return_amount"]

    def test_until_runs_to_end_of_entry(self):
        finder = _finder(RuleItem("_contract_address"), RuleItem("action"), until="_contract_address")
        attrs = _attrs(
            ("_contract_address", "x"), ("action", "transfer"), ("amount", "1"),
            ("_contract_address", "y"), ("action", "transfer"), ("amount", "2"), ("to", "z"),
        )
        results = finder.find_from_attrs(attrs)
        assert [len(r) for r in results] == [3, 4]

    def test_matches_do_not_overlap(self):
        finder = _finder(RuleItem("a"), RuleItem("a"))
        attrs = _attrs(("a", "1"), ("a", "2"), ("a", "3"))
        assert len(finder.find_from_attrs(attrs)) == 1


class TestFindFromLogs:
    def test_scans_every_entry_of_the_type(self):
        finder = _finder(RuleItem("contract", member_of({"a", "b", "c"})))
        entry = LogEntry(type=LogType.WASM, attributes=_attrs(("contract", "a"), ("contract", "b"), ("contract", "c"), ("contract", "d")))
        assert len(finder.find_from_logs([entry, entry])) == 6

    def test_other_types_ignored(self):
        finder = _finder(RuleItem("amount"), log_type=LogType.TRANSFER)
        logs = [
            LogEntry(type=LogType.WASM, attributes=_attrs(("amount", "1"))),
            LogEntry(type=LogType.TRANSFER, attributes=_attrs(("amount", "2"))),
        ]
        results = finder.find_from_logs(logs)
        assert results == [_attrs(("amount", "2"))]

    def test_match_never_spans_entries(self):
        finder = _finder(RuleItem("a"), RuleItem("b"))
        logs = [
            LogEntry(type=LogType.WASM, attributes=_attrs(("a", "1"))),
            LogEntry(type=LogType.WASM, attributes=_attrs(("b", "2"))),
        ]
        assert finder.find_from_logs(logs) == []
