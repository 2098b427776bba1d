"""LogFinder: locate every match of a Rule inside a transaction's logs."""

from collections.abc import Sequence

from dexparser.eventlog.rule import Rule
from dexparser.eventlog.types import Attribute, LogEntry, Match


class LogFinder:
    def __init__(self, rule: Rule) -> None:
        self._rule = rule

    @property
    def rule(self) -> Rule:
        return self._rule

    def find_from_logs(self, logs: Sequence[LogEntry]) -> list[Match]:
        """Scan entries of the rule's type, one at a time, in order."""
        results: list[Match] = []
        for entry in logs:
            if entry.type == self._rule.type:
                results.extend(self.find_from_attrs(entry.attributes))
        return results

    def find_from_attrs(self, attrs: Sequence[Attribute]) -> list[Match]:
        items = self._rule.items
        until = self._rule.until
        rule_len = len(items)
        attr_len = len(attrs)

        results: list[Match] = []
        start = 0
        while start + rule_len <= attr_len:
            if not all(items[i].match(attrs[start + i]) for i in range(rule_len)):
                start += 1
                continue

            end = start + rule_len
            if until:
                # extend to the next segment start (exclusive)
                while end < attr_len and attrs[end].key != until:
                    end += 1

            results.append([Attribute(key=a.key, value=a.value) for a in attrs[start:end]])
            start = end
        return results
