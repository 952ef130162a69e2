"""Rule table: parses, stores, and resolves production rules."""

from __future__ import annotations
import re
import string
from collections.abc import Iterable

from lsystem3d.core.errors import DuplicateRuleError
from lsystem3d.rules.base import ProductionRule
from lsystem3d.rules.parser import RuleParser
from lsystem3d.rules.productions import identity_rule

_LINE_BREAK = re.compile(r"\r\n|\n\r|\n|\r")


class RuleTable:
    """
    Fixed mapping from the 26 uppercase letters to their rules.

    Every letter has exactly one rule: at most one registered by the
    user, otherwise the identity rule that rewrites the letter to itself.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ProductionRule] = {}
        self._table: list[ProductionRule] = [
            identity_rule(c) for c in string.ascii_uppercase
        ]

    @classmethod
    def from_lines(cls, lines: Iterable[str], parser: RuleParser | None = None) -> RuleTable:
        """Parse rule lines, skipping blank lines and `#` comments."""
        parser = parser or RuleParser()
        table = cls()
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            symbol, rule = parser.parse_line(line)
            table.register(symbol, rule)
        return table

    @classmethod
    def from_text(cls, text: str) -> RuleTable:
        """Parse a block of rules, one per line."""
        return cls.from_lines(_LINE_BREAK.split(text))

    def register(self, symbol: str, rule: ProductionRule) -> None:
        """Register the rule for `symbol`; each symbol may only be set once."""
        if symbol in self._rules:
            raise DuplicateRuleError(symbol)
        self._rules[symbol] = rule
        self._table[ord(symbol) - ord("A")] = rule

    def get_rule(self, symbol: str) -> ProductionRule:
        return self._table[ord(symbol) - ord("A")]

    def rule_for_byte(self, code: int) -> ProductionRule:
        """Lookup by ASCII code, as read straight out of a symbol buffer."""
        return self._table[code - 65]

    def list_rules(self) -> list[ProductionRule]:
        """Return the explicitly registered rules, in registration order."""
        return list(self._rules.values())

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._rules

    def __len__(self) -> int:
        return len(self._rules)
