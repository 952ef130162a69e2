"""Rule line parser.

Two kinds of lines are understood:

- `A = A[A]` is a constant replacement rule.
- `A = 20 A[A], 80 M` is a weighted rule; the integer in front of each
  replacement is its weight.

Instead of `=` the arrows `→`, `←`, `->` and `<-` may be used. Whitespace
is ignored everywhere except inside a `(a)` parameter.
"""

from __future__ import annotations

from lsystem3d.core.errors import InvalidWeightError, RuleParseError
from lsystem3d.rules.base import ProductionRule
from lsystem3d.rules.productions import ConstantRule, WeightedRule

# Longest first so `->` is not read as a `-` command.
ASSIGNMENT_GLYPHS = ("->", "<-", "=", "→", "←")
COMMAND_GLYPHS = frozenset("+-^v<>")


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class RuleParser:
    """Turns one line of rule text into a `(symbol, rule)` pair."""

    def parse_line(self, line: str) -> tuple[str, ProductionRule]:
        # Identifier
        i = self._skip_whitespace(line, 0)
        if i >= len(line):
            raise RuleParseError("Expected placeholder LHS 'A = ...', but the line is empty", line)
        c = line[i]
        if not _is_upper(c):
            raise RuleParseError(
                f"Expected placeholder LHS 'A = ...', but got unexpected char '{c}'", line, c, i,
            )
        symbol = c

        i = self._parse_assignment(line, self._skip_whitespace(line, i + 1))
        i = self._skip_whitespace(line, i)

        # A leading digit means a weighted rule.
        if i < len(line) and _is_digit(line[i]):
            return symbol, self._parse_weighted(symbol, line, i)

        replacement, i = self._parse_replacement(line, i)
        if i < len(line):
            raise RuleParseError(
                f"Unexpected character '{line[i]}' after replacement", line, line[i], i,
            )
        return symbol, ConstantRule(symbol, replacement)

    def _parse_assignment(self, line: str, i: int) -> int:
        for glyph in ASSIGNMENT_GLYPHS:
            if line.startswith(glyph, i):
                return i + len(glyph)
        if i >= len(line):
            raise RuleParseError("Expected '=', but the line ended", line, None, i)
        raise RuleParseError(f"Expected '=', but got '{line[i]}' instead", line, line[i], i)

    def _parse_weighted(self, symbol: str, line: str, i: int) -> WeightedRule:
        candidates: list[tuple[str, float]] = []
        while True:
            weight, i = self._parse_weight(line, i)
            replacement, i = self._parse_replacement(line, i)
            candidates.append((replacement, float(weight)))
            if i >= len(line):
                break
            # _parse_replacement only stops early on a comma
            i = self._skip_whitespace(line, i + 1)

        try:
            return WeightedRule(symbol, candidates)
        except InvalidWeightError as e:
            raise RuleParseError(str(e), line) from e

    def _parse_weight(self, line: str, i: int) -> tuple[int, int]:
        start = i
        while i < len(line) and _is_digit(line[i]):
            i += 1
        if i == start:
            char = line[i] if i < len(line) else None
            raise RuleParseError("Random rule without weight", line, char, i)
        return int(line[start:i]), i

    def _parse_replacement(self, line: str, i: int) -> tuple[str, int]:
        """Parse up to the end of the line or the next `,` (not consumed)."""
        out: list[str] = []
        depth = 0
        while i < len(line):
            c = line[i]
            if c.isspace():
                i += 1
                continue
            if c == ",":
                break

            if _is_upper(c) or c in COMMAND_GLYPHS:
                out.append(c)
            elif c == "[":
                depth += 1
                out.append(c)
            elif c == "]":
                depth -= 1
                if depth < 0:
                    raise RuleParseError("Unbalanced brackets [] in replacement", line, c, i)
                out.append(c)
            elif c == "(":
                # A parameter binds to the symbol right before it.
                if not out or out[-1].endswith(")"):
                    raise RuleParseError(f"Unexpected character '{c}'", line, c, i)
                if i + 1 >= len(line):
                    raise RuleParseError("Unclosed '(' near the end in replacement", line, c, i)
                name = line[i + 1]
                if not _is_lower(name):
                    raise RuleParseError(
                        "Parameters in ()s may only be lower case letters", line, name, i + 1,
                    )
                if i + 2 >= len(line) or line[i + 2] != ")":
                    raise RuleParseError("Unclosed '('", line, c, i)
                out.append(f"({name})")
                i += 3
                continue
            else:
                raise RuleParseError(f"Unexpected character '{c}'", line, c, i)
            i += 1

        if depth != 0:
            raise RuleParseError("Unbalanced brackets [] in replacement", line, "[", i)
        return "".join(out), i

    @staticmethod
    def _skip_whitespace(line: str, i: int) -> int:
        while i < len(line) and line[i].isspace():
            i += 1
        return i


def parse_rule(line: str) -> tuple[str, ProductionRule]:
    """Parse a single rule line with a fresh parser."""
    return RuleParser().parse_line(line)
