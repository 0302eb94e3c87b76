"""Letter <-> pattern table for the 26 Latin letters.

The table is the single source of truth for both directions: encoding reads
it directly, decoding goes through the trie built from it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .errors import InvalidPatternError
from .models import Pattern, parse_pattern, render_pattern


# ITU Morse, letters only
CANONICAL_CODES = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-",
    "L": ".-..", "M": "--", "N": "-.", "O": "---", "P": ".--.",
    "Q": "--.-", "R": ".-.", "S": "...", "T": "-", "U": "..-",
    "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--", "Z": "--..",
}


class CodeTable(Mapping):
    """Read-only mapping of uppercase letter -> pattern."""

    def __init__(self, codes: Mapping[str, str]) -> None:
        patterns: dict[str, Pattern] = {}
        for letter, code in codes.items():
            key = letter.upper() if isinstance(letter, str) else ""
            if len(key) != 1:
                raise InvalidPatternError(str(letter), code, "key must be a single character")
            if key in patterns:
                raise InvalidPatternError(letter, code, "key repeats another entry ignoring case")
            if not code:
                raise InvalidPatternError(letter, code, "pattern is empty")
            pattern = parse_pattern(code)
            if pattern is None:
                raise InvalidPatternError(letter, code, "pattern may only contain '.' and '-'")
            patterns[key] = pattern
        self._patterns = MappingProxyType(patterns)

    def __getitem__(self, letter: str) -> Pattern:
        return self._patterns[letter]

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"CodeTable({len(self)} letters)"

    def pattern_for(self, letter: str) -> Pattern | None:
        return self._patterns.get(letter.upper()) if len(letter) == 1 else None

    def render(self, letter: str) -> str | None:
        pattern = self.pattern_for(letter)
        return render_pattern(pattern) if pattern is not None else None

    def rows(self) -> list[list[str]]:
        """Reference rows ``[pattern, letter]`` in alphabetical order."""
        return [[render_pattern(self._patterns[letter]), letter] for letter in sorted(self._patterns)]


def build_table() -> CodeTable:
    return CodeTable(CANONICAL_CODES)
