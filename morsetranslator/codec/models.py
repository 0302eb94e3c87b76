from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Symbol(Enum):
    DOT = "."
    DASH = "-"

    @classmethod
    def from_char(cls, char: str) -> Symbol | None:
        if char == cls.DOT.value:
            return cls.DOT
        if char == cls.DASH.value:
            return cls.DASH
        return None


Pattern = tuple[Symbol, ...]

WORD_SEPARATOR = "/"
LETTER_SEPARATOR = " "
# Written for tokens whose walk ends on a node without a letter.
NO_LETTER = " "


class DiagnosticKind(Enum):
    UNKNOWN_SYMBOL = "unknown_symbol"
    INCOMPLETE_OR_INVALID_TOKEN = "incomplete_or_invalid_token"
    UNMAPPED_CHARACTER = "unmapped_character"


@dataclass(frozen=True)
class TrieNode:
    dot: int | None = None
    dash: int | None = None
    letter: str | None = None

    def child(self, symbol: Symbol) -> int | None:
        return self.dot if symbol is Symbol.DOT else self.dash


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    position: int  # offset into the caller's input string
    token: str
    message: str = ""


@dataclass(frozen=True)
class TranslationResult:
    text: str
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def by_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [item for item in self.diagnostics if item.kind is kind]


def parse_pattern(text: str) -> Pattern | None:
    """Convert a ``.``/``-`` string to a pattern, or None if any char is foreign."""
    symbols = []
    for char in text:
        symbol = Symbol.from_char(char)
        if symbol is None:
            return None
        symbols.append(symbol)
    return tuple(symbols)


def render_pattern(pattern: Pattern) -> str:
    return "".join(symbol.value for symbol in pattern)
