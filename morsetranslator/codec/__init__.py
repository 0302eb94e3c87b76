from .alphabet import CANONICAL_CODES, CodeTable, build_table
from .errors import (
    DuplicatePatternError,
    InvalidPatternError,
    MorseError,
    TableError,
    TranslationError,
)
from .models import (
    NO_LETTER,
    WORD_SEPARATOR,
    Diagnostic,
    DiagnosticKind,
    Pattern,
    Symbol,
    TranslationResult,
    TrieNode,
)
from .translator import MorseCodec, decode, encode
from .trie import DecodeTrie, build_trie

__all__ = [
    "CANONICAL_CODES",
    "CodeTable",
    "DecodeTrie",
    "Diagnostic",
    "DiagnosticKind",
    "DuplicatePatternError",
    "InvalidPatternError",
    "MorseCodec",
    "MorseError",
    "NO_LETTER",
    "Pattern",
    "Symbol",
    "TableError",
    "TranslationError",
    "TranslationResult",
    "TrieNode",
    "WORD_SEPARATOR",
    "build_table",
    "build_trie",
    "decode",
    "encode",
]
