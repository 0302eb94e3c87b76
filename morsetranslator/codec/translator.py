from __future__ import annotations

import logging
from collections.abc import Mapping

from PySide6.QtCore import QCoreApplication

from .alphabet import CodeTable, build_table
from .errors import TranslationError
from .models import (
    LETTER_SEPARATOR,
    NO_LETTER,
    WORD_SEPARATOR,
    Diagnostic,
    DiagnosticKind,
    TranslationResult,
    render_pattern,
)
from .trie import DecodeTrie, build_trie

logger = logging.getLogger(__name__)


def _tr(text: str) -> str:
    return QCoreApplication.translate("MorseCodec", text)


class MorseCodec:
    """Text <-> Morse translator.

    Table and trie are built once in ``__init__`` and only read afterwards,
    so one instance can serve any number of threads.

    In the default permissive mode unmapped characters are dropped on encode
    and malformed tokens decode to a blank (or to the letter reached before
    the bad symbol). With ``strict=True`` the same situations raise
    :class:`TranslationError`.
    """

    def __init__(
        self,
        table: CodeTable | Mapping[str, str] | None = None,
        *,
        strict: bool = False,
        log_diagnostics: bool = True,
    ) -> None:
        if table is None:
            table = build_table()
        elif not isinstance(table, CodeTable):
            table = CodeTable(table)
        self.table: CodeTable = table
        self.trie: DecodeTrie = build_trie(table)
        self.strict = bool(strict)
        self.log_diagnostics = bool(log_diagnostics)
        self._encoded = {letter: render_pattern(pattern) for letter, pattern in table.items()}

    # Text -> Morse
    def encode(self, text: str) -> str:
        return self._finish(self.encode_with_report(text), "encode")

    def encode_with_report(self, text: str) -> TranslationResult:
        tokens: list[str] = []
        diagnostics: list[Diagnostic] = []
        for position, char in enumerate(text):
            if char == " ":
                tokens.append(WORD_SEPARATOR)
                continue
            code = self._encoded.get(char.upper())
            if code is not None:
                tokens.append(code)
                continue
            diagnostics.append(
                Diagnostic(
                    DiagnosticKind.UNMAPPED_CHARACTER,
                    position,
                    char,
                    _tr("Character {0!r} at {1} has no Morse pattern").format(char, position),
                )
            )

        morse = LETTER_SEPARATOR.join(tokens) + LETTER_SEPARATOR if tokens else ""
        return TranslationResult(morse, tuple(diagnostics))

    def encode_letter(self, letter: str) -> str | None:
        return self.table.render(letter)

    # Morse -> text
    def decode(self, morse: str) -> str:
        return self._finish(self.decode_with_report(morse), "decode")

    def decode_with_report(self, morse: str) -> TranslationResult:
        stripped = morse.strip()
        if not stripped:
            return TranslationResult("")

        offset = len(morse) - len(morse.lstrip())
        letters: list[str] = []
        diagnostics: list[Diagnostic] = []
        for token in stripped.split(LETTER_SEPARATOR):
            if token == WORD_SEPARATOR:
                letters.append(" ")
            else:
                letter, problems = self._decode_token(token, offset)
                letters.append(letter)
                diagnostics.extend(problems)
            offset += len(token) + 1

        return TranslationResult("".join(letters), tuple(diagnostics))

    def decode_token(self, token: str) -> str:
        """Decode one letter token; never raises."""
        letter = self.trie.resolve(token)
        return letter if letter is not None else NO_LETTER

    def _decode_token(self, token: str, offset: int) -> tuple[str, list[Diagnostic]]:
        problems: list[Diagnostic] = []
        current = None
        for step in self.trie.walk(token):
            current = step.node
            if not step.moved:
                problems.append(
                    Diagnostic(
                        DiagnosticKind.UNKNOWN_SYMBOL,
                        offset + step.index,
                        token,
                        _tr("Symbol {0!r} at {1} does not continue token {2!r}").format(
                            step.char, offset + step.index, token
                        ),
                    )
                )

        letter = self.trie.node(current).letter if current is not None else None
        if letter is None:
            problems.append(
                Diagnostic(
                    DiagnosticKind.INCOMPLETE_OR_INVALID_TOKEN,
                    offset,
                    token,
                    _tr("Token {0!r} at {1} is not a letter").format(token, offset),
                )
            )
            return NO_LETTER, problems
        return letter, problems

    def _finish(self, result: TranslationResult, direction: str) -> str:
        if result.diagnostics:
            if self.log_diagnostics:
                logger.debug(
                    "%s: %d diagnostic(s), first: %s",
                    direction,
                    len(result.diagnostics),
                    result.diagnostics[0].message,
                )
            if self.strict:
                raise TranslationError(result)
        return result.text


_default_codec = MorseCodec()


def encode(text: str) -> str:
    return _default_codec.encode(text)


def decode(morse: str) -> str:
    return _default_codec.decode(morse)
