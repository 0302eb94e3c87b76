from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QCoreApplication

if TYPE_CHECKING:
    from .models import TranslationResult


def _tr(text: str) -> str:
    return QCoreApplication.translate("MorseErrors", text)


class MorseError(Exception):
    """Base class for every error raised by the codec package."""


class TableError(MorseError, ValueError):
    """The code table cannot be turned into a valid codec."""


class InvalidPatternError(TableError):
    def __init__(self, letter: str, pattern: str, reason: str) -> None:
        self.letter = letter
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            _tr("Invalid table entry {0!r} -> {1!r}: {2}").format(letter, pattern, reason)
        )


class DuplicatePatternError(TableError):
    def __init__(self, pattern: str, existing: str, duplicate: str) -> None:
        self.pattern = pattern
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            _tr("Pattern {0!r} is assigned to both {1!r} and {2!r}").format(pattern, existing, duplicate)
        )


class TranslationError(MorseError):
    """Strict-mode translation hit at least one diagnostic.

    ``result`` still carries the best-effort text, so callers that catch the
    error can fall back to it.
    """

    def __init__(self, result: TranslationResult) -> None:
        self.result = result
        first = result.diagnostics[0] if result.diagnostics else None
        detail = first.message if first is not None else ""
        super().__init__(
            _tr("Translation failed with {0} problem(s): {1}").format(len(result.diagnostics), detail)
        )
