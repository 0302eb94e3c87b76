"""Text <-> Morse code translation built on a binary decode trie."""

from .codec import MorseCodec, decode, encode
from .core.metadata import APP_NAME, APP_VERSION

__version__ = APP_VERSION

__all__ = ["APP_NAME", "APP_VERSION", "MorseCodec", "decode", "encode"]
