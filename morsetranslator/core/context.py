"""Shared application context and dependency factories."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable

from morsetranslator.codec import MorseCodec
from morsetranslator.utils.config_manager import ConfigManager
from .metadata import APP_NAME, APP_VERSION


logger = logging.getLogger(__name__)

CodecFactory = Callable[..., MorseCodec]


@dataclass
class AppContext:
    """Holds the config and the one codec a host process shares."""

    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    config_manager: ConfigManager = field(default_factory=ConfigManager)
    codec_factory: CodecFactory = field(default=MorseCodec)
    _shared_codec: MorseCodec | None = field(default=None, init=False, repr=False)
    _codec_lock: RLock = field(default_factory=RLock, init=False, repr=False)

    def _build_codec(self) -> MorseCodec:
        strict = self.config_manager.get_strict_mode()
        codec = self.codec_factory(
            strict=strict,
            log_diagnostics=self.config_manager.get_log_diagnostics(),
        )
        logger.debug("Created %s codec", "strict" if strict else "permissive")
        return codec

    def get_codec(self) -> MorseCodec:
        with self._codec_lock:
            if self._shared_codec is None:
                self._shared_codec = self._build_codec()
            return self._shared_codec

    def reset_codec(self) -> MorseCodec:
        """Rebuild the shared codec, e.g. after the strict-mode setting changed."""
        new = self._build_codec()
        with self._codec_lock:
            self._shared_codec = new
        return new

    def translate(self, direction: str, source: str) -> str:
        codec = self.get_codec()
        if direction == "encode":
            result = codec.encode(source)
        elif direction == "decode":
            result = codec.decode(source)
        else:
            raise ValueError(f"unknown direction: {direction!r}")
        if self.config_manager.get_history_limit():
            self.config_manager.append_history(direction, source, result)
        return result
