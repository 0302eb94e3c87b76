"""Process bootstrap for hosts embedding the translator."""

from __future__ import annotations

import logging

from morsetranslator.core.context import AppContext
from morsetranslator.utils.config_manager import ConfigManager


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _set_app_version(context: AppContext) -> None:
    context.config_manager.set_current_version(context.app_version)
    context.config_manager.sync()


def build_context(config_dir: str = "resources/config", log_level: int | str | None = None) -> AppContext:
    if log_level is not None:
        configure_logging(log_level)
    context = AppContext(config_manager=ConfigManager(db_dir=config_dir))
    _set_app_version(context)
    # Build before any caller can race on first use.
    context.get_codec()
    return context
