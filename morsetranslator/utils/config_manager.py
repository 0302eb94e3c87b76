import json
import logging
import os

from PySide6.QtCore import QSettings

from morsetranslator.core.metadata import APP_VERSION


logger = logging.getLogger(__name__)


class ConfigManager:
    DEFAULT_HISTORY_LIMIT = 20

    def __init__(self, config_file="config.ini", db_dir="resources/config"):
        self.config_file = os.path.join(db_dir, config_file)
        os.makedirs(db_dir, exist_ok=True)
        self.settings = QSettings(self.config_file, QSettings.IniFormat)
        self.initialize_config()

    def initialize_config(self):
        """Ensure all required keys exist with sensible defaults."""
        default_values = {
            "Version/current_version": APP_VERSION,
            "Codec/strict_mode": False,
            "Codec/log_diagnostics": True,
            "Codec/history": json.dumps([]),
            "Codec/history_limit": self.DEFAULT_HISTORY_LIMIT,
        }

        for key, value in default_values.items():
            if not self.settings.contains(key):
                self.set_value(key, value)
        self.settings.sync()

    @staticmethod
    def _as_bool(value, default=False):
        if isinstance(value, bool):
            return value
        if value is None:
            return default
        return str(value).strip().lower() in ("true", "1", "yes", "on")

    def get_value(self, key, default=None, value_type=str):
        """Read config value and safely coerce type."""
        try:
            self.settings.sync()
            value = self.settings.value(key, default)
            if value is None:
                return default
            if value_type == bool:
                return self._as_bool(value, default if isinstance(default, bool) else False)
            if value_type == int:
                return int(float(value))
            if value_type == float:
                return float(value)
            if value_type == str:
                return str(value).strip().strip('"').strip("'")
            return value_type(value)
        except Exception as e:
            logger.warning("Failed to read config key %s: %s", key, e)
            return default

    def set_value(self, key, value):
        if value is None:
            value = ""
        self.settings.setValue(key, value)

    def sync(self):
        self.settings.sync()

    # App version
    def get_current_version(self):
        return self.get_value("Version/current_version", value_type=str)

    def set_current_version(self, value):
        self.set_value("Version/current_version", value)

    # Codec
    def get_strict_mode(self):
        return self.get_value("Codec/strict_mode", False, bool)

    def set_strict_mode(self, value):
        self.set_value("Codec/strict_mode", bool(value))

    def get_log_diagnostics(self):
        return self.get_value("Codec/log_diagnostics", True, bool)

    def set_log_diagnostics(self, value):
        self.set_value("Codec/log_diagnostics", bool(value))

    def get_history_limit(self):
        limit = self.get_value("Codec/history_limit", self.DEFAULT_HISTORY_LIMIT, int)
        return max(0, limit)

    def set_history_limit(self, value):
        self.set_value("Codec/history_limit", max(0, int(value)))

    def get_history(self):
        try:
            history = json.loads(self.get_value("Codec/history", "[]", value_type=str) or "[]")
        except ValueError as e:
            logger.warning("Discarding unreadable translation history: %s", e)
            return []
        return history if isinstance(history, list) else []

    def set_history(self, history):
        limit = self.get_history_limit()
        self.set_value("Codec/history", json.dumps(list(history)[-limit:] if limit else []))

    def append_history(self, direction, source, result):
        history = self.get_history()
        history.append({"direction": direction, "source": source, "result": result})
        self.set_history(history)
