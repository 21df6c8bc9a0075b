"""Module: json_config_manager.py

Author: Michael Economou
Date: 2026-02-02

JSON-based configuration manager.
Handles serialization and loading of configuration categories with a
backup of the previous file and thread-safe access.
"""

import json
import shutil
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from attredit.config import (
    APP_NAME,
    APP_VERSION,
    DEBUG_RESET_CONFIG,
    DEFAULT_HIDDEN_ATTRIBUTE_CODES,
    PREVIEW_PLACEHOLDER,
)
from attredit.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ConfigCategory:
    """Base class for configuration categories with defaults."""

    def __init__(self, name: str, defaults: dict[str, Any]):
        """Initialize configuration category with name and default values."""
        self.name = name
        self.defaults = defaults
        self._data = defaults.copy()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with fallback to default."""
        return self._data.get(key, default if default is not None else self.defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set configuration value."""
        self._data[key] = value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self._data.copy()

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load from dictionary, applying defaults for missing keys."""
        self._data = self.defaults.copy()
        self._data.update(data)


class DialogsConfig(ConfigCategory):
    """Configuration for dialog windows (geometry)."""

    def __init__(self) -> None:
        defaults: dict[str, Any] = {"chattr_geometry": None}
        super().__init__("dialogs", defaults)


class AttributesConfig(ConfigCategory):
    """User preferences for the attribute form."""

    def __init__(self) -> None:
        defaults = {
            "hidden_codes": list(DEFAULT_HIDDEN_ATTRIBUTE_CODES),
            "placeholder": PREVIEW_PLACEHOLDER,
        }
        super().__init__("attributes", defaults)

    def hidden_codes(self) -> set[str]:
        """Attribute codes the user chose not to show in the form.

        A value that is not a list falls back to the default, and entries
        that are not single characters are dropped.
        """
        value = self.get("hidden_codes", [])
        if not isinstance(value, list):
            logger.warning("[AttributesConfig] Invalid hidden_codes %r, using defaults", value)
            return set(DEFAULT_HIDDEN_ATTRIBUTE_CODES)

        invalid = [code for code in value if not (isinstance(code, str) and len(code) == 1)]
        if invalid:
            logger.warning("[AttributesConfig] Ignoring invalid hidden codes %r", invalid)
        return {code for code in value if code not in invalid}

    def placeholder(self) -> str:
        """Single character shown in the preview for unset attributes."""
        value = self.get("placeholder", PREVIEW_PLACEHOLDER)
        if not isinstance(value, str) or len(value) != 1:
            logger.warning(
                "[AttributesConfig] Invalid placeholder %r, using %r",
                value,
                PREVIEW_PLACEHOLDER,
            )
            return PREVIEW_PLACEHOLDER
        return value


class JSONConfigManager:
    """JSON-based configuration manager with category registry."""

    def __init__(self, app_name: str = "app", config_dir: str | None = None):
        """Initialize configuration manager with app name and config directory."""
        self.app_name = app_name
        self.config_dir = Path(config_dir or self._get_default_config_dir())
        self.config_file = self.config_dir / "config.json"
        self.backup_file = self.config_dir / "config.json.bak"

        self._lock = threading.RLock()
        self._categories: dict[str, ConfigCategory] = {}

        self.config_dir.mkdir(parents=True, exist_ok=True)

        logger.debug(
            "[JSONConfigManager] Initialized for '%s' with dir: %s",
            app_name,
            self.config_dir,
            extra={"dev_only": True},
        )

    def _get_default_config_dir(self) -> str:
        """Get default configuration directory using AppPaths."""
        from attredit.utils.paths import AppPaths

        return str(AppPaths.get_user_data_dir())

    def register_category(self, category: ConfigCategory) -> None:
        """Register a configuration category."""
        with self._lock:
            self._categories[category.name] = category

    def get_category(
        self, category_name: str, create_if_not_exists: bool = False
    ) -> ConfigCategory | None:
        """Get configuration category by name."""
        category = self._categories.get(category_name)
        if not category and create_if_not_exists:
            logger.debug("Category '%s' not found, creating it dynamically.", category_name)
            category = ConfigCategory(category_name, {})
            self.register_category(category)
        return category

    def list_categories(self) -> list[str]:
        """Get list of registered category names."""
        return list(self._categories.keys())

    def load(self) -> bool:
        """Load configuration from JSON file."""
        with self._lock:
            if DEBUG_RESET_CONFIG and self.config_file.exists():
                logger.info("[DEBUG] Deleting config file for fresh start: %s", self.config_file)
                try:
                    self.config_file.unlink()
                except OSError as e:
                    logger.error("[DEBUG] Failed to delete config file: %s", e)

            if not self.config_file.exists():
                logger.info(
                    "[JSONConfigManager] No config file found, using defaults",
                    extra={"dev_only": True},
                )
                return True

            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                logger.error("[JSONConfigManager] Failed to load configuration: %s", e)
                return False

            if not isinstance(data, dict):
                logger.error(
                    "[JSONConfigManager] Configuration root must be an object, got %s",
                    type(data).__name__,
                )
                return False

            for category_name, category in self._categories.items():
                if isinstance(data.get(category_name), dict):
                    category.from_dict(data[category_name])

            logger.info(
                "[JSONConfigManager] Configuration loaded successfully",
                extra={"dev_only": True},
            )
            return True

    def save(self, create_backup: bool = True) -> bool:
        """Save configuration to JSON file."""
        with self._lock:
            data: dict[str, Any] = {
                name: category.to_dict() for name, category in self._categories.items()
            }
            data["_metadata"] = {
                "last_saved": datetime.now().isoformat(),
                "version": f"v{APP_VERSION}",
                "app_name": self.app_name,
            }

            try:
                if create_backup and self.config_file.exists():
                    shutil.copy2(self.config_file, self.backup_file)

                with open(self.config_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
            except (OSError, TypeError) as e:
                logger.error("[JSONConfigManager] Failed to save configuration: %s", e)
                return False

            logger.debug("[JSONConfigManager] Configuration saved successfully")
            return True


_app_config_manager: JSONConfigManager | None = None


def get_app_config_manager() -> JSONConfigManager:
    """Return the process-wide config manager, loading it on first use."""
    global _app_config_manager
    if _app_config_manager is None:
        manager = JSONConfigManager(app_name=APP_NAME)
        manager.register_category(DialogsConfig())
        manager.register_category(AttributesConfig())
        manager.load()
        _app_config_manager = manager
    return _app_config_manager


def reset_app_config_manager() -> None:
    """Drop the process-wide config manager (for testing)."""
    global _app_config_manager
    _app_config_manager = None
