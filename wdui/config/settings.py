"""
Settings management for WDUI.

Handles loading, saving, and updating the persisted settings record.
"""

import json
import logging
import os
import time
import typing
from dataclasses import dataclass, field, fields, Field
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from PySide6.QtCore import QObject, Signal

from ..utils.version import VER_PACKED
from .defaults import (
    SETTINGS_FILENAME,
    BACKUP_INFIX,
    DATA_DIR_ENV,
    DEFAULT_LANGUAGE,
)

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


class ThemeSetting(IntEnum):
    """Window theme. Persisted as its integer value."""

    FLUENT = 0
    FLUENT_THIN = 1
    MICA = 2
    MICA_ALT = 3
    SYSTEM = 4


@dataclass
class SettingsData:
    """The persisted settings record."""

    save_version: int = field(
        default=VER_PACKED,
        metadata={"json": "SaveVersion", "writable": False},
    )
    theme: ThemeSetting = field(
        default=ThemeSetting.FLUENT,
        metadata={"json": "Theme"},
    )
    debug_logging_enabled: bool = field(
        default=False,
        metadata={"json": "DebugLoggingEnabled"},
    )
    language: str = field(
        default=DEFAULT_LANGUAGE,
        metadata={"json": "Language"},
    )
    downloaded_wd_version: Optional[str] = field(
        default=None,
        metadata={"json": "DownloadedWDVer"},
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict keyed by the on-disk field names."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            result[f.metadata["json"]] = value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SettingsData":
        """
        Build a record from parsed JSON.

        Missing keys keep their defaults; unknown keys are ignored.

        Raises:
            TypeError: If data is not an object or a value has the wrong type
            ValueError: If a value cannot be converted
        """
        if not isinstance(data, dict):
            raise TypeError(f"Settings root must be an object, got {type(data).__name__}")

        record = cls()
        for f in fields(cls):
            key = f.metadata["json"]
            if key in data:
                setattr(record, f.name, convert_value(data[key], f.type, strict=True))
        return record


def _optional_inner(target: Any) -> Optional[Any]:
    """Return T for Optional[T], otherwise None."""
    if typing.get_origin(target) is Union:
        args = [arg for arg in typing.get_args(target) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return None


def _require_json_type(value: Any, target: Any):
    """Reject a parsed JSON value whose type does not match the field."""
    if isinstance(target, type) and issubclass(target, Enum):
        # Enums are stored as integers; member names are also accepted
        if isinstance(value, str) and not value.strip().lstrip('-').isdigit():
            return
        expected = int
    else:
        expected = target

    if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
        raise TypeError(f"Expected {expected.__name__}, got {type(value).__name__}")


def convert_value(value: Any, target: Any, strict: bool = False) -> Any:
    """
    Convert a value to a settings field type.

    Args:
        value: Incoming value (from JSON or from a caller)
        target: Field type, e.g. bool, ThemeSetting, Optional[str]
        strict: Require the JSON type to match the field (used when
            loading from disk); callers of set_setting get loose conversion

    Returns:
        The converted value

    Raises:
        TypeError: If the value cannot represent the type at all
        ValueError: If the value is of a usable type but out of range
    """
    inner = _optional_inner(target)
    if inner is not None:
        if value is None:
            return None
        target = inner

    if value is None:
        raise TypeError("None is not allowed here")

    if strict:
        _require_json_type(value, target)

    if isinstance(target, type) and issubclass(target, Enum):
        if isinstance(value, target):
            return value
        if isinstance(value, str):
            text = value.strip()
            for member in target:
                if member.name.lower() == text.lower():
                    return member
            if text.lstrip('-').isdigit():
                return target(int(text))
            raise ValueError(f"{value!r} is not a valid {target.__name__}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Cannot convert {type(value).__name__} to {target.__name__}")
        return target(value)

    if target is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
            raise ValueError(f"{value!r} is not a boolean")
        if isinstance(value, int):
            return bool(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to bool")

    if target is int:
        if isinstance(value, bool):
            number = int(value)
        elif isinstance(value, (int, str)):
            number = int(value)
        else:
            raise TypeError(f"Cannot convert {type(value).__name__} to int")
        # Settings integers are unsigned
        if number < 0:
            raise ValueError(f"{number} is negative")
        return number

    if target is str:
        if isinstance(value, Enum):
            return value.name
        return str(value)

    raise TypeError(f"Unsupported settings type: {target!r}")


def get_data_dir() -> Path:
    """
    Get the per-user data directory.

    ``WDUI_DATA_DIR`` overrides the platform default.

    Returns:
        Path to data directory (not created)
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)

    if os.name == 'nt':  # Windows
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
    else:  # Linux/macOS
        base = os.environ.get('XDG_DATA_HOME', os.path.expanduser('~/.local/share'))
    return Path(base) / 'wdui'


class Settings(QObject):
    """
    Application settings manager.

    Owns the single SettingsData record and keeps it in sync with
    ``settings.json`` in the user's data directory.

    Path:
        Linux/macOS: ~/.local/share/wdui/settings.json
        Windows: %APPDATA%\\wdui\\settings.json

    Signals:
        saved: Emitted after every successful save
    """

    saved = Signal()

    def __init__(self, data_dir: Optional[Union[str, Path]] = None,
                 parent: Optional[QObject] = None):
        """
        Initialize settings manager and load the settings file.

        Args:
            data_dir: Directory holding settings.json (default: get_data_dir())
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self.data_dir = Path(data_dir) if data_dir is not None else get_data_dir()
        self.settings_file = self.data_dir / SETTINGS_FILENAME
        self.data = self.defaults()

        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.load()

    @staticmethod
    def defaults() -> SettingsData:
        """Return a fresh record holding the default values."""
        return SettingsData()

    def load(self):
        """
        Load settings from file.

        Generates defaults if the file is missing or unreadable, and resets
        (with a backup) if the file was written by a newer version.
        """
        if not self.settings_file.exists():
            logger.warning("Settings file doesn't exist")
            self.generate()
            return

        try:
            raw = json.loads(self.settings_file.read_text(encoding="utf-8-sig"))
            if raw is None:
                logger.info("Settings file is empty, using defaults")
                return
            loaded = SettingsData.from_dict(raw)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error loading settings: {e}")
            self.generate()
            return

        if loaded.save_version > VER_PACKED:
            self.reset()
            logger.info(
                f"Settings were reset due to the settings file version being too new. "
                f"({loaded.save_version})"
            )
            return

        self.data = loaded
        logger.info(f"Loaded settings from {self.settings_file}")

        if loaded.save_version < VER_PACKED:
            self.migrate(loaded.save_version)

    def migrate(self, from_version: int):
        """
        Bring a record written by an older version up to date.

        Missing fields already carry their defaults after loading, so
        migrating only restamps the file with the current version.

        Args:
            from_version: Packed version found in the file
        """
        logger.info(f"Migrating settings from version {from_version} to {VER_PACKED}")
        self.save()

    def save(self) -> bool:
        """
        Save current settings to file.

        The file is replaced atomically. Emits ``saved`` on success.

        Returns:
            True if the file was written
        """
        tmp_file = self.settings_file.with_name(self.settings_file.name + ".tmp")
        try:
            logger.info("Saving settings...")
            self.data.save_version = VER_PACKED
            payload = json.dumps(self.data.to_dict(), indent=2)

            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_file.write_text(payload, encoding="utf-8")
            os.replace(tmp_file, self.settings_file)
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            try:
                tmp_file.unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.debug(f"Could not remove {tmp_file}: {cleanup_error}")
            return False

        logger.debug(f"Saved settings to {self.settings_file}")
        self.saved.emit()
        return True

    def set_setting(self, name: str, value: Any) -> bool:
        """
        Set a single setting by name and persist it.

        Args:
            name: Attribute name (``debug_logging_enabled``) or JSON key
                (``DebugLoggingEnabled``)
            value: New value, converted to the field's type

        Returns:
            True if the value was applied and saved
        """
        target = self._find_field(name)
        if target is None or not target.metadata.get("writable", True):
            logger.error(f"Setting {name} does not exist or is not writable")
            return False

        try:
            converted = convert_value(value, target.type)
        except (ValueError, TypeError) as e:
            logger.warning(f"Error setting {name}: {e}")
            return False

        setattr(self.data, target.name, converted)
        logger.debug(f"Setting {target.name} = {converted!r}")
        return self.save()

    def reset(self):
        """Back up the current file and replace it with defaults."""
        try:
            self.backup()
        except OSError as e:
            logger.error(f"Failed to back up settings: {e}")
        self.generate()
        logger.info("Settings have been reset")

    def backup(self) -> Path:
        """
        Rename the settings file to ``settings.json.old_<unix_ms>``.

        An existing backup is never overwritten; the stamp is bumped
        until the name is free.

        Returns:
            Path of the backup file

        Raises:
            OSError: If the file cannot be renamed
        """
        stamp = int(time.time() * 1000)
        while True:
            backup_file = self.settings_file.with_name(
                f"{self.settings_file.name}{BACKUP_INFIX}{stamp}"
            )
            if not backup_file.exists():
                break
            stamp += 1
        logger.info(f"Backing up {self.settings_file.name} to {backup_file}")
        return self.settings_file.rename(backup_file)

    def generate(self):
        """Replace in-memory settings with defaults and write them out."""
        logger.info("Generating settings file...")
        self.data = self.defaults()
        self.save()

    @staticmethod
    def _find_field(name: str) -> Optional[Field]:
        for f in fields(SettingsData):
            if name in (f.name, f.metadata["json"]):
                return f
        return None
