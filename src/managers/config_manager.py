"""
Config Manager

Loads the YAML configuration (with include support) and exposes typed
views of it: StripConfig, FirmwareOptions, clock / API / logging settings.
"""

import copy
import yaml
from pathlib import Path
from typing import Any, Dict, List, Union

from codegen.firmware import FirmwareOptions
from models.enums import LogLevel, PatternID
from models.strip_config import StripConfig
from patterns.engine import resolve_pattern_id
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "strip": {"led_count": 20, "brightness": 100, "speed": 50, "pattern": "rainbow"},
    "clock": {"min_interval_ms": 1},
    "firmware": {"led_pin": 6, "led_type": "WS2812B", "color_order": "GRB"},
    "api": {"host": "0.0.0.0", "port": 8000},
    "logging": {"level": "INFO", "use_colors": True},
}


class ConfigError(Exception):
    """Configuration file is unreadable or has the wrong shape"""


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes the include: directive to merge modular
    YAML files. Falls back to factory_defaults.yaml when the main file
    cannot be loaded. Missing keys fall back to DEFAULTS section by section.

    Example:
        config = ConfigManager()
        config.load()

        strip = config.get_strip_config()       # StripConfig (clamped)
        fw = config.get_firmware_options()      # FirmwareOptions
        host, port = config.api_host, config.api_port
    """

    def __init__(
        self,
        config_path: Union[str, Path] = "config/config.yaml",
        defaults_path: Union[str, Path] = "config/factory_defaults.yaml",
    ):
        """
        Args:
            config_path: Path to main config.yaml (relative paths resolve from src/)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = self._resolve(config_path)
        self.factory_defaults_path = self._resolve(defaults_path)
        self.data: Dict[str, Any] = copy.deepcopy(DEFAULTS)

    @staticmethod
    def _resolve(path: Union[str, Path]) -> Path:
        path = Path(path)
        return path if path.is_absolute() else SRC_DIR / path

    # ===== Loading =====

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Fallback to factory defaults on failure
        4. Merge over built-in DEFAULTS

        Returns:
            Merged config data dict

        Raises:
            ConfigError: Both the main file and the factory defaults failed
        """
        try:
            loaded = self._load_file(self.config_path)
            if "include" in loaded:
                log.info("Using include-based configuration")
                loaded = self._load_with_includes(loaded["include"], self.config_path.parent)
            else:
                log.info("Using monolithic configuration")
            self.data = self._merge_defaults(loaded)

        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            try:
                self.data = self._merge_defaults(self._load_file(self.factory_defaults_path))
            except Exception as defaults_ex:
                raise ConfigError(
                    f"Cannot load {self.config_path} or {self.factory_defaults_path}: {defaults_ex}"
                ) from defaults_ex

        log.info("Config loaded", sections=str(list(self.data.keys())))
        return self.data

    @staticmethod
    def _load_file(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path.name} must contain a mapping, got {type(data).__name__}")
        return data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["strip.yaml", "firmware.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                file_data = self._load_file(filepath)
                merged.update(file_data)
                log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except Exception as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        return merged

    @staticmethod
    def _merge_defaults(loaded: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge loaded sections over DEFAULTS key by key

        An empty section (`strip:` with nothing under it) keeps its defaults.

        Raises:
            ConfigError: A known section is not a mapping
        """
        merged = copy.deepcopy(DEFAULTS)
        for section, values in loaded.items():
            if section not in merged:
                merged[section] = values
            elif values is None:
                continue
            elif isinstance(values, dict):
                merged[section].update(values)
            else:
                raise ConfigError(
                    f"Section '{section}' must be a mapping, got {type(values).__name__}"
                )
        return merged

    # ===== Typed accessors =====

    def get_strip_config(self) -> StripConfig:
        strip = self.data["strip"]
        return StripConfig.clamped(
            led_count=strip["led_count"],
            brightness=strip["brightness"],
            speed=strip["speed"],
        )

    def get_default_pattern(self) -> PatternID:
        name = str(self.data["strip"]["pattern"])
        pattern = resolve_pattern_id(name)
        if pattern is None:
            log.warn(f"Unknown default pattern '{name}', using rainbow")
            return PatternID.RAINBOW
        return pattern

    def get_firmware_options(self) -> FirmwareOptions:
        fw = self.data["firmware"]
        return FirmwareOptions(
            led_pin=int(fw["led_pin"]),
            led_type=str(fw["led_type"]),
            color_order=str(fw["color_order"]),
        )

    @property
    def min_interval_ms(self) -> int:
        return int(self.data["clock"]["min_interval_ms"])

    @property
    def api_host(self) -> str:
        return str(self.data["api"]["host"])

    @property
    def api_port(self) -> int:
        return int(self.data["api"]["port"])

    @property
    def log_level(self) -> LogLevel:
        level = str(self.data["logging"]["level"])
        return EnumHelper.from_string(LogLevel, level, default=LogLevel.INFO)

    @property
    def use_colors(self) -> bool:
        return bool(self.data["logging"]["use_colors"])
