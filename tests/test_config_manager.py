"""
Tests for ConfigManager: include system, fallback and typed accessors.
"""

import pytest

from codegen.firmware import FirmwareOptions
from managers.config_manager import ConfigError, ConfigManager
from models.enums import LogLevel, PatternID
from models.strip_config import StripConfig


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestShippedConfig:

    def test_shipped_config_loads(self):
        config = ConfigManager()
        config.load()
        assert config.get_strip_config() == StripConfig(led_count=20, brightness=100, speed=50)
        assert config.get_default_pattern() is PatternID.RAINBOW
        assert config.get_firmware_options() == FirmwareOptions()
        assert config.api_port == 8000


class TestLoading:

    def test_monolithic_config(self, tmp_path):
        main = write(tmp_path / "config.yaml", """
strip:
  led_count: 60
  pattern: police
firmware:
  led_pin: 5
logging:
  level: debug
""")
        config = ConfigManager(main, tmp_path / "missing.yaml")
        config.load()

        strip = config.get_strip_config()
        assert strip.led_count == 60
        assert strip.brightness == 100   # default filled in
        assert config.get_default_pattern() is PatternID.POLICE
        assert config.get_firmware_options().led_pin == 5
        assert config.get_firmware_options().led_type == "WS2812B"
        assert config.log_level is LogLevel.DEBUG

    def test_include_files_are_merged(self, tmp_path):
        write(tmp_path / "strip.yaml", "strip:\n  speed: 90\n")
        write(tmp_path / "server.yaml", "api:\n  port: 9100\n")
        main = write(tmp_path / "config.yaml", "include:\n  - strip.yaml\n  - server.yaml\n")

        config = ConfigManager(main, tmp_path / "missing.yaml")
        config.load()

        assert config.get_strip_config().speed == 90
        assert config.api_port == 9100
        assert config.api_host == "0.0.0.0"

    def test_missing_include_falls_back_to_defaults_file(self, tmp_path):
        main = write(tmp_path / "config.yaml", "include:\n  - nope.yaml\n")
        defaults = write(tmp_path / "defaults.yaml", "strip:\n  led_count: 7\n")

        config = ConfigManager(main, defaults)
        config.load()
        assert config.get_strip_config().led_count == 7

    def test_invalid_yaml_falls_back(self, tmp_path):
        main = write(tmp_path / "config.yaml", "strip: [unclosed\n")
        defaults = write(tmp_path / "defaults.yaml", "strip:\n  brightness: 40\n")

        config = ConfigManager(main, defaults)
        config.load()
        assert config.get_strip_config().brightness == 40

    def test_non_mapping_root_falls_back(self, tmp_path):
        main = write(tmp_path / "config.yaml", "- just\n- a list\n")
        defaults = write(tmp_path / "defaults.yaml", "strip:\n  speed: 10\n")

        config = ConfigManager(main, defaults)
        config.load()
        assert config.get_strip_config().speed == 10

    def test_empty_section_keeps_defaults(self, tmp_path):
        main = write(tmp_path / "config.yaml", "strip:\nfirmware:\n  led_pin: 3\n")
        config = ConfigManager(main, tmp_path / "missing.yaml")
        config.load()

        assert config.get_strip_config() == StripConfig(led_count=20, brightness=100, speed=50)
        assert config.get_default_pattern() is PatternID.RAINBOW
        assert config.get_firmware_options().led_pin == 3

    def test_non_mapping_section_falls_back(self, tmp_path):
        main = write(tmp_path / "config.yaml", "strip: 60\n")
        defaults = write(tmp_path / "defaults.yaml", "strip:\n  led_count: 12\n")

        config = ConfigManager(main, defaults)
        config.load()
        assert config.get_strip_config().led_count == 12

    def test_non_mapping_section_in_both_files_raises(self, tmp_path):
        main = write(tmp_path / "config.yaml", "api: 8000\n")
        defaults = write(tmp_path / "defaults.yaml", "logging: [debug]\n")

        config = ConfigManager(main, defaults)
        with pytest.raises(ConfigError):
            config.load()

    def test_both_files_missing_raises(self, tmp_path):
        config = ConfigManager(tmp_path / "a.yaml", tmp_path / "b.yaml")
        with pytest.raises(ConfigError):
            config.load()


class TestAccessors:

    def test_out_of_range_values_are_clamped(self, tmp_path):
        main = write(tmp_path / "config.yaml", "strip:\n  led_count: 0\n  brightness: 1\n  speed: 500\n")
        config = ConfigManager(main, tmp_path / "missing.yaml")
        config.load()
        assert config.get_strip_config() == StripConfig(led_count=1, brightness=10, speed=100)

    def test_unknown_pattern_falls_back_to_rainbow(self, tmp_path):
        main = write(tmp_path / "config.yaml", "strip:\n  pattern: lava\n")
        config = ConfigManager(main, tmp_path / "missing.yaml")
        config.load()
        assert config.get_default_pattern() is PatternID.RAINBOW

    def test_unknown_log_level_falls_back_to_info(self, tmp_path):
        main = write(tmp_path / "config.yaml", "logging:\n  level: chatty\n  use_colors: false\n")
        config = ConfigManager(main, tmp_path / "missing.yaml")
        config.load()
        assert config.log_level is LogLevel.INFO
        assert config.use_colors is False
