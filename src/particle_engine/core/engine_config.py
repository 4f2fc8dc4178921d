# particle_engine/core/engine_config.py
import copy
import json
import os

from particle_engine.utils.file_utils import FileUtils, PROJECT_ROOT


class EngineConfig:
    """
    Manages the persistent demo and display settings, loading them from
    settings.json and providing centralized access.

    Settings live under the engine home directory ($PARTICLE_ENGINE_HOME or the
    working directory), in config/settings.json.
    """

    CONFIG_DIR = os.path.join(PROJECT_ROOT, 'config')
    CONFIG_FILE = os.path.join(CONFIG_DIR, 'settings.json')
    ASSETS_DIR = os.path.join(PROJECT_ROOT, 'assets')
    LOGS_DIR = os.path.join(PROJECT_ROOT, 'logs')

    def __init__(self, config_file: str = None):
        """Loads the configuration file, or initializes it with defaults."""
        self.config_file = config_file or self.CONFIG_FILE
        self._config_data = {}
        self.load_config()

    def _get_default_config(self):
        """Returns the default configuration structure."""
        return {
            "engine_version": "1.0.0",
            "display_settings": {
                "width": 100,
                "height": 100,
                "scale": 3,            # device-pixel multiplier for crisp pixel art
                "target_fps": 60,
                "background_color": "#1e1e1e",
                "window_title": "Particle Playground"
            },
            "asset_settings": {
                "sprite_atlas": os.path.join(self.ASSETS_DIR, 'particles.png')
            },
            "demo_settings": {
                "preset": "angle",
                "burst_count": 5
            },
            "log_settings": {
                "log_to_file": True
            },
            "presets": {}  # user emitter presets, same shape as the built-in ones
        }

    def load_config(self):
        """Loads configuration from the settings file, merging it over the defaults."""
        default_data = self._get_default_config()

        if not os.path.exists(self.config_file):
            self._config_data = default_data
            self.save_config()
            FileUtils.log_message(f"Created default configuration file: {self.config_file}")
            return

        try:
            loaded_data = FileUtils.read_json(self.config_file)
        except json.JSONDecodeError as e:
            FileUtils.log_error(f"Corrupted settings.json ({e}). Using default config.")
            self._config_data = default_data
            return
        except OSError as e:
            FileUtils.log_error(f"Error reading config file: {e}. Using default config.")
            self._config_data = default_data
            return

        if not isinstance(loaded_data, dict):
            FileUtils.log_error("settings.json does not contain an object. Using default config.")
            self._config_data = default_data
            return

        # Merge loaded data with defaults (one level deep for nested dicts)
        self._config_data = default_data
        for key, value in loaded_data.items():
            if isinstance(value, dict) and isinstance(self._config_data.get(key), dict):
                self._config_data[key].update(value)
            else:
                self._config_data[key] = value

        FileUtils.log_message(f"Loaded configuration from {self.config_file}")

    def save_config(self):
        """Saves the current configuration data back to the settings file."""
        try:
            FileUtils.write_json(self.config_file, self._config_data)
            FileUtils.log_message(f"Configuration saved to {self.config_file}")
        except OSError as e:
            FileUtils.log_error(f"Could not write configuration file: {e}")

    # --- Property Accessors (read-only for settings dicts) ---

    @property
    def display_settings(self):
        return self._config_data.get("display_settings", {})

    @property
    def asset_settings(self):
        return self._config_data.get("asset_settings", {})

    @property
    def demo_settings(self):
        return self._config_data.get("demo_settings", {})

    @property
    def log_settings(self):
        return self._config_data.get("log_settings", {})

    @property
    def presets(self):
        """User-declared emitter presets (copies, safe to mutate)."""
        return copy.deepcopy(self._config_data.get("presets", {}))

    def get_setting(self, category, key, default=None):
        """Generic method to retrieve a setting."""
        return self._config_data.get(category, {}).get(key, default)

    def set_setting(self, category, key, value):
        """
        Generic method to set a setting.
        Note: Caller must explicitly call save_config() to persist changes.
        """
        if isinstance(self._config_data.get(category), dict):
            self._config_data[category][key] = value
        else:
            FileUtils.log_error(f"Attempted to set setting in unknown category: {category}")
