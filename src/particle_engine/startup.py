# particle_engine/startup.py

from particle_engine.core.engine_config import EngineConfig
from particle_engine.managers.particle_presets import register_preset
from particle_engine.utils.file_utils import FileUtils, LOG_FILE, PROJECT_ROOT


def _create_directories():
    """Create the engine home directories."""
    FileUtils.log_message("Setting up engine directories...")
    for path in (EngineConfig.CONFIG_DIR, EngineConfig.ASSETS_DIR, EngineConfig.LOGS_DIR):
        FileUtils.create_dirs_if_not_exist(path)


def _register_user_presets(config: EngineConfig):
    """Registers presets declared in settings.json. Broken entries are logged and skipped."""
    for name, preset in config.presets.items():
        try:
            register_preset(name, preset)
            FileUtils.log_message(f"Registered preset '{name}' from settings.")
        except (ValueError, TypeError) as e:
            FileUtils.log_error(f"Skipping preset '{name}': {e}")


def init_engine_environment(config_file: str = None) -> EngineConfig:
    """Initialize engine directories, logging and configuration."""
    _create_directories()
    config = EngineConfig(config_file)

    if config.log_settings.get('log_to_file', True):
        FileUtils.set_log_file(LOG_FILE)

    FileUtils.log_message("--- Particle Engine Startup ---")
    FileUtils.log_message(f"Engine Home: {PROJECT_ROOT}")
    _register_user_presets(config)
    FileUtils.log_message("Startup complete.")
    return config


if __name__ == "__main__":
    init_engine_environment()
