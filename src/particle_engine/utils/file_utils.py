# particle_engine/utils/file_utils.py
import os
import sys
import json
import datetime
from typing import Dict, Any

# Root for logs/config/assets. Defaults to the working directory so an installed
# package never writes into site-packages.
PROJECT_ROOT = os.path.abspath(os.environ.get('PARTICLE_ENGINE_HOME', os.getcwd()))
LOGS_DIR = os.path.join(PROJECT_ROOT, 'logs')
LOG_FILE = os.path.join(LOGS_DIR, 'engine_log.txt')


class FileUtils:
    """
    Utility class for file system and logging operations in the engine.
    Log lines always go to the console; file output is enabled by startup.
    """

    _log_file = None

    @staticmethod
    def set_log_file(path: str | None):
        """Enables file logging to `path` (None disables it)."""
        if path:
            FileUtils.create_dirs_if_not_exist(os.path.dirname(path))
        FileUtils._log_file = path

    @staticmethod
    def create_dirs_if_not_exist(path: str):
        """Creates a directory and its parents if they don't exist."""
        if path:
            os.makedirs(path, exist_ok=True)

    # --- Logging ---

    @staticmethod
    def _write_log(log_entry: str):
        """Internal helper to write the log entry to console and, if enabled, file."""
        print(log_entry)

        if FileUtils._log_file is None:
            return
        try:
            with open(FileUtils._log_file, 'a', encoding='utf-8') as f:
                f.write(log_entry + '\n')
        except OSError as e:
            print(f"[FATAL LOG ERROR] Could not write to log file: {e}", file=sys.stderr)

    @staticmethod
    def log_message(message: str, level: str = "INFO"):
        """Logs a standard message."""
        timestamp = datetime.datetime.now().strftime("[%Y-%m-%d %H:%M:%S]")
        log_entry = f"{timestamp} [{level.upper():<5}] {message}"
        FileUtils._write_log(log_entry)

    @staticmethod
    def log_error(message: str):
        """Logs an error message."""
        FileUtils.log_message(message, level="ERROR")

    @staticmethod
    def log_warning(message: str):
        """Logs a warning message."""
        FileUtils.log_message(message, level="WARN")

    # --- File IO (JSON) ---

    @staticmethod
    def read_json(file_path: str) -> Dict[str, Any]:
        """Reads and parses a JSON file. Raises on missing or malformed files."""
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @staticmethod
    def write_json(file_path: str, data: Dict[str, Any]):
        """Writes a dictionary to a JSON file atomically (temp file + rename)."""
        FileUtils.create_dirs_if_not_exist(os.path.dirname(file_path))
        temp_file = file_path + ".tmp"
        with open(temp_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
        os.replace(temp_file, file_path)
