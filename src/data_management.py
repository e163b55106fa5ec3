# This file contains data management logic: the key-value store the app
# state is saved into on shutdown and read back from on startup.
import os
import json
import tempfile
import logging

from src.models import AppState
from src.constants import (APP_KEY, THEME_KEY, WINDOW_KEY, STORAGE_FILENAME,
                           AUTO_SAVE_INTERVAL_MS, THEME_SYSTEM)
from src.utils import get_data_dir, normalize_theme

logger = logging.getLogger(__name__)


def default_storage_path():
    return os.path.join(get_data_dir(), STORAGE_FILENAME)


class Storage:
    """
    Key-value store kept in one JSON file.

    Values must be JSON serializable. Changes stay in memory until flush().
    """
    def __init__(self, path):
        self.path = path
        self.values = self._read()

    def _read(self):
        if not os.path.exists(self.path):
            logger.info(f"No saved state at {self.path}, starting fresh")
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read saved state from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Saved state in {self.path} is not a JSON object, ignoring it")
            return {}
        return data

    def get_value(self, key, default=None):
        return self.values.get(key, default)

    def set_value(self, key, value):
        self.values[key] = value

    def flush(self):
        """Write all values to disk, replacing the file in one step"""
        directory = os.path.dirname(self.path) or '.'
        os.makedirs(directory, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(prefix='.app-', suffix='.json', dir=directory)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(self.values, f, indent=2)
            os.replace(temp_path, self.path)
        except BaseException:
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise


class DataManagement:
    def __init__(self, app, storage):
        self.app = app
        self.storage = storage
        self.autosave_timer = None

    def load_state(self):
        """Load the saved AppState, or a fresh one if nothing usable was saved"""
        data = self.storage.get_value(APP_KEY)
        if data is None:
            return AppState()
        if not isinstance(data, dict):
            logger.warning(f"Saved app state has type {type(data).__name__}, using defaults")
            return AppState()
        state = AppState.from_dict(data)
        logger.info(f"Loaded {len(state.people)} people from saved state")
        return state

    def load_theme(self):
        return normalize_theme(self.storage.get_value(THEME_KEY, THEME_SYSTEM))

    def load_geometry(self):
        geometry = self.storage.get_value(WINDOW_KEY)
        return geometry if isinstance(geometry, str) and geometry else None

    def save_state(self):
        """Save the app state, theme and window geometry. Returns True on success."""
        self.storage.set_value(APP_KEY, self.app.state.to_dict())
        self.storage.set_value(THEME_KEY, self.app.theme_preference)
        geometry = self.app.window_geometry()
        if geometry:
            self.storage.set_value(WINDOW_KEY, geometry)
        try:
            self.storage.flush()
        except OSError as e:
            logger.error(f"Error saving state to {self.storage.path}: {e}")
            return False
        logger.debug(f"Saved {len(self.app.state.people)} people to {self.storage.path}")
        return True

    def schedule_autosave(self):
        self.autosave_timer = self.app.root.after(AUTO_SAVE_INTERVAL_MS, self._autosave)

    def _autosave(self):
        self.autosave_timer = None
        self.save_state()
        self.schedule_autosave()

    def cancel_autosave(self):
        if self.autosave_timer:
            self.app.root.after_cancel(self.autosave_timer)
            self.autosave_timer = None

    def shutdown(self):
        """Stop autosaving and write the final state"""
        self.cancel_autosave()
        logger.info("Saving state before shutdown")
        return self.save_state()
