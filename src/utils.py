# This file contains utility functions.

import os
import logging
from logging.handlers import TimedRotatingFileHandler

from src.constants import (APP_NAME, LIGHT_COLORS, DARK_COLORS,
                           THEME_SYSTEM, THEME_LIGHT, THEME_DARK)


def get_data_dir():
    """Per-user directory holding the saved state and the logs"""
    base_dir = (os.environ.get('LOCALAPPDATA')
                or os.environ.get('XDG_DATA_HOME')
                or os.path.join(os.path.expanduser('~'), '.local', 'share'))
    return os.path.join(base_dir, APP_NAME)


# Set up logging with both console and daily rotating file
def setup_logging(log_dir=None):
    if log_dir is None:
        log_dir = get_data_dir()
    os.makedirs(log_dir, exist_ok=True)

    # Create formatter
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    # Set up root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler with daily rotation. Today's lines go to WhoHasPhone.log;
    # at midnight it is renamed to WhoHasPhone-YYYY-MM-DD.log for that day.
    log_filename = os.path.join(log_dir, f'{APP_NAME}.log')
    file_handler = TimedRotatingFileHandler(
        log_filename,
        when='midnight',
        interval=1,
        backupCount=30,  # Keep 30 days of logs
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    file_handler.namer = rotated_log_name
    root_logger.addHandler(file_handler)
    return log_filename


def rotated_log_name(default_name):
    """
    Rename a rotated log to APP-YYYY-MM-DD.log.

    The handler proposes names like WhoHasPhone.log.2025-07-02, where the
    suffix is the day the rotated file covers.
    """
    base_dir = os.path.dirname(default_name)
    parts = os.path.basename(default_name).split('.')
    if len(parts) >= 3:
        date_part = parts[-1]
        return os.path.join(base_dir, f'{APP_NAME}-{date_part}.log')
    return default_name


def normalize_theme(preference):
    if preference in (THEME_SYSTEM, THEME_LIGHT, THEME_DARK):
        return preference
    return THEME_SYSTEM


def get_palette(preference):
    """Color palette for a theme preference ('system' follows the light palette)"""
    if normalize_theme(preference) == THEME_DARK:
        return DARK_COLORS
    return LIGHT_COLORS


def darken_color(color):
    """Darken a hex color by 20%"""
    color = color.lstrip('#')
    rgb = tuple(int(color[i:i+2], 16) for i in (0, 2, 4))
    darkened = tuple(int(c * 0.8) for c in rgb)
    return '#%02x%02x%02x' % darkened
