# constants.py
"""
Constants and configuration for Who Has Phone
"""

APP_NAME = "WhoHasPhone"
APP_VERSION = "0.1.0"
APP_TITLE = "📱 Who Has Phone"

# Persistence
APP_KEY = "app"
THEME_KEY = "theme"
WINDOW_KEY = "window"
STORAGE_FILENAME = "app.json"
AUTO_SAVE_INTERVAL_MS = 30 * 1000

# Person defaults
DEFAULT_NAME = "New Person"
DEFAULT_AGE = 13
AGE_CHOICES = 100  # ages 0..99 offered by the editor

# Window settings
WINDOW_WIDTH = 520
WINDOW_HEIGHT = 640
DIALOG_WIDTH = 350

# Theme preferences
THEME_SYSTEM = "system"
THEME_LIGHT = "light"
THEME_DARK = "dark"
THEME_CHOICES = [
    (THEME_SYSTEM, "💻 System"),
    (THEME_LIGHT, "☀ Light"),
    (THEME_DARK, "🌙 Dark"),
]

# Light color scheme
LIGHT_COLORS = {
    'primary': '#2563eb',      # Modern blue
    'primary_dark': '#1d4ed8',
    'background': '#f8fafc',   # Light gray
    'surface': '#ffffff',      # White
    'text_primary': '#1e293b', # Dark slate
    'text_secondary': '#64748b', # Slate
    'border': '#9ca3af',       # Card stroke
    'yes': '#16a34a',          # Green
    'no': '#dc2626',           # Red
    'danger': '#ef4444',
    'tooltip_bg': '#111827',
    'tooltip_fg': '#f1f5f9',
}

# Dark color scheme
DARK_COLORS = {
    'primary': '#3b82f6',
    'primary_dark': '#2563eb',
    'background': '#0b1220',
    'surface': '#1f2937',
    'text_primary': '#e5e7eb',
    'text_secondary': '#9ca3af',
    'border': '#6b7280',
    'yes': '#90ee90',          # Light green
    'no': '#ff8080',           # Light red
    'danger': '#f87171',
    'tooltip_bg': '#f1f5f9',
    'tooltip_fg': '#111827',
}

READY_STATUS = "Ready - Click Add to record a person"
STATUS_DURATION_MS = 5000
