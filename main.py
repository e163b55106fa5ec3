import tkinter as tk
import logging

# Import from supporting modules
from src.constants import APP_TITLE, APP_VERSION, WINDOW_WIDTH, WINDOW_HEIGHT, READY_STATUS, STATUS_DURATION_MS
from src.dialogs import AddPersonDialog
from src.utils import setup_logging, get_palette, normalize_theme
from src.ui_setup import UISetup
from src.event_handlers import EventHandlers
from src.data_management import DataManagement, Storage, default_storage_path

logger = logging.getLogger(__name__)


class WhoHasPhoneApp:
    def __init__(self, root, storage):
        logger.info(f"Initializing WhoHasPhoneApp {APP_VERSION}")
        self.root = root
        self.root.title(APP_TITLE)
        self.status_label = None
        self.status_timer = None
        self.add_dialog = None

        # Load previous app state (if any)
        self.data = DataManagement(self, storage)
        self.state = self.data.load_state()
        self.theme_preference = self.data.load_theme()
        self.theme_var = tk.StringVar(value=self.theme_preference)
        self.root.geometry(self.data.load_geometry() or f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")

        self.events = EventHandlers(self)

        logger.info("Setting up UI")
        self.ui = UISetup(self)
        self.ui.setup_styles()
        self.ui.setup_ui()
        self.refresh()

        self.root.protocol("WM_DELETE_WINDOW", self.quit)
        self.data.schedule_autosave()
        logger.info("WhoHasPhoneApp initialized successfully")

    @property
    def colors(self):
        return get_palette(self.theme_preference)

    def refresh(self):
        """Redraw the people list from a snapshot of the current state"""
        self.ui.render_people([person.copy() for person in self.state.people])

    def add_person(self):
        logger.info("Add person button clicked")
        if not self.events.open_add_dialog():
            if self.add_dialog:
                self.add_dialog.dialog.lift()
            return
        self.add_dialog = AddPersonDialog(self.root, self.events, self.colors,
                                          on_close=self._on_dialog_closed)

    def _on_dialog_closed(self):
        self.add_dialog = None

    def on_theme_change(self):
        preference = normalize_theme(self.theme_var.get())
        if preference == self.theme_preference:
            return
        logger.info(f"Theme preference changed to {preference}")
        self.theme_preference = preference
        self.ui.setup_styles()
        self.ui.setup_ui()
        self.refresh()

    def window_geometry(self):
        return self.root.geometry()

    def update_status(self, message, duration=STATUS_DURATION_MS):
        """Update the status bar with a message that disappears after a duration"""
        self.status_label.config(text=message)
        # If a timer is already running, cancel it
        if self.status_timer:
            self.root.after_cancel(self.status_timer)
        self.status_timer = self.root.after(duration, self.clear_status)

    def clear_status(self):
        """Clear the status bar message"""
        self.status_label.config(text=READY_STATUS)
        self.status_timer = None

    def quit(self):
        """Save state and close the window"""
        if self.add_dialog:
            self.add_dialog.cancel()
        self.data.shutdown()
        self.root.destroy()


def main():
    setup_logging()
    try:
        root = tk.Tk()
        WhoHasPhoneApp(root, Storage(default_storage_path()))
        root.mainloop()
    except Exception as e:
        logger.critical(f"Unhandled exception in main loop: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
