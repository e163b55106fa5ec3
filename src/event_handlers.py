import logging

from src.constants import AGE_CHOICES

logger = logging.getLogger(__name__)

# This file contains event handling logic. Every handler runs to completion
# on the Tk main loop, mutates app.state and then asks the app to redraw.

class EventHandlers:
    def __init__(self, app):
        self.app = app

    @property
    def state(self):
        return self.app.state

    def open_add_dialog(self):
        """Handle the Add button"""
        if self.state.dialog_open:
            logger.debug("Add dialog already open")
            return False
        # The draft is reset on every close, so it already holds defaults
        self.state.dialog_open = True
        logger.info("Add person dialog opened")
        return True

    def update_draft(self, name=None, age=None, has_phone=None):
        """Copy edits from the dialog widgets into the draft"""
        if not self.state.dialog_open:
            logger.debug("Ignoring draft edit while the dialog is closed")
            return
        draft = self.state.draft
        if name is not None:
            draft.name = name
        if age is not None:
            draft.age = min(max(int(age), 0), AGE_CHOICES - 1)
        if has_phone is not None:
            draft.has_phone = bool(has_phone)

    def submit_draft(self):
        """Handle the Submit button: commit a copy of the draft"""
        if not self.state.dialog_open:
            logger.warning("Submit without an open dialog, ignoring")
            return None
        person = self.state.draft.copy()
        self.state.add(person)
        self._close_dialog()
        logger.info(f"Added {person!r}; people: {self.state.people!r}")
        self.app.refresh()
        self.app.update_status(f"➕ Added '{person.to_display_label()}'")
        return person

    def cancel_draft(self):
        """Handle Cancel, Escape or closing the dialog window"""
        if not self.state.dialog_open:
            return
        self._close_dialog()
        logger.info("Add person dialog cancelled")

    def _close_dialog(self):
        """Discard the draft and mark the add dialog closed"""
        self.state.reset_draft()
        self.state.dialog_open = False

    def delete_person(self, snapshot):
        """
        Handle a card's Delete button.

        ``snapshot`` is the copy the card was drawn from. The first record
        equal to it is removed; with duplicates that is the lowest index.
        """
        index = self.state.find_index(snapshot)
        if index is None:
            logger.warning(f"Not found: {snapshot!r}")
            return None
        removed = self.state.remove_at(index)
        logger.info(f"Removed {removed!r}")
        self.app.refresh()
        self.app.update_status(f"🗑️ Deleted '{removed.to_display_label()}'")
        return removed
