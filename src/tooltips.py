import tkinter as tk

from src.constants import LIGHT_COLORS


class ToolTip:
    """Hover text for Tk widgets.

    Usage:
        ToolTip(widget, "Person's Age In Years", colors)
    """

    def __init__(self, widget, text, colors=None, delay=350):
        self.widget = widget
        self.text = text
        self.colors = colors or LIGHT_COLORS
        self.delay = delay
        self.tipwindow = None
        self._after_id = None
        self.widget.bind("<Enter>", self._schedule, add="+")
        self.widget.bind("<Leave>", self._hide, add="+")
        self.widget.bind("<ButtonPress>", self._hide, add="+")

    def _schedule(self, _event=None):
        self._cancel()
        self._after_id = self.widget.after(self.delay, self._show)

    def _cancel(self):
        if self._after_id:
            self.widget.after_cancel(self._after_id)
            self._after_id = None

    def _show(self):
        self._after_id = None
        if self.tipwindow or not self.text:
            return
        x = self.widget.winfo_rootx() + 10
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 6
        self.tipwindow = tw = tk.Toplevel(self.widget)
        tw.wm_overrideredirect(True)
        tw.wm_geometry(f"+{x}+{y}")
        label = tk.Label(
            tw,
            text=self.text,
            justify=tk.LEFT,
            background=self.colors['tooltip_bg'],
            foreground=self.colors['tooltip_fg'],
            relief=tk.SOLID,
            borderwidth=1,
            font=("Segoe UI", 9),
            padx=6,
            pady=4,
        )
        label.pack()

    def _hide(self, _event=None):
        self._cancel()
        tw = self.tipwindow
        self.tipwindow = None
        if tw:
            tw.destroy()
