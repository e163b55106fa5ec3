# dialogs.py
"""
Dialog classes for Who Has Phone
"""

import tkinter as tk
from tkinter import ttk
import logging

from src.constants import AGE_CHOICES, DIALOG_WIDTH
from src.utils import darken_color

logger = logging.getLogger(__name__)


class AddPersonDialog:
    """
    Modal dialog editing the draft person.

    Every widget change is copied into the draft straight away. Submit
    commits the draft; Cancel, Escape or closing the window discards it.
    """
    def __init__(self, parent, handlers, colors, on_close=None):
        self.handlers = handlers
        self.colors = colors
        self.on_close = on_close
        draft = handlers.state.draft

        self.dialog = tk.Toplevel(parent)
        self.dialog.title("Add Person")
        self.dialog.configure(bg=colors['background'])
        self.dialog.transient(parent)
        self.dialog.resizable(False, False)

        # Center over the parent window
        self.dialog.update_idletasks()
        height = 260
        x = parent.winfo_rootx() + (parent.winfo_width() // 2) - (DIALOG_WIDTH // 2)
        y = parent.winfo_rooty() + (parent.winfo_height() // 2) - (height // 2)
        self.dialog.geometry(f"{DIALOG_WIDTH}x{height}+{max(x, 0)}+{max(y, 0)}")

        main_frame = tk.Frame(self.dialog, bg=colors['background'])
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=15)

        title_label = tk.Label(main_frame,
                               text="Add Person",
                               font=("Segoe UI", 16, "bold"),
                               fg=colors['primary'],
                               bg=colors['background'])
        title_label.pack(anchor="w", pady=(0, 15))

        form = tk.Frame(main_frame, bg=colors['background'])
        form.pack(fill=tk.X)
        form.columnconfigure(1, weight=1)

        # Name
        self.name_var = tk.StringVar(value=draft.name)
        self._field_label(form, "Name:").grid(row=0, column=0, sticky="w", pady=4)
        self.name_entry = tk.Entry(form,
                                   textvariable=self.name_var,
                                   font=("Segoe UI", 11),
                                   bg=colors['surface'],
                                   fg=colors['text_primary'],
                                   insertbackground=colors['text_primary'],
                                   relief=tk.FLAT,
                                   highlightthickness=2,
                                   highlightcolor=colors['primary'],
                                   highlightbackground=colors['border'])
        self.name_entry.grid(row=0, column=1, sticky="ew", padx=(10, 0), pady=4)

        # Age, chosen by index from 0..99
        self._field_label(form, "Age:").grid(row=1, column=0, sticky="w", pady=4)
        self.age_combo = ttk.Combobox(form,
                                      values=[str(i) for i in range(AGE_CHOICES)],
                                      state="readonly",
                                      width=6)
        self.age_combo.current(draft.age if 0 <= draft.age < AGE_CHOICES else 0)
        self.age_combo.grid(row=1, column=1, sticky="w", padx=(10, 0), pady=4)

        # Has phone
        self.has_phone_var = tk.BooleanVar(value=draft.has_phone)
        phone_check = tk.Checkbutton(form,
                                     text="Has a Phone?",
                                     variable=self.has_phone_var,
                                     font=("Segoe UI", 11),
                                     bg=colors['background'],
                                     fg=colors['text_primary'],
                                     selectcolor=colors['surface'],
                                     activebackground=colors['background'],
                                     activeforeground=colors['text_primary'])
        phone_check.grid(row=2, column=0, columnspan=2, sticky="w", pady=(8, 4))

        self.name_var.trace_add("write", self._on_name_change)
        self.age_combo.bind("<<ComboboxSelected>>", self._on_age_change)
        self.has_phone_var.trace_add("write", self._on_phone_change)

        # Buttons
        button_frame = tk.Frame(main_frame, bg=colors['background'])
        button_frame.pack(fill=tk.X, pady=(15, 0))

        cancel_btn = self._button(button_frame, "Cancel", self.cancel, colors['text_secondary'])
        cancel_btn.pack(side=tk.RIGHT, padx=(10, 0))
        submit_btn = self._button(button_frame, "Submit", self.submit, colors['primary'])
        submit_btn.pack(side=tk.RIGHT)

        self.dialog.protocol("WM_DELETE_WINDOW", self.cancel)
        self.dialog.bind('<Return>', lambda e: self.submit())
        self.dialog.bind('<Escape>', lambda e: self.cancel())

        self.name_entry.focus_set()
        self.name_entry.select_range(0, tk.END)
        self.dialog.wait_visibility()
        self.dialog.grab_set()

    def _field_label(self, parent, text):
        return tk.Label(parent,
                        text=text,
                        font=("Segoe UI", 11, "bold"),
                        fg=self.colors['text_primary'],
                        bg=self.colors['background'])

    def _button(self, parent, text, command, color):
        btn = tk.Button(parent,
                        text=text,
                        command=command,
                        font=("Segoe UI", 10, "bold"),
                        bg=color,
                        fg='white',
                        relief=tk.FLAT,
                        padx=18,
                        pady=6,
                        cursor='hand2')
        btn.bind("<Enter>", lambda e: btn.configure(bg=darken_color(color)))
        btn.bind("<Leave>", lambda e: btn.configure(bg=color))
        return btn

    def _on_name_change(self, *_):
        self.handlers.update_draft(name=self.name_var.get())

    def _on_age_change(self, _event=None):
        self.handlers.update_draft(age=self.age_combo.current())

    def _on_phone_change(self, *_):
        self.handlers.update_draft(has_phone=self.has_phone_var.get())

    def submit(self):
        """Handle Submit button click"""
        self.handlers.submit_draft()
        self._destroy()

    def cancel(self):
        """Handle Cancel button click or window dismissal"""
        self.handlers.cancel_draft()
        self._destroy()

    def _destroy(self):
        self.dialog.grab_release()
        self.dialog.destroy()
        if self.on_close:
            self.on_close()
