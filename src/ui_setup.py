# This file contains functions for setting up the UI.

import tkinter as tk
from tkinter import ttk

from src.constants import THEME_CHOICES, READY_STATUS
from src.tooltips import ToolTip
from src.utils import darken_color


class UISetup:
    def __init__(self, app):
        self.app = app
        self.main_container = None
        self.list_canvas = None
        self.list_frame = None
        self.list_window = None

    @property
    def colors(self):
        return self.app.colors

    def setup_styles(self):
        """Configure ttk styles for the current palette"""
        style = ttk.Style()
        style.configure(
            "Modern.TFrame",
            background=self.colors['background']
        )
        style.configure(
            "Modern.TLabel",
            font=("Segoe UI", 10),
            background=self.colors['background'],
            foreground=self.colors['text_primary']
        )

    def setup_ui(self):
        """Build the whole window; called again after a theme change"""
        if self.main_container is not None:
            self.main_container.destroy()
        self.app.root.configure(bg=self.colors['background'])

        self.main_container = ttk.Frame(self.app.root, style="Modern.TFrame")
        self.main_container.pack(fill=tk.BOTH, expand=True)

        self.create_toolbar(self.main_container)

        # Status bar
        status_frame = ttk.Frame(self.main_container, style="Modern.TFrame")
        status_frame.pack(side=tk.BOTTOM, fill=tk.X, padx=10, pady=(0, 6))
        self.app.status_label = ttk.Label(status_frame,
                                          text=READY_STATUS,
                                          font=("Segoe UI", 9),
                                          foreground=self.colors['text_secondary'],
                                          style="Modern.TLabel")
        self.app.status_label.pack(side=tk.LEFT)

        content = ttk.Frame(self.main_container, style="Modern.TFrame")
        content.pack(fill=tk.BOTH, expand=True, padx=10, pady=(10, 6))

        heading = tk.Label(content,
                           text="People",
                           font=("Segoe UI", 20, "bold"),
                           fg=self.colors['text_primary'],
                           bg=self.colors['background'])
        heading.pack(anchor="w")
        ttk.Separator(content, orient=tk.HORIZONTAL).pack(fill=tk.X, pady=(2, 6))

        self.create_people_list(content)

    def create_toolbar(self, parent):
        """Top bar: Add, Options menu and the theme preference buttons"""
        toolbar = tk.Frame(parent, bg=self.colors['surface'])
        toolbar.pack(side=tk.TOP, fill=tk.X)

        add_btn = self.create_modern_button(toolbar, "Add", self.app.add_person, self.colors['primary'])
        ToolTip(add_btn, "Click To Add Another Person To Records.", self.colors)

        options_btn = tk.Menubutton(toolbar,
                                    text="Options",
                                    font=("Segoe UI", 10),
                                    bg=self.colors['surface'],
                                    fg=self.colors['text_primary'],
                                    activebackground=self.colors['background'],
                                    relief=tk.FLAT,
                                    padx=12,
                                    pady=6)
        options_menu = tk.Menu(options_btn, tearoff=False)
        options_menu.add_command(label="Quit", command=self.app.quit)
        options_btn.configure(menu=options_menu)
        options_btn.pack(side=tk.LEFT, padx=(0, 6), pady=4)

        for value, label in reversed(THEME_CHOICES):
            choice = tk.Radiobutton(toolbar,
                                    text=label,
                                    value=value,
                                    variable=self.app.theme_var,
                                    command=self.app.on_theme_change,
                                    indicatoron=False,
                                    font=("Segoe UI", 9),
                                    bg=self.colors['surface'],
                                    fg=self.colors['text_primary'],
                                    selectcolor=self.colors['background'],
                                    relief=tk.FLAT,
                                    padx=8,
                                    pady=4)
            choice.pack(side=tk.RIGHT, padx=(0, 4), pady=4)
        return toolbar

    def create_people_list(self, parent):
        """Scrollable column holding one card per person"""
        frame = ttk.Frame(parent, style="Modern.TFrame")
        frame.pack(fill=tk.BOTH, expand=True)

        self.list_canvas = tk.Canvas(frame,
                                     bg=self.colors['background'],
                                     highlightthickness=0,
                                     bd=0)
        scrollbar = ttk.Scrollbar(frame, orient=tk.VERTICAL, command=self.list_canvas.yview)
        self.list_canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.list_canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.list_frame = tk.Frame(self.list_canvas, bg=self.colors['background'])
        self.list_window = self.list_canvas.create_window((0, 0), window=self.list_frame, anchor="nw")

        self.list_frame.bind("<Configure>", self._on_list_configure)
        self.list_canvas.bind("<Configure>", self._on_canvas_configure)
        self.list_canvas.bind_all("<MouseWheel>", self._on_mouse_wheel)
        self.list_canvas.bind_all("<Button-4>", lambda e: self.list_canvas.yview_scroll(-1, "units"))
        self.list_canvas.bind_all("<Button-5>", lambda e: self.list_canvas.yview_scroll(1, "units"))

    def _on_list_configure(self, _event):
        self.list_canvas.configure(scrollregion=self.list_canvas.bbox("all"))

    def _on_canvas_configure(self, event):
        self.list_canvas.itemconfigure(self.list_window, width=event.width)

    def _on_mouse_wheel(self, event):
        self.list_canvas.yview_scroll(int(-event.delta / 120) or (-1 if event.delta > 0 else 1), "units")

    def render_people(self, people):
        """Redraw the list from a snapshot of the people"""
        for child in self.list_frame.winfo_children():
            child.destroy()
        for person in people:
            self.create_person_card(self.list_frame, person)

    def create_person_card(self, parent, person):
        """One bordered card: name, age, phone status and a Delete button"""
        card = tk.Frame(parent,
                        bg=self.colors['surface'],
                        highlightthickness=1,
                        highlightbackground=self.colors['border'])
        card.pack(fill=tk.X, pady=(0, 3), padx=(0, 4))
        inner = tk.Frame(card, bg=self.colors['surface'])
        inner.pack(fill=tk.X, padx=8, pady=8)

        name_label = tk.Label(inner,
                              text=person.to_display_label(),
                              font=("Segoe UI", 14, "bold"),
                              fg=self.colors['text_primary'],
                              bg=self.colors['surface'],
                              anchor="w")
        name_label.pack(fill=tk.X)
        ToolTip(name_label, "Person's Name", self.colors)

        ttk.Separator(inner, orient=tk.HORIZONTAL).pack(fill=tk.X, pady=4)

        age_row = tk.Frame(inner, bg=self.colors['surface'])
        age_row.pack(fill=tk.X)
        self._row_label(age_row, "Age:", "Person's Age In Years")
        self._row_value(age_row, str(person.age), self.colors['text_primary'], "Person's Age In Years")

        phone_row = tk.Frame(inner, bg=self.colors['surface'])
        phone_row.pack(fill=tk.X)
        self._row_label(phone_row, "Has Phone:", "Does This Person Have A Phone")
        if person.has_phone:
            self._row_value(phone_row, "Yes", self.colors['yes'], "Person Has A Phone")
        else:
            self._row_value(phone_row, "No", self.colors['no'], "Person Does Not Have A Phone")

        # Bind the snapshot this card was drawn from
        delete_btn = tk.Button(inner,
                               text="Delete",
                               command=lambda p=person: self.app.events.delete_person(p),
                               font=("Segoe UI", 9),
                               bg=self.colors['danger'],
                               fg='white',
                               relief=tk.FLAT,
                               padx=10,
                               pady=2,
                               cursor='hand2')
        delete_btn.pack(anchor="w", pady=(6, 0))
        ToolTip(delete_btn, "Remove Person", self.colors)
        return card

    def _row_label(self, parent, text, tooltip):
        label = tk.Label(parent,
                         text=text,
                         font=("Segoe UI", 10),
                         fg=self.colors['text_secondary'],
                         bg=self.colors['surface'])
        label.pack(side=tk.LEFT)
        ToolTip(label, tooltip, self.colors)

    def _row_value(self, parent, text, color, tooltip):
        label = tk.Label(parent,
                         text=text,
                         font=("Segoe UI", 10, "bold"),
                         fg=color,
                         bg=self.colors['surface'])
        label.pack(side=tk.LEFT, padx=(4, 0))
        ToolTip(label, tooltip, self.colors)

    def create_modern_button(self, parent, text, command, color):
        """Create a modern styled button"""
        btn = tk.Button(parent,
                        text=text,
                        command=command,
                        font=("Segoe UI", 10, "bold"),
                        bg=color,
                        fg='white',
                        relief=tk.FLAT,
                        padx=16,
                        pady=6,
                        cursor='hand2',
                        border=0)

        def on_enter(e):
            btn.configure(bg=darken_color(color))

        def on_leave(e):
            btn.configure(bg=color)

        btn.bind("<Enter>", on_enter, add="+")
        btn.bind("<Leave>", on_leave, add="+")
        btn.pack(side=tk.LEFT, padx=(6, 6), pady=4)
        return btn
