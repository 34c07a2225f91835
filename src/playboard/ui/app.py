from __future__ import annotations

import tkinter as tk
from typing import Optional

from playboard.models import ArrowStyle, Team
from playboard.services import BoardController
from playboard.ui.canvas import BoardCanvas
from playboard.ui.sidebar import Sidebar


class App(tk.Tk):
    def __init__(self, controller: Optional[BoardController] = None):
        super().__init__()
        self.title("Playboard")
        self.geometry("1300x650")
        self.minsize(980, 560)

        self.controller = controller if controller is not None else BoardController()

        self.sidebar_toggle_var = tk.BooleanVar(value=True)

        menubar = tk.Menu(self)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Save Layout...", command=self._proxy_save_layout, accelerator="Ctrl+S")
        file_menu.add_command(label="Load Layout...", command=self._proxy_load_layout, accelerator="Ctrl+O")
        file_menu.add_command(label="Export PNG...", command=self._proxy_export)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.destroy)
        menubar.add_cascade(label="File", menu=file_menu)

        edit_menu = tk.Menu(menubar, tearoff=0)
        edit_menu.add_command(label="Undo", command=self.controller.undo, accelerator="Ctrl+Z")
        edit_menu.add_command(label="Redo", command=self.controller.redo, accelerator="Ctrl+Y")
        edit_menu.add_separator()
        for team in Team:
            edit_menu.add_command(label=f"Add Team {team.value} Player", command=lambda t=team: self.controller.add_player(t))
        edit_menu.add_command(label="Add Ball", command=self.controller.add_ball)
        edit_menu.add_command(label="Add Arrow", command=lambda: self.controller.add_arrow(ArrowStyle.SOLID))
        edit_menu.add_command(label="Add Zone", command=self.controller.add_zone)
        menubar.add_cascade(label="Edit", menu=edit_menu)

        view_menu = tk.Menu(menubar, tearoff=0)
        view_menu.add_checkbutton(
            label="Tools Panel",
            variable=self.sidebar_toggle_var,
            command=self.toggle_sidebar,
        )
        menubar.add_cascade(label="View", menu=view_menu)
        self.config(menu=menubar)

        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=0)
        self.rowconfigure(0, weight=1)

        self.board_canvas = BoardCanvas(self, self.controller, bd=0)
        self.board_canvas.grid(row=0, column=0, sticky="nsew")

        self.sidebar = Sidebar(self, self.board_canvas, self.controller, width=260, bd=1, relief="groove")
        self.sidebar.grid(row=0, column=1, sticky="ns")
        self._sidebar_visible = True

        self.bind_all("<Control-z>", lambda _e: self.controller.undo())
        self.bind_all("<Control-y>", lambda _e: self.controller.redo())
        self.bind_all("<Control-s>", lambda _e: self._proxy_save_layout())
        self.bind_all("<Control-o>", lambda _e: self._proxy_load_layout())

    def destroy(self):
        if hasattr(self, "board_canvas"):
            self.board_canvas.shutdown()
        self.controller.store.dispose()
        super().destroy()

    def toggle_sidebar(self):
        if self.sidebar_toggle_var.get():
            self.show_sidebar()
        else:
            self.hide_sidebar()

    def show_sidebar(self):
        if self._sidebar_visible:
            return
        self.sidebar.grid()
        self._sidebar_visible = True

    def hide_sidebar(self):
        if not self._sidebar_visible:
            return
        self.sidebar.grid_remove()
        self._sidebar_visible = False

    def _proxy_save_layout(self):
        self.sidebar.save_layout_dialog()

    def _proxy_load_layout(self):
        self.sidebar.load_layout_dialog()

    def _proxy_export(self):
        self.sidebar.export_dialog()
