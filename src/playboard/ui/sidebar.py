from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox, simpledialog, ttk
from typing import Dict

from playboard.config import EXPORTS_DIR, IMAGE_FILETYPES, JSON_FILETYPES, LAYOUTS_DIR, ensure_directories
from playboard.models import ArrowStyle, SceneDocument, Team
from playboard.services import BoardController, BoardError
from playboard.ui.canvas import BoardCanvas


class Sidebar(tk.Frame):
    """
    Right pane: entity buttons, team visibility toggles, history controls and
    save/load/export of the board.
    """

    def __init__(self, master, board_canvas: BoardCanvas, controller: BoardController, **kwargs):
        super().__init__(master, **kwargs)
        self.board_canvas = board_canvas
        self.controller = controller
        self.team_vars: Dict[Team, tk.BooleanVar] = {}

        body = self

        self._section(body, "Players")
        for team in Team:
            tk.Button(
                body, text=f"Add Team {team.value} Player", command=lambda t=team: self.controller.add_player(t)
            ).pack(fill="x", padx=10, pady=2)
        tk.Button(body, text="Add Ball", command=self.controller.add_ball).pack(fill="x", padx=10, pady=(2, 6))

        self._section(body, "Drawing Tools")
        self.curved_var = tk.BooleanVar(value=False)
        for style in ArrowStyle:
            tk.Button(
                body,
                text=f"Add {style.value.title()} Arrow",
                command=lambda s=style: self.controller.add_arrow(s, curved=self.curved_var.get()),
            ).pack(fill="x", padx=10, pady=2)
        tk.Checkbutton(body, text="Curved arrows", variable=self.curved_var).pack(anchor="w", padx=10)
        tk.Button(body, text="Add Pick", command=self.controller.add_pick).pack(fill="x", padx=10, pady=2)
        tk.Button(body, text="Add Pick Between Players", command=self.add_pick_between_players).pack(fill="x", padx=10, pady=2)
        tk.Button(body, text="Add Zone", command=self.controller.add_zone).pack(fill="x", padx=10, pady=(2, 6))

        self._section(body, "Visibility")
        for team in Team:
            var = tk.BooleanVar(value=True)
            self.team_vars[team] = var
            tk.Checkbutton(
                body, text=f"Show Team {team.value}", variable=var, command=lambda t=team: self.toggle_team(t)
            ).pack(anchor="w", padx=10)
        self.handles_var = tk.BooleanVar(value=self.board_canvas.show_handles)
        tk.Checkbutton(body, text="Show handles", variable=self.handles_var, command=self.on_handles_toggle).pack(
            anchor="w", padx=10, pady=(0, 6)
        )

        self._section(body, "Edit")
        edit_buttons = tk.Frame(body)
        edit_buttons.pack(fill="x", padx=8, pady=(4, 8))
        tk.Button(edit_buttons, text="Undo", command=self.controller.undo).pack(side="left")
        tk.Button(edit_buttons, text="Redo", command=self.controller.redo).pack(side="left", padx=6)
        tk.Button(edit_buttons, text="Clear", command=self.clear_board).pack(side="left")

        self._section(body, "File")
        tk.Button(body, text="Save Layout...", command=self.save_layout_dialog).pack(fill="x", pady=(6, 3), padx=6)
        tk.Button(body, text="Load Layout...", command=self.load_layout_dialog).pack(fill="x", pady=3, padx=6)
        tk.Button(body, text="Save To Slot...", command=self.save_slot_dialog).pack(fill="x", pady=3, padx=6)
        tk.Button(body, text="Load From Slot...", command=self.load_slot_dialog).pack(fill="x", pady=3, padx=6)
        tk.Button(body, text="Export PNG...", command=self.export_dialog).pack(fill="x", pady=3, padx=6)

        self.controller.store.add_listener(self._on_scene_changed)

    @staticmethod
    def _section(body, title: str) -> None:
        ttk.Separator(body, orient="horizontal").pack(fill="x", padx=8, pady=6)
        tk.Label(body, text=title, anchor="w", font=("Segoe UI", 10, "bold")).pack(fill="x", padx=8)

    def _on_scene_changed(self, _document: SceneDocument) -> None:
        for team, var in self.team_vars.items():
            players = self.controller.store.players_of(team)
            visible = all(p.visible for p in players) if players else True
            if var.get() != visible:
                var.set(visible)

    # ---------- Commands ----------
    def toggle_team(self, team: Team):
        if not self.controller.toggle_team_visibility(team):
            self.team_vars[team].set(True)

    def on_handles_toggle(self):
        self.board_canvas.show_handles = bool(self.handles_var.get())
        self.board_canvas.redraw()

    def add_pick_between_players(self):
        if self.controller.add_pick(between_players=True) is None:
            messagebox.showinfo("Add Pick", "Add at least two visible players first.")

    def clear_board(self):
        if messagebox.askyesno("Clear board", "Remove everything from the board?"):
            self.controller.clear_board()

    # ---------- File dialogs ----------
    def save_layout_dialog(self):
        ensure_directories()
        path = filedialog.asksaveasfilename(
            defaultextension=".json",
            filetypes=JSON_FILETYPES,
            title="Save Layout",
            initialdir=LAYOUTS_DIR,
        )
        if not path:
            return
        try:
            self.controller.save(path)
        except BoardError as e:
            messagebox.showerror("Error", f"Failed to save layout:\n{e}")
        else:
            messagebox.showinfo("Saved", f"Layout saved to:\n{path}")

    def load_layout_dialog(self):
        path = filedialog.askopenfilename(
            title="Load Layout JSON",
            filetypes=JSON_FILETYPES,
            initialdir=LAYOUTS_DIR,
        )
        if not path:
            return
        try:
            self.controller.load(path)
        except BoardError as e:
            messagebox.showerror("Error", f"Failed to load layout:\n{e}")

    def save_slot_dialog(self):
        name = simpledialog.askstring("Save To Slot", "Slot name:", parent=self)
        if not name:
            return
        try:
            path = self.controller.save_slot(name)
        except BoardError as e:
            messagebox.showerror("Error", f"Failed to save layout:\n{e}")
        else:
            messagebox.showinfo("Saved", f"Layout saved to:\n{path}")

    def load_slot_dialog(self):
        slots = self.controller.layout_service.list_slots()
        if not slots:
            messagebox.showinfo("Load From Slot", "No saved slots yet.")
            return
        name = simpledialog.askstring("Load From Slot", "Slot name:\n" + "\n".join(slots), parent=self)
        if not name:
            return
        try:
            self.controller.load_slot(name)
        except BoardError as e:
            messagebox.showerror("Error", f"Failed to load layout:\n{e}")

    def export_dialog(self):
        ensure_directories()
        path = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=IMAGE_FILETYPES,
            title="Export Board Image",
            initialdir=EXPORTS_DIR,
        )
        if not path:
            return
        try:
            self.controller.export(path)
        except BoardError as e:
            messagebox.showerror("Error", f"Failed to export image:\n{e}")
        else:
            messagebox.showinfo("Exported", f"Image saved to:\n{path}")
