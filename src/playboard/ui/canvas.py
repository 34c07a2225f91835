from __future__ import annotations

import tkinter as tk
from tkinter import simpledialog
from typing import Optional, Sequence

from playboard.config import BOARD_BACKGROUND, BOARD_LINE_COLOR, LABEL_COLOR
from playboard.models import Arrow, Player, SceneDocument
from playboard.services import BoardController
from playboard.ui.surface import DrawingSurface, render_scene
from playboard.utils import Point


class TkCanvasSurface(DrawingSurface):
    """Drawing surface painting onto a Tkinter Canvas."""

    def __init__(self, canvas: tk.Canvas) -> None:
        self.canvas = canvas

    def clear(self) -> None:
        self.canvas.delete("board")

    def circle(self, center: Point, radius: float, fill: Optional[str] = None, outline: Optional[str] = None, width: float = 1) -> None:
        x, y = center
        options = {"outline": outline or "", "width": width, "tags": ("board",)}
        if fill:
            # Tk has no alpha; translucent fills are stippled instead.
            if len(fill) == 9:
                options["fill"] = fill[:7]
                options["stipple"] = "gray25"
            else:
                options["fill"] = fill
        self.canvas.create_oval(x - radius, y - radius, x + radius, y + radius, **options)

    def polyline(self, points: Sequence[Point], color: str, width: float = 1, dash: Optional[Sequence[int]] = None) -> None:
        coords = [c for point in points for c in point]
        if len(coords) < 4:
            return
        self.canvas.create_line(
            *coords, fill=color, width=width, dash=tuple(dash) if dash else (), capstyle=tk.ROUND, tags=("board",)
        )

    def polygon(self, points: Sequence[Point], fill: str) -> None:
        coords = [c for point in points for c in point]
        self.canvas.create_polygon(*coords, fill=fill, outline="", tags=("board",))

    def text(self, at: Point, text: str, color: str = LABEL_COLOR, size: int = 12) -> None:
        self.canvas.create_text(at[0], at[1], text=text, fill=color, font=("Arial", size), tags=("board",))


class BoardCanvas(tk.Frame):
    """
    Editor canvas: paints the board and routes pointer events to the
    controller's edit session. Double-click relabels a player or arrow.
    """

    def __init__(self, master, controller: BoardController, **kwargs):
        super().__init__(master, **kwargs)
        self.controller = controller
        settings = controller.settings
        self.canvas = tk.Canvas(
            self, width=settings.width, height=settings.height, bg=BOARD_BACKGROUND, highlightthickness=0
        )
        self.canvas.pack(fill="both", expand=True)
        self.surface = TkCanvasSurface(self.canvas)
        self.show_handles: bool = True

        self.canvas.bind("<Button-1>", self.on_mouse_down)
        self.canvas.bind("<B1-Motion>", self.on_mouse_drag)
        self.canvas.bind("<ButtonRelease-1>", self.on_mouse_up)
        self.canvas.bind("<Leave>", self.on_mouse_leave)
        self.canvas.bind("<Double-Button-1>", self.on_double_click)
        self.canvas.bind("<Configure>", lambda _e: self.redraw())

        controller.store.add_listener(self._on_scene_changed)
        self.redraw()

    def _on_scene_changed(self, _document: SceneDocument) -> None:
        self.redraw()

    def redraw(self) -> None:
        self._draw_field()
        render_scene(self.controller.document, self.surface, self.controller.settings, self.show_handles)

    def _draw_field(self) -> None:
        self.canvas.delete("field")
        s = self.controller.settings
        m = s.margin
        self.canvas.create_rectangle(m, m, s.width - m, s.height - m, outline=BOARD_LINE_COLOR, width=2, tags=("field",))
        self.canvas.create_line(s.width / 2, m, s.width / 2, s.height - m, fill=BOARD_LINE_COLOR, width=2, tags=("field",))
        r = min(s.width, s.height) / 8
        cx, cy = s.width / 2, s.height / 2
        self.canvas.create_oval(cx - r, cy - r, cx + r, cy + r, outline=BOARD_LINE_COLOR, width=2, tags=("field",))
        self.canvas.tag_lower("field")

    def shutdown(self) -> None:
        self.controller.store.remove_listener(self._on_scene_changed)

    # ---------- Mouse handlers ----------
    def on_mouse_down(self, event):
        self.controller.session.pointer_down(event.x, event.y)

    def on_mouse_drag(self, event):
        self.controller.session.pointer_move(event.x, event.y)

    def on_mouse_up(self, _event):
        self.controller.session.pointer_up()

    def on_mouse_leave(self, _event):
        self.controller.session.pointer_leave()

    def on_double_click(self, event):
        self.controller.session.pointer_up()
        target = self.controller.label_target_at(event.x, event.y)
        if not isinstance(target, (Player, Arrow)):
            return
        title = "Player label" if isinstance(target, Player) else "Arrow label"
        new_label = simpledialog.askstring(title, "Enter label:", initialvalue=target.label, parent=self)
        if new_label is not None:
            self.controller.relabel(target, new_label)
