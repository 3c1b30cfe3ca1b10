# ui_timer.py
from __future__ import annotations
import tkinter as tk
from tkinter import ttk

from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from clock import ButtonState, ClockState
from controller import TimerController
from progress import SIDES, active_side, border_progress, octagon_vertices

THEMES = {
    "light": {"bg": "#FFFFFF", "primary": "#6200EE", "on_primary": "#FFFFFF",
              "secondary": "#03DAC5", "on_secondary": "#000000"},
    "dark":  {"bg": "#121212", "primary": "#BB86FC", "on_primary": "#000000",
              "secondary": "#03DAC5", "on_secondary": "#000000"},
}

CIRCLE_PX = 100


class TimerTab:
    """
    Timer page:
    - Hour / minute / second circles
    - Octagon progress ring (matplotlib), one side lit per eighth of the run
    - Hold "-" / "+" to change the duration
    - Start / Stop
    Only forwards press/release/start/stop to the controller and renders
    the snapshots it publishes.
    """
    def __init__(self, parent, controller: TimerController, theme: str = "light", ppi: float = 96.0):
        self.controller = controller
        self.colors = THEMES.get(theme, THEMES["light"])
        self.frame = tk.Frame(parent, bg=self.colors["bg"])

        # ------- time circles -------
        row = tk.Frame(self.frame, bg=self.colors["bg"]); row.pack(pady=(40, 20))
        self.hour_var = tk.StringVar(value="00")
        self.minute_var = tk.StringVar(value="00")
        self.second_var = tk.StringVar(value="00")
        for var in (self.hour_var, self.minute_var, self.second_var):
            self._circle(row, var).pack(side="left", padx=6)

        # ------- progress ring -------
        self._build_ring(ppi)

        # ------- -/+ -------
        adj = tk.Frame(self.frame, bg=self.colors["bg"]); adj.pack(pady=(0, 20))
        minus = self._circle(adj, tk.StringVar(value="-"), secondary=True)
        plus = self._circle(adj, tk.StringVar(value="+"), secondary=True)
        minus.pack(side="left", padx=(0, 10))
        plus.pack(side="left", padx=(10, 0))
        self._bind_hold(minus, self.controller.press_decrease)
        self._bind_hold(plus, self.controller.press_increase)

        # ------- controls -------
        self.btn_start = ttk.Button(self.frame, text="Start", command=self.controller.start)
        self.btn_stop = ttk.Button(self.frame, text="Stop", command=self.controller.stop, state="disabled")
        self.btn_start.pack(fill="x", padx=20)
        self.btn_stop.pack(fill="x", padx=20, pady=(10, 20))

        # snapshots from the controller
        self.controller.clock.subscribe(self._on_clock)
        self.controller.buttons.subscribe(self._on_buttons)

    # ---------- UI builders ----------
    def _circle(self, parent, var: tk.StringVar, secondary: bool = False) -> tk.Canvas:
        bg = self.colors["secondary" if secondary else "primary"]
        fg = self.colors["on_secondary" if secondary else "on_primary"]
        c = tk.Canvas(parent, width=CIRCLE_PX, height=CIRCLE_PX,
                      bg=self.colors["bg"], highlightthickness=0, bd=0)
        c.create_oval(2, 2, CIRCLE_PX - 2, CIRCLE_PX - 2, fill=bg, outline=bg)
        text_id = c.create_text(CIRCLE_PX // 2, CIRCLE_PX // 2, text=var.get(),
                                fill=fg, font=("Segoe UI", 28, "bold"))
        var.trace_add("write", lambda *_: c.itemconfigure(text_id, text=var.get()))
        return c

    def _build_ring(self, ppi: float) -> None:
        self.fig = Figure(figsize=(2.0, 2.0), dpi=ppi)
        self.fig.patch.set_facecolor(self.colors["bg"])
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_aspect("equal")
        self.ax.axis("off")

        verts = octagon_vertices()
        self.ring_lines = []
        for i in range(SIDES):
            seg = verts[i:i + 2]
            (line,) = self.ax.plot(seg[:, 0], seg[:, 1], linewidth=6,
                                   solid_capstyle="round", color=self.colors["secondary"])
            self.ring_lines.append(line)
        self.ax.set_xlim(-1.1, 1.1)
        self.ax.set_ylim(-1.1, 1.1)

        self.canvas = FigureCanvasTkAgg(self.fig, master=self.frame)
        self.canvas.get_tk_widget().pack(pady=(0, 20))
        self._draw_ring(1)

    def _bind_hold(self, widget: tk.Widget, on_press) -> None:
        widget.bind("<ButtonPress-1>", lambda e: on_press())
        widget.bind("<ButtonRelease-1>", lambda e: self.controller.release())

    # ---------- snapshot callbacks ----------
    def _on_clock(self, state: ClockState) -> None:
        self.hour_var.set(state.hours)
        self.minute_var.set(state.minutes)
        self.second_var.set(state.seconds)
        self._draw_ring(active_side(border_progress(state.elapsed, state.total)))

    def _on_buttons(self, state: ButtonState) -> None:
        self.btn_start.config(state="normal" if state.start_enabled else "disabled")
        self.btn_stop.config(state="normal" if state.stop_enabled else "disabled")

    def _draw_ring(self, side: int) -> None:
        for i, line in enumerate(self.ring_lines, start=1):
            line.set_color(self.colors["primary" if i == side else "secondary"])
        self.canvas.draw_idle()
