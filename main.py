# main.py
from __future__ import annotations
import ctypes
import logging
import sys
import tkinter as tk
from tkinter import messagebox
from tkinter import font as tkfont

from app_state import AppState
from controller import TimerController
from storage import LOG_PATH
from ui_timer import THEMES, TimerTab

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(LOG_PATH, encoding="utf-8"),
        ],
    )


def install_error_reporter(root: tk.Tk) -> None:
    """Log exceptions raised inside Tk callbacks and show them to the user."""
    def report(exctype, value, tb):
        logging.error("Unhandled exception in Tk callback", exc_info=(exctype, value, tb))
        messagebox.showerror("Application Error", f"{exctype.__name__}: {value}")

    root.report_callback_exception = report


def enable_dpi_awareness():
    """
    Windows-only: enable per-monitor DPI awareness before creating Tk root.
    No-op on other platforms.
    """
    windll = getattr(ctypes, "windll", None)
    if windll is None:
        return
    try:
        windll.shcore.SetProcessDpiAwareness(2)   # Per-monitor v2
    except (AttributeError, OSError):
        windll.user32.SetProcessDPIAware()        # Legacy fallback


def get_screen_ppi(root: tk.Tk) -> float:
    """
    Return physical pixels per inch for the current display.
    Tk returns pixels in '1i' (1 inch).
    """
    try:
        return float(root.winfo_fpixels('1i'))
    except tk.TclError:
        return 96.0


def apply_tk_scaling_and_fonts(root: tk.Tk, ppi: float):
    """
    Align Tk's internal scaling to the real PPI and set one font family
    across widgets.
    """
    scale = max(0.5, min(ppi / 72.0, 4.0))
    root.tk.call('tk', 'scaling', scale)

    for name, size in (("TkDefaultFont", 10), ("TkTextFont", 10), ("TkHeadingFont", 11)):
        try:
            tkfont.nametofont(name).configure(family="Segoe UI", size=size)
        except tk.TclError:
            logger.debug("font %s not available", name)


def center_window(window: tk.Tk) -> None:
    """Center the window on screen once Tk knows its requested size."""
    window.update_idletasks()
    w, h = window.winfo_reqwidth(), window.winfo_reqheight()
    sw, sh = window.winfo_screenwidth(), window.winfo_screenheight()
    window.geometry(f"{w}x{h}+{(sw - w) // 2}+{(sh - h) // 2}")


def main():
    state = AppState.load()
    setup_logging(state.log_level)

    enable_dpi_awareness()
    root = tk.Tk()
    root.title(state.config.get("window_title", "Holdtimer"))
    root.configure(bg=THEMES.get(state.theme, THEMES["light"])["bg"])
    install_error_reporter(root)

    ppi = get_screen_ppi(root)
    apply_tk_scaling_and_fonts(root, ppi)

    # the Tk root schedules both timer loops
    controller = TimerController(root)
    tab = TimerTab(root, controller, theme=state.theme, ppi=ppi)
    tab.frame.pack(fill="both", expand=True, padx=20)

    root.protocol("WM_DELETE_WINDOW", lambda: (controller.stop(), root.destroy()))
    root.after_idle(lambda: center_window(root))
    logger.info("Holdtimer started (theme=%s)", state.theme)
    root.mainloop()


if __name__ == "__main__":
    main()
