"""Blocking error dialog for fatal startup problems."""
import logging


log = logging.getLogger("delve.alert")


def alert(message: str, title: str = "delve") -> None:
    """Log the message, then show it in a modal box until the user dismisses it."""
    log.critical(message)
    try:
        import tkinter as tk
        from tkinter import messagebox
    except ImportError:
        log.debug("tkinter is not available; the message is only logged")
        return

    try:
        root = tk.Tk()
        root.withdraw()
        messagebox.showerror(title, message, parent=root)
        root.destroy()
    except tk.TclError as exc:
        # no display to put a dialog on
        log.debug("Could not open alert dialog: %s", exc)
