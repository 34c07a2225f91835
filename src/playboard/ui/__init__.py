"""Tkinter editor shell. Only ``surface`` is importable without a display."""
