"""Discrete-signal block simulator: signals, circuits, modules, text charts, file storage and menus."""

__version__ = "0.1.0"

__all__ = ["chart", "signal", "circuits", "modules", "persistence", "cli"]