"""Mini README: Utility helpers for bimshot.

Currently exports the entry-point plugin loader used by the renderer
registry.
"""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
