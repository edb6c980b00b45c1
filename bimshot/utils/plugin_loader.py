"""Mini README: Dynamic plugin loading helpers.

Structure:
    * load_entry_point_plugins - load objects registered under an entry point group.

Third-party packages expose renderers through the ``bimshot.renderers``
group; the registry decides what to do with what is loaded here.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import List

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def load_entry_point_plugins(group: str) -> List[object]:
    """Load and return the objects registered under ``group``."""

    loaded_plugins = []
    for entry_point in entry_points(group=group):
        try:
            plugin = entry_point.load()
        except (ImportError, AttributeError) as exc:
            LOGGER.error("Failed to load plugin '%s': %s", entry_point.name, exc)
            continue
        loaded_plugins.append(plugin)
        LOGGER.info("Loaded plugin '%s'", entry_point.name)
    return loaded_plugins
