"""Mini README: Status classification subsystem.

Turns project status records and the selected product's metrics into the
colour, opacity and visibility of each scene object. Everything here is
pure: no I/O and no state carried between requests.
"""

from .engine import ClassificationEngine, classify
from .levels import LevelRanking, level_number
from .palettes import attention_color, hex_to_rgb, status_color
from .records import Metric, SelectedProduct, StatusRecord, VisualState

__all__ = [
    "ClassificationEngine",
    "LevelRanking",
    "Metric",
    "SelectedProduct",
    "StatusRecord",
    "VisualState",
    "attention_color",
    "classify",
    "hex_to_rgb",
    "level_number",
    "status_color",
]
