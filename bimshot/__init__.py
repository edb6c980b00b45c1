"""Mini README: Core package initializer for the bimshot render proxy.

bimshot drives a headless browser to load a BIM viewer, colours the model's
objects according to project status data, and returns a screenshot. The
package root only re-exports the logging helper so importing it stays
cheap; the heavier subsystems live in ``classification``, ``rendering`` and
``interface``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
