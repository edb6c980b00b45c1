"""Mini README: Built-in renderer implementations.

Importing this package registers every bundled renderer with the global
registry so they are available to the HTTP layer and the CLI.
"""

from .playwright_provider import PlaywrightRenderer

__all__ = ["PlaywrightRenderer"]
