"""NiceGUI pages for Dropzones.

Import this module to register all page routes with NiceGUI.
"""

from dropzones.pages import board

__all__ = ["board"]

# Touch modules to prevent linter from removing "unused" imports.
# These imports register @ui.page decorators as a side effect.
_PAGES = (board,)
