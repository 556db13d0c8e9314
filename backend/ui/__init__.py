"""
Animation primitives for the public site.

Pure state machines. No imports from db, repos, services or routes.
"""

from backend.ui.hover import HoverElevate, HoverOptions
from backend.ui.reveal import Rect, Reveal, RevealOptions, VisualStyle

__all__ = [
    "HoverElevate",
    "HoverOptions",
    "Rect",
    "Reveal",
    "RevealOptions",
    "VisualStyle",
]
