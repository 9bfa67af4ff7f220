"""
Chromalab Color Value
=====================

:class:`Color` keeps one clamped RGBA tuple and derives every other
representation from it on demand.

Usage
-----
>>> from chromalab.colors import Color
>>> blue = Color("#3498db")
>>> blue.get("hsl.l")                 # read a channel
>>> lighter = blue.set("hsl.l", 0.8)  # copy with one channel replaced
>>> blue.set("lch.c", "*1.5").hex()   # relative update
>>> blue.saturate(0.5).hex()
>>> blue.with_alpha(0.5).hex()        # '#3498db80'

Input formats are resolved through :data:`default_registry`: hex strings,
rgb components, hsl/lch triples (autodetected by priority) and lab (explicit
mode only).

Notes
-----
- Undefined hues (grays) are ``None`` in ``hsl()`` and ``lch()``.
- ``clipped`` tells whether r, g or b had to be clamped; ``unclipped`` keeps
  the decoded values.
"""

from .color import Color, chroma, clip_rgba
from .registry import (
    FormatEntry,
    FormatRegistry,
    as_mode,
    build_default_registry,
    default_registry,
)

__all__ = [
    'Color',
    'chroma',
    'clip_rgba',
    'FormatEntry',
    'FormatRegistry',
    'as_mode',
    'build_default_registry',
    'default_registry',
]
