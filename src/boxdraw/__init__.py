"""boxdraw - Parametric outlines for Unicode box-drawing glyphs.

boxdraw draws the Box Drawing (U+2500..U+257F) and Block Elements
(U+2580..U+259F) characters from a catalogue of recipes. Each recipe is a
short list of drawing commands whose coordinates are expressions over the
font metrics, so the whole set follows any stroke weight or glyph width.

Example:
    $ boxdraw --stroke 120 draw U+256C --svg

This prints the outline of the double cross as SVG path data.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
