"""Rendering subpackage.

Turns resolved ownership into visual descriptions of a map:

* :mod:`frontlines_map.renderer.grid` builds the dense grid of cell
  descriptors (fill color, POI glyph, tooltip, border tier).
* :mod:`frontlines_map.renderer.legend` builds the sorted player legend.
* :mod:`frontlines_map.renderer.image` draws a finished map view with Pillow
  for previews and exports.

Grid and legend construction are pure; only the image module touches pixels.
"""
