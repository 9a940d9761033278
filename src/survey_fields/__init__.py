"""Clip surveyed reference lines to a boundary polygon and tessellate them for map rendering."""
