"""Planar (web-Mercator) geometry engine: projection, lines, tessellation, boundary clipping."""
