"""Procedural maze layouts stitched from content tiles.

A maze generator lays out cells and the links between them. A chart provider
assigns each cell a content tile (chart) with openings carved to match the
links. Atlas assembly places the charts on one shared grid and projects their
content markers into global coordinates.
"""
