from __future__ import annotations

# =============================================================================
# MAZE-CELL COORDINATES (Always integers)
# =============================================================================

# One unit is one maze cell, i.e. one chart in the finished atlas.
CellCoord = int

# =============================================================================
# ATLAS PIXEL COORDINATES
# =============================================================================

# Integer tile position on the composed global map. Chart offsets live here.
PixelCoord = int  # Example: x=48 is the first column of the fourth 16-wide chart

# Marker positions and sizes may be fractional within a chart.
MarkerCoord = float
MarkerPos = tuple[MarkerCoord, MarkerCoord]  # Example: (3.5, 7.25)
MarkerSize = tuple[MarkerCoord, MarkerCoord]  # Example: (1.0, 2.0)

# Axis-aligned rectangle as (x, y, length, width).
PixelRect = tuple[int, int, int, int]
MarkerRect = tuple[float, float, float, float]

# Chart tile dimensions (length along x, width along y).
ChartDimensions = tuple[int, int]  # Example: (16, 16)

# =============================================================================
# GENERATION
# =============================================================================

# Seeds accepted by random.Random; None draws from system entropy.
RandomSeed = int | str | None
