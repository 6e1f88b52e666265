"""
Configuration constants.

Centralizes the magic numbers and default settings used by the maze generators,
chart providers and atlas assembly. Organized by functional area.
"""

from mazeatlas.tile_types import TileTypeID

# =============================================================================
# GENERAL
# =============================================================================

# Seed used by scripts when none is given on the command line.
DEFAULT_SEED = 0

# =============================================================================
# MAZE TAGS
# =============================================================================

# Metadata keys written by the branching generator and read by chart providers.
START_TAG = "start"
END_TAG = "end"

# =============================================================================
# BRANCHING PATH GENERATOR
# =============================================================================

# Weights are drawn uniformly from this pool for every cell of the search grid.
# Large spread between entries gives a more meandering initial path.
DEFAULT_GRID_WEIGHTS: tuple[int, ...] = (1, 20, 10000)

# Beyond the links needed for connectivity, the approximate proportion of
# adjacent cells that get connected.
DEFAULT_EXTRA_LINK_PROPORTION = 0.33

# Branch expansion gives up after this many fruitless draws per requested cell.
BRANCH_ATTEMPT_FACTOR = 1000

# =============================================================================
# CHARTS
# =============================================================================

# Length of the opening carved into each open side of a chart.
DEFAULT_OPENING_LENGTH = 3

# Tile used for the parts of the global map not covered by any chart.
ATLAS_FILL_TILE = TileTypeID.WALL

# Image authoring: pixels at or above this luminance become floor.
IMAGE_FLOOR_THRESHOLD = 128
