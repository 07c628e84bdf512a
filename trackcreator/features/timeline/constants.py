"""
Timeline Constants

Central location for lane layout and timing constants.
"""

# =============================================================================
# Lanes
# =============================================================================

LANE_COUNT = 5
LANES = tuple(range(1, LANE_COUNT + 1))  # Lane numbers 1..5, top to bottom

# =============================================================================
# Dimensions
# =============================================================================

DEFAULT_PIXELS_PER_SECOND = 300  # Fixed horizontal scale for an editor session

# =============================================================================
# Snapping
# =============================================================================

# Max distance (seconds) between a dropped note and a note in another lane
# for the drop to snap onto it
DEFAULT_SNAP_THRESHOLD = 0.08
