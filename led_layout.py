"""Central window layout constants so the entire stack stays in sync."""

# Block grid: 6 columns × 12 rows of glass blocks
GRID_COLUMNS = 6
GRID_ROWS = 12

# Model units per block, scaled for the OPC gl_server pre-visualizer
BLOCK_SIZE = 0.3
CENTER_X = BLOCK_SIZE * GRID_COLUMNS / 2
CENTER_Y = BLOCK_SIZE * GRID_ROWS / 2

# Each block is a ring of 36 LEDs, 9 per side
LEDS_PER_EDGE = 9
EDGES_PER_BLOCK = 4
EDGE_DISTANCE = 0.75  # edge line distance from block center, block-normalized

# Fadecandy addressing: 64 LEDs per channel, 2 channels per chain
CHANNEL_SLOTS = 64
CHANNELS_PER_CHAIN = 2
CHAIN_SLOTS = CHANNEL_SLOTS * CHANNELS_PER_CHAIN
EDGES_PER_CHANNEL = 6

CHAINS_PER_MODULE = 4
MODULE_SLOTS = CHAIN_SLOTS * CHAINS_PER_MODULE
MODULE_COUNT = 6

DEFAULT_LAYOUT_PATH = "layouts/window6x12.json"


def total_slots(modules: int = MODULE_COUNT) -> int:
    """Compute the allocated address space for a layout."""
    return modules * MODULE_SLOTS


def populated_slots(modules: int = MODULE_COUNT) -> int:
    """Count the addresses that carry an LED (padding excluded)."""
    edges = CHAINS_PER_MODULE * CHANNELS_PER_CHAIN * EDGES_PER_CHANNEL
    return modules * edges * LEDS_PER_EDGE
