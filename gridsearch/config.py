DEFAULT_ROWS = 20
DEFAULT_COLS = 40
DEFAULT_START = (10, 5)
DEFAULT_END = (10, 35)

# Fraction of cells turned into walls by random maze generation
DEFAULT_WALL_DENSITY = 0.3

# Pixels brighter than this are free space when loading a map image
DEFAULT_FREE_THRESHOLD = 220

# Seconds between two playback frames in the CLI, 0 prints the final frame only
DEFAULT_PLAYBACK_DELAY = 0.0
