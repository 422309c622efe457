GRID_SIZE = 4
WIN_THRESHOLD = 2048

# Tiles placed when a board is created.
START_TILES = 2
# A spawned tile is a 2 when random() <= this, otherwise a 4.
SPAWN_TWO_PROBABILITY = 0.8
SPAWN_LOW_VALUE = 2
SPAWN_HIGH_VALUE = 4

# Terminal cell geometry, in characters (borders excluded).
INNER_CELL_WIDTH = 16
INNER_CELL_HEIGHT = 6

# Foreground/background color names per tile value; 0 is the empty cell.
# Names resolve to curses COLOR_* constants in the render system.
TILE_COLORS = {
        0: ("white", "black"),
        2: ("black", "white"),
        4: ("blue", "white"),
        8: ("black", "yellow"),
       16: ("white", "red"),
       32: ("black", "red"),
       64: ("white", "magenta"),
      128: ("red", "yellow"),
      256: ("magenta", "yellow"),
      512: ("white", "yellow"),
     1024: ("white", "yellow"),
     2048: ("white", "yellow"),
     4096: ("white", "black"),
     8192: ("white", "black"),
    16384: ("white", "black"),
    32768: ("white", "black"),
    65536: ("white", "black"),
}
# Used for any value past the end of the table.
FALLBACK_TILE_COLOR = ("white", "black")
