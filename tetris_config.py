"""Fixed game constants and shell tunables"""

GRID_WIDTH, GRID_HEIGHT = 10, 20

SPAWN_X = 4
POINTS_PER_ROW = 100
POINTS_PER_LEVEL = 500

CONFIG = {
    "TICK_RATE_MS": 500,
    "SEED": None,          # None => seeded from system entropy at start
    "CELL_SIZE": 20,
    "PREVIEW_W": 160,
    "PREVIEW_H": 80,
    "LOG_LEVEL": "INFO",
}
