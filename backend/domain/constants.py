"""
Game constants for CurveSnake.

Sizes are in unscaled canvas units; multiply by the device pixel ratio
(see config.GameConfig.scale) before comparing against canvas coordinates.
"""

# Steering
TURN_RATE = 0.07  # radians applied per tick while a steering key is held

# Apple
PICKUP_RADIUS = 4
APPLE_SIZE = 10

# Trail
BASE_VISIBLE_LENGTH = 40
GROWTH_PER_POINT = 1

# Loop cadence (seconds), roughly one display refresh
TICK_INTERVAL = 0.016

# Rendering
BACKGROUND_COLOR = "#b5ffec"
TRAIL_COLOR = "#bcf8e8"
SNAKE_COLOR = "#420016"
APPLE_COLOR = "#ff3838"
TEXT_COLOR = "#000000"
SNAKE_LINE_WIDTH = 14
TRAIL_LINE_WIDTH = 16

START_MESSAGE = "Tap anywhere to start."
GAME_OVER_MESSAGE = "Game over!"
