# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs.
They belong to the rendering framework rather than to the physics
configuration in config.json.
"""

# Visualization settings
# The window size comes from config.json.
WINDOW_TITLE = "Collide"
UI_PANEL_WIDTH = 300
BACKGROUND_COLOR = (0, 0, 0)
BOUNDARY_COLOR = (255, 255, 255)
BOUNDARY_LINE_WIDTH = 1
# Particles smaller than this are still drawn as a visible dot.
MIN_DRAW_RADIUS = 1

# Alpha for the UI panel background
UI_BACKGROUND_ALPHA = 100
UI_FONT_NAME = "Segoe UI"
UI_FONT_SIZE = 14
